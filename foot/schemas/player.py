"""Player Schemas - wire representation of players and partial player updates.

Invariants:
    - Player.id is absent on creation, present everywhere else
    - Length bounds apply to request bodies only (NewPlayer, PlayerUpdate):
      a stored player is always serializable
    - PlayerUpdate omits fields that must stay unchanged
"""

from pydantic import BaseModel, ConfigDict, Field


class Player(BaseModel):
    """Player as sent and received over REST."""
    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    name: str
    is_guardian: bool = Field(False, alias="isGuardian")
    team_name: str = Field(alias="teamName")


class NewPlayer(Player):
    """Request body item of POST /players."""
    name: str = Field(min_length=1, max_length=100)
    team_name: str = Field(min_length=1, max_length=100, alias="teamName")


class PlayerUpdate(BaseModel):
    """Partial player update - only id is required."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str | None = Field(None, min_length=1, max_length=100)
    is_guardian: bool | None = Field(None, alias="isGuardian")
