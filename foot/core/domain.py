"""Domain Model - plain records for teams, players, goals and matches.

Invariants:
    - Value types only: no identity beyond the id field, no IO
    - Player.team_name is a denormalized reference to Team.name
    - PlayerUpdate fields set to None mean "leave unchanged"
    - Match.datetime is timezone-aware (UTC)

Design Decisions:
    - Dataclasses, not ORM models or pydantic schemas: the domain stays
      independent of both the wire format and the storage schema
"""

from dataclasses import dataclass, field
import datetime as dt


@dataclass
class Team:
    id: int
    name: str


@dataclass
class Player:
    id: int | None
    name: str
    is_guardian: bool
    team_name: str


@dataclass
class PlayerUpdate:
    """Partial update projection of Player."""
    id: int
    name: str | None = None
    is_guardian: bool | None = None


@dataclass
class PlayerScorer:
    """One goal event attributed to a player within a match."""
    player: Player
    minute: int
    is_own_goal: bool = False
    id: int | None = None


@dataclass
class TeamMatch:
    """One side of a match: the team, its computed score and its goals."""
    team: Team
    score: int = 0
    scorers: list[PlayerScorer] = field(default_factory=list)


@dataclass
class Match:
    id: int
    team_a: TeamMatch
    team_b: TeamMatch
    stadium: str
    datetime: dt.datetime
