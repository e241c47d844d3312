"""PlayerEntity ORM - persists a player and its team association.

Invariants:
    - Always belongs to a Team (team_id FK, non-nullable)
    - team is eagerly loaded: entity -> domain conversion reads team.name

Design Decisions:
    - lazy="selectin" on team: async sessions cannot lazy-load on attribute access
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foot.db.base import Base


class PlayerEntity(Base):
    """Player entity."""
    __tablename__ = "player"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    guardian: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    team_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("team.id"), nullable=False,
    )

    team: Mapped["TeamEntity"] = relationship(
        "TeamEntity", lazy="selectin",
    )
