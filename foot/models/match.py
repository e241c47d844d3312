"""MatchEntity ORM - persists a match between two teams and owns its goals.

Invariants:
    - team_a and team_b are both required
    - scorers ordered by minute, then insertion (id)
    - cascade delete for scorers: a match owns all its goal events

Design Decisions:
    - Goals stored flat on the match, not per side: the side a goal counts for
      is derived from the scorer's team and the own-goal flag (core/goal_rules.py)
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foot.db.base import Base


class MatchEntity(Base):
    """Match entity - aggregate root for goal events."""
    __tablename__ = "match"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    team_a_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("team.id"), nullable=False,
    )
    team_b_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("team.id"), nullable=False,
    )
    stadium: Mapped[str] = mapped_column(String(100), nullable=False)
    match_datetime: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

    # Relationships
    team_a: Mapped["TeamEntity"] = relationship(
        "TeamEntity", foreign_keys=[team_a_id], lazy="selectin",
    )
    team_b: Mapped["TeamEntity"] = relationship(
        "TeamEntity", foreign_keys=[team_b_id], lazy="selectin",
    )
    scorers: Mapped[list["PlayerScoreEntity"]] = relationship(
        "PlayerScoreEntity", back_populates="match",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="(PlayerScoreEntity.minute, PlayerScoreEntity.id)",
    )
