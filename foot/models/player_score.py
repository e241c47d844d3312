"""PlayerScoreEntity ORM - persists one goal event of a player in a match.

Invariants:
    - Always references exactly one Player and one Match
    - minute within [0, 90] is enforced before persistence (core/goal_rules.py)
"""

from sqlalchemy import Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foot.db.base import Base


class PlayerScoreEntity(Base):
    """Goal event entity."""
    __tablename__ = "player_score"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    player_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("player.id"), nullable=False,
    )
    match_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("match.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    minute: Mapped[int] = mapped_column(Integer, nullable=False)
    own_goal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    player: Mapped["PlayerEntity"] = relationship("PlayerEntity", lazy="selectin")
    match: Mapped["MatchEntity"] = relationship(
        "MatchEntity", back_populates="scorers",
    )
