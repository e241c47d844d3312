"""TeamEntity ORM - persists a football team.

Invariants:
    - name is unique: it is the lookup key used when persisting players
    - Team -> players is not mapped: players are always queried by team
      name, never loaded through the team
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from foot.db.base import Base


class TeamEntity(Base):
    """Team entity."""
    __tablename__ = "team"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
