"""ORM Entities - SQLAlchemy declarative models for teams, players, matches and goals.

Invariants:
    - All entities inherit from Base (db/base.py)
    - Entities own identity and relationship resolution; domain objects never leak here

Design Decisions:
    - One file per entity for locality
    - All entities imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from foot.models.team import TeamEntity  # noqa: F401
from foot.models.player import PlayerEntity  # noqa: F401
from foot.models.match import MatchEntity  # noqa: F401
from foot.models.player_score import PlayerScoreEntity  # noqa: F401
