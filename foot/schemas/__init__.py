"""Pydantic Schemas - REST request/response shapes for the API boundary.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - JSON field names are camelCase on the wire; Python attributes are snake_case

Design Decisions:
    - Separate from models and core.domain: schemas are API contracts,
      entities are persistence, domain is neither
"""

from foot.schemas.player import NewPlayer, Player, PlayerUpdate  # noqa: F401
from foot.schemas.match import Match, PlayerScorer, Team, TeamMatch  # noqa: F401
