"""Match Mapper - converts a match entity into the domain Match with both sides scored.

Invariants:
    - Every goal of the match lands on at most one side (core/goal_rules.py)
    - datetime is always timezone-aware; naive values from the store are UTC
"""

from datetime import datetime, timezone

from foot.core.domain import Match, Team
from foot.core.goal_rules import build_team_match
from foot.models import MatchEntity, TeamEntity
from foot.repositories.player_mapper import PlayerMapper


class MatchMapper:

    def __init__(self, player_mapper: PlayerMapper):
        self.player_mapper = player_mapper

    def to_domain(self, entity: MatchEntity) -> Match:
        team_a = to_domain_team(entity.team_a)
        team_b = to_domain_team(entity.team_b)
        scorers = [
            self.player_mapper.to_domain_scorer(s)
            for s in sorted(entity.scorers, key=lambda s: s.minute)
        ]
        return Match(
            id=entity.id,
            team_a=build_team_match(team_a, team_b, scorers),
            team_b=build_team_match(team_b, team_a, scorers),
            stadium=entity.stadium,
            datetime=_as_utc(entity.match_datetime),
        )


def to_domain_team(entity: TeamEntity) -> Team:
    return Team(id=entity.id, name=entity.name)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on DateTime(timezone=True)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
