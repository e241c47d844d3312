"""REST Mappers - pure conversion between wire schemas and domain objects.

Invariants:
    - Stateless and side-effect free: no data access, no validation
    - Field mapping is one-to-one and total; invalid wire input is rejected
      upstream by pydantic before reaching here
    - to_domain(to_rest(p)) == p for every well-formed domain Player
"""

from foot import schemas
from foot.core import domain


class PlayerRestMapper:

    def to_rest(self, player: domain.Player) -> schemas.Player:
        return schemas.Player(
            id=player.id,
            name=player.name,
            is_guardian=player.is_guardian,
            team_name=player.team_name,
        )

    def to_domain(self, rest: schemas.Player) -> domain.Player:
        return domain.Player(
            id=rest.id,
            name=rest.name,
            is_guardian=rest.is_guardian,
            team_name=rest.team_name,
        )

    def to_domain_update(self, to_update: schemas.PlayerUpdate) -> domain.PlayerUpdate:
        return domain.PlayerUpdate(
            id=to_update.id,
            name=to_update.name,
            is_guardian=to_update.is_guardian,
        )


class ScorerRestMapper:
    """Goal events: scoreTime <-> minute, isOG <-> is_own_goal."""

    def __init__(self, player_mapper: PlayerRestMapper):
        self.player_mapper = player_mapper

    def to_rest(self, scorer: domain.PlayerScorer) -> schemas.PlayerScorer:
        return schemas.PlayerScorer(
            id=scorer.id,
            player=self.player_mapper.to_rest(scorer.player),
            score_time=scorer.minute,
            is_og=scorer.is_own_goal,
        )

    def to_domain(self, rest: schemas.PlayerScorer) -> domain.PlayerScorer:
        return domain.PlayerScorer(
            player=self.player_mapper.to_domain(rest.player),
            minute=rest.score_time,
            is_own_goal=rest.is_og,
            id=rest.id,
        )


class MatchRestMapper:

    def __init__(self, scorer_mapper: ScorerRestMapper):
        self.scorer_mapper = scorer_mapper

    def to_rest(self, match: domain.Match) -> schemas.Match:
        return schemas.Match(
            id=match.id,
            team_a=self._to_rest_side(match.team_a),
            team_b=self._to_rest_side(match.team_b),
            stadium=match.stadium,
            datetime=match.datetime,
        )

    def _to_rest_side(self, side: domain.TeamMatch) -> schemas.TeamMatch:
        return schemas.TeamMatch(
            team=to_rest_team(side.team),
            score=side.score,
            scorers=[self.scorer_mapper.to_rest(s) for s in side.scorers],
        )


def to_rest_team(team: domain.Team) -> schemas.Team:
    return schemas.Team(id=team.id, name=team.name)


player_rest_mapper = PlayerRestMapper()
scorer_rest_mapper = ScorerRestMapper(player_rest_mapper)
match_rest_mapper = MatchRestMapper(scorer_rest_mapper)
