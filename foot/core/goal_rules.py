"""Goal Rules - validation of scoring events and per-side score computation.

Invariants:
    - A batch is validated as a whole before anything is persisted:
      one goal after MAX_GOAL_MINUTE rejects the entire batch
    - Goal players are referenced by id: a player without one is a 400
    - A goal counts for side X when scored by a player of X (not own goal)
      or by a player of the opponent as an own goal
    - A side's score equals the number of goals counted for it
    - Event order is preserved when splitting scorers into sides

Design Decisions:
    - Rejection message wording kept verbatim from the public API contract
      ("cannot score before after minute 90"), clients match on it
"""

from foot.core.domain import PlayerScorer, Team, TeamMatch
from foot.core.domain_types import MAX_GOAL_MINUTE
from foot.core.errors import BadRequestError, ErrorContext


def check_goals_valid(scorers: list[PlayerScorer]) -> None:
    """Raise BadRequestError on the first goal scored after MAX_GOAL_MINUTE."""
    for scorer in scorers:
        if scorer.minute > MAX_GOAL_MINUTE:
            raise BadRequestError(
                f"Player#{scorer.player.name} cannot score before after "
                f"minute {MAX_GOAL_MINUTE}.",
                ErrorContext(player_id=scorer.player.id),
            )


def check_scorers_identified(scorers: list[PlayerScorer]) -> None:
    """Raise BadRequestError when a goal names a player without an id."""
    for scorer in scorers:
        if scorer.player.id is None:
            raise BadRequestError(f"Player#{scorer.player.name} has no id.")


def check_players_in_match(
    team_a: Team, team_b: Team, scorers: list[PlayerScorer], match_id: int,
) -> None:
    """Raise BadRequestError when a scorer plays for neither side."""
    sides = {team_a.name, team_b.name}
    for scorer in scorers:
        if scorer.player.team_name not in sides:
            raise BadRequestError(
                f"Player#{scorer.player.name} does not play in Match#{match_id}.",
                ErrorContext(match_id=match_id, player_id=scorer.player.id),
            )


def counts_for(team: Team, scorer: PlayerScorer) -> bool:
    """Whether a goal is credited to `team`."""
    own_player = scorer.player.team_name == team.name
    return own_player != scorer.is_own_goal


def compute_score(side_scorers: list[PlayerScorer]) -> int:
    return len(side_scorers)


def build_team_match(
    team: Team, opponent: Team, scorers: list[PlayerScorer],
) -> TeamMatch:
    """Assemble one side of a match from all of the match's goal events."""
    side_scorers = [
        s for s in scorers
        if counts_for(team, s) and s.player.team_name in (team.name, opponent.name)
    ]
    return TeamMatch(
        team=team, score=compute_score(side_scorers), scorers=side_scorers,
    )
