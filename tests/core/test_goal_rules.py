"""Goal rules - minute validation, side attribution and scoring. Pure, no IO."""

import pytest

from foot.core.domain import Player, PlayerScorer, Team
from foot.core.errors import BadRequestError
from foot.core.goal_rules import (
    build_team_match, check_goals_valid, check_players_in_match,
    check_scorers_identified, compute_score, counts_for,
)

E1 = Team(id=1, name="E1")
E2 = Team(id=2, name="E2")
J1 = Player(id=1, name="J1", is_guardian=False, team_name="E1")
J2 = Player(id=2, name="J2", is_guardian=False, team_name="E2")
J9 = Player(id=9, name="J9", is_guardian=False, team_name="E9")


def test_goals_up_to_minute_90_pass():
    check_goals_valid([
        PlayerScorer(player=J1, minute=0),
        PlayerScorer(player=J1, minute=90),
    ])


def test_goal_after_minute_90_is_rejected_with_player_name():
    with pytest.raises(BadRequestError) as exc_info:
        check_goals_valid([PlayerScorer(player=J1, minute=100)])
    assert exc_info.value.message == "Player#J1 cannot score before after minute 90."
    assert exc_info.value.http_status == 400
    assert exc_info.value.context.player_id == 1


def test_goal_player_without_id_is_rejected():
    unsaved = Player(id=None, name="J7", is_guardian=False, team_name="E1")
    with pytest.raises(BadRequestError) as exc_info:
        check_scorers_identified([
            PlayerScorer(player=J1, minute=10),
            PlayerScorer(player=unsaved, minute=20),
        ])
    assert exc_info.value.message == "Player#J7 has no id."
    assert exc_info.value.http_status == 400


def test_first_offending_goal_is_reported():
    with pytest.raises(BadRequestError, match="Player#J2"):
        check_goals_valid([
            PlayerScorer(player=J1, minute=30),
            PlayerScorer(player=J2, minute=91),
            PlayerScorer(player=J1, minute=95),
        ])


def test_empty_batch_is_valid():
    check_goals_valid([])


def test_own_goal_counts_for_opponent():
    own_goal = PlayerScorer(player=J2, minute=12, is_own_goal=True)
    assert counts_for(E1, own_goal)
    assert not counts_for(E2, own_goal)


def test_regular_goal_counts_for_own_team():
    goal = PlayerScorer(player=J1, minute=12)
    assert counts_for(E1, goal)
    assert not counts_for(E2, goal)


def test_build_team_match_splits_and_scores():
    scorers = [
        PlayerScorer(player=J1, minute=10),
        PlayerScorer(player=J2, minute=20),
        PlayerScorer(player=J2, minute=30, is_own_goal=True),
    ]
    side_a = build_team_match(E1, E2, scorers)
    side_b = build_team_match(E2, E1, scorers)

    assert [s.minute for s in side_a.scorers] == [10, 30]
    assert side_a.score == 2
    assert [s.minute for s in side_b.scorers] == [20]
    assert side_b.score == 1


def test_build_team_match_ignores_players_of_other_teams():
    side = build_team_match(
        E1, E2, [PlayerScorer(player=J9, minute=5, is_own_goal=True)],
    )
    assert side.scorers == []
    assert side.score == 0


def test_compute_score_is_scorer_count():
    assert compute_score([]) == 0
    assert compute_score([PlayerScorer(player=J1, minute=1)] * 3) == 3


def test_player_outside_match_is_rejected():
    with pytest.raises(BadRequestError) as exc_info:
        check_players_in_match(E1, E2, [PlayerScorer(player=J9, minute=5)], 3)
    assert exc_info.value.message == "Player#J9 does not play in Match#3."
    assert exc_info.value.context.match_id == 3


def test_players_of_both_sides_pass():
    check_players_in_match(
        E1, E2,
        [PlayerScorer(player=J1, minute=5), PlayerScorer(player=J2, minute=6)],
        3,
    )
