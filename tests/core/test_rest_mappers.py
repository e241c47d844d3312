"""REST mappers - wire <-> domain conversion for players, goals and matches."""

from datetime import datetime, timezone

from foot import schemas
from foot.api.mappers import (
    match_rest_mapper, player_rest_mapper, scorer_rest_mapper,
)
from foot.core.domain import (
    Match, Player, PlayerScorer, PlayerUpdate, Team, TeamMatch,
)

J1 = Player(id=1, name="J1", is_guardian=True, team_name="E1")


def test_player_round_trip_is_identity():
    once = player_rest_mapper.to_domain(player_rest_mapper.to_rest(J1))
    twice = player_rest_mapper.to_domain(player_rest_mapper.to_rest(once))
    assert once == J1
    assert twice == J1


def test_player_to_rest_uses_wire_names():
    dumped = player_rest_mapper.to_rest(J1).model_dump(by_alias=True)
    assert dumped == {"id": 1, "name": "J1", "isGuardian": True, "teamName": "E1"}


def test_player_update_keeps_absent_fields_none():
    rest = schemas.PlayerUpdate.model_validate({"id": 4, "isGuardian": False})
    assert player_rest_mapper.to_domain_update(rest) == PlayerUpdate(
        id=4, name=None, is_guardian=False,
    )


def test_scorer_maps_score_time_and_og_flag():
    rest = schemas.PlayerScorer.model_validate({
        "id": 12,
        "player": {"id": 1, "name": "J1", "isGuardian": True, "teamName": "E1"},
        "scoreTime": 42,
        "isOG": True,
    })
    scorer = scorer_rest_mapper.to_domain(rest)
    assert scorer == PlayerScorer(
        player=J1, minute=42, is_own_goal=True, id=12,
    )
    assert scorer_rest_mapper.to_rest(scorer).model_dump() == rest.model_dump()


def test_match_to_rest_serializes_camel_case():
    match = Match(
        id=2,
        team_a=TeamMatch(
            team=Team(id=1, name="E1"), score=1,
            scorers=[PlayerScorer(player=J1, minute=5)],
        ),
        team_b=TeamMatch(team=Team(id=3, name="E3")),
        stadium="S2",
        datetime=datetime(2023, 1, 1, 14, 0, tzinfo=timezone.utc),
    )
    dumped = match_rest_mapper.to_rest(match).model_dump(by_alias=True)
    assert set(dumped) == {"id", "teamA", "teamB", "stadium", "datetime"}
    assert dumped["teamA"]["scorers"][0]["scoreTime"] == 5
    assert dumped["teamA"]["scorers"][0]["isOG"] is False
    assert dumped["teamB"] == {"team": {"id": 3, "name": "E3"}, "score": 0, "scorers": []}
