"""Persistence mappers - entity <-> domain conversion against the seeded database.

Invariants:
    - Every missing reference (player, match, team) raises ResourceNotFoundError
    - Partial updates leave absent fields untouched
"""

import pytest

from foot.core.domain import Player, PlayerScorer, PlayerUpdate
from foot.core.errors import ResourceNotFoundError
from foot.services.composition import build_repositories


@pytest.fixture
def repos(test_db):
    return build_repositories(test_db)


async def test_player_entity_to_domain_reads_team_name(repos):
    entity = await repos.players.find_by_id(6)
    assert repos.player_mapper.to_domain(entity) == Player(
        id=6, name="J6", is_guardian=False, team_name="E3",
    )


async def test_scorer_entity_to_domain(repos):
    match = await repos.matches.find_by_id(2)
    scorers = [repos.player_mapper.to_domain_scorer(s) for s in match.scorers]
    assert [(s.id, s.player.name, s.minute, s.is_own_goal) for s in scorers] == [
        (7, "J3", 70, False), (8, "J6", 80, True),
    ]


async def test_scorer_to_entity_resolves_player_and_match(repos):
    j1 = Player(id=1, name="J1", is_guardian=False, team_name="E1")
    entity = await repos.player_mapper.to_entity_scorer(
        3, PlayerScorer(player=j1, minute=5, is_own_goal=False, id=1),
    )
    assert entity.id is None
    assert entity.player.name == "J1"
    assert entity.match.id == 3
    assert entity.minute == 5
    assert entity.own_goal is False


async def test_scorer_to_entity_unknown_player(repos):
    ghost = Player(id=404, name="Ghost", is_guardian=False, team_name="E1")
    with pytest.raises(ResourceNotFoundError, match="Player '404' not found"):
        await repos.player_mapper.to_entity_scorer(
            3, PlayerScorer(player=ghost, minute=5),
        )


async def test_scorer_to_entity_unknown_match(repos):
    j1 = Player(id=1, name="J1", is_guardian=False, team_name="E1")
    with pytest.raises(ResourceNotFoundError, match="Match '404' not found"):
        await repos.player_mapper.to_entity_scorer(
            404, PlayerScorer(player=j1, minute=5),
        )


async def test_player_to_entity_resolves_team(repos):
    entity = await repos.player_mapper.to_entity(
        Player(id=None, name="J7", is_guardian=True, team_name="E2"),
    )
    assert entity.team.name == "E2"
    assert entity.guardian is True


async def test_player_to_entity_unknown_team_fails_loudly(repos):
    with pytest.raises(ResourceNotFoundError, match="Team 'E9' not found"):
        await repos.player_mapper.to_entity(
            Player(id=None, name="J7", is_guardian=False, team_name="E9"),
        )


async def test_player_update_applies_present_fields_only(repos):
    entity = await repos.player_mapper.to_entity_update(
        PlayerUpdate(id=5, name="Keeper"),
    )
    assert entity.name == "Keeper"
    assert entity.guardian is True


async def test_player_update_unknown_id_fails_immediately(repos):
    with pytest.raises(ResourceNotFoundError):
        await repos.player_mapper.to_entity_update(PlayerUpdate(id=77))


async def test_match_entity_to_domain_scores_both_sides(repos):
    match = repos.match_mapper.to_domain(await repos.matches.find_by_id(1))
    assert (match.team_a.team.name, match.team_a.score) == ("E1", 4)
    assert (match.team_b.team.name, match.team_b.score) == ("E2", 2)
    assert match.datetime.tzinfo is not None
