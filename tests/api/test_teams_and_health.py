"""Team listing and health probes."""


async def test_list_teams(client):
    res = await client.get("/teams")
    assert res.status_code == 200
    assert res.json() == [
        {"id": 1, "name": "E1"},
        {"id": 2, "name": "E2"},
        {"id": 3, "name": "E3"},
    ]


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
