import pytest
from httpx import ASGITransport, AsyncClient

from fut5.api import create_app

DAY = "2024-05-01"
NAMES = ["Ana", "Bea", "Cid", "Dan", "Ema", "Fio", "Gil", "Hal", "Ivo", "Joe"]


@pytest.fixture()
async def client(tmp_path, monkeypatch):
    monkeypatch.delenv("FUT5_DB_PATH", raising=False)
    app = create_app(tmp_path / "api.sqlite")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


async def _fill_roster(client: AsyncClient, names=NAMES) -> None:
    resp = await client.get(f"/days/{DAY}")
    resp.raise_for_status()
    for slot, name in zip(resp.json()["players"], names):
        resp = await client.put(f"/days/{DAY}/players/{slot['id']}", json={"name": name})
        resp.raise_for_status()


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_new_day(client: AsyncClient):
    resp = await client.get(f"/days/{DAY}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["day"] == DAY
    assert body["ready"] is False
    assert len(body["players"]) == 10
    assert body["submissions"] == []
    assert body["consensus"] is None

    resp = await client.get("/days")
    assert resp.json() == [DAY]


@pytest.mark.anyio
async def test_invalid_day_is_rejected(client: AsyncClient):
    resp = await client.get("/days/yesterday")
    assert resp.status_code == 422


@pytest.mark.anyio
async def test_rename_unknown_player(client: AsyncClient):
    resp = await client.put(f"/days/{DAY}/players/missing", json={"name": "Ana"})
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_save_players_reports_incomplete_roster(client: AsyncClient):
    await _fill_roster(client, NAMES[:9] + ["ana"])

    resp = await client.post(f"/days/{DAY}/players/save")
    assert resp.status_code == 400
    assert "ana" in resp.json()["detail"]

    await _fill_roster(client)
    resp = await client.post(f"/days/{DAY}/players/save")
    assert resp.status_code == 200
    assert resp.json()["ready"] is True


@pytest.mark.anyio
async def test_submission_flow(client: AsyncClient):
    await _fill_roster(client)

    resp = await client.post(
        f"/days/{DAY}/submissions",
        json={"author": "X", "team_a": ["Ana", "Bea", "Cid", "Dan", "Ema"]},
    )
    assert resp.status_code == 201
    first_id = resp.json()["id"]

    resp = await client.post(
        f"/days/{DAY}/submissions",
        json={"author": "Y", "team_a": ["Fio", "Gil", "Hal", "Ivo", "Joe"]},
    )
    assert resp.status_code == 201

    resp = await client.post(
        f"/days/{DAY}/submissions",
        json={"author": "X", "team_a": ["Joe", "Ivo", "Hal", "Gil", "Fio"]},
    )
    assert resp.status_code == 409

    resp = await client.post(f"/days/{DAY}/submissions", json={"team_a": ["Ana", "Bea"]})
    assert resp.status_code == 400

    resp = await client.get(f"/days/{DAY}/consensus")
    assert resp.status_code == 200
    body = resp.json()
    assert body["consensus"]["votes"] == 2
    assert [p["name"] for p in body["consensus"]["split"]["team_a"]] == ["Ana", "Bea", "Cid", "Dan", "Ema"]
    assert [t["votes"] for t in body["tallies"]] == [2]

    resp = await client.delete(f"/days/{DAY}/submissions/{first_id}")
    assert resp.json() == {"deleted": True}
    resp = await client.get(f"/days/{DAY}")
    body = resp.json()
    assert [s["author"] for s in body["submissions"]] == ["Y"]
    assert body["consensus"]["votes"] == 1


@pytest.mark.anyio
async def test_share_and_reset(client: AsyncClient):
    await _fill_roster(client, NAMES[:2])

    resp = await client.get(f"/days/{DAY}/share")
    assert resp.json()["text"] == "Fut5 2024-05-01: Ana, Bea"

    resp = await client.post(f"/days/{DAY}/reset")
    assert resp.status_code == 200
    body = resp.json()
    assert all(player["name"] == "" for player in body["players"])
    assert body["share_text"] == "Fut5 2024-05-01: "
