import pytest
from sqlmodel import select

from foodcart.models.favorites import Favorite


async def _food_id(client, name: str) -> int:
    foods = (await client.get("/foods")).json()
    return next(f["id"] for f in foods if f["name"] == name)


@pytest.mark.asyncio
async def test_repeated_add_increments_single_row(client, db_session):
    pizza = await _food_id(client, "Pizza")

    first = (await client.post("/favorites", json={"food_id": pizza})).json()
    assert first["qty"] == 1
    assert first["food_id"] == pizza

    second = (await client.post("/favorites", json={"food_id": pizza})).json()
    assert second["id"] == first["id"]
    assert second["qty"] == 2

    third = (await client.post("/favorites", json={"food_id": pizza})).json()
    assert third["qty"] == 3

    rows = db_session.exec(select(Favorite).where(Favorite.food_id == pizza)).all()
    assert len(rows) == 1


@pytest.mark.asyncio
async def test_list_favorites_joins_food(client):
    burger = await _food_id(client, "Burger")
    created = (await client.post("/favorites", json={"food_id": burger})).json()

    r = await client.get("/favorites")
    assert r.status_code == 200
    assert r.json() == [
        {"id": created["id"], "qty": 1, "name": "Burger", "image": "img/burger.png", "price": 3500}
    ]


@pytest.mark.asyncio
async def test_orphan_favorite_created_but_not_listed(client, db_session):
    r = await client.post("/favorites", json={"food_id": 9999})
    assert r.status_code == 200, r.text
    orphan = r.json()
    assert orphan["food_id"] == 9999
    assert orphan["qty"] == 1

    assert db_session.get(Favorite, orphan["id"]) is not None
    assert (await client.get("/favorites")).json() == []


@pytest.mark.asyncio
async def test_add_favorite_requires_food_id(client):
    r = await client.post("/favorites", json={})
    assert r.status_code == 400
    assert r.json()["error"] == "Missing fields: food_id"


@pytest.mark.asyncio
async def test_patch_qty(client):
    salad = await _food_id(client, "Salad")
    fav = (await client.post("/favorites", json={"food_id": salad})).json()

    rejected = await client.patch(f"/favorites/{fav['id']}", json={"qty": 0})
    assert rejected.status_code == 400
    assert rejected.json()["error"] == "Invalid fields: qty"

    missing = await client.patch(f"/favorites/{fav['id']}", json={})
    assert missing.status_code == 400
    assert missing.json()["error"] == "Missing fields: qty"

    r = await client.patch(f"/favorites/{fav['id']}", json={"qty": 5})
    assert r.status_code == 200, r.text
    assert r.json() == {"id": fav["id"], "food_id": salad, "qty": 5}

    listed = (await client.get("/favorites")).json()
    assert listed[0]["qty"] == 5

    # a later add keeps counting from the patched value
    bumped = (await client.post("/favorites", json={"food_id": salad})).json()
    assert bumped["qty"] == 6


@pytest.mark.asyncio
async def test_patch_unknown_favorite_is_404(client):
    r = await client.patch("/favorites/4242", json={"qty": 3})
    assert r.status_code == 404
    assert r.json() == {"error": "Favorite 4242 not found"}


@pytest.mark.asyncio
async def test_malformed_id_is_400(client):
    r = await client.patch("/favorites/abc", json={"qty": 3})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid fields: favorite_id"

    r = await client.delete("/favorites/abc")
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_delete_favorite(client):
    pasta = await _food_id(client, "Pasta")
    dolma = await _food_id(client, "Dolma")
    gone = (await client.post("/favorites", json={"food_id": pasta})).json()
    kept = (await client.post("/favorites", json={"food_id": dolma})).json()

    r = await client.delete(f"/favorites/{gone['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True}

    listed = (await client.get("/favorites")).json()
    assert [f["id"] for f in listed] == [kept["id"]]


@pytest.mark.asyncio
async def test_delete_unknown_favorite_still_succeeds(client):
    r = await client.delete("/favorites/4242")
    assert r.status_code == 200
    assert r.json() == {"success": True}


@pytest.mark.asyncio
async def test_list_favorites_is_stable(client):
    quzi = await _food_id(client, "Quzi")
    await client.post("/favorites", json={"food_id": quzi})
    first = (await client.get("/favorites")).json()
    second = (await client.get("/favorites")).json()
    assert first == second


@pytest.mark.asyncio
async def test_ids_and_qty_beyond_64_bit_are_400(client):
    huge = 10**20

    r = await client.delete(f"/favorites/{huge}")
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid fields: favorite_id"

    salad = await _food_id(client, "Salad")
    fav = (await client.post("/favorites", json={"food_id": salad})).json()
    r = await client.patch(f"/favorites/{fav['id']}", json={"qty": huge})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid fields: qty"

    r = await client.post("/favorites", json={"food_id": huge})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid fields: food_id"

    listed = (await client.get("/favorites")).json()
    assert [f["qty"] for f in listed] == [1]
