"""User Routes: end-to-end behaviour through FastAPI.

Tests cover:
    - GET /user lists the 14 seed users in order
    - POST /user creates id 15 and GET /user/15 returns it without unset fields
    - GET /user/999 answers 400 "id 999 not found"
    - GET /user/abc, an oversized id or a non-ASCII digit answers 400 not-found
      instead of crashing or resolving to a user
    - POST with a short first_name / missing country answers 400 with the rule message
    - POST with invalid JSON or a non-object body answers 400
    - Rejected payloads never allocate an id
    - Unknown payload keys are accepted but not stored
    - Two apps never share a store
"""

from httpx import ASGITransport, AsyncClient

from mockapi.core.seed_data import SEED_USERS
from mockapi.main import create_app


async def test_list_users_returns_seed_in_order(client):
    res = await client.get("/user")
    assert res.status_code == 200
    body = res.json()
    assert [u["id"] for u in body] == list(range(1, 15))
    assert body[0] == SEED_USERS[0]


async def test_create_then_get_scenario(client):
    res = await client.post("/user", json={"first_name": "Ada", "country": "UK"})
    assert res.status_code == 200
    assert res.json() == {"message": "user created", "id": 15}

    res = await client.get("/user/15")
    assert res.status_code == 200
    assert res.json() == {"id": 15, "first_name": "Ada", "country": "UK"}


async def test_created_user_appears_last_in_list(client):
    await client.post("/user", json={"first_name": "Ada", "country": "UK"})
    await client.post("/user", json={"first_name": "Bob", "country": "US"})
    body = (await client.get("/user")).json()
    assert [u["id"] for u in body[-2:]] == [15, 16]
    assert "last_name" not in body[-1]


async def test_get_missing_user_is_400(client):
    res = await client.get("/user/999")
    assert res.status_code == 400
    assert res.json()["message"] == "id 999 not found"


async def test_get_malformed_id_is_not_found(client):
    res = await client.get("/user/abc")
    assert res.status_code == 400
    assert res.json()["message"] == "id abc not found"


async def test_post_short_first_name_rejected(client):
    res = await client.post("/user", json={"first_name": "Al", "country": "US"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Bad Request"
    assert body["message"] == '"first_name" length must be at least 3 characters long'


async def test_post_missing_country_rejected(client):
    res = await client.post("/user", json={"first_name": "Ada"})
    assert res.status_code == 400
    assert res.json()["message"] == '"country" is required'


async def test_post_invalid_json_rejected(client):
    res = await client.post(
        "/user", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request payload JSON format"


async def test_post_array_body_rejected(client):
    res = await client.post("/user", json=[{"first_name": "Ada", "country": "UK"}])
    assert res.status_code == 400
    assert res.json()["message"] == '"value" must be of type object'


async def test_post_empty_body_rejected(client):
    res = await client.post("/user")
    assert res.status_code == 400
    assert res.json()["message"] == '"value" must be of type object'


async def test_rejected_payload_allocates_no_id(client, app):
    await client.post("/user", json={"first_name": "Al", "country": "US"})
    assert app.state.user_store.next_id == 15
    res = await client.post("/user", json={"first_name": "Ada", "country": "UK"})
    assert res.json()["id"] == 15


async def test_unknown_payload_keys_not_stored(client):
    res = await client.post(
        "/user",
        json={"id": 1, "first_name": "Ada", "country": "UK", "role": "admin"},
    )
    assert res.status_code == 200
    assert res.json()["id"] == 15
    assert (await client.get("/user/15")).json() == {
        "id": 15, "first_name": "Ada", "country": "UK",
    }


async def test_apps_do_not_share_store(settings):
    first, second = create_app(settings), create_app(settings)
    async with AsyncClient(
        transport=ASGITransport(app=first), base_url="http://test",
    ) as c1, AsyncClient(
        transport=ASGITransport(app=second), base_url="http://test",
    ) as c2:
        await c1.post("/user", json={"first_name": "Ada", "country": "UK"})
        assert len((await c1.get("/user")).json()) == 15
        assert len((await c2.get("/user")).json()) == 14


async def test_get_oversized_id_is_not_found(client):
    raw = "9" * 5000
    res = await client.get(f"/user/{raw}")
    assert res.status_code == 400
    assert res.json()["message"] == f"id {raw} not found"


async def test_get_non_ascii_digit_is_not_found(client):
    res = await client.get("/user/١")
    assert res.status_code == 400
    assert res.json()["message"] == "id ١ not found"
