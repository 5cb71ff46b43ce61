"""Data route — /api/data CRUD against an in-memory posts table.

Invariants:
    - GET ?id returns one post, 404 if absent, 400 if the id is not a UUID
    - GET without id pages newest-first with an exact total
    - POST/PUT/DELETE validate bodies before touching the database (400)
    - DELETE of a missing id still answers 200
    - Store failures surface as 500 DATABASE_ERROR
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

import app.infrastructure.database as db_module
from app.infrastructure.database import get_db
from app.main import app
from app.models.post import Post

USER_ID = uuid4()


@pytest.fixture
async def seed_posts(test_db):
    """Three posts, created one hour apart (oldest first)."""
    base = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    posts = [
        Post(
            title=f"Post {i}", content=f"Body {i}", user_id=USER_ID,
            created_at=base + timedelta(hours=i),
        )
        for i in range(3)
    ]
    test_db.add_all(posts)
    await test_db.commit()
    for p in posts:
        await test_db.refresh(p)
    return posts


# -- GET -----------------------------------------------------------------------

async def test_list_returns_newest_first_with_pagination(client, seed_posts):
    res = await client.get("/api/data")
    assert res.status_code == 200
    body = res.json()
    assert [p["title"] for p in body["data"]] == ["Post 2", "Post 1", "Post 0"]
    assert body["pagination"] == {"total": 3, "limit": 10, "offset": 0}


async def test_list_honors_limit_and_offset(client, seed_posts):
    res = await client.get("/api/data", params={"limit": 1, "offset": 1})
    body = res.json()
    assert [p["title"] for p in body["data"]] == ["Post 1"]
    assert body["pagination"] == {"total": 3, "limit": 1, "offset": 1}


async def test_list_empty_table(client):
    res = await client.get("/api/data")
    assert res.status_code == 200
    assert res.json() == {
        "data": [], "pagination": {"total": 0, "limit": 10, "offset": 0},
    }


@pytest.mark.parametrize("params", [
    {"limit": 0}, {"limit": 101}, {"offset": -1}, {"limit": "abc"},
])
async def test_list_rejects_out_of_range_paging(client, params):
    res = await client.get("/api/data", params=params)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_by_id(client, seed_posts):
    post = seed_posts[0]
    res = await client.get("/api/data", params={"id": str(post.id)})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["id"] == str(post.id)
    assert data["title"] == "Post 0"
    assert data["user_id"] == str(USER_ID)
    assert "created_at" in data


async def test_get_by_id_ignores_paging_params(client, seed_posts):
    post = seed_posts[1]
    res = await client.get(
        "/api/data", params={"id": str(post.id), "limit": 0, "offset": "x"},
    )
    assert res.status_code == 200
    assert res.json()["data"]["id"] == str(post.id)


async def test_list_paging_error_names_query_field(client):
    res = await client.get("/api/data", params={"limit": 0})
    assert res.json()["error"]["details"][0]["field"] == "query.limit"


async def test_get_unknown_id_returns_404(client):
    res = await client.get("/api/data", params={"id": str(uuid4())})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_malformed_id_returns_400(client):
    res = await client.get("/api/data", params={"id": "not-a-uuid"})
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert details[0]["field"] == "query.id"


# -- POST ----------------------------------------------------------------------

async def test_create_post(client):
    res = await client.post("/api/data", json={
        "title": "My Post", "content": "Hello", "user_id": str(USER_ID),
    })
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["title"] == "My Post"
    assert data["content"] == "Hello"
    assert data["user_id"] == str(USER_ID)

    fetched = await client.get("/api/data", params={"id": data["id"]})
    assert fetched.status_code == 200


async def test_create_missing_title_returns_400(client):
    res = await client.post("/api/data", json={
        "content": "Hello", "user_id": str(USER_ID),
    })
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.title" in fields


async def test_create_blank_title_returns_400(client):
    res = await client.post("/api/data", json={
        "title": "   ", "content": "Hello", "user_id": str(USER_ID),
    })
    assert res.status_code == 400
    assert "Title is required" in res.json()["error"]["details"][0]["message"]


async def test_create_invalid_user_id_returns_400(client):
    res = await client.post("/api/data", json={
        "title": "T", "content": "Hello", "user_id": "123",
    })
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.user_id"


async def test_create_title_too_long_returns_400(client):
    res = await client.post("/api/data", json={
        "title": "x" * 201, "content": "Hello", "user_id": str(USER_ID),
    })
    assert res.status_code == 400


async def test_create_malformed_json_returns_400(client):
    res = await client.post(
        "/api/data", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# -- PUT -----------------------------------------------------------------------

async def test_update_changes_only_sent_fields(client, seed_posts):
    post = seed_posts[0]
    res = await client.put("/api/data", json={
        "id": str(post.id), "title": "Updated Title",
    })
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["title"] == "Updated Title"
    assert data["content"] == "Body 0"


async def test_update_without_changes_returns_row(client, seed_posts):
    post = seed_posts[1]
    res = await client.put("/api/data", json={"id": str(post.id)})
    assert res.status_code == 200
    assert res.json()["data"]["title"] == "Post 1"


async def test_update_unknown_id_returns_404(client):
    res = await client.put("/api/data", json={"id": str(uuid4()), "title": "x"})
    assert res.status_code == 404


async def test_update_blank_content_returns_400(client, seed_posts):
    res = await client.put("/api/data", json={
        "id": str(seed_posts[0].id), "content": "",
    })
    assert res.status_code == 400


# -- DELETE --------------------------------------------------------------------

async def test_delete_removes_post(client, seed_posts):
    post = seed_posts[2]
    res = await client.request("DELETE", "/api/data", json={"id": str(post.id)})
    assert res.status_code == 200
    assert res.json() == {"message": "Post deleted successfully"}

    fetched = await client.get("/api/data", params={"id": str(post.id)})
    assert fetched.status_code == 404


async def test_delete_unknown_id_is_not_an_error(client):
    res = await client.request("DELETE", "/api/data", json={"id": str(uuid4())})
    assert res.status_code == 200


async def test_delete_requires_valid_id(client):
    res = await client.request("DELETE", "/api/data", json={"id": "abc"})
    assert res.status_code == 400


# -- Failures ------------------------------------------------------------------

class _BrokenSession:
    """Session whose every query fails."""

    def __init__(self, exc: Exception):
        self.exc = exc

    async def execute(self, *args, **kwargs):
        raise self.exc

    async def rollback(self):
        pass


async def test_store_failure_returns_500(client):
    async def broken_db():
        yield _BrokenSession(OperationalError("SELECT", {}, Exception("down")))

    app.dependency_overrides[get_db] = broken_db
    res = await client.get("/api/data")
    assert res.status_code == 500
    body = res.json()["error"]
    assert body["code"] == "DATABASE_ERROR"
    assert "down" not in body["message"]


async def test_unexpected_exception_returns_generic_500(client):
    async def broken_db():
        yield _BrokenSession(RuntimeError("secret internals"))

    app.dependency_overrides[get_db] = broken_db
    res = await client.get("/api/data")
    assert res.status_code == 500
    body = res.json()["error"]
    assert body["code"] == "INTERNAL_ERROR"
    assert "secret" not in body["message"]


async def test_unconfigured_database_returns_500(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    del app.dependency_overrides[get_db]
    res = await client.get("/api/data")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DATABASE_NOT_CONFIGURED"
