import pytest

from app.db.models.comment import Comment
from app.db.models.post import Post


@pytest.fixture
def post(db, user):
    post = Post(user_id=user.id, body="hello")
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def comment_count(db):
    return db.query(Comment).count()


def test_store_comment_returns_created_with_user(client, db, post, make_user, auth_headers):
    author = make_user(firstname="Alan", lastname="Turing")

    res = client.post(
        f"/api/posts/{post.id}/comments",
        json={"user_id": author.id, "text": "Nice post"},
        headers=auth_headers,
    )

    assert res.status_code == 201
    comment = res.json()["comment"]
    assert comment["text"] == "Nice post"
    assert comment["post_id"] == post.id
    assert comment["user"]["id"] == author.id
    assert comment["user"]["firstname"] == "Alan"
    assert comment_count(db) == 1


def test_store_comment_accepts_exactly_255_characters(client, post, user, auth_headers):
    res = client.post(
        f"/api/posts/{post.id}/comments",
        json={"user_id": user.id, "text": "x" * 255},
        headers=auth_headers,
    )

    assert res.status_code == 201


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"text": "no user"}, "user_id"),
        ({"user_id": None, "text": "null user"}, "user_id"),
        ({"user_id": "AUTHOR", "text": "x" * 256}, "text"),
        ({"user_id": "AUTHOR", "text": ""}, "text"),
        ({"user_id": "AUTHOR", "text": "   "}, "text"),
        ({"user_id": "AUTHOR"}, "text"),
    ],
)
def test_store_comment_validation_failure_creates_nothing(client, db, post, user, auth_headers, payload, field):
    if payload.get("user_id") == "AUTHOR":
        payload = {**payload, "user_id": user.id}

    res = client.post(f"/api/posts/{post.id}/comments", json=payload, headers=auth_headers)

    assert res.status_code == 422
    body = res.json()
    assert field in body["errors"]
    assert body["message"]
    assert comment_count(db) == 0


def test_store_comment_for_unknown_user(client, db, post, auth_headers):
    res = client.post(
        f"/api/posts/{post.id}/comments",
        json={"user_id": 9999, "text": "ghost"},
        headers=auth_headers,
    )

    assert res.status_code == 422
    assert res.json()["errors"] == {"user_id": ["The selected user id is invalid."]}
    assert comment_count(db) == 0


def test_store_comment_on_missing_post(client, user, auth_headers):
    res = client.post(
        "/api/posts/4242/comments",
        json={"user_id": user.id, "text": "hello?"},
        headers=auth_headers,
    )

    assert res.status_code == 404


def test_store_comment_requires_authentication(client, post, user):
    res = client.post(f"/api/posts/{post.id}/comments", json={"user_id": user.id, "text": "hi"})

    assert res.status_code == 401


def test_store_comment_trims_text(client, post, user, auth_headers):
    res = client.post(
        f"/api/posts/{post.id}/comments",
        json={"user_id": user.id, "text": "  spaced out  "},
        headers=auth_headers,
    )

    assert res.status_code == 201
    assert res.json()["comment"]["text"] == "spaced out"
