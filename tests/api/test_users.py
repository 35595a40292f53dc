from models.users import User
from models.user_sessions import UserSession
from services.session_service import SessionService
from services.token_service import TokenService
from utils.hashing import is_password_hash


async def test_signup_success(client, session):
    response = await client.post("/users", json={"email": "a@x.com", "password": "secret123"})

    assert response.status_code == 200
    data = response.json()

    assert data["email"] == "a@x.com"
    assert isinstance(data["_id"], int)

    # Secrets are never serialized
    assert "password" not in data
    assert "token_salt" not in data
    assert "sessions" not in data

    access_token = response.headers["x-access-token"]
    refresh_token = response.headers["x-refresh-token"]
    assert TokenService.verify(access_token) == data["_id"]

    stored = session.query(UserSession).filter(
        UserSession.token_hash == SessionService.hash_refresh_token(refresh_token)
    ).one()
    assert stored.user_id == data["_id"]
    assert stored.token_hash != refresh_token

    user = session.get(User, data["_id"])
    assert is_password_hash(user.password)


async def test_signup_normalizes_email(client):
    response = await client.post("/users", json={"email": "  Mixed@Example.COM ", "password": "secret123"})

    assert response.status_code == 200
    assert response.json()["email"] == "mixed@example.com"


async def test_signup_duplicate_email(client, registered_user):
    response = await client.post("/users", json={"email": "USER@example.com", "password": "secret123"})

    assert response.status_code == 400
    assert "already registered" in response.json()["error"].lower()


async def test_signup_invalid_email(client):
    response = await client.post("/users", json={"email": "not-an-email", "password": "secret123"})

    assert response.status_code == 400
    assert "email" in response.json()["error"]


async def test_signup_short_password(client):
    response = await client.post("/users", json={"email": "a@x.com", "password": "short"})

    assert response.status_code == 400
    assert "8 characters" in response.json()["error"]


async def test_signup_missing_fields(client):
    response = await client.post("/users", json={})

    assert response.status_code == 400
    assert "error" in response.json()


async def test_login_success(client, registered_user):
    response = await client.post("/users/login", json={
        "email": registered_user.email,
        "password": "secret123"
    })

    assert response.status_code == 200
    assert response.json() == {"_id": registered_user.id, "email": registered_user.email}
    assert TokenService.verify(response.headers["x-access-token"]) == registered_user.id
    assert response.headers["x-refresh-token"]


async def test_login_creates_additional_session(client, session, registered_user):
    for _ in range(2):
        response = await client.post("/users/login", json={
            "email": registered_user.email,
            "password": "secret123"
        })
        assert response.status_code == 200

    assert session.query(UserSession).filter(UserSession.user_id == registered_user.id).count() == 2


async def test_login_failures_are_indistinguishable(client, registered_user):
    wrong_password = await client.post("/users/login", json={
        "email": registered_user.email,
        "password": "wrong-password"
    })
    unknown_email = await client.post("/users/login", json={
        "email": "nobody@example.com",
        "password": "secret123"
    })

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert "x-access-token" not in wrong_password.headers


async def test_get_me(client, auth_headers):
    response = await client.get("/users/me", headers={"x-access-token": auth_headers["x-access-token"]})

    assert response.status_code == 200
    assert response.json() == {"_id": int(auth_headers["_id"]), "email": "a@x.com"}


async def test_delete_me_removes_everything(client, session, auth_headers):
    headers = {"x-access-token": auth_headers["x-access-token"]}
    list_id = (await client.post("/lists", json={"title": "Groceries"}, headers=headers)).json()["id"]
    await client.post(f"/lists/{list_id}/tasks", json={"title": "Milk"}, headers=headers)

    response = await client.delete("/users/me", headers=headers)
    assert response.status_code == 200

    user_id = int(auth_headers["_id"])
    assert session.query(User).filter(User.id == user_id).count() == 0
    assert session.query(UserSession).filter(UserSession.user_id == user_id).count() == 0

    # The access token is still cryptographically valid but the account is gone
    response = await client.get("/users/me", headers=headers)
    assert response.status_code == 404

    response = await client.get("/users/me/access-token", headers={
        "x-refresh-token": auth_headers["x-refresh-token"],
        "_id": auth_headers["_id"],
    })
    assert response.status_code == 401
