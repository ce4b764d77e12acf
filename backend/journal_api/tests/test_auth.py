"""
Tests for registration, login, logout and current-user endpoints.
"""
from journal_api.core.config import settings
from journal_api.models.user import User
from journal_api.tests.conftest import PASSWORD, auth_headers, make_user


def register(client, username="testuser", email="test@example.com", password="secret12"):
    return client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": email,
            "password": password,
            "first_name": "Test",
            "last_name": "User",
        }
    )


def test_register(client):
    """Registration returns a token and the account without its password."""
    response = register(client, username="TestUser", email="Test@Example.com")
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["access_token"]
    user = body["data"]["user"]
    assert user["username"] == "testuser"
    assert user["email"] == "test@example.com"
    assert user["role"] == "user"
    assert user["profile"]["avatar"].startswith("https://ui-avatars.com/api/?name=Test")
    assert user["preferences"] == {"theme": "auto", "timezone": "IST", "reminder_time": None}
    assert "password" not in user and "hashed_password" not in user


def test_register_duplicate_username(client):
    """Usernames are unique regardless of case."""
    register(client, username="taken", email="one@example.com")
    response = register(client, username="TAKEN", email="two@example.com")
    assert response.status_code == 409
    assert response.json()["success"] is False


def test_register_duplicate_email(client):
    """Emails are unique regardless of case."""
    register(client, username="first", email="same@example.com")
    response = register(client, username="second", email="SAME@example.com")
    assert response.status_code == 409


def test_register_password_length_bounds(client):
    """Passwords must be 6 to 10 characters."""
    assert register(client, password="short").status_code == 400
    response = register(client, password="waytoolongpassword")
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "password"


def test_login_with_username_and_email(client):
    """Login accepts either identifier."""
    register(client, username="testuser2", email="test2@example.com")

    response = client.post("/api/auth/login", json={"identifier": "testuser2", "password": "secret12"})
    assert response.status_code == 200
    assert "access_token" in response.json()["data"]

    response = client.post("/api/auth/login", json={"identifier": "TEST2@example.com", "password": "secret12"})
    assert response.status_code == 200


def test_login_invalid_credentials(client):
    """Unknown users and wrong passwords get the same 401."""
    register(client, username="realuser", email="real@example.com")
    unknown = client.post("/api/auth/login", json={"identifier": "nonexistent", "password": "wrongpw"})
    wrong = client.post("/api/auth/login", json={"identifier": "realuser", "password": "wrongpw"})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json()["message"] == wrong.json()["message"]


def test_login_inactive_account(client, db):
    """Deactivated accounts cannot log in."""
    make_user(db, "sleeper", is_active=False)
    response = client.post("/api/auth/login", json={"identifier": "sleeper", "password": PASSWORD})
    assert response.status_code == 403


def test_login_cookie_expires_after_seven_hours(client, db):
    """The login cookie lasts 7 hours even though the token is valid for 7 days."""
    make_user(db, "cookie")
    response = client.post("/api/auth/login", json={"identifier": "cookie", "password": PASSWORD})
    cookie = response.headers["set-cookie"].lower()
    assert f"{settings.COOKIE_NAME}=" in cookie
    assert f"max-age={7 * 60 * 60}" in cookie
    assert "httponly" in cookie
    assert "samesite=lax" in cookie
    assert settings.ACCESS_TOKEN_EXPIRE_DAYS == 7


def test_login_cookie_authenticates_follow_up_requests(client, db):
    """A browser client can rely on the cookie alone."""
    make_user(db, "browser")
    client.post("/api/auth/login", json={"identifier": "browser", "password": PASSWORD})
    response = client.get("/api/users/me")
    assert response.status_code == 200
    assert response.json()["data"]["username"] == "browser"


def test_logout_clears_cookie(client, alice):
    """Logout expires the login cookie."""
    response = client.post("/api/auth/logout", headers=auth_headers(alice))
    assert response.status_code == 200
    cookie = response.headers["set-cookie"].lower()
    assert cookie.startswith(f"{settings.COOKIE_NAME}=")
    assert "max-age=0" in cookie


def test_update_profile_and_preferences(client, alice):
    """Profile and preferences round-trip through /users/me."""
    headers = auth_headers(alice)
    response = client.put(
        "/api/users/me/profile",
        json={"first_name": "Alice", "last_name": "Liddell", "bio": "Down the hole"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["data"]["profile"]["last_name"] == "Liddell"

    response = client.put(
        "/api/users/me/preferences",
        json={"theme": "dark", "reminder_time": "21:30"},
        headers=headers,
    )
    assert response.status_code == 200
    prefs = response.json()["data"]["preferences"]
    assert prefs["theme"] == "dark"
    assert prefs["reminder_time"] == "21:30"
    assert prefs["timezone"] == "IST"


def test_preferences_reject_bad_reminder_time(client, alice):
    response = client.put(
        "/api/users/me/preferences", json={"reminder_time": "25:00"}, headers=auth_headers(alice)
    )
    assert response.status_code == 400


def test_change_password(client, db, alice):
    """The old password must verify; the new one then works for login."""
    headers = auth_headers(alice)
    bad = client.put(
        "/api/users/me/password",
        json={"current_password": "nope", "new_password": "newpass1"},
        headers=headers,
    )
    assert bad.status_code == 401

    ok = client.put(
        "/api/users/me/password",
        json={"current_password": PASSWORD, "new_password": "newpass1"},
        headers=headers,
    )
    assert ok.status_code == 200

    response = client.post("/api/auth/login", json={"identifier": "alice", "password": "newpass1"})
    assert response.status_code == 200
    db.expire_all()
    assert db.query(User).filter(User.id == alice.id).one().hashed_password != PASSWORD
