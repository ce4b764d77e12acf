"""
Tests for the identity guard and the admin guard.
"""
from datetime import timedelta
import pytest
from jose import jwt
from journal_api.core.config import settings
from journal_api.core.exceptions import (
    AccountInactiveError, AuthFailure, ForbiddenError, UnauthenticatedError
)
from journal_api.core.security import create_access_token
from journal_api.services.auth_service import authenticate, extract_token, require_admin
from journal_api.tests.conftest import auth_headers, make_user, token_for


def test_extract_token_prefers_header():
    assert extract_token("Bearer header-token", "cookie-token") == "header-token"
    assert extract_token("bearer  header-token ", None) == "header-token"
    assert extract_token(None, "cookie-token") == "cookie-token"
    assert extract_token(None, "") is None
    assert extract_token(None, None) is None


@pytest.mark.parametrize("authorization", ["Basic abc", "Bearer ", "", "header-token"])
def test_malformed_header_does_not_fall_back_to_cookie(db, alice, authorization):
    """A present Authorization header is authoritative even when a valid cookie is sent."""
    with pytest.raises(UnauthenticatedError) as exc_info:
        extract_token(authorization, token_for(alice))
    assert exc_info.value.reason == AuthFailure.INVALID

    with pytest.raises(UnauthenticatedError):
        authenticate(db, authorization=authorization, cookie_token=token_for(alice))


def test_api_rejects_malformed_header_with_valid_cookie(client, alice):
    client.cookies.set(settings.COOKIE_NAME, token_for(alice))
    response = client.get("/api/users/me", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401
    assert response.json()["success"] is False

    assert client.get("/api/users/me").status_code == 200


def test_authenticate_from_header(db, alice):
    user = authenticate(db, authorization=f"Bearer {token_for(alice)}")
    assert user.id == alice.id


def test_authenticate_from_cookie(db, alice):
    user = authenticate(db, cookie_token=token_for(alice))
    assert user.id == alice.id


def test_header_wins_over_cookie(db, alice, bob):
    user = authenticate(db, authorization=f"Bearer {token_for(alice)}", cookie_token=token_for(bob))
    assert user.id == alice.id


@pytest.mark.parametrize("authorization,reason", [
    (None, AuthFailure.MISSING),
    ("Bearer not-a-jwt", AuthFailure.INVALID),
])
def test_authenticate_rejects(db, authorization, reason):
    with pytest.raises(UnauthenticatedError) as exc_info:
        authenticate(db, authorization=authorization)
    assert exc_info.value.reason == reason
    assert exc_info.value.status_code == 401


def test_authenticate_rejects_wrong_signature(db, alice):
    forged = jwt.encode({"user_id": alice.id}, "another-secret", algorithm=settings.ALGORITHM)
    with pytest.raises(UnauthenticatedError) as exc_info:
        authenticate(db, authorization=f"Bearer {forged}")
    assert exc_info.value.reason == AuthFailure.INVALID


def test_authenticate_rejects_expired_token(db, alice):
    expired = create_access_token({"user_id": alice.id}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(UnauthenticatedError) as exc_info:
        authenticate(db, authorization=f"Bearer {expired}")
    assert exc_info.value.reason == AuthFailure.EXPIRED


def test_authenticate_rejects_token_without_user_id(db):
    token = create_access_token({"sub": "nobody"})
    with pytest.raises(UnauthenticatedError) as exc_info:
        authenticate(db, authorization=f"Bearer {token}")
    assert exc_info.value.reason == AuthFailure.INVALID


def test_authenticate_rejects_deleted_account(db):
    token = create_access_token({"user_id": 9999})
    with pytest.raises(UnauthenticatedError) as exc_info:
        authenticate(db, authorization=f"Bearer {token}")
    assert exc_info.value.reason == AuthFailure.ACCOUNT_NOT_FOUND


def test_authenticate_rejects_inactive_account(db):
    sleeper = make_user(db, "sleeper", is_active=False)
    with pytest.raises(AccountInactiveError):
        authenticate(db, authorization=f"Bearer {token_for(sleeper)}")


def test_require_admin(alice, admin):
    assert require_admin(admin) is admin
    with pytest.raises(ForbiddenError):
        require_admin(alice)


def test_unauthorized_responses_do_not_reveal_reason(client, alice):
    """Missing, malformed, expired and orphaned tokens all look the same to the client."""
    expired = create_access_token({"user_id": alice.id}, expires_delta=timedelta(seconds=-5))
    orphan = create_access_token({"user_id": 9999})
    responses = [
        client.get("/api/journals"),
        client.get("/api/journals", headers={"Authorization": "Bearer garbage"}),
        client.get("/api/journals", headers={"Authorization": "Basic garbage"}),
        client.get("/api/journals", headers={"Authorization": f"Bearer {expired}"}),
        client.get("/api/journals", headers={"Authorization": f"Bearer {orphan}"}),
    ]
    assert {r.status_code for r in responses} == {401}
    assert len({r.json()["message"] for r in responses}) == 1
    assert all(r.json()["success"] is False for r in responses)


def test_inactive_account_is_forbidden(client, db):
    sleeper = make_user(db, "sleeper", is_active=False)
    response = client.get("/api/users/me", headers=auth_headers(sleeper))
    assert response.status_code == 403


def test_me_never_exposes_password(client, alice):
    response = client.get("/api/users/me", headers=auth_headers(alice))
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == alice.id
    assert not any("password" in key for key in data)
