from datetime import timedelta

import pytest

from hackclub.core.config.settings import get_settings
from hackclub.core.security.auth import AuthService
from hackclub.models.user import RoleType


@pytest.fixture
def admin_emails():
    settings = get_settings()
    original = settings.ADMIN_EMAILS
    settings.ADMIN_EMAILS = ["chief@hackclub.io"]
    yield settings.ADMIN_EMAILS
    settings.ADMIN_EMAILS = original


def test_register_returns_token_and_user(client):
    response = client.post("/api/auth/register", json={
        "name": "Ada", "email": "ada@hackclub.io", "password": "abc123",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "ada@hackclub.io"
    assert body["user"]["role"] == "user"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["name"] == "Ada"


def test_register_rejects_duplicate_email(client, make_user):
    make_user("Grace", email="grace@hackclub.io")

    response = client.post("/api/auth/register", json={
        "name": "Grace Again", "email": "grace@hackclub.io", "password": "abc123",
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


@pytest.mark.parametrize("password", ["ab1", "abcdefg", "1234567"])
def test_register_rejects_weak_password(client, password):
    response = client.post("/api/auth/register", json={
        "name": "Weak", "email": "weak@hackclub.io", "password": password,
    })
    assert response.status_code == 400


def test_register_rejects_invalid_email(client):
    response = client.post("/api/auth/register", json={
        "name": "Nobody", "email": "not-an-email", "password": "abc123",
    })
    assert response.status_code == 422


def test_register_promotes_configured_admin(client, admin_emails):
    response = client.post("/api/auth/register", json={
        "name": "Chief", "email": "chief@hackclub.io", "password": "abc123",
    })
    assert response.json()["user"]["role"] == "admin"


def test_login_with_valid_credentials(client, make_user, user_password):
    user = make_user("Linus")

    response = client.post("/api/auth/login", json={"email": user.email, "password": user_password})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == user.id


def test_login_with_wrong_password(client, make_user):
    user = make_user("Ken")

    response = client.post("/api/auth/login", json={"email": user.email, "password": "wrong999"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_login_unknown_user(client):
    response = client.post("/api/auth/login", json={"email": "ghost@hackclub.io", "password": "abc123"})
    assert response.status_code == 401


def test_me_rejects_garbage_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_me_rejects_expired_token(client, make_user, auth_service):
    user = make_user("Expired")
    token = auth_service.generate_token(user.id, expires_delta=timedelta(seconds=-10))

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Token has expired"


def test_token_signed_with_another_secret_is_rejected(client, make_user):
    user = make_user("Mallory")
    forged = AuthService(secret_key="other-secret", bcrypt_rounds=4).generate_token(user.id)

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401


def test_google_sign_in_creates_user(client):
    response = client.post("/api/auth/google", json={"idToken": "valid:margaret@hackclub.io:Margaret"})

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == "margaret@hackclub.io"
    assert user["name"] == "Margaret"
    assert user["role"] == "user"


def test_google_sign_in_defaults_name_to_email_prefix(client):
    response = client.post("/api/auth/google", json={"idToken": "valid:barbara@hackclub.io:"})
    assert response.json()["user"]["name"] == "barbara"


def test_google_sign_in_reuses_existing_account(client, make_user):
    user = make_user("Existing", email="existing@hackclub.io")

    response = client.post("/api/auth/google", json={"idToken": "valid:existing@hackclub.io:Someone"})

    assert response.json()["user"]["id"] == user.id


def test_google_sign_in_promotes_configured_admin(client, make_user, admin_emails):
    make_user("Chief", email="chief@hackclub.io")

    response = client.post("/api/auth/google", json={"idToken": "valid:chief@hackclub.io:Chief"})

    assert response.json()["user"]["role"] == RoleType.ADMIN.value


def test_google_sign_in_with_invalid_token(client):
    response = client.post("/api/auth/google", json={"idToken": "forged"})
    assert response.status_code == 401


def test_firebase_only_account_cannot_use_password_login(client):
    client.post("/api/auth/google", json={"idToken": "valid:oauth@hackclub.io:OAuth"})

    response = client.post("/api/auth/login", json={"email": "oauth@hackclub.io", "password": "abc123"})

    assert response.status_code == 401
