import uuid

import jwt
from fastapi.testclient import TestClient

from services import auth_tokens


def _signup(client: TestClient, email: str = "a@x.com", password: str = "Abcdef1!", name: str = "Alice"):
    return client.post("/api/v1/signup", json={"email": email, "password": password, "displayName": name})


def test_signup_returns_empty_200(api_client: TestClient):
    response = _signup(api_client)
    assert response.status_code == 200
    assert response.content == b""


def test_signup_duplicate_email_is_409(api_client: TestClient):
    _signup(api_client)
    response = _signup(api_client, email="A@X.com")
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "auth.email_taken"


def test_signup_weak_password_is_400_with_itemized_rules(api_client: TestClient):
    response = _signup(api_client, password="alllowercase")
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["code"] == "auth.invalid_password"
    assert detail["errors"] == ["password.missing_upper", "password.missing_digit", "password.missing_symbol"]


def test_signin_flow(api_client: TestClient):
    _signup(api_client)

    response = api_client.post("/api/v1/signin", json={"email": "a@x.com", "password": "Abcdef1!"})

    assert response.status_code == 200
    token = response.json()["token"]
    profile = api_client.get("/api/v1/profile", headers={"token": token})
    assert profile.status_code == 200
    assert profile.json()["email"] == "a@x.com"
    assert uuid.UUID(auth_tokens.verify_token(token)) == uuid.UUID(profile.json()["id"])


def test_signin_unknown_email_is_404(api_client: TestClient):
    response = api_client.post("/api/v1/signin", json={"email": "ghost@x.com", "password": "Abcdef1!"})
    assert response.status_code == 404


def test_signin_wrong_password_is_401(api_client: TestClient):
    _signup(api_client)
    response = api_client.post("/api/v1/signin", json={"email": "a@x.com", "password": "Wrong1!x"})
    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "auth.invalid_credentials"


def test_missing_token_is_401(api_client: TestClient):
    response = api_client.get("/api/v1/content")
    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "auth.required"


def test_invalid_token_is_403(api_client: TestClient):
    response = api_client.get("/api/v1/content", headers={"token": "garbage"})
    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "auth.token_invalid"


def test_non_uuid_subject_is_403(api_client: TestClient):
    token = auth_tokens.issue_token("not-a-uuid")
    response = api_client.get("/api/v1/content", headers={"token": token})
    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "auth.token_format"


def test_bearer_header_is_accepted(api_client: TestClient):
    _signup(api_client)
    token = api_client.post("/api/v1/signin", json={"email": "a@x.com", "password": "Abcdef1!"}).json()["token"]
    response = api_client.get("/api/v1/content", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200


def test_foreign_key_token_is_403(api_client: TestClient):
    forged = jwt.encode({"userId": str(uuid.uuid4())}, "attacker-signing-secret-0123456789abcdef", algorithm="HS256")
    response = api_client.get("/api/v1/content", headers={"token": forged})
    assert response.status_code == 403


def test_update_display_name(api_client: TestClient):
    _signup(api_client)
    token = api_client.post("/api/v1/signin", json={"email": "a@x.com", "password": "Abcdef1!"}).json()["token"]

    response = api_client.patch("/api/v1/profile", json={"displayName": "Alicia"}, headers={"token": token})

    assert response.status_code == 200
    assert response.json()["displayName"] == "Alicia"


def test_signup_blank_display_name_is_422(api_client: TestClient):
    response = _signup(api_client, name="   ")
    assert response.status_code == 422
    assert api_client.post("/api/v1/signin", json={"email": "a@x.com", "password": "Abcdef1!"}).status_code == 404


def test_display_name_is_trimmed_and_blank_update_is_rejected(api_client: TestClient):
    _signup(api_client, name="  Alice  ")
    token = api_client.post("/api/v1/signin", json={"email": "a@x.com", "password": "Abcdef1!"}).json()["token"]

    blank = api_client.patch("/api/v1/profile", json={"displayName": " \t "}, headers={"token": token})
    profile = api_client.get("/api/v1/profile", headers={"token": token})

    assert blank.status_code == 422
    assert profile.json()["displayName"] == "Alice"
