import pytest
from httpx import AsyncClient
from jose import JWTError, jwt
from app.auth.jwt_verifier import JWTVerifier
from app.auth.middleware import build_payload
from app.auth.permissions_manager import PermissionsManager
from app.config import settings

SIGNUP = {
    "email": "Jane.Doe@acme-corp.com",
    "password": "s3cret-pass",
    "name": "Jane Doe",
    "department": "Accounts",
}


@pytest.mark.asyncio
async def test_signup_then_verify(client: AsyncClient):
    """A signup token authenticates against /verify."""
    response = await client.post("/api/auth/signup", json=SIGNUP)
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["email"] == "jane.doe@acme-corp.com"
    assert data["user"]["department"] == "Accounts"
    assert data["user"]["isAdmin"] is False
    assert data["user"]["role"] == "user"

    verify = await client.get(
        "/api/auth/verify",
        headers={"Authorization": f"Bearer {data['token']}"},
    )
    assert verify.status_code == 200
    assert verify.json()["id"] == data["user"]["id"]


@pytest.mark.asyncio
async def test_signup_duplicate_email(client: AsyncClient):
    await client.post("/api/auth/signup", json=SIGNUP)
    response = await client.post("/api/auth/signup", json={**SIGNUP, "email": "jane.doe@acme-corp.com"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_signup_unknown_department(client: AsyncClient):
    response = await client.post("/api/auth/signup", json={**SIGNUP, "department": "Marketing"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_signup_missing_fields(client: AsyncClient):
    response = await client.post("/api/auth/signup", json={"email": SIGNUP["email"]})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login(client: AsyncClient):
    await client.post("/api/auth/signup", json=SIGNUP)

    bad = await client.post("/api/auth/login", json={"email": SIGNUP["email"], "password": "wrong"})
    assert bad.status_code == 401

    unknown = await client.post("/api/auth/login", json={"email": "nobody@acme-corp.com", "password": "x"})
    assert unknown.status_code == 401

    good = await client.post("/api/auth/login", json={"email": SIGNUP["email"], "password": SIGNUP["password"]})
    assert good.status_code == 200
    claims = jwt.decode(good.json()["token"], settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert claims["department"] == "Accounts"
    assert claims["role"] == "user"


@pytest.mark.asyncio
async def test_verify_without_token(client: AsyncClient):
    response = await client.get("/api/auth/verify")
    assert response.status_code in [401, 403]


@pytest.mark.asyncio
async def test_verify_with_invalid_token(client: AsyncClient):
    response = await client.get("/api/auth/verify", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401

    forged = JWTVerifier(secret="other-secret").issue(
        "123e4567-e89b-12d3-a456-426614174000",
        {"email": "x@acme-corp.com", "department": "IT"},
    )
    response = await client.get("/api/auth/verify", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 401


def test_expired_token_is_rejected():
    verifier = JWTVerifier(secret="s", expires_minutes=-1)
    token = verifier.issue("123e4567-e89b-12d3-a456-426614174000")
    with pytest.raises(JWTError):
        verifier.verify_and_decode(token)


def test_role_permissions_from_file(tmp_path):
    path = tmp_path / "permissions.yml"
    path.write_text("roles:\n  user: [feedback:create]\n  admin: [feedback:create, period:manage]\n")
    manager = PermissionsManager(path)

    assert manager.get_permissions_for_roles(["user"]) == ["feedback:create"]
    assert manager.get_permissions_for_roles(["admin", "user"]) == ["feedback:create", "period:manage"]
    assert manager.get_permissions_for_roles(["guest"]) == []


def test_missing_permissions_file_grants_nothing(tmp_path):
    manager = PermissionsManager(tmp_path / "absent.yml")
    assert manager.get_permissions_for_roles(["admin"]) == []


def test_build_payload_maps_admin_flag_to_role():
    payload = build_payload({
        "sub": "123e4567-e89b-12d3-a456-426614174000",
        "email": "boss@acme-corp.com",
        "name": "Boss",
        "department": "HR",
        "isAdmin": True,
    })
    assert payload.roles == ["admin"]
    assert payload.is_admin is True
    assert "period:manage" in payload.permissions
    assert "template:manage" in payload.permissions
