import pytest
from httpx import AsyncClient
from uuid import uuid4
from app.main import app
from app.auth.middleware import verify_token

QUESTIONS = [
    {"id": "q1", "text": "Quality of service", "type": "rating"},
    {"id": "q2", "text": "Timeliness", "type": "rating"},
]


@pytest.mark.asyncio
async def test_templates_require_admin(client: AsyncClient, mock_jwt_payload, auth_headers):
    app.dependency_overrides[verify_token] = lambda: mock_jwt_payload

    response = await client.post(
        "/api/question-templates",
        json={"department": "HR", "questions": QUESTIONS},
        headers=auth_headers,
    )
    assert response.status_code == 403

    response = await client.get("/api/question-templates", headers=auth_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_template_validation(client: AsyncClient, admin_jwt_payload, auth_headers):
    """Department and a non-empty list of questions with id, text and type are required."""
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload

    for body in [
        {"department": "HR", "questions": []},
        {"department": "HR", "questions": [{"id": "q1", "text": "No type"}]},
        {"questions": QUESTIONS},
    ]:
        response = await client.post("/api/question-templates", json=body, headers=auth_headers)
        assert response.status_code == 422

    response = await client.post(
        "/api/question-templates",
        json={"department": "Marketing", "questions": QUESTIONS},
        headers=auth_headers,
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_template_crud(client: AsyncClient, admin_jwt_payload, auth_headers):
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload

    missing = await client.get("/api/question-templates/HR", headers=auth_headers)
    assert missing.status_code == 404

    created = await client.post(
        "/api/question-templates",
        json={"department": "HR", "questions": QUESTIONS},
        headers=auth_headers,
    )
    assert created.status_code == 201
    template = created.json()
    assert template["department"] == "HR"
    assert template["questions"] == QUESTIONS

    by_department = await client.get("/api/question-templates/HR", headers=auth_headers)
    assert by_department.status_code == 200
    assert by_department.json()["id"] == template["id"]

    updated = await client.put(
        f"/api/question-templates/{template['id']}",
        json={"department": "Civil", "questions": QUESTIONS[:1]},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["department"] == "Civil"
    assert len(updated.json()["questions"]) == 1

    listing = await client.get("/api/question-templates", headers=auth_headers)
    assert [t["id"] for t in listing.json()] == [template["id"]]

    deleted = await client.delete(f"/api/question-templates/{template['id']}", headers=auth_headers)
    assert deleted.json() == {"success": True}

    gone = await client.put(
        f"/api/question-templates/{template['id']}",
        json={"department": "Civil", "questions": QUESTIONS},
        headers=auth_headers,
    )
    assert gone.status_code == 404

    gone = await client.delete(f"/api/question-templates/{uuid4()}", headers=auth_headers)
    assert gone.status_code == 404
