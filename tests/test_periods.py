import pytest
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient
from uuid import uuid4
from app.main import app
from app.auth.middleware import verify_token

QUESTIONS = [{"id": "q1", "text": "Overall satisfaction", "type": "rating"}]


def period_body(department, start_offset=-1, end_offset=7):
    now = datetime.now(timezone.utc)
    return {
        "department": department,
        "startDate": (now + timedelta(days=start_offset)).isoformat(),
        "endDate": (now + timedelta(days=end_offset)).isoformat(),
        "questions": QUESTIONS,
    }


@pytest.mark.asyncio
async def test_create_period_unauthorized(client: AsyncClient):
    response = await client.post("/api/feedback-periods", json=period_body("HR"))
    assert response.status_code in [401, 403]


@pytest.mark.asyncio
async def test_create_period_requires_admin(client: AsyncClient, mock_jwt_payload, auth_headers):
    app.dependency_overrides[verify_token] = lambda: mock_jwt_payload

    response = await client.post("/api/feedback-periods", json=period_body("HR"), headers=auth_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_period(client: AsyncClient, admin_jwt_payload, auth_headers):
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload

    response = await client.post("/api/feedback-periods", json=period_body("IT"), headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["department"] == "IT"
    assert data["active"] is True
    assert data["questions"] == QUESTIONS
    assert "startDate" in data and "endDate" in data and "createdAt" in data


@pytest.mark.asyncio
async def test_create_period_end_before_start(client: AsyncClient, admin_jwt_payload, auth_headers):
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload

    response = await client.post(
        "/api/feedback-periods",
        json=period_body("IT", start_offset=5, end_offset=1),
        headers=auth_headers,
    )
    assert response.status_code == 422

    response = await client.post(
        "/api/feedback-periods",
        json=period_body("IT", start_offset=1, end_offset=1),
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_period_unknown_department(client: AsyncClient, admin_jwt_payload, auth_headers):
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload

    response = await client.post("/api/feedback-periods", json=period_body("Marketing"), headers=auth_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_toggle_and_get_period(client: AsyncClient, admin_jwt_payload, auth_headers):
    """Only active periods can be fetched by id."""
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload
    created = (await client.post("/api/feedback-periods", json=period_body("HR"), headers=auth_headers)).json()

    response = await client.get(f"/api/feedback-periods/{created['id']}", headers=auth_headers)
    assert response.status_code == 200

    toggled = await client.patch(f"/api/feedback-periods/{created['id']}/toggle", headers=auth_headers)
    assert toggled.json() == {"success": True, "active": False}

    response = await client.get(f"/api/feedback-periods/{created['id']}", headers=auth_headers)
    assert response.status_code == 404

    toggled = await client.patch(f"/api/feedback-periods/{created['id']}/toggle", headers=auth_headers)
    assert toggled.json()["active"] is True


@pytest.mark.asyncio
async def test_replace_and_delete_period(client: AsyncClient, admin_jwt_payload, auth_headers):
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload
    created = (await client.post("/api/feedback-periods", json=period_body("HR"), headers=auth_headers)).json()

    body = period_body("Civil", end_offset=14)
    body["questions"] = [{"id": "q9", "text": "New question", "type": "rating"}]
    replaced = await client.put(f"/api/feedback-periods/{created['id']}", json=body, headers=auth_headers)
    assert replaced.status_code == 200
    assert replaced.json()["department"] == "Civil"
    assert replaced.json()["questions"][0]["id"] == "q9"

    deleted = await client.delete(f"/api/feedback-periods/{created['id']}", headers=auth_headers)
    assert deleted.json() == {"success": True}

    listing = await client.get("/api/feedback-periods", headers=auth_headers)
    assert listing.json() == []

    missing = await client.delete(f"/api/feedback-periods/{uuid4()}", headers=auth_headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_available_feedbacks(
    client: AsyncClient, mock_jwt_payload, admin_jwt_payload, auth_headers
):
    """Own department, answered departments, inactive and expired periods are hidden."""
    app.dependency_overrides[verify_token] = lambda: admin_jwt_payload
    await client.post("/api/feedback-periods", json=period_body("IT"), headers=auth_headers)
    hr = (await client.post("/api/feedback-periods", json=period_body("HR", end_offset=10), headers=auth_headers)).json()
    accounts = (await client.post("/api/feedback-periods", json=period_body("Accounts", end_offset=3), headers=auth_headers)).json()
    await client.post("/api/feedback-periods", json=period_body("Civil", start_offset=-10, end_offset=-1), headers=auth_headers)
    safety = (await client.post("/api/feedback-periods", json=period_body("Safety"), headers=auth_headers)).json()
    await client.patch(f"/api/feedback-periods/{safety['id']}/toggle", headers=auth_headers)

    app.dependency_overrides[verify_token] = lambda: mock_jwt_payload
    response = await client.get("/api/available-feedbacks", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data["feedbackPeriods"]] == [accounts["id"], hr["id"]]
    assert data["submittedDepartments"] == []

    await client.post(
        "/api/feedbacks",
        json={
            "periodId": hr["id"],
            "targetDepartment": "HR",
            "questions": [{"id": "q1", "text": "Overall satisfaction", "rating": 4}],
        },
        headers=auth_headers,
    )

    data = (await client.get("/api/available-feedbacks", headers=auth_headers)).json()
    assert [p["department"] for p in data["feedbackPeriods"]] == ["Accounts"]
    assert data["submittedDepartments"] == ["HR"]
