"""End-to-end API flows over an in-memory record store."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from clientportal.application.interfaces import RecordStore
from clientportal.config import get_settings
from clientportal.domain.exceptions import StorageError
from clientportal.infrastructure.dependencies import get_record_store
from clientportal.infrastructure.storage.memory_record_store import InMemoryRecordStore
from clientportal.main import app


class BrokenRecordStore(RecordStore):
    """Every operation fails as if the database were down."""

    async def get(self, entity_type: str, record_id: str) -> bytes | None:
        raise StorageError("database is down", entity_type, record_id)

    async def put(self, entity_type: str, record_id: str, payload: bytes) -> None:
        raise StorageError("database is down", entity_type, record_id)

    async def delete(self, entity_type: str, record_id: str) -> bool:
        raise StorageError("database is down", entity_type, record_id)


@pytest_asyncio.fixture
async def api() -> AsyncIterator[AsyncClient]:
    store = InMemoryRecordStore()
    app.dependency_overrides[get_record_store] = lambda: store
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


async def _register(api: AsyncClient, email: str = "jane@acme.test", company: str = "Acme") -> dict:
    response = await api.post(
        "/api/clients/register",
        json={"name": "Jane Doe", "email": email, "company": company, "projectType": "CRM"},
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]


async def _admin_id(api: AsyncClient) -> str:
    settings = get_settings()
    response = await api.post(
        "/api/admin/login",
        json={"email": settings.admin_email, "password": settings.admin_password},
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]["user"]["id"]


# ── Auth and registration ────────────────────────────────────────────


@pytest.mark.asyncio
async def test_register_then_login_with_generated_password(api: AsyncClient):
    registered = await _register(api)

    assert registered["client"]["status"] == "pending"
    assert registered["client"]["projectType"] == "CRM"
    assert registered["client"]["id"] == registered["user"]["id"]
    password = registered["password_plaintext"]

    response = await api.post("/api/clients/login", json={"email": "jane@acme.test", "password": password})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["data"]["user"]["role"] == "client"
    assert "passwordHash" not in body["data"]["user"]
    assert body["data"]["token"].startswith("mock-jwt-token-for-client-")


@pytest.mark.asyncio
async def test_duplicate_registration_is_a_bad_request(api: AsyncClient):
    await _register(api)

    response = await api.post(
        "/api/clients/register",
        json={"name": "J", "email": "jane@acme.test", "company": "Other", "projectType": "ERP"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "A user with this email already exists."}


@pytest.mark.asyncio
async def test_registration_requires_every_field(api: AsyncClient):
    response = await api.post("/api/clients/register", json={"name": "J", "email": "j@x.test"})

    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_login_failures_use_error_envelope(api: AsyncClient):
    bad_admin = await api.post("/api/admin/login", json={"email": "x@y.test", "password": "nope"})
    assert bad_admin.status_code == 401
    assert bad_admin.json() == {"success": False, "error": "Invalid credentials"}

    unknown = await api.post("/api/clients/login", json={"email": "ghost@x.test", "password": "x"})
    assert unknown.status_code == 401
    assert unknown.json()["error"] == "User not found"


@pytest.mark.asyncio
async def test_admin_cannot_use_client_login(api: AsyncClient):
    settings = get_settings()
    await _admin_id(api)

    response = await api.post(
        "/api/clients/login",
        json={"email": settings.admin_email, "password": settings.admin_password},
    )

    assert response.status_code == 403
    assert response.json()["error"] == "Access denied"


# ── Admin: clients, projects, invoices ───────────────────────────────


@pytest.mark.asyncio
async def test_admin_manages_client_projects_and_invoices(api: AsyncClient):
    client_id = (await _register(api))["client"]["id"]

    listed = (await api.get("/api/admin/clients")).json()["data"]
    assert [(c["id"], c["user"]["email"]) for c in listed] == [(client_id, "jane@acme.test")]

    updated = await api.put(f"/api/admin/clients/{client_id}", json={"status": "active"})
    assert updated.json()["data"]["status"] == "active"

    project = (
        await api.post(f"/api/admin/clients/{client_id}/projects", json={"title": "Website"})
    ).json()["data"]
    assert project["progress"] == 0
    assert project["clientId"] == client_id

    response = await api.put(f"/api/admin/projects/{project['id']}", json={"progress": 55, "notes": "On track"})
    assert response.json()["data"]["progress"] == 55

    milestone = (
        await api.post(f"/api/admin/projects/{project['id']}/milestones", json={"title": "Design"})
    ).json()["data"]
    assert milestone["status"] == "todo"
    response = await api.put(f"/api/admin/milestones/{milestone['id']}", json={"status": "completed"})
    assert response.json()["data"]["status"] == "completed"

    invoice = (
        await api.post(f"/api/admin/clients/{client_id}/invoices", json={"amount": 2499})
    ).json()["data"]
    assert invoice["status"] == "pending"
    assert invoice["pdf_url"].startswith("/mock-invoice-")

    paid = await api.put(f"/api/admin/invoices/{invoice['id']}", json={"status": "paid"})
    assert paid.json()["data"]["status"] == "paid"

    all_invoices = (await api.get("/api/admin/invoices")).json()["data"]
    assert [(i["clientName"], i["clientCompany"]) for i in all_invoices] == [("Jane Doe", "Acme")]


@pytest.mark.asyncio
async def test_progress_outside_range_is_rejected(api: AsyncClient):
    client_id = (await _register(api))["client"]["id"]
    project = (
        await api.post(f"/api/admin/clients/{client_id}/projects", json={"title": "Website"})
    ).json()["data"]

    response = await api.put(f"/api/admin/projects/{project['id']}", json={"progress": 101})

    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_missing_records_are_404(api: AsyncClient):
    for method, path, body in (
        ("PUT", "/api/admin/projects/ghost", {"progress": 1}),
        ("DELETE", "/api/admin/milestones/ghost", None),
        ("PUT", "/api/admin/invoices/ghost", {"status": "paid"}),
        ("DELETE", "/api/admin/clients/ghost", None),
        ("GET", "/api/portal/ghost/account", None),
    ):
        response = await api.request(method, path, json=body)
        assert response.status_code == 404, path
        assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_delete_client_cascades(api: AsyncClient):
    client_id = (await _register(api))["client"]["id"]
    await _admin_id(api)
    project = (
        await api.post(f"/api/admin/clients/{client_id}/projects", json={"title": "Website"})
    ).json()["data"]
    await api.post(f"/api/admin/projects/{project['id']}/milestones", json={"title": "Design"})
    await api.post(f"/api/admin/clients/{client_id}/invoices", json={"amount": 10})
    await api.post(f"/api/chat/{client_id}", json={"senderId": client_id, "content": "Hi"})

    response = await api.delete(f"/api/admin/clients/{client_id}")

    assert response.status_code == 200
    assert (await api.get("/api/admin/clients")).json()["data"] == []
    assert (await api.get("/api/admin/invoices")).json()["data"] == []
    assert (await api.get(f"/api/portal/{client_id}/projects")).json()["data"] == []
    assert (await api.get(f"/api/chat/{client_id}")).json()["data"] == []


# ── Portal ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_portal_shows_projects_with_ordered_milestones(api: AsyncClient):
    client_id = (await _register(api))["client"]["id"]
    project = (
        await api.post(f"/api/admin/clients/{client_id}/projects", json={"title": "Website"})
    ).json()["data"]
    for title, due in (("Launch", 3000), ("Design", 1000), ("Build", 2000)):
        milestone = (
            await api.post(f"/api/admin/projects/{project['id']}/milestones", json={"title": title})
        ).json()["data"]
        await api.put(f"/api/admin/milestones/{milestone['id']}", json={"dueDate": due})

    data = (await api.get(f"/api/portal/{client_id}/projects")).json()["data"]

    assert [m["title"] for m in data[0]["milestones"]] == ["Design", "Build", "Launch"]


@pytest.mark.asyncio
async def test_portal_account_and_password(api: AsyncClient):
    registered = await _register(api)
    client_id = registered["client"]["id"]

    await api.put(f"/api/portal/{client_id}/account", json={"name": "Jane D.", "company": "Acme Ltd"})
    account = (await api.get(f"/api/portal/{client_id}/account")).json()["data"]
    assert (account["name"], account["company"], account["email"]) == ("Jane D.", "Acme Ltd", "jane@acme.test")

    wrong = await api.post(
        f"/api/portal/{client_id}/change-password",
        json={"currentPassword": "wrong", "newPassword": "brand-new"},
    )
    assert wrong.status_code == 401

    changed = await api.post(
        f"/api/portal/{client_id}/change-password",
        json={"currentPassword": registered["password_plaintext"], "newPassword": "brand-new"},
    )
    assert changed.status_code == 200
    login = await api.post("/api/clients/login", json={"email": "jane@acme.test", "password": "brand-new"})
    assert login.status_code == 200


# ── Chat ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_chat_round_trip(api: AsyncClient):
    client_id = (await _register(api))["client"]["id"]
    admin_id = await _admin_id(api)

    to_admin = (await api.post(f"/api/chat/{client_id}", json={"senderId": client_id, "content": "Hi"})).json()
    assert to_admin["data"]["receiverId"] == admin_id
    to_client = (await api.post(f"/api/chat/{client_id}", json={"senderId": admin_id, "content": "Hello"})).json()
    assert to_client["data"]["receiverId"] == client_id

    conversation = (await api.get(f"/api/chat/{client_id}")).json()["data"]
    assert [m["content"] for m in conversation] == ["Hi", "Hello"]
    assert [m["sender"]["role"] for m in conversation] == ["client", "admin"]

    cleared = await api.delete(f"/api/chat/{client_id}")
    assert cleared.status_code == 200
    assert (await api.get(f"/api/chat/{client_id}")).json()["data"] == []


@pytest.mark.asyncio
async def test_chat_without_admin_is_rejected(api: AsyncClient):
    client_id = (await _register(api))["client"]["id"]

    response = await api.post(f"/api/chat/{client_id}", json={"senderId": client_id, "content": "Hi"})

    assert response.status_code == 400
    assert response.json()["error"] == "Admin user not configured"


# ── Website content ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_content_defaults_then_replace(api: AsyncClient):
    content = (await api.get("/api/content")).json()["data"]
    assert content["hero"]["headline"] == "Your Business, Simplified."
    assert content["brandAssets"]["primaryColor"] == "#2F80ED"

    content["hero"]["headline"] = "Built for you"
    content["pricing"] = content["pricing"][:1]
    response = await api.put("/api/content", json=content)
    assert response.status_code == 200

    updated = (await api.get("/api/content")).json()["data"]
    assert updated["hero"]["headline"] == "Built for you"
    assert len(updated["pricing"]) == 1


# ── Storage failures ─────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_storage_failure_is_a_500_envelope():
    broken = BrokenRecordStore()
    app.dependency_overrides[get_record_store] = lambda: broken
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/admin/clients")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Storage unavailable"}
