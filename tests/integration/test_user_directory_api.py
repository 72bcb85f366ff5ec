"""End-to-end tests of the list and form endpoints against an in-memory user store."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from user_directory.domain.exceptions import ConflictError
from user_directory.infrastructure.dependencies import Workspace, build_workspace, get_workspace
from user_directory.main import create_app
from tests.fakes import FakeUserStore, make_wire_user


@pytest.fixture
def remote() -> FakeUserStore:
    return FakeUserStore(
        [make_wire_user("u1"), make_wire_user("u2", fullName="John Doe", emailAddress="john@x.org")]
    )


@pytest.fixture
def workspace(remote: FakeUserStore) -> Workspace:
    return build_workspace(remote)


@pytest.fixture
async def client(workspace: Workspace) -> AsyncIterator[AsyncClient]:
    app = create_app()
    app.dependency_overrides[get_workspace] = lambda: workspace
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


async def _fill_form(client: AsyncClient, **overrides) -> None:
    values = {
        "full_name": "Jo Doe",
        "mobile_number": "1234567890",
        "email_address": "a@b.co",
        "date_of_birth": "15/06/1990",
        "address_line1": "1 Main St",
        "city": "Springfield",
        "pin_code": "123456",
    }
    values.update(overrides)
    for name, value in values.items():
        response = await client.put(f"/api/v1/form/fields/{name}", json={"value": value})
        assert response.status_code == 200


@pytest.mark.asyncio
async def test_list_loads_and_searches(client: AsyncClient, remote: FakeUserStore):
    response = await client.get("/api/v1/users", params={"search": "JANE"})

    assert response.status_code == 200
    data = response.json()
    assert data["route"] == "/list"
    assert data["total"] == 2
    assert data["showing"] == 1
    assert data["users"][0]["full_name"] == "Jane Smith"
    assert data["users"][0]["date_of_birth"] == "15/06/1990"
    assert data["users"][0]["date_label"] == "Jun 15, 1990"
    assert data["users"][0]["initials"] == "JS"

    # Second view reuses the cache
    await client.get("/api/v1/users")
    assert [call[0] for call in remote.calls] == ["list"]


@pytest.mark.asyncio
async def test_list_refresh_reloads(client: AsyncClient, remote: FakeUserStore):
    await client.get("/api/v1/users")
    await client.get("/api/v1/users", params={"refresh": True})
    assert [call[0] for call in remote.calls] == ["list", "list"]


@pytest.mark.asyncio
async def test_create_flow(client: AsyncClient, remote: FakeUserStore):
    response = await client.post("/api/v1/form/new")
    assert response.json()["title"] == "User Registration Form"
    assert response.json()["route"] == "/form"

    await _fill_form(client)
    response = await client.post("/api/v1/form/submit")

    data = response.json()
    assert data["route"] == "/list"
    assert data["toast"]["message"] == "User created successfully!"
    assert data["fields"]["full_name"] == ""
    assert remote.calls[-1][0] == "create"


@pytest.mark.asyncio
async def test_invalid_submit_returns_field_errors(client: AsyncClient, remote: FakeUserStore):
    await client.post("/api/v1/form/new")
    response = await client.post("/api/v1/form/submit")

    data = response.json()
    assert response.status_code == 200
    assert len(data["errors"]) == 7
    assert data["status"] == "submitted_error"
    assert data["route"] == "/form"
    assert remote.calls == []


@pytest.mark.asyncio
async def test_remote_failure_keeps_form_values(client: AsyncClient, remote: FakeUserStore):
    await client.post("/api/v1/form/new")
    await _fill_form(client)
    remote.fail_with = ConflictError(409, "User with this email already exists")

    data = (await client.post("/api/v1/form/submit")).json()

    assert data["error"] == "User with this email already exists"
    assert data["fields"]["email_address"] == "a@b.co"
    assert data["route"] == "/form"


@pytest.mark.asyncio
async def test_date_field_is_masked(client: AsyncClient):
    await client.post("/api/v1/form/new")
    response = await client.put("/api/v1/form/fields/date_of_birth", json={"value": "01021999"})
    assert response.json()["fields"]["date_of_birth"] == "01/02/1999"


@pytest.mark.asyncio
async def test_unknown_field_is_404(client: AsyncClient):
    response = await client.put("/api/v1/form/fields/password", json={"value": "x"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_edit_flow(client: AsyncClient, remote: FakeUserStore):
    await client.get("/api/v1/users")

    response = await client.post("/api/v1/users/u1/edit")
    data = response.json()
    assert data["title"] == "Edit User"
    assert data["editing"] is True
    assert data["fields"]["full_name"] == "Jane Smith"
    assert data["route"] == "/form"

    await client.put("/api/v1/form/fields/full_name", json={"value": "Jane Q. Smith"})
    data = (await client.post("/api/v1/form/submit")).json()
    assert data["toast"]["message"] == "User updated successfully!"
    assert data["route"] == "/list"

    listing = (await client.get("/api/v1/users")).json()
    assert listing["users"][0]["full_name"] == "Jane Q. Smith"
    assert listing["users"][0]["id"] == "u1"


@pytest.mark.asyncio
async def test_edit_unknown_user_is_404(client: AsyncClient):
    await client.get("/api/v1/users")
    response = await client.post("/api/v1/users/nope/edit")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_cancel_edit(client: AsyncClient, remote: FakeUserStore):
    await client.get("/api/v1/users")
    await client.post("/api/v1/users/u1/edit")

    data = (await client.post("/api/v1/form/cancel")).json()

    assert data["route"] == "/list"
    assert data["editing"] is False
    assert [call[0] for call in remote.calls] == ["list"]


@pytest.mark.asyncio
async def test_delete_requires_confirmation(client: AsyncClient, remote: FakeUserStore):
    await client.get("/api/v1/users")

    data = (await client.post("/api/v1/users/u1/delete")).json()
    assert data["pending_delete"] == "u1"
    assert data["total"] == 2
    assert all(call[0] != "delete" for call in remote.calls)

    data = (await client.post("/api/v1/users/delete/confirm")).json()
    assert data["pending_delete"] is None
    assert data["total"] == 1
    assert data["toast"]["message"] == "User deleted successfully!"


@pytest.mark.asyncio
async def test_delete_cancel(client: AsyncClient, remote: FakeUserStore):
    await client.get("/api/v1/users")
    await client.post("/api/v1/users/u2/delete")

    data = (await client.post("/api/v1/users/delete/cancel")).json()

    assert data["pending_delete"] is None
    assert data["total"] == 2
    assert all(call[0] != "delete" for call in remote.calls)


@pytest.mark.asyncio
async def test_confirm_without_pending_is_409(client: AsyncClient):
    response = await client.post("/api/v1/users/delete/confirm")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_dismiss_toast(client: AsyncClient):
    await client.get("/api/v1/users")
    await client.post("/api/v1/users/u1/delete")
    await client.post("/api/v1/users/delete/confirm")

    data = (await client.delete("/api/v1/toast")).json()

    assert data["visible"] is False


@pytest.mark.asyncio
async def test_workspace_missing_is_503():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        response = await http.get("/api/v1/users")
    assert response.status_code == 503
