"""Dealer management through the admin console."""
import pytest
from httpx import AsyncClient

from factories import dealer_payload, employee_payload


@pytest.mark.asyncio
async def test_create_dealer_returns_one_time_password(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.post("/admin/dealers", json=dealer_payload(), headers=admin_headers)
    assert response.status_code == 201
    body = response.json()
    assert len(body["temp_pass"]) == 12
    assert body["dealer"]["company_name"] == "Dealer Number 1"
    assert body["dealer"]["status"] == "active"

    listed = await client.get("/admin/dealers", headers=admin_headers)
    assert [d["id"] for d in listed.json()] == [body["dealer"]["id"]]
    assert "temp_pass" not in listed.json()[0]


@pytest.mark.asyncio
async def test_create_dealer_conflicts(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    first = await client.post("/admin/dealers", json=dealer_payload(1), headers=admin_headers)
    assert first.status_code == 201

    same_company = dealer_payload(2, company_name="Dealer Number 1")
    same_email = dealer_payload(2, primary_contact_email="dealer1@example.com")
    same_username = dealer_payload(2, username="dealer1")

    for payload, field in (
        (same_company, "company_name"),
        (same_email, "primary_contact_email"),
        (same_username, "username"),
    ):
        response = await client.post("/admin/dealers", json=payload, headers=admin_headers)
        assert response.status_code == 409
        assert field in response.json()["errors"]

    listed = await client.get("/admin/dealers", headers=admin_headers)
    assert len(listed.json()) == 1


@pytest.mark.asyncio
async def test_create_dealer_validates_input(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    bad = dealer_payload(primary_contact_phone="12345", address="short", username="bad name!")
    response = await client.post("/admin/dealers", json=bad, headers=admin_headers)
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert {"primary_contact_phone", "address", "username"} <= set(errors)


@pytest.mark.asyncio
async def test_update_dealer_ignores_login_fields(
    client: AsyncClient, admin_headers: dict[str, str], make_dealer
) -> None:
    dealer, _ = await make_dealer()

    response = await client.put(
        f"/admin/dealers/{dealer['id']}",
        json={
            "address": "99 Ring Road, Nagpur",
            "status": "suspended",
            "primary_contact_email": "changed@example.com",
            "username": "changed",
        },
        headers=admin_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["address"] == "99 Ring Road, Nagpur"
    assert body["status"] == "suspended"
    assert body["primary_contact_email"] == "dealer1@example.com"

    # The login account is untouched.
    login = await client.post(
        "/auth/dealer-login", json={"email": "changed@example.com", "password": "whatever1"}
    )
    assert login.status_code == 401


@pytest.mark.asyncio
async def test_update_dealer_requires_a_field_and_unique_company(
    client: AsyncClient, admin_headers: dict[str, str], make_dealer
) -> None:
    first, _ = await make_dealer(1)
    await make_dealer(2)

    empty = await client.put(f"/admin/dealers/{first['id']}", json={}, headers=admin_headers)
    assert empty.status_code == 400

    clash = await client.put(
        f"/admin/dealers/{first['id']}",
        json={"company_name": "Dealer Number 2"},
        headers=admin_headers,
    )
    assert clash.status_code == 409

    missing = await client.put(
        "/admin/dealers/9999", json={"address": "1 Nowhere Lane, Goa"}, headers=admin_headers
    )
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_delete_dealer_cascades_to_tenant_data(
    client: AsyncClient, admin_headers: dict[str, str], make_dealer
) -> None:
    dealer, headers = await make_dealer()
    created = await client.post("/dealer/employees", json=employee_payload(), headers=headers)
    assert created.status_code == 201

    response = await client.delete(f"/admin/dealers/{dealer['id']}", headers=admin_headers)
    assert response.status_code == 204

    assert (await client.get(f"/admin/dealers/{dealer['id']}", headers=admin_headers)).status_code == 404
    found = await client.get("/search", params={"q": "Kumar"}, headers=admin_headers)
    assert found.json() == []

    # The login account is gone too, so the old token no longer resolves.
    assert (await client.get("/users/me", headers=headers)).status_code == 401

    # The aadhar is free again.
    _, other = await make_dealer(2)
    again = await client.post("/dealer/employees", json=employee_payload(), headers=other)
    assert again.status_code == 201

    logs = (await client.get("/admin/audit-logs", headers=admin_headers)).json()
    deleted = [entry for entry in logs if entry["action_type"] == "delete_dealer"]
    assert len(deleted) == 1
    assert "Dealer Number 1" in deleted[0]["details"]


@pytest.mark.asyncio
async def test_reset_password_issues_new_temporary_password(
    client: AsyncClient, admin_headers: dict[str, str], make_dealer
) -> None:
    dealer, _ = await make_dealer()

    response = await client.post(
        f"/admin/users/{dealer['user_id']}/reset-password", headers=admin_headers
    )
    assert response.status_code == 200
    temp_pass = response.json()["temp_pass"]

    login = await client.post(
        "/auth/dealer-login", json={"email": "dealer1@example.com", "password": temp_pass}
    )
    assert login.status_code == 200
    assert login.json()["user"]["temp_pass"] is True

    missing = await client.post("/admin/users/9999/reset-password", headers=admin_headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_update_dealer_trims_and_rejects_null_only_bodies(
    client: AsyncClient, admin_headers: dict[str, str], make_dealer
) -> None:
    first, _ = await make_dealer(1)
    await make_dealer(2)
    url = f"/admin/dealers/{first['id']}"

    padded = await client.put(url, json={"company_name": "  Dealer Number 2  "}, headers=admin_headers)
    assert padded.status_code == 409

    nulls = await client.put(url, json={"company_name": None, "address": None}, headers=admin_headers)
    assert nulls.status_code == 400

    renamed = await client.put(url, json={"company_name": "  Renamed Dealer "}, headers=admin_headers)
    assert renamed.status_code == 200
    assert renamed.json()["company_name"] == "Renamed Dealer"

    logs = (await client.get("/admin/audit-logs", headers=admin_headers)).json()
    assert len([e for e in logs if e["action_type"] == "update_dealer"]) == 1
