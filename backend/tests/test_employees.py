"""Integration tests for the dealer employee API."""
from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from factories import employee_payload


@pytest.mark.asyncio
async def test_create_and_list_employees(client: AsyncClient, make_dealer) -> None:
    """A dealer can create an employee and sees only its own employees."""

    dealer, headers = await make_dealer(1)
    _, other = await make_dealer(2)

    response = await client.post("/dealer/employees", json=employee_payload(), headers=headers)
    assert response.status_code == 201
    employee = response.json()
    assert employee["status"] == "active"
    assert employee["dealer_id"] == dealer["id"]
    assert employee["termination_date"] is None

    mine = await client.get("/dealer/employees", headers=headers)
    theirs = await client.get("/dealer/employees", headers=other)
    assert [e["id"] for e in mine.json()] == [employee["id"]]
    assert theirs.json() == []


@pytest.mark.asyncio
async def test_duplicate_aadhar_names_current_employer(client: AsyncClient, make_dealer) -> None:
    _, first = await make_dealer(1)
    _, second = await make_dealer(2)
    await client.post("/dealer/employees", json=employee_payload(), headers=first)

    response = await client.post(
        "/dealer/employees",
        json=employee_payload(first_name="Someone", email="someone@example.com"),
        headers=second,
    )
    assert response.status_code == 409
    message = response.json()["message"]
    assert "Dealer Number 1" in message
    assert "(Status: active)" in message
    assert "aadhar" in response.json()["errors"]


@pytest.mark.asyncio
async def test_terminated_aadhar_still_blocks_registration(
    client: AsyncClient, make_dealer
) -> None:
    _, first = await make_dealer(1)
    _, second = await make_dealer(2)
    created = (await client.post("/dealer/employees", json=employee_payload(), headers=first)).json()
    await client.post(
        f"/dealer/employees/{created['id']}/terminate",
        json={"reason": "Resigned to relocate abroad", "date": "2024-03-01"},
        headers=first,
    )

    response = await client.post("/dealer/employees", json=employee_payload(), headers=second)
    assert response.status_code == 409
    assert "(Status: terminated)" in response.json()["message"]


@pytest.mark.asyncio
async def test_validation_rules_on_create(client: AsyncClient, make_dealer) -> None:
    _, headers = await make_dealer()
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    response = await client.post(
        "/dealer/employees",
        json=employee_payload(aadhar="1234", phone="98-76", hire_date=tomorrow),
        headers=headers,
    )
    assert response.status_code == 400
    assert {"aadhar", "phone", "hire_date"} <= set(response.json()["errors"])


@pytest.mark.asyncio
async def test_foreign_employee_is_forbidden_and_unchanged(
    client: AsyncClient, make_dealer
) -> None:
    _, owner = await make_dealer(1)
    _, intruder = await make_dealer(2)
    created = (await client.post("/dealer/employees", json=employee_payload(), headers=owner)).json()
    url = f"/dealer/employees/{created['id']}"

    assert (await client.get(url, headers=intruder)).status_code == 403
    assert (await client.put(url, json={"position": "Manager"}, headers=intruder)).status_code == 403
    terminate = await client.post(
        f"{url}/terminate",
        json={"reason": "Not my employee at all", "date": "2024-03-01"},
        headers=intruder,
    )
    assert terminate.status_code == 403

    current = (await client.get(url, headers=owner)).json()
    assert current["position"] == "Mechanic"
    assert current["status"] == "active"

    assert (await client.get("/dealer/employees/9999", headers=owner)).status_code == 404


@pytest.mark.asyncio
async def test_aadhar_cannot_be_changed(client: AsyncClient, make_dealer) -> None:
    _, headers = await make_dealer()
    created = (await client.post("/dealer/employees", json=employee_payload(), headers=headers)).json()
    url = f"/dealer/employees/{created['id']}"

    only_aadhar = await client.put(url, json={"aadhar": "999999999999"}, headers=headers)
    assert only_aadhar.status_code == 400

    response = await client.put(
        url, json={"aadhar": "999999999999", "position": "Supervisor"}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["aadhar"] == "123412341234"
    assert response.json()["position"] == "Supervisor"


@pytest.mark.asyncio
async def test_termination_rules(client: AsyncClient, make_dealer) -> None:
    _, headers = await make_dealer()
    created = (await client.post("/dealer/employees", json=employee_payload(), headers=headers)).json()
    url = f"/dealer/employees/{created['id']}/terminate"

    too_early = await client.post(
        url, json={"reason": "Contract ended early", "date": "2022-12-31"}, headers=headers
    )
    assert too_early.status_code == 400
    assert "date" in too_early.json()["errors"]

    short_reason = await client.post(url, json={"reason": "Left", "date": "2024-03-01"}, headers=headers)
    assert short_reason.status_code == 400

    current = (await client.get(f"/dealer/employees/{created['id']}", headers=headers)).json()
    assert current["status"] == "active"

    done = await client.post(
        url, json={"reason": "Contract ended as planned", "date": "2024-03-01"}, headers=headers
    )
    assert done.status_code == 200
    body = done.json()
    assert body["status"] == "terminated"
    assert body["termination_date"] == "2024-03-01"
    assert body["termination_reason"] == "Contract ended as planned"

    again = await client.post(
        url, json={"reason": "Contract ended as planned", "date": "2024-03-02"}, headers=headers
    )
    assert again.status_code == 400


@pytest.mark.asyncio
async def test_hire_date_cannot_move_past_termination(client: AsyncClient, make_dealer) -> None:
    _, headers = await make_dealer()
    created = (await client.post("/dealer/employees", json=employee_payload(), headers=headers)).json()
    url = f"/dealer/employees/{created['id']}"
    await client.post(
        f"{url}/terminate",
        json={"reason": "Contract ended as planned", "date": "2024-03-01"},
        headers=headers,
    )

    response = await client.put(url, json={"hire_date": "2024-06-01"}, headers=headers)
    assert response.status_code == 400
    assert (await client.get(url, headers=headers)).json()["hire_date"] == "2023-01-15"


@pytest.mark.asyncio
async def test_update_with_only_nulls_is_rejected_and_not_audited(
    client: AsyncClient, make_dealer
) -> None:
    _, headers = await make_dealer()
    created = (await client.post("/dealer/employees", json=employee_payload(), headers=headers)).json()
    url = f"/dealer/employees/{created['id']}"

    response = await client.put(url, json={"first_name": None}, headers=headers)
    assert response.status_code == 400

    current = (await client.get(url, headers=headers)).json()
    assert current["first_name"] == "Anil"
    assert current["updated_at"] == created["updated_at"]

    logs = (await client.get("/dealer/audit-logs", headers=headers)).json()
    assert [e for e in logs if e["action_type"] == "update_employee"] == []
