"""Request bodies shared by the API tests."""


def dealer_payload(index: int = 1, **overrides) -> dict:
    """Valid create-dealer body; ``index`` keeps the unique fields apart."""

    payload = {
        "company_name": f"Dealer Number {index}",
        "primary_contact_name": f"Contact {index}",
        "primary_contact_phone": f"98765{index:05d}",
        "primary_contact_email": f"dealer{index}@example.com",
        "address": f"{index} Station Road, Pune",
        "username": f"dealer{index}",
    }
    payload.update(overrides)
    return payload


def employee_payload(**overrides) -> dict:
    payload = {
        "first_name": "Anil",
        "last_name": "Kumar",
        "phone": "9123456780",
        "email": "anil.kumar@example.com",
        "aadhar": "123412341234",
        "position": "Mechanic",
        "hire_date": "2023-01-15",
    }
    payload.update(overrides)
    return payload


def customer_payload(**overrides) -> dict:
    payload = {
        "type": "private",
        "name_or_entity": "Meera Iyer",
        "phone": "9000012345",
        "email": "meera@example.com",
        "official_id": "PAN-ABCDE1234F",
        "address": "7 Lake View, Chennai",
    }
    payload.update(overrides)
    return payload
