"""Sample data used to initialize an empty store."""

from __future__ import annotations

from typing import Any

from employee_records.models import EMPLOYEES_KEY, ResourceKind
from employee_records.storage.base import StorageData, new_id, next_timestamp

SAMPLE_EMPLOYEE_ID = "emp-1"

_SAMPLE_TRAINING: list[tuple[str, str, str, str, str, str]] = [
    # name, category, status, due date, completed date, credits
    ("Unlawful Harassment", "General", "Pending", "2025-12-02", "", "1.0"),
    ("Advantage Package Demo Video", "Product Training", "Pending", "", "", "0.5"),
    ("Quarterly Security Training", "Product Training", "Pending", "2025-11-18", "", "1.0"),
    ("Sexual Harassment Training", "Quarterly Training", "Pending", "2022-11-10", "", "1.0"),
    ("Annual Security Training", "Required Annual Trainings", "Pending", "", "", "1.0"),
    ("HIPAA Training", "Required Annual Trainings", "Pending", "", "", "1.0"),
    ("OSHA Training", "Required Annual Trainings", "Pending", "2022-10-14", "", "1.0"),
    ("Unlawful Harassment", "General", "Completed", "2025-12-02", "2025-12-02", "1.0"),
    ("Quarterly Security Training", "Product Training", "Completed", "2025-08-19", "2025-08-19", "1.0"),
    ("Getting Started", "Product Training", "Completed", "2025-08-19", "2025-08-19", "0.5"),
    ("Working from home during COVID-19", "COVID-19", "Completed", "2025-08-19", "2025-08-19", "0.5"),
]


def _sample_employee() -> dict[str, Any]:
    now = next_timestamp().isoformat()
    return {
        "id": SAMPLE_EMPLOYEE_ID,
        "firstName": "Muhammad Hamza",
        "lastName": "Anis",
        "email": "mhamza292156@gmail.com",
        "phone": "801-724-6600 x 123",
        "jobTitle": "HR Administrator",
        "department": "Operations",
        "location": "Salt Lake City, Utah",
        "hireDate": "2022-10-11",
        "profileData": {
            "personal": {
                "preferredName": "Hamza",
                "gender": "Male",
                "dateOfBirth": "1995-03-15",
                "maritalStatus": "Single",
            },
            "address": {
                "street": "123 Main Street",
                "city": "Salt Lake City",
                "state": "Utah",
                "zipCode": "84101",
                "country": "United States",
            },
            "contact": {
                "workPhone": "801-724-6600",
                "mobilePhone": "801-724-6600",
                "homePhone": "",
                "personalEmail": "hamza.personal@gmail.com",
            },
            "social": {
                "linkedin": "https://linkedin.com/in/hamza-anis",
                "twitter": "https://twitter.com/hamza_anis",
                "website": "",
            },
            "visa": {
                "type": "US Citizen",
                "status": "Active",
                "expiration": "",
                "sponsorshipRequired": False,
            },
        },
        "createdAt": now,
        "updatedAt": now,
    }


def _sample_training() -> list[dict[str, Any]]:
    return [
        {
            "id": new_id(),
            "employeeId": SAMPLE_EMPLOYEE_ID,
            "name": name,
            "category": category,
            "status": status,
            "dueDate": due_date,
            "completedDate": completed_date,
            "credits": credits,
        }
        for name, category, status, due_date, completed_date, credits in _SAMPLE_TRAINING
    ]


def _sample_bonuses() -> list[dict[str, Any]]:
    return [
        {
            "id": new_id(),
            "employeeId": SAMPLE_EMPLOYEE_ID,
            "type": "Performance Bonus",
            "amount": "$5000",
            "frequency": "One-time",
            "eligibilityDate": "2025-09-01",
            "description": "For outstanding project delivery",
        },
        {
            "id": new_id(),
            "employeeId": SAMPLE_EMPLOYEE_ID,
            "type": "Annual Bonus",
            "amount": "$10000",
            "frequency": "Annual",
            "eligibilityDate": "2025-12-31",
            "description": "Year-end performance bonus",
        },
    ]


def sample_data() -> StorageData:
    """Build the seed document: one employee with training and bonus records."""
    data: StorageData = {EMPLOYEES_KEY: {}}
    data.update({kind.value: {} for kind in ResourceKind})

    employee = _sample_employee()
    data[EMPLOYEES_KEY][employee["id"]] = employee
    data[ResourceKind.TRAINING.value] = {t["id"]: t for t in _sample_training()}
    data[ResourceKind.BONUSES.value] = {b["id"]: b for b in _sample_bonuses()}
    return data
