from __future__ import annotations

from datetime import date


DEMO_EMPLOYEES = [
    {"id": "1", "name": "John Doe", "department": "Engineering", "position": "Developer", "hire_date": date(2022, 1, 15), "salary": 85000},
    {"id": "2", "name": "Jane Smith", "department": "HR", "position": "Manager", "hire_date": date(2021, 5, 10), "salary": 95000},
    {"id": "3", "name": "Michael Johnson", "department": "Marketing", "position": "Specialist", "hire_date": date(2023, 2, 20), "salary": 75000},
]

DEPARTMENTS = [
    {"id": "1", "name": "Engineering", "value": "engineering"},
    {"id": "2", "name": "Human Resources", "value": "hr"},
    {"id": "3", "name": "Marketing", "value": "marketing"},
    {"id": "4", "name": "Sales", "value": "sales"},
    {"id": "5", "name": "Finance", "value": "finance"},
]

POSITIONS_BY_DEPARTMENT = {
    "engineering": [
        {"id": "1", "name": "Software Engineer", "value": "software-engineer"},
        {"id": "2", "name": "Frontend Developer", "value": "frontend-developer"},
        {"id": "3", "name": "Backend Developer", "value": "backend-developer"},
        {"id": "4", "name": "DevOps Engineer", "value": "devops-engineer"},
    ],
    "hr": [
        {"id": "5", "name": "HR Manager", "value": "hr-manager"},
        {"id": "6", "name": "Recruiter", "value": "recruiter"},
        {"id": "7", "name": "HR Specialist", "value": "hr-specialist"},
    ],
    "marketing": [
        {"id": "8", "name": "Marketing Manager", "value": "marketing-manager"},
        {"id": "9", "name": "Content Writer", "value": "content-writer"},
        {"id": "10", "name": "Social Media Manager", "value": "social-media-manager"},
    ],
    "sales": [
        {"id": "11", "name": "Sales Manager", "value": "sales-manager"},
        {"id": "12", "name": "Account Executive", "value": "account-executive"},
        {"id": "13", "name": "Sales Representative", "value": "sales-representative"},
    ],
    "finance": [
        {"id": "14", "name": "Finance Manager", "value": "finance-manager"},
        {"id": "15", "name": "Accountant", "value": "accountant"},
        {"id": "16", "name": "Financial Analyst", "value": "financial-analyst"},
    ],
}


def positions_for(department: str) -> list[dict]:
    return list(POSITIONS_BY_DEPARTMENT.get(department, []))
