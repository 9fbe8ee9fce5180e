from __future__ import annotations

import logging
from types import MappingProxyType
from uuid import uuid4

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.data.reference_data import DEMO_EMPLOYEES
from app.models.employee import Employee
from app.schemas.employees import EmployeeCreate

_LOG = logging.getLogger("app.employees")


def employee_record(row: Employee) -> MappingProxyType:
    return MappingProxyType(
        {
            "id": row.id,
            "name": row.name,
            "department": row.department,
            "position": row.position,
            "hireDate": row.hire_date,
            "salary": row.salary,
        }
    )


def load_employee_records(db: Session) -> tuple:
    """Read-only snapshot of every employee, in insertion order."""
    rows = db.query(Employee).order_by(Employee.created_at.asc(), Employee.id.asc()).all()
    return tuple(employee_record(row) for row in rows)


def create_employee(db: Session, payload: EmployeeCreate) -> Employee:
    employee_id = payload.id or uuid4().hex
    if db.get(Employee, employee_id) is not None:
        raise HTTPException(status_code=409, detail=f'Employee "{employee_id}" already exists')
    row = Employee(
        id=employee_id,
        name=payload.name,
        department=payload.department,
        position=payload.position,
        hire_date=payload.hire_date,
        salary=payload.salary,
    )
    db.add(row); db.commit(); db.refresh(row)
    _LOG.info("employee created id=%s department=%s", row.id, row.department)
    return row


def seed_employees(db: Session) -> int:
    if db.query(Employee).first() is not None:
        return 0
    for item in DEMO_EMPLOYEES:
        db.add(Employee(**item))
    db.commit()
    _LOG.info("seeded %s demo employees", len(DEMO_EMPLOYEES))
    return len(DEMO_EMPLOYEES)
