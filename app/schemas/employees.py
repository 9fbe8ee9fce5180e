from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

class EmployeeCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str
    department: str
    position: str
    hire_date: date = Field(alias="hireDate")
    salary: int = Field(ge=0)

    @field_validator("name", "department", "position")
    @classmethod
    def require_text(cls, value: str) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("must not be empty")
        return text

    @field_validator("id")
    @classmethod
    def normalize_id(cls, value: Optional[str]) -> Optional[str]:
        text = str(value or "").strip()
        return text or None


class EmployeeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    department: str
    position: str
    hire_date: date = Field(alias="hireDate")
    salary: int


class EmployeePage(BaseModel):
    employees: List[EmployeeOut]
    totalEmployees: int
    totalPages: int
    currentPage: int


class EmployeeCreated(BaseModel):
    success: bool = True
    message: str = "Employee created successfully"
    data: EmployeeOut


class ReferenceItem(BaseModel):
    id: str
    name: str
    value: str
