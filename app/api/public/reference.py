from typing import List

from fastapi import APIRouter, HTTPException, Query

from app.data.reference_data import DEPARTMENTS, positions_for
from app.schemas.employees import ReferenceItem

router = APIRouter()

@router.get("/departments", response_model=List[ReferenceItem])
def list_departments():
    return DEPARTMENTS

@router.get("/positions", response_model=List[ReferenceItem])
def list_positions(department: str | None = Query(None)):
    if not str(department or "").strip():
        raise HTTPException(status_code=400, detail="Department is required")
    return positions_for(department)
