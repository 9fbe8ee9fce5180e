from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.schemas.employees import EmployeeCreate, EmployeeCreated, EmployeePage
from app.services import employee_store
from app.services.employee_query import parse_employee_query
from app.services.query_engine import InvalidQuery, run_query

router = APIRouter()

# Everything arrives as raw text so that malformed values become a 400 from
# the query parser rather than FastAPI's 422.
@router.get("", response_model=EmployeePage)
def list_employees(
    page: str | None = Query(None),
    sort: str | None = Query(None),
    direction: str | None = Query(None),
    name: str | None = Query(None),
    department: str | None = Query(None),
    position: str | None = Query(None),
    startDate: str | None = Query(None),
    endDate: str | None = Query(None),
    db: Session = Depends(get_db),
):
    params = {
        "page": page,
        "sort": sort,
        "direction": direction,
        "name": name,
        "department": department,
        "position": position,
        "startDate": startDate,
        "endDate": endDate,
    }
    page_size = max(1, min(settings.PAGE_SIZE, settings.MAX_PAGE_SIZE))
    try:
        query = parse_employee_query(params, page_size=page_size)
        result = run_query(employee_store.load_employee_records(db), query)
    except InvalidQuery as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {
        "employees": [dict(record) for record in result.records],
        "totalEmployees": result.total_records,
        "totalPages": result.total_pages,
        "currentPage": result.current_page,
    }

@router.post("", status_code=201, response_model=EmployeeCreated)
def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)):
    row = employee_store.create_employee(db, payload)
    return {"data": dict(employee_store.employee_record(row))}
