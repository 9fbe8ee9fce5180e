from fastapi import APIRouter
from app.api.public import employees, reference

router = APIRouter()
router.include_router(employees.router, prefix="/employees", tags=["Employees"])
router.include_router(reference.router, tags=["Reference"])
