"""
FastAPI dependencies shared by the API endpoints.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.employee_service import EmployeeService


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    """
    Build an EmployeeService bound to the request's database session.

    Usage:
        @router.get("/employees")
        def list_employees(service: EmployeeService = Depends(get_employee_service)):
            ...
    """
    return EmployeeService(db)
