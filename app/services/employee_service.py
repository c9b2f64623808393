"""
Employee business rules.

The only rule enforced here is email uniqueness on create; everything else
is delegated straight to the CRUD layer.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud import employee as employee_crud
from app.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeAlreadyExistsError(Exception):
    """Raised when creating an employee whose email is already taken"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Employee already exists with given email: {email}")


class EmployeeService:
    """
    Service for managing employees.

    One instance is bound to one database session, normally the session of
    the current request.
    """

    def __init__(self, db: Session):
        self.db = db

    def save_employee(self, employee: Employee) -> Employee:
        """
        Create a new employee.

        The email check and the insert run in separate transactions, so two
        concurrent creates with the same email can both succeed.

        Raises:
            EmployeeAlreadyExistsError: if an employee with the same email exists
        """
        existing = employee_crud.get_by_email(self.db, employee.email)
        if existing is not None:
            logger.warning("Rejected employee create, email already in use")
            raise EmployeeAlreadyExistsError(employee.email)

        saved = employee_crud.save(self.db, employee)
        logger.info(f"Created employee {saved.id}", extra={"employee_id": saved.id})
        return saved

    def get_all_employees(self) -> List[Employee]:
        return employee_crud.get_all(self.db)

    def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return employee_crud.get_by_id(self.db, employee_id)

    def update_employee(self, employee: Employee) -> Employee:
        """Persist an existing employee. Callers are expected to have checked it exists."""
        updated = employee_crud.save(self.db, employee)
        logger.info(f"Updated employee {updated.id}", extra={"employee_id": updated.id})
        return updated

    def delete_employee(self, employee_id: int) -> None:
        """Delete by id; a missing id is a no-op."""
        if employee_crud.delete_by_id(self.db, employee_id):
            logger.info(f"Deleted employee {employee_id}", extra={"employee_id": employee_id})
        else:
            logger.info(f"Delete requested for missing employee {employee_id}", extra={"employee_id": employee_id})
