"""
CRUD operations for Employee model.

Implements the Repository pattern to encapsulate all database operations
for employees, providing a clean interface for the service layer.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.employee import Employee

logger = logging.getLogger(__name__)


def save(db: Session, employee: Employee) -> Employee:
    """
    Insert or update an employee.

    Records without an id are inserted and get one assigned. Records carrying
    an id are merged onto the stored row with that id.

    Args:
        db: Database session
        employee: Employee instance to persist

    Returns:
        Persisted Employee instance with id
    """
    try:
        if employee.id is None:
            db.add(employee)
        else:
            employee = db.merge(employee)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving employee: {e}")
        raise

    db.refresh(employee)
    return employee


def get_all(db: Session) -> List[Employee]:
    """
    Retrieve every employee, unfiltered.

    Args:
        db: Database session

    Returns:
        List of Employee instances
    """
    return db.query(Employee).order_by(Employee.id).all()


def get_by_id(db: Session, employee_id: int) -> Optional[Employee]:
    """
    Retrieve an employee by its ID.

    Args:
        db: Database session
        employee_id: Employee ID to retrieve

    Returns:
        Employee instance if found, None otherwise
    """
    return db.get(Employee, employee_id)


def get_by_email(db: Session, email: str) -> Optional[Employee]:
    """
    Retrieve the first employee with the given email.

    Args:
        db: Database session
        email: Email address to look up

    Returns:
        Employee instance if found, None otherwise
    """
    return db.query(Employee).filter(Employee.email == email).first()


def get_by_name(db: Session, first_name: str, last_name: str) -> Optional[Employee]:
    """
    Retrieve the single employee with the given first and last name.

    Raises sqlalchemy.exc.MultipleResultsFound when more than one
    employee matches.

    Args:
        db: Database session
        first_name: First name to match exactly
        last_name: Last name to match exactly

    Returns:
        Employee instance if found, None otherwise
    """
    return db.query(Employee).filter(
        Employee.first_name == first_name,
        Employee.last_name == last_name
    ).one_or_none()


def delete_by_id(db: Session, employee_id: int) -> bool:
    """
    Delete an employee by ID.

    Args:
        db: Database session
        employee_id: Employee ID to delete

    Returns:
        True if deleted, False if not found
    """
    employee = get_by_id(db, employee_id)
    if not employee:
        return False

    try:
        db.delete(employee)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting employee {employee_id}: {e}")
        raise

    return True
