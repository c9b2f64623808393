import logging
from typing import Annotated, List
from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import PlainTextResponse

from app.core.deps import get_employee_service
from app.models.employee import Employee
from app.schemas.employee import EmployeeRequest, EmployeeResponse
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["Employees"])
logger = logging.getLogger(__name__)

DELETE_MESSAGE = "Employee deleted successfully."

# Ids are stored as signed 64-bit integers; larger values are rejected with 422
EmployeeId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EmployeeResponse)
def create_employee(
    request: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Create a new employee.

    Returns 409 if another employee already uses the same email.
    """
    employee = Employee(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email
    )
    return service.save_employee(employee)


@router.get("", response_model=List[EmployeeResponse])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """List all employees."""
    return service.get_all_employees()


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: EmployeeId, service: EmployeeService = Depends(get_employee_service)):
    """
    Retrieve an employee by ID.

    Responds 404 with an empty body when the employee does not exist.
    """
    employee = service.get_employee_by_id(employee_id)

    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return employee


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: EmployeeId,
    request: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Replace the first name, last name and email of an existing employee.

    The id is taken from the path. Responds 404 with an empty body, and
    writes nothing, when the employee does not exist.
    """
    employee = service.get_employee_by_id(employee_id)

    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    employee.first_name = request.first_name
    employee.last_name = request.last_name
    employee.email = request.email

    return service.update_employee(employee)


@router.delete("/{employee_id}", response_class=PlainTextResponse)
def delete_employee(employee_id: EmployeeId, service: EmployeeService = Depends(get_employee_service)):
    """
    Delete an employee by ID.

    Always responds 200, whether or not the employee existed.
    """
    service.delete_employee(employee_id)
    return DELETE_MESSAGE
