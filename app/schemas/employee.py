from pydantic import BaseModel, Field
from typing import Optional


class EmployeeBase(BaseModel):
    """Fields shared by employee requests and responses"""
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None

    class Config:
        populate_by_name = True  # Accept both firstName and first_name


class EmployeeRequest(EmployeeBase):
    """
    Schema for creating or updating an employee.
    Any id sent by the client is ignored; ids are assigned by the database.
    """
    pass


class EmployeeResponse(EmployeeBase):
    """Schema for employee response"""
    id: int

    class Config:
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models
