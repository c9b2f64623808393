from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Employee(Base):
    """
    Employee record.

    Email uniqueness is checked by the service layer before insert; the
    column itself carries no unique constraint.
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    email = Column(String, nullable=True, index=True)

    def __repr__(self):
        return f"<Employee(id={self.id}, email='{self.email}')>"
