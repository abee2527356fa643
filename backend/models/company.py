"""Company model and its updatable-field enumeration."""
from enum import Enum
from typing import TYPE_CHECKING
from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from models import Base

if TYPE_CHECKING:
    from models.job import Job


class CompanyField(str, Enum):
    """Logical (camelCase) company fields a PATCH may change. The handle is immutable."""
    NAME = "name"
    DESCRIPTION = "description"
    NUM_EMPLOYEES = "numEmployees"
    LOGO_URL = "logoUrl"


# Only fields whose column name differs from the logical name
COMPANY_COLUMNS = {
    CompanyField.NUM_EMPLOYEES.value: "num_employees",
    CompanyField.LOGO_URL.value: "logo_url",
}


class Company(Base):
    """
    Company that posts jobs.

    Schema matches migration: 3f1c2a9b7d10_companies_jobs_users.py
    """
    __tablename__ = "companies"

    # Short slug used in URLs, e.g. "anderson-arias-morrow"
    handle: Mapped[str] = mapped_column(String(25), primary_key=True)

    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    num_employees: Mapped[int] = mapped_column(Integer, nullable=True)
    logo_url: Mapped[str] = mapped_column(Text, nullable=True)

    jobs: Mapped[list["Job"]] = relationship(
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Job.id",
    )

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    def __repr__(self) -> str:
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
