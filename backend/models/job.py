from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING
from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from models import Base

if TYPE_CHECKING:
    from models.company import Company


class JobField(str, Enum):
    """Job fields a PATCH may change. id and companyHandle are fixed at creation."""
    TITLE = "title"
    SALARY = "salary"
    EQUITY = "equity"


# Every updatable job field is named after its column
JOB_COLUMNS: dict[str, str] = {}


class Job(Base):
    """
    Job posting belonging to a company.

    equity is a fraction of the company (0 to 1.0), stored as NUMERIC.
    """
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[int] = mapped_column(Integer, nullable=True)
    equity: Mapped[Decimal] = mapped_column(Numeric, nullable=True)

    company_handle: Mapped[str] = mapped_column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False
    )

    company: Mapped["Company"] = relationship(back_populates="jobs")

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
