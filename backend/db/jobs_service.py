"""
Database service functions for job postings.

Listing and partial updates go through the SQL builders (db/filters.py,
db/sql.py) and the JOBS query template; everything else uses the ORM.
"""

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.filters import job_filter
from db.query_templates import JOBS
from db.sql import sql_for_partial_update
from models.job import Job, JobField, JOB_COLUMNS

logger = logging.getLogger(__name__)


def create_job(
    db: Session,
    title: str,
    company_handle: str,
    salary: Optional[int] = None,
    equity: Optional[Decimal] = None,
) -> Job:
    """
    Create a job posting for an existing company.

    Args:
        db: Database session
        title: Job title
        company_handle: Owning company (must exist)
        salary: Yearly salary (optional)
        equity: Fraction of company, 0 to 1.0 (optional)

    Returns:
        Created Job object

    Raises:
        IntegrityError: If company_handle does not exist
    """
    job = Job(
        title=title,
        salary=salary,
        equity=equity,
        company_handle=company_handle,
    )

    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(f"Created job {job.id} for {company_handle}")
    return job


def find_all_jobs(
    db: Session,
    criteria: Optional[Mapping[str, Any]] = None
) -> list[Job]:
    """
    List jobs ordered by company then title, optionally filtered.

    Args:
        db: Database session
        criteria: Any of {title, minSalary, hasEquity}; see job_filter()

    Returns:
        List of matching Job objects
    """
    stmt = JOBS.select(job_filter(criteria))
    result = db.execute(select(Job).from_statement(stmt.bind()))
    return list(result.scalars().all())


def get_job_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Get a job by ID.

    Returns:
        Job object if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def update_job(
    db: Session,
    job_id: int,
    data: Mapping[str, Any]
) -> Optional[Job]:
    """
    Partially update a job's title, salary or equity.

    Returns:
        Updated Job if found, None otherwise

    Raises:
        BadRequestError: If data is empty or names a non-updatable field
    """
    set_clause = sql_for_partial_update(data, JOB_COLUMNS, JobField)
    stmt = JOBS.update(set_clause, job_id)

    job = db.execute(
        select(Job)
        .from_statement(stmt.bind())
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()
    db.commit()

    if job:
        logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return job


def remove_job(db: Session, job_id: int) -> bool:
    """
    Delete a job.

    Returns:
        True if deleted, False if not found
    """
    deleted_count = db.query(Job).filter(Job.id == job_id).delete(synchronize_session=False)
    db.commit()

    if deleted_count:
        logger.info(f"Deleted job {job_id}")
    return deleted_count > 0
