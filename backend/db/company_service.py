"""Company database service layer - CRUD operations for companies."""
import logging
from typing import Any, Mapping, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from db.filters import company_filter
from db.query_templates import COMPANIES
from db.sql import sql_for_partial_update
from models.company import Company, CompanyField, COMPANY_COLUMNS
from utils.errors import BadRequestError

logger = logging.getLogger(__name__)


def create_company(
    db: Session,
    handle: str,
    name: str,
    description: Optional[str] = None,
    num_employees: Optional[int] = None,
    logo_url: Optional[str] = None,
) -> Company:
    """
    Create a new company record.

    Args:
        db: Database session
        handle: Unique company slug
        name: Display name (unique)
        description: Free-text description (optional)
        num_employees: Headcount (optional)
        logo_url: Logo image URL (optional)

    Returns:
        Created Company object

    Raises:
        BadRequestError: If handle or name already exists
    """
    company = Company(
        handle=handle,
        name=name,
        description=description,
        num_employees=num_employees,
        logo_url=logo_url,
    )

    try:
        db.add(company)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate company: {handle} / {name}")
    db.refresh(company)

    logger.info(f"Created company {handle}")
    return company


def find_all_companies(
    db: Session,
    criteria: Optional[Mapping[str, Any]] = None
) -> list[Company]:
    """
    List companies ordered by name, optionally filtered.

    Args:
        db: Database session
        criteria: Any of {nameLike, minEmployees, maxEmployees}; see company_filter()

    Returns:
        List of matching Company objects (empty if none match)
    """
    stmt = COMPANIES.select(company_filter(criteria))
    result = db.execute(select(Company).from_statement(stmt.bind()))
    return list(result.scalars().all())


def get_company(db: Session, handle: str) -> Optional[Company]:
    """
    Get company by handle, with its jobs loaded.

    Returns:
        Company object if found, None otherwise
    """
    return db.query(Company).options(
        selectinload(Company.jobs)
    ).filter(Company.handle == handle).first()


def update_company(
    db: Session,
    handle: str,
    data: Mapping[str, Any]
) -> Optional[Company]:
    """
    Partially update a company.

    Only the fields present in data change. The handle cannot be changed.

    Args:
        db: Database session
        handle: Company to update
        data: {logicalField: value} with keys from CompanyField

    Returns:
        Updated Company if found, None otherwise

    Raises:
        BadRequestError: If data is empty, names a non-updatable field
            or renames the company to an existing name
    """
    set_clause = sql_for_partial_update(data, COMPANY_COLUMNS, CompanyField)
    stmt = COMPANIES.update(set_clause, handle)

    try:
        company = db.execute(
            select(Company)
            .from_statement(stmt.bind())
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate company name: {data.get('name')}")

    if company:
        logger.info(f"Updated company {handle}: {', '.join(data)}")
    return company


def remove_company(db: Session, handle: str) -> bool:
    """
    Delete a company (its jobs are removed by ON DELETE CASCADE).

    Returns:
        True if deleted, False if not found
    """
    company = db.query(Company).filter(Company.handle == handle).first()
    if not company:
        return False

    db.delete(company)
    db.commit()

    logger.info(f"Deleted company {handle}")
    return True
