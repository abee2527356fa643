"""
API routes for companies.

Endpoints:
- POST   /companies                 Create company (admin)
- GET    /companies                 List companies, filterable by nameLike, minEmployees, maxEmployees
- GET    /companies/{handle}        Get company with its jobs
- PATCH  /companies/{handle}        Partially update company (admin)
- DELETE /companies/{handle}        Delete company (admin)
"""

import logging
from decimal import Decimal
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from pydantic import ConfigDict, Field, field_validator
from sqlalchemy.orm import Session

from api.models import CamelModel, DeletedResponse, reject_null
from api.query_params import only_query_params
from auth.dependencies import ensure_admin
from db.session import get_db
from db.company_service import (
    create_company as create_company_record,
    find_all_companies,
    get_company as get_company_record,
    update_company as update_company_record,
    remove_company,
)
from utils.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class CompanyCreate(CamelModel):
    """Request for POST /companies."""
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(CamelModel):
    """Request for PATCH /companies/{handle}. The handle cannot change."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return reject_null(value)


class CompanyJob(CamelModel):
    """Job as listed under its company."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    salary: Optional[int]
    equity: Optional[Decimal]


class CompanyResponse(CamelModel):
    """Company fields returned by every company endpoint."""
    model_config = ConfigDict(from_attributes=True)

    handle: str
    name: str
    description: Optional[str]
    num_employees: Optional[int]
    logo_url: Optional[str]


class CompanyDetail(CompanyResponse):
    """Response body for GET /companies/{handle}."""
    jobs: list[CompanyJob]


class CompanyEnvelope(CamelModel):
    company: CompanyResponse


class CompanyDetailEnvelope(CamelModel):
    company: CompanyDetail


class CompaniesListResponse(CamelModel):
    """Response for GET /companies."""
    companies: list[CompanyResponse]


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=CompanyEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
async def create_company(
    request: CompanyCreate,
    db: Session = Depends(get_db),
):
    """
    Create a company.

    Auth: admin JWT required

    Example:
        POST /companies
        {"handle": "acme", "name": "Acme", "numEmployees": 12}

        Response (201):
        {"company": {"handle": "acme", "name": "Acme", "description": null,
                     "numEmployees": 12, "logoUrl": null}}
    """
    if get_company_record(db, request.handle):
        raise BadRequestError(f"Duplicate company: {request.handle}")

    company = create_company_record(
        db,
        handle=request.handle,
        name=request.name,
        description=request.description,
        num_employees=request.num_employees,
        logo_url=request.logo_url,
    )
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.get(
    "",
    response_model=CompaniesListResponse,
    dependencies=[Depends(only_query_params("nameLike", "minEmployees", "maxEmployees"))],
)
async def list_companies(
    name_like: Optional[str] = Query(None, alias="nameLike"),
    min_employees: Optional[int] = Query(None, alias="minEmployees"),
    max_employees: Optional[int] = Query(None, alias="maxEmployees"),
    db: Session = Depends(get_db),
):
    """
    List companies ordered by name.

    Optional filters (combined with AND):
    - nameLike: case-insensitive partial match on name
    - minEmployees / maxEmployees: inclusive headcount bounds

    Auth: none

    Raises:
        BadRequestError: minEmployees > maxEmployees, or an unknown query parameter
    """
    if (
        min_employees is not None
        and max_employees is not None
        and min_employees > max_employees
    ):
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    companies = find_all_companies(db, {
        "nameLike": name_like,
        "minEmployees": min_employees,
        "maxEmployees": max_employees,
    })
    return CompaniesListResponse(
        companies=[CompanyResponse.model_validate(c) for c in companies]
    )


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
async def get_company(handle: str, db: Session = Depends(get_db)):
    """Get a company and its jobs. Auth: none"""
    company = get_company_record(db, handle)
    if not company:
        raise NotFoundError(f"No company: {handle}")

    return CompanyDetailEnvelope(company=CompanyDetail.model_validate(company))


@router.patch(
    "/{handle}",
    response_model=CompanyEnvelope,
    dependencies=[Depends(ensure_admin)],
)
async def update_company(
    handle: str,
    request: CompanyUpdate,
    db: Session = Depends(get_db),
):
    """
    Partially update a company.

    Only fields present in the body change: name, description,
    numEmployees, logoUrl. An empty body is a 400.

    Auth: admin JWT required
    """
    # Update only provided fields, keyed by their camelCase names
    update_data = request.model_dump(exclude_unset=True, by_alias=True)
    company = update_company_record(db, handle, update_data)

    if not company:
        raise NotFoundError(f"No company: {handle}")

    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.delete(
    "/{handle}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_admin)],
)
async def delete_company(handle: str, db: Session = Depends(get_db)):
    """Delete a company and its jobs. Auth: admin JWT required"""
    if not remove_company(db, handle):
        raise NotFoundError(f"No company: {handle}")

    return DeletedResponse(deleted=handle)
