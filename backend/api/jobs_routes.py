"""
API routes for job postings.

Endpoints:
- POST   /jobs               Create job (admin)
- GET    /jobs               List jobs, filterable by title, minSalary, hasEquity
- GET    /jobs/{job_id}      Get job details
- PATCH  /jobs/{job_id}      Update title, salary or equity (admin)
- DELETE /jobs/{job_id}      Delete job (admin)
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
from db.company_service import get_company
from db.jobs_service import (
    create_job as create_job_record,
    find_all_jobs,
    get_job_by_id,
    update_job as update_job_record,
    remove_job,
)
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class JobCreate(CamelModel):
    """Request for POST /jobs."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(CamelModel):
    """Request for PATCH /jobs/{job_id}. id and companyHandle cannot change."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        return reject_null(value)


class JobResponse(CamelModel):
    """Job fields returned by every job endpoint. equity serializes as a string, e.g. "0.3"."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    salary: Optional[int]
    equity: Optional[Decimal]
    company_handle: str


class JobEnvelope(CamelModel):
    job: JobResponse


class JobsListResponse(CamelModel):
    """Response for GET /jobs."""
    jobs: list[JobResponse]


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=JobEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
async def create_job(
    request: JobCreate,
    db: Session = Depends(get_db),
):
    """
    Create a job for an existing company.

    Auth: admin JWT required

    Raises:
        NotFoundError: companyHandle does not exist
    """
    if not get_company(db, request.company_handle):
        raise NotFoundError(f"No company: {request.company_handle}")

    job = create_job_record(
        db,
        title=request.title,
        company_handle=request.company_handle,
        salary=request.salary,
        equity=request.equity,
    )
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.get(
    "",
    response_model=JobsListResponse,
    dependencies=[Depends(only_query_params("title", "minSalary", "hasEquity"))],
)
async def list_jobs(
    title: Optional[str] = None,
    min_salary: Optional[int] = Query(None, alias="minSalary"),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    db: Session = Depends(get_db),
):
    """
    List jobs ordered by company, then title.

    Optional filters (combined with AND):
    - title: case-insensitive partial match
    - minSalary: salary at least this much
    - hasEquity: true shows only jobs with equity > 0; false shows all jobs

    Auth: none

    Example:
        GET /jobs?minSalary=1&hasEquity=true&title=engineer
    """
    jobs = find_all_jobs(db, {
        "title": title,
        "minSalary": min_salary,
        "hasEquity": has_equity,
    })
    return JobsListResponse(jobs=[JobResponse.model_validate(j) for j in jobs])


@router.get("/{job_id}", response_model=JobEnvelope)
async def get_job(job_id: int, db: Session = Depends(get_db)):
    """Get a single job by ID. Auth: none"""
    job = get_job_by_id(db, job_id)
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)],
)
async def update_job(
    job_id: int,
    request: JobUpdate,
    db: Session = Depends(get_db),
):
    """Partially update a job. Auth: admin JWT required"""
    update_data = request.model_dump(exclude_unset=True, by_alias=True)
    job = update_job_record(db, job_id, update_data)

    if not job:
        raise NotFoundError(f"No job: {job_id}")

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete(
    "/{job_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_admin)],
)
async def delete_job(job_id: int, db: Session = Depends(get_db)):
    """Delete a job. Auth: admin JWT required"""
    if not remove_job(db, job_id):
        raise NotFoundError(f"No job: {job_id}")

    return DeletedResponse(deleted=str(job_id))
