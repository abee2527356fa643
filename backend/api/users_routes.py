"""
API routes for users.

Endpoints:
- POST   /users               Create user, optionally admin (admin); returns user + token
- GET    /users               List users (admin)
- GET    /users/{username}    Get user (that user or admin)
- PATCH  /users/{username}    Update user (that user or admin)
- DELETE /users/{username}    Delete user (that user or admin)
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, status
from pydantic import ConfigDict, EmailStr, Field, field_validator
from sqlalchemy.orm import Session

from api.models import CamelModel, DeletedResponse, reject_null
from auth.dependencies import ensure_admin, ensure_correct_user_or_admin
from auth.utils import create_user_token
from db.session import get_db
from db.user_service import find_all_users, get_user as get_user_record, register_user, update_user as update_user_record, remove_user
from utils.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

class UserCreate(CamelModel):
    """Request for POST /users."""
    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=64)
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: EmailStr
    is_admin: bool = False


class UserUpdate(CamelModel):
    """Request for PATCH /users/{username}. The username cannot change."""
    model_config = ConfigDict(extra="forbid")

    password: Optional[str] = Field(default=None, min_length=5, max_length=64)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None

    # Every user column is NOT NULL: fields may be left out, never nulled
    @field_validator("password", "first_name", "last_name", "email")
    @classmethod
    def fields_not_null(cls, value):
        return reject_null(value)


class UserResponse(CamelModel):
    """Public user fields (never the password hash)."""
    model_config = ConfigDict(from_attributes=True)

    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserEnvelope(CamelModel):
    user: UserResponse


class UserCreatedResponse(CamelModel):
    """Response for POST /users."""
    user: UserResponse
    token: str


class UsersListResponse(CamelModel):
    users: list[UserResponse]


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
async def create_user(request: UserCreate, db: Session = Depends(get_db)):
    """
    Add a user, possibly an admin. Not a registration endpoint (see /auth/register).

    Auth: admin JWT required
    """
    if get_user_record(db, request.username):
        raise BadRequestError(f"Duplicate username: {request.username}")

    user = register_user(
        db=db,
        username=request.username,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        is_admin=request.is_admin,
    )

    return UserCreatedResponse(
        user=UserResponse.model_validate(user),
        token=create_user_token(user.username, user.is_admin),
    )


@router.get("", response_model=UsersListResponse, dependencies=[Depends(ensure_admin)])
async def list_users(db: Session = Depends(get_db)):
    """List all users. Auth: admin JWT required"""
    users = find_all_users(db)
    return UsersListResponse(users=[UserResponse.model_validate(u) for u in users])


@router.get(
    "/{username}",
    response_model=UserEnvelope,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def get_user(username: str, db: Session = Depends(get_db)):
    """Get one user. Auth: that user's JWT or admin"""
    user = get_user_record(db, username)
    if not user:
        raise NotFoundError(f"No user: {username}")

    return UserEnvelope(user=UserResponse.model_validate(user))


@router.patch(
    "/{username}",
    response_model=UserEnvelope,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def update_user(
    username: str,
    request: UserUpdate,
    db: Session = Depends(get_db),
):
    """
    Partially update a user: password, firstName, lastName, email.

    Auth: that user's JWT or admin
    """
    update_data = request.model_dump(exclude_unset=True, by_alias=True)
    user = update_user_record(db, username, update_data)

    if not user:
        raise NotFoundError(f"No user: {username}")

    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete(
    "/{username}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def delete_user(username: str, db: Session = Depends(get_db)):
    """Delete a user. Auth: that user's JWT or admin"""
    if not remove_user(db, username):
        raise NotFoundError(f"No user: {username}")

    return DeletedResponse(deleted=username)
