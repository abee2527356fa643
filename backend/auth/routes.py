from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from auth.models import TokenRequest, RegisterRequest, TokenResponse
from auth.utils import create_user_token
from db.session import get_db
from db.user_service import authenticate_user, get_user, register_user
from utils.errors import BadRequestError, UnauthorizedError

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
async def login(request: TokenRequest, db: Session = Depends(get_db)):
    """
    Exchange username/password for a JWT

    Flow:
    1. Client sends {username, password}
    2. Backend checks the password against the stored argon2 hash
    3. Backend returns a JWT with {username, isAdmin}
    4. Client sends it as "Authorization: Bearer <token>" afterwards
    """
    user = authenticate_user(db, request.username, request.password)
    if not user:
        raise UnauthorizedError("Invalid username/password")

    return TokenResponse(token=create_user_token(user.username, user.is_admin))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new (non-admin) user and return a JWT

    Admins are created through POST /users instead.
    """
    if get_user(db, request.username):
        raise BadRequestError(f"Duplicate username: {request.username}")

    user = register_user(
        db=db,
        username=request.username,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        is_admin=False,
    )

    return TokenResponse(token=create_user_token(user.username, user.is_admin))
