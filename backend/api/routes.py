from fastapi import APIRouter, Depends
from auth.dependencies import ensure_logged_in
from auth.models import UserInfo

router = APIRouter()


@router.get("/user", response_model=UserInfo)
async def get_current_user_info(current_user: dict = Depends(ensure_logged_in)):
    """
    Get current user information (protected endpoint)

    Requires valid JWT token in Authorization header:
        Authorization: Bearer <jwt_token>

    Returns:
        UserInfo: username and isAdmin, straight from the JWT

    Note: All data comes from JWT token, no database query needed
    """
    return UserInfo(**current_user)
