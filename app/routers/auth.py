# =============================================================================
# app/routers/auth.py - Authentication Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import UserServiceDep
from app.schemas import LoginRequest, UserResponse

router = APIRouter()


@router.post("/login", response_model=UserResponse)
async def login(credentials: LoginRequest, user_service: UserServiceDep):
    """
    Verifies email and password.

    401 on bad credentials, 423 once the failed-attempt limit is reached.
    """
    return await user_service.authenticate(credentials)
