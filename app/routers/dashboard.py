# =============================================================================
# app/routers/dashboard.py - Dashboard Endpoint
# =============================================================================

from fastapi import APIRouter, Query

from app.core.validation import validate_email_address
from app.dependencies import UserServiceDep
from app.schemas import DashboardResponse

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(user_service: UserServiceDep, email: str | None = Query(default=None)):
    """
    Looks up a user by email address and returns the username.

    400 on a malformed email, 404 when no user has that address.
    """
    return await user_service.get_dashboard(validate_email_address(email))
