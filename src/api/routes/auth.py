from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from config import ApplicationConfig
from src.app.services.account_service import AccountService
from src.app.use_cases.auth import PasswordPolicy, SignupOutcome, SignupUseCase
from src.depends import get_account_service

router = APIRouter(prefix="/auth", tags=["Authentication"])

OUTCOME_STATUS = {
    "success": status.HTTP_201_CREATED,
    "duplicate_account": status.HTTP_409_CONFLICT,
    "validation_failure": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "auth_failure": status.HTTP_400_BAD_REQUEST,
    "unexpected_failure": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupOutcome
)
async def signup(
    payload: Dict[str, Any] = Body(...),
    accounts: AccountService = Depends(get_account_service),
):
    """
    User Signup

    Flow:
    1. Validate form fields (422 with per-field errors)
    2. Reject emails that already have a profile (409, redirect to login)
    3. Create the account with full name, username and role
    4. Redirect by role (201)

    The body always carries the outcome: kind, navigation for the
    client router and the notification to show.

    Responses:
        - 201 Created: Account created
        - 409 Conflict: Account already exists
        - 422 Unprocessable Entity: Invalid form fields
        - 400 Bad Request: Auth API rejected the signup
        - 500 Internal Server Error: Unexpected failure
    """
    use_case = SignupUseCase(accounts)
    outcome = await use_case.execute(payload)

    return JSONResponse(
        status_code=OUTCOME_STATUS[outcome.kind],
        content=outcome.model_dump(mode="json"),
    )


@router.get(
    "/signup/password-policy",
    status_code=status.HTTP_200_OK,
    response_model=PasswordPolicy,
)
async def password_policy():
    """Active password strength policy, for client-side hints"""
    return PasswordPolicy.from_config(ApplicationConfig)
