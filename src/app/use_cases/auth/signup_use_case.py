import logging
from typing import Any, Callable, Mapping, Optional

from config import ApplicationConfig
from src.app.services.account_service import AUTH_ERROR, AccountMetadata, AccountService
from src.domain.entities import UserRole
from .auth_error_classifier import GENERIC_MESSAGE, classify_auth_error
from .duplicate_account_checker import DuplicateAccountChecker, Found, QueryFailed
from .signup_dto import (
    AuthErrorInfo,
    AuthFailure,
    DuplicateAccount,
    Navigation,
    NavigationState,
    Notification,
    PasswordPolicy,
    SignupOutcome,
    SignupRequest,
    SignupSuccess,
    UnexpectedFailure,
    ValidationFailure,
)
from .signup_validation import validate_signup

logger = logging.getLogger(__name__)

ACCOUNT_EXISTS_MESSAGE = "An account with this email already exists. Please login instead."
ACCOUNT_CREATED_MESSAGE = "Account created successfully. Welcome to GlamConnect!"
ARTIST_WELCOME = "Please complete your artist profile to start offering services."
CUSTOMER_WELCOME = "You can now start booking services from our talented artists."
SIGNUP_IN_PROGRESS = "A signup request is already in progress."
WELCOME_TOAST_DURATION_MS = 6000


class SignupUseCase:
    """
    Signup Use Case

    Command/Outcome Pattern:
    - Input: raw signup form values
    - Output: exactly one SignupOutcome per call

    Business Logic:
    1. Validate the form (no network call on failure)
    2. Check the profile store for the email
       - found: duplicate-account outcome, redirect to login
       - lookup failed: unexpected failure, never create the account
    3. Create the account with full name, username and role metadata
       - "already registered" auth error: same outcome as step 2
       - other auth error: classified auth failure
    4. Redirect by role: artist -> artist registration, customer -> dashboard

    is_loading is True while a submission runs and False on every exit path.
    """

    def __init__(
        self,
        accounts: AccountService,
        password_policy: Optional[PasswordPolicy] = None,
        on_open_terms: Optional[Callable[[], Any]] = None,
    ):
        self.accounts = accounts
        self.password_policy = password_policy or PasswordPolicy.from_config(
            ApplicationConfig
        )
        self.on_open_terms = on_open_terms
        self.duplicate_checker = DuplicateAccountChecker(accounts)
        self.is_loading = False

    def open_terms(self):
        """Forward the terms-and-conditions trigger to the presentation layer"""
        if self.on_open_terms is not None:
            return self.on_open_terms()
        return None

    async def execute(self, data: Mapping[str, Any]) -> SignupOutcome:
        """
        Execute signup use case

        Args:
            data: Signup form values (camelCase or snake_case keys)

        Returns:
            SignupSuccess, DuplicateAccount, AuthFailure,
            UnexpectedFailure or ValidationFailure
        """
        if self.is_loading:
            logger.warning("Signup submitted while another one is running")
            return self._unexpected_failure(SIGNUP_IN_PROGRESS)

        self.is_loading = True
        try:
            validated = validate_signup(data, self.password_policy)
            if validated.is_err():
                return ValidationFailure(
                    field_errors=validated.error.details,
                    notification=Notification(
                        variant="destructive",
                        title="Invalid Signup Details",
                        description=validated.error.message,
                    ),
                )
            return await self._submit(validated.value)
        except Exception:
            logger.exception("Signup process error")
            return self._unexpected_failure()
        finally:
            self.is_loading = False

    async def _submit(self, request: SignupRequest) -> SignupOutcome:
        logger.info(f"Starting signup process for email: {request.email}")

        check = await self.duplicate_checker.check(request.email)
        if isinstance(check, Found):
            logger.info(f"User already exists in profiles: {request.email}")
            return self._duplicate_account(request.email)
        if isinstance(check, QueryFailed):
            return self._unexpected_failure()

        logger.info("No existing user found, proceeding with signup")
        created = await self.accounts.create_account(
            request.email,
            request.password,
            AccountMetadata(
                full_name=request.full_name,
                username=request.username,
                role=request.role,
            ),
        )

        if created.is_err():
            error = created.error
            if error.code != AUTH_ERROR:
                logger.error(f"Account creation failed: {error.code} {error.message}")
                return self._unexpected_failure()

            auth_error = AuthErrorInfo(
                status=error.details.get("status"),
                code=error.details.get("error_code"),
                message=error.message,
            )
            logger.warning(f"Auth error: {auth_error}")
            reason = classify_auth_error(auth_error)
            if reason.already_registered:
                logger.info("User already exists, redirecting to login")
                return self._duplicate_account(request.email)
            return AuthFailure(
                reason=reason.message,
                notification=Notification(
                    variant="destructive",
                    title="Error Creating Account",
                    description=reason.message,
                ),
            )

        logger.info(f"Signup successful, user id: {created.value.user_id}")
        return self._success(request)

    def _success(self, request: SignupRequest) -> SignupSuccess:
        match request.role:
            case UserRole.artist:
                redirect_path = ApplicationConfig.ARTIST_REGISTRATION_PATH
                welcome_message = ARTIST_WELCOME
            case UserRole.customer:
                redirect_path = ApplicationConfig.DASHBOARD_PATH
                welcome_message = CUSTOMER_WELCOME

        return SignupSuccess(
            redirect_path=redirect_path,
            welcome_message=welcome_message,
            navigation=Navigation(
                target_path=redirect_path,
                state=NavigationState(
                    email=request.email, message=ACCOUNT_CREATED_MESSAGE
                ),
            ),
            notification=Notification(
                title="Account Created Successfully!",
                description=welcome_message,
                duration_ms=WELCOME_TOAST_DURATION_MS,
            ),
        )

    def _duplicate_account(self, email: str) -> DuplicateAccount:
        return DuplicateAccount(
            email=email,
            navigation=Navigation(
                target_path=ApplicationConfig.LOGIN_PATH,
                state=NavigationState(email=email, message=ACCOUNT_EXISTS_MESSAGE),
            ),
            notification=Notification(
                variant="destructive",
                title="Account Already Exists",
                description=ACCOUNT_EXISTS_MESSAGE,
            ),
        )

    def _unexpected_failure(self, description: str = GENERIC_MESSAGE) -> UnexpectedFailure:
        return UnexpectedFailure(
            notification=Notification(
                variant="destructive",
                title="Error Creating Account",
                description=description,
            )
        )
