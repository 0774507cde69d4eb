"""
Signup Use Case DTOs (Data Transfer Objects)

Command/Outcome pattern for the signup flow:
- SignupRequest: validated form submission (input to use case)
- SignupOutcome: exactly one tagged outcome per submission (output)
"""

import re
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationInfo,
    field_validator,
)

from src.domain.entities import UserRole


class PasswordPolicy(BaseModel):
    """Password strength policy loaded from configuration"""

    min_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_digit: bool = True
    require_special: bool = False

    @classmethod
    def from_config(cls, config) -> "PasswordPolicy":
        return cls(
            min_length=config.PASSWORD_MIN_LENGTH,
            require_uppercase=config.PASSWORD_REQUIRE_UPPERCASE,
            require_lowercase=config.PASSWORD_REQUIRE_LOWERCASE,
            require_digit=config.PASSWORD_REQUIRE_DIGIT,
            require_special=config.PASSWORD_REQUIRE_SPECIAL,
        )

    def violations(self, password: str) -> List[str]:
        """Return every rule the password breaks, in policy order"""
        problems = []
        if len(password) < self.min_length:
            problems.append(
                f"Password must be at least {self.min_length} characters"
            )
        if self.require_uppercase and not re.search(r"[A-Z]", password):
            problems.append("Password must contain at least one uppercase letter")
        if self.require_lowercase and not re.search(r"[a-z]", password):
            problems.append("Password must contain at least one lowercase letter")
        if self.require_digit and not re.search(r"\d", password):
            problems.append("Password must contain at least one number")
        if self.require_special and not re.search(r"[^A-Za-z0-9]", password):
            problems.append("Password must contain at least one special character")
        return problems


class SignupRequest(BaseModel):
    """
    Signup request - one form submission.

    Accepts the browser's camelCase field names as aliases.
    Cross-field rules (password confirmation, terms acceptance) are
    enforced by validate_signup, which also reports them when other
    fields fail.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: str
    confirm_password: str = Field(alias="confirmPassword")
    username: str
    full_name: str = Field(alias="fullName")
    role: UserRole = UserRole.customer
    accept_terms: bool = Field(default=False, alias="acceptTerms")

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        # Stored and compared lowercase so the exact-match unique key holds
        return value.lower()

    @field_validator("password")
    @classmethod
    def password_meets_policy(cls, value: str, info: ValidationInfo) -> str:
        policy = (info.context or {}).get("password_policy") or PasswordPolicy()
        problems = policy.violations(value)
        if problems:
            raise ValueError(problems[0])
        return value

    @field_validator("username", "full_name")
    @classmethod
    def not_blank(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            label = "Username" if info.field_name == "username" else "Full name"
            raise ValueError(f"{label} is required")
        return value


# ============================================================================
# Outcome DTOs
# ============================================================================


class NavigationState(BaseModel):
    """State handed to the destination view (e.g. pre-filled email)"""

    email: str
    message: str


class Navigation(BaseModel):
    """Redirect instruction performed by the presentation layer"""

    target_path: str
    state: NavigationState


class Notification(BaseModel):
    """Toast shown by the presentation layer"""

    variant: Literal["default", "destructive"] = "default"
    title: str
    description: str
    duration_ms: Optional[int] = None


class SignupSuccess(BaseModel):
    kind: Literal["success"] = "success"
    redirect_path: str
    welcome_message: str
    navigation: Navigation
    notification: Notification


class DuplicateAccount(BaseModel):
    kind: Literal["duplicate_account"] = "duplicate_account"
    email: str
    navigation: Navigation
    notification: Notification


class AuthFailure(BaseModel):
    kind: Literal["auth_failure"] = "auth_failure"
    reason: str
    notification: Notification


class UnexpectedFailure(BaseModel):
    kind: Literal["unexpected_failure"] = "unexpected_failure"
    notification: Notification


class ValidationFailure(BaseModel):
    kind: Literal["validation_failure"] = "validation_failure"
    field_errors: Dict[str, str]
    notification: Notification


SignupOutcome = Annotated[
    Union[
        SignupSuccess,
        DuplicateAccount,
        AuthFailure,
        UnexpectedFailure,
        ValidationFailure,
    ],
    Field(discriminator="kind"),
]


# ============================================================================
# Error classification DTOs
# ============================================================================


class AuthErrorInfo(BaseModel):
    """Authentication error as reported by the account service"""

    status: Optional[int] = None
    code: Optional[str] = None
    message: str = ""


class ClassifiedReason(BaseModel):
    """User-facing category of an authentication error"""

    already_registered: bool = False
    message: str
