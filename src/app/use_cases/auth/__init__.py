"""
Authentication Use Cases

Signup orchestration and its building blocks.
"""

from .signup_use_case import SignupUseCase
from .signup_validation import validate_signup
from .auth_error_classifier import classify_auth_error
from .duplicate_account_checker import (
    DuplicateAccountChecker,
    Found,
    NotFound,
    QueryFailed,
)
from .signup_dto import (
    AuthErrorInfo,
    AuthFailure,
    ClassifiedReason,
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

__all__ = [
    # Use Cases
    "SignupUseCase",
    "validate_signup",
    "classify_auth_error",
    "DuplicateAccountChecker",
    # Duplicate check results
    "Found",
    "NotFound",
    "QueryFailed",
    # DTOs - Input
    "SignupRequest",
    "PasswordPolicy",
    # DTOs - Outcomes
    "SignupOutcome",
    "SignupSuccess",
    "DuplicateAccount",
    "AuthFailure",
    "UnexpectedFailure",
    "ValidationFailure",
    # DTOs - Nested Models
    "Navigation",
    "NavigationState",
    "Notification",
    "AuthErrorInfo",
    "ClassifiedReason",
]
