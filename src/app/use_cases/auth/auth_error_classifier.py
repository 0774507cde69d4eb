"""
Authentication error classification.

Translates errors reported by the auth API into stable, user-facing
messages. Classification never raises.
"""

import logging

from .signup_dto import AuthErrorInfo, ClassifiedReason

logger = logging.getLogger(__name__)

ALREADY_REGISTERED_STATUS = 422
ALREADY_REGISTERED_MARKER = "user already registered"

GENERIC_MESSAGE = "An unexpected error occurred. Please try again."

ERROR_MESSAGES = {
    "invalid_credentials": "Invalid email or password. Please check your credentials and try again.",
    "email_not_confirmed": "Please verify your email address before signing in.",
    "user_not_found": "No user found with these credentials.",
    "weak_password": "Password is too weak. Please choose a stronger password.",
    "email_address_invalid": "Please enter a valid email address.",
    "validation_failed": "Please check your input and try again.",
    "over_email_send_rate_limit": "Too many attempts. Please wait a moment and try again.",
    "over_request_rate_limit": "Too many attempts. Please wait a moment and try again.",
    "signup_disabled": "New signups are currently disabled.",
    "email_provider_disabled": "Email signups are currently disabled.",
}

# Older auth API versions report no code, only message text
MESSAGE_CODES = {
    "invalid login credentials": "invalid_credentials",
    "email not confirmed": "email_not_confirmed",
    "password should be at least": "weak_password",
    "unable to validate email address": "email_address_invalid",
    "email rate limit exceeded": "over_email_send_rate_limit",
    "signups not allowed": "signup_disabled",
}


def is_already_registered(error: AuthErrorInfo) -> bool:
    return (
        error.status == ALREADY_REGISTERED_STATUS
        and ALREADY_REGISTERED_MARKER in (error.message or "").lower()
    )


def error_message(error: AuthErrorInfo) -> str:
    """Look up the human-readable message for an auth error"""
    if error.code and error.code in ERROR_MESSAGES:
        return ERROR_MESSAGES[error.code]

    text = (error.message or "").lower()
    for marker, code in MESSAGE_CODES.items():
        if marker in text:
            return ERROR_MESSAGES[code]

    return GENERIC_MESSAGE


def classify_auth_error(error: AuthErrorInfo) -> ClassifiedReason:
    """
    Classify an auth API error.

    Args:
        error: Status, code and message reported by the auth API

    Returns:
        ClassifiedReason with already_registered set for the
        422 "User already registered" conflict, else a displayable message
    """
    try:
        if is_already_registered(error):
            return ClassifiedReason(
                already_registered=True,
                message="An account with this email already exists. Please login instead.",
            )
        return ClassifiedReason(message=error_message(error))
    except Exception:
        logger.exception("Failed to classify auth error")
        return ClassifiedReason(message=GENERIC_MESSAGE)
