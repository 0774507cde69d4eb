"""
Signup form validation.

Pure and synchronous: no I/O, same input always yields the same result.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from libs.result import Error, Result, Return
from .signup_dto import PasswordPolicy, SignupRequest

INVALID_INPUT = "INVALID_INPUT"

PASSWORDS_DONT_MATCH = "Passwords don't match"
TERMS_NOT_ACCEPTED = "You must accept the terms and conditions"

# Field names as the signup form knows them
FORM_FIELDS = {
    "email": "email",
    "password": "password",
    "confirm_password": "confirmPassword",
    "username": "username",
    "full_name": "fullName",
    "role": "role",
    "accept_terms": "acceptTerms",
}

FIELD_MESSAGES = {
    "email": "Invalid email address",
    "role": "Role must be either customer or artist",
    "acceptTerms": TERMS_NOT_ACCEPTED,
}


def _form_field(loc) -> str:
    name = str(loc[0]) if loc else "__root__"
    return FORM_FIELDS.get(name, name)


def _message(field: str, err: Dict[str, Any]) -> str:
    if err["type"] == "missing":
        return FIELD_MESSAGES.get(field, f"{field} is required")
    if err["type"] == "value_error" and field != "email":
        # ValueError raised by our own field validators
        return str(err.get("ctx", {}).get("error", err["msg"]))
    return FIELD_MESSAGES.get(field, err["msg"])


def _raw(data: Mapping[str, Any], field: str) -> Any:
    alias = FORM_FIELDS[field]
    return data[alias] if alias in data else data.get(field)


def validate_signup(
    data: Mapping[str, Any], policy: Optional[PasswordPolicy] = None
) -> Result[SignupRequest]:
    """
    Validate a signup submission.

    Args:
        data: Raw form values (camelCase or snake_case keys)
        policy: Password strength policy, defaults to PasswordPolicy()

    Returns:
        Result[SignupRequest] with trimmed values,
        or Error(INVALID_INPUT) whose details map form field -> message
    """
    policy = policy or PasswordPolicy()
    field_errors: Dict[str, str] = {}
    request = None

    try:
        request = SignupRequest.model_validate(
            dict(data), context={"password_policy": policy}
        )
    except ValidationError as exc:
        for err in exc.errors():
            field = _form_field(err["loc"])
            field_errors.setdefault(field, _message(field, err))

    if _raw(data, "password") != _raw(data, "confirm_password"):
        field_errors.setdefault("confirmPassword", PASSWORDS_DONT_MATCH)

    # Terms violation always replaces any type error on the checkbox
    if _raw(data, "accept_terms") is not True:
        field_errors["acceptTerms"] = TERMS_NOT_ACCEPTED

    if field_errors:
        return Return.err(
            Error(INVALID_INPUT, "Please correct the highlighted fields", field_errors)
        )

    return Return.ok(request)
