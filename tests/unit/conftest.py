import pytest
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return
from src.app.services.account_service import AccountSession


@pytest.fixture
def mock_accounts():
    """Mock AccountService: no existing profile, account creation succeeds"""
    accounts = MagicMock()
    accounts.get_profile_by_email = AsyncMock(return_value=Return.ok(None))
    accounts.create_account = AsyncMock(
        return_value=Return.ok(
            AccountSession(user_id="user-1", email="jane@glam.com", access_token="token")
        )
    )
    return accounts


@pytest.fixture
def signup_form():
    return {
        "email": "jane@glam.com",
        "password": "SecurePass123!",
        "confirmPassword": "SecurePass123!",
        "username": "janeglam",
        "fullName": "Jane Doe",
        "role": "customer",
        "acceptTerms": True,
    }
