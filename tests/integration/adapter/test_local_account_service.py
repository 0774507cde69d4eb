import pytest

import src.adapter.services.local_account_service as local_account_service
from src.api.utils.jwt import verify_jwt
from src.app.services.account_service import AUTH_ERROR, AccountMetadata
from src.domain.entities import Account, Profile, UserRole

METADATA = AccountMetadata(full_name="Jane Doe", username="janeglam", role=UserRole.artist)


@pytest.mark.asyncio
async def test_unknown_email_has_no_profile(local_accounts):
    result = await local_accounts.get_profile_by_email("nobody@glam.com")

    assert result.is_ok()
    assert result.value is None


@pytest.mark.asyncio
async def test_created_account_is_found_by_email(local_accounts):
    created = await local_accounts.create_account("jane@glam.com", "SecurePass123!", METADATA)

    assert created.is_ok()
    session = created.value
    assert session.email == "jane@glam.com"
    claims = verify_jwt(session.access_token)
    assert claims["sub"] == session.user_id
    assert claims["role"] == "artist"

    result = await local_accounts.get_profile_by_email("jane@glam.com")
    assert result.is_ok()
    assert result.value.email == "jane@glam.com"


@pytest.mark.asyncio
async def test_profile_lookup_is_exact_match(local_accounts):
    await local_accounts.create_account("jane@glam.com", "SecurePass123!", METADATA)

    result = await local_accounts.get_profile_by_email("JANE@glam.com")

    assert result.is_ok()
    assert result.value is None


@pytest.mark.asyncio
async def test_second_account_for_email_is_already_registered(local_accounts):
    await local_accounts.create_account("jane@glam.com", "SecurePass123!", METADATA)

    result = await local_accounts.create_account("jane@glam.com", "OtherPass123!", METADATA)

    assert result.is_err()
    assert result.error.code == AUTH_ERROR
    assert result.error.message == "User already registered"
    assert result.error.details["status"] == 422


@pytest.mark.asyncio
async def test_profile_unique_key_conflict_is_already_registered(local_accounts, db_session):
    """A profile committed by a concurrent signup wins the unique constraint"""
    other = Account(email="someone-else@glam.com", password_hash="hashed")
    db_session.add(other)
    await db_session.flush()
    db_session.add(
        Profile(id=other.id, email="jane@glam.com", username="jane", full_name="Jane")
    )
    await db_session.commit()

    result = await local_accounts.create_account("jane@glam.com", "SecurePass123!", METADATA)

    assert result.is_err()
    assert result.error.code == AUTH_ERROR
    assert result.error.message == "User already registered"
    assert result.error.details["status"] == 422


@pytest.mark.asyncio
async def test_token_failure_leaves_no_account(local_accounts, monkeypatch):
    def broken_jwt(*args):
        raise RuntimeError("signing key unavailable")

    monkeypatch.setattr(local_account_service, "generate_jwt", broken_jwt)

    with pytest.raises(RuntimeError):
        await local_accounts.create_account("jane@glam.com", "SecurePass123!", METADATA)

    result = await local_accounts.get_profile_by_email("jane@glam.com")
    assert result.is_ok()
    assert result.value is None
