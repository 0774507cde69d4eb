"""
Account & Profile Service backed by the application's own database.

Mirrors the hosted auth API's error contract so the signup flow behaves
the same against either backend.
"""

import logging
from typing import Optional

import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.account_service import (
    AUTH_ERROR,
    BACKEND_UNAVAILABLE,
    PROFILE_QUERY_FAILED,
    AccountMetadata,
    AccountService,
    AccountSession,
    ExistingProfileRecord,
)
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, Profile

logger = logging.getLogger(__name__)


def already_registered() -> Error:
    return Error(
        AUTH_ERROR,
        "User already registered",
        {"status": 422, "error_code": "user_already_exists"},
    )


class LocalAccountService(AccountService):
    """AccountService implementation using SQLModel repositories"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get_profile_by_email(
        self, email: str
    ) -> Result[Optional[ExistingProfileRecord]]:
        try:
            async with self.uow:
                profile = await self.uow.profiles.get_by_email(email)
        except SQLAlchemyError as exc:
            logger.error(f"Profile query failed: {exc}")
            return Return.err(Error(PROFILE_QUERY_FAILED, str(exc)))

        if profile is None:
            return Return.ok(None)
        return Return.ok(ExistingProfileRecord(email=profile.email))

    async def create_account(
        self, email: str, password: str, metadata: AccountMetadata
    ) -> Result[AccountSession]:
        try:
            async with self.uow:
                if await self.uow.accounts.get_by_email(email) is not None:
                    return Return.err(already_registered())

                # Hash password with bcrypt cost factor 12
                password_hash = bcrypt.hashpw(
                    password.encode("utf-8"), bcrypt.gensalt(12)
                )

                account = await self.uow.accounts.create(
                    Account(
                        email=email,
                        password_hash=password_hash.decode("utf-8"),
                        user_metadata=metadata.model_dump(mode="json"),
                    )
                )
                await self.uow.profiles.create(
                    Profile(
                        id=account.id,
                        email=email,
                        username=metadata.username,
                        full_name=metadata.full_name,
                        role=metadata.role,
                    )
                )
                session = AccountSession(
                    user_id=str(account.id),
                    email=account.email,
                    access_token=generate_jwt(
                        account.id, account.email, metadata.role.value
                    ),
                )

                await self.uow.commit()
        except IntegrityError:
            # Concurrent signup won the unique constraint
            return Return.err(already_registered())
        except SQLAlchemyError as exc:
            logger.error(f"Account creation failed: {exc}")
            return Return.err(Error(BACKEND_UNAVAILABLE, str(exc)))

        return Return.ok(session)
