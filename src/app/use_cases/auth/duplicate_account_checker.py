"""
Duplicate-account detection against the profile store.
"""

import logging
from dataclasses import dataclass
from typing import Union

from libs.result import Error
from src.app.services.account_service import (
    NO_ROWS_CODE,
    AccountService,
    ExistingProfileRecord,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Found:
    record: ExistingProfileRecord


@dataclass(frozen=True)
class QueryFailed:
    cause: Error


DuplicateCheck = Union[NotFound, Found, QueryFailed]


class DuplicateAccountChecker:
    """
    Looks up an existing profile for a validated email.

    Only the store's documented no-rows code counts as NotFound;
    every other error is QueryFailed.
    """

    def __init__(self, accounts: AccountService):
        self.accounts = accounts

    async def check(self, email: str) -> DuplicateCheck:
        result = await self.accounts.get_profile_by_email(email)

        if result.is_err():
            if result.error.code == NO_ROWS_CODE:
                return NotFound()
            logger.error(
                f"Profile lookup failed: {result.error.code} {result.error.message}"
            )
            return QueryFailed(result.error)

        if result.value is None:
            return NotFound()
        return Found(result.value)
