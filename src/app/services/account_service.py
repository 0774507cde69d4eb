from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from libs.result import Result
from src.domain.entities import UserRole

# Documented "no rows" code of the profile store (PostgREST single-object mode)
NO_ROWS_CODE = "PGRST116"

# Error codes returned by AccountService implementations
AUTH_ERROR = "AUTH_ERROR"
PROFILE_QUERY_FAILED = "PROFILE_QUERY_FAILED"
BACKEND_UNAVAILABLE = "BACKEND_UNAVAILABLE"


class ExistingProfileRecord(BaseModel):
    """Minimal projection of a profile row used for duplicate detection"""

    email: str


class AccountMetadata(BaseModel):
    """Profile metadata stored with a new account"""

    full_name: str
    username: str
    role: UserRole


class AccountSession(BaseModel):
    """Session handed back by the service after account creation"""

    user_id: str
    email: str
    access_token: Optional[str] = None


class AccountService(ABC):
    """
    Account & Profile Service port - application layer

    Error contract:
    - get_profile_by_email: Ok(None) or Err(NO_ROWS_CODE) when no profile
      matches; any other Err is a genuine query failure.
    - create_account: Err(AUTH_ERROR) with details {"status", "error_code"}
      for errors reported by the auth API; any other code means the call
      itself failed.
    """

    @abstractmethod
    async def get_profile_by_email(
        self, email: str
    ) -> Result[Optional[ExistingProfileRecord]]:
        """Get the profile registered with an email address"""
        pass

    @abstractmethod
    async def create_account(
        self, email: str, password: str, metadata: AccountMetadata
    ) -> Result[AccountSession]:
        """Create an account with profile metadata"""
        pass
