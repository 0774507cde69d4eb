"""
Account & Profile Service backed by a hosted Supabase project.

Profiles are read through the PostgREST API in single-object mode, so an
empty match comes back as the documented no-rows error (PGRST116).
Accounts are created through the GoTrue signup endpoint.
"""

import logging
from typing import Any, Dict, Optional

import httpx

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

logger = logging.getLogger(__name__)

SINGLE_OBJECT = "application/vnd.pgrst.object+json"


def _json(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class SupabaseAccountService(AccountService):
    """AccountService implementation over the Supabase REST and auth APIs"""

    def __init__(self, client: httpx.AsyncClient, base_url: str, api_key: str):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
        }

    async def get_profile_by_email(
        self, email: str
    ) -> Result[Optional[ExistingProfileRecord]]:
        try:
            response = await self.client.get(
                f"{self.base_url}/rest/v1/profiles",
                params={"select": "email", "email": f"eq.{email}"},
                headers={**self.headers, "Accept": SINGLE_OBJECT},
            )
        except httpx.HTTPError as exc:
            logger.error(f"Profile query failed: {exc!r}")
            return Return.err(Error(PROFILE_QUERY_FAILED, str(exc)))

        if response.is_success:
            # Single-object mode: a match is exactly one object
            try:
                row = response.json()
            except ValueError:
                row = None
            if not isinstance(row, dict) or not row.get("email"):
                return Return.err(
                    Error(
                        PROFILE_QUERY_FAILED,
                        "Unexpected profile response",
                        {"status": response.status_code},
                    )
                )
            return Return.ok(ExistingProfileRecord(email=row["email"]))

        body = _json(response)

        # PostgREST error body: {"code", "message", "details", "hint"}
        return Return.err(
            Error(
                body.get("code") or PROFILE_QUERY_FAILED,
                body.get("message") or f"Profile query returned {response.status_code}",
                {"status": response.status_code, "details": body.get("details")},
            )
        )

    async def create_account(
        self, email: str, password: str, metadata: AccountMetadata
    ) -> Result[AccountSession]:
        try:
            response = await self.client.post(
                f"{self.base_url}/auth/v1/signup",
                json={
                    "email": email,
                    "password": password,
                    "data": metadata.model_dump(mode="json"),
                },
                headers=self.headers,
            )
        except httpx.HTTPError as exc:
            logger.error(f"Signup request failed: {exc!r}")
            return Return.err(Error(BACKEND_UNAVAILABLE, str(exc)))

        body = _json(response)
        if not response.is_success:
            message = (
                body.get("msg")
                or body.get("message")
                or body.get("error_description")
                or body.get("error")
                or ""
            )
            return Return.err(
                Error(
                    AUTH_ERROR,
                    message,
                    {"status": response.status_code, "error_code": body.get("error_code")},
                )
            )

        # Session payload when auto-confirm is on, bare user otherwise
        user = body.get("user") or body
        return Return.ok(
            AccountSession(
                user_id=str(user.get("id", "")),
                email=user.get("email") or email,
                access_token=body.get("access_token"),
            )
        )
