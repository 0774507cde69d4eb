import json

import httpx
import pytest

from src.adapter.services.supabase_account_service import SupabaseAccountService
from src.app.services.account_service import (
    AUTH_ERROR,
    BACKEND_UNAVAILABLE,
    NO_ROWS_CODE,
    PROFILE_QUERY_FAILED,
    AccountMetadata,
)
from src.app.use_cases.auth import (
    DuplicateAccount,
    DuplicateAccountChecker,
    QueryFailed,
    SignupSuccess,
    SignupUseCase,
)
from src.domain.entities import UserRole

BASE_URL = "https://glam.supabase.co"
API_KEY = "anon-key"
METADATA = AccountMetadata(full_name="Jane Doe", username="janeglam", role=UserRole.customer)


def make_service(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SupabaseAccountService(client, BASE_URL, API_KEY)


@pytest.mark.asyncio
async def test_profile_lookup_request(test_data):
    requests = []

    def handler(request: httpx.Request):
        requests.append(request)
        return httpx.Response(200, json=test_data.get("supabase_profile"))

    result = await make_service(handler).get_profile_by_email("jane@glam.com")

    assert result.is_ok()
    assert result.value.email == "jane@glam.com"

    request = requests[0]
    assert request.url.path == "/rest/v1/profiles"
    assert request.url.params["select"] == "email"
    assert request.url.params["email"] == "eq.jane@glam.com"
    assert request.headers["accept"] == "application/vnd.pgrst.object+json"
    assert request.headers["apikey"] == API_KEY
    assert request.headers["authorization"] == f"Bearer {API_KEY}"


@pytest.mark.asyncio
async def test_no_rows_is_reported_with_documented_code(test_data):
    service = make_service(
        lambda request: httpx.Response(406, json=test_data.get("supabase_no_rows"))
    )

    result = await service.get_profile_by_email("jane@glam.com")

    assert result.is_err()
    assert result.error.code == NO_ROWS_CODE


@pytest.mark.asyncio
async def test_query_error_keeps_store_code(test_data):
    service = make_service(
        lambda request: httpx.Response(404, json=test_data.get("supabase_missing_table"))
    )

    result = await service.get_profile_by_email("jane@glam.com")

    assert result.is_err()
    assert result.error.code == "42P01"
    assert result.error.details["status"] == 404


@pytest.mark.asyncio
async def test_unreachable_store_is_query_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = await make_service(handler).get_profile_by_email("jane@glam.com")

    assert result.is_err()
    assert result.error.code == PROFILE_QUERY_FAILED


@pytest.mark.asyncio
async def test_signup_request_carries_metadata(test_data):
    requests = []

    def handler(request: httpx.Request):
        requests.append(request)
        return httpx.Response(200, json=test_data.get("supabase_signup_session"))

    result = await make_service(handler).create_account(
        "jane@glam.com", "SecurePass123!", METADATA
    )

    assert result.is_ok()
    assert result.value.user_id == "8f14e45f-ceea-467f-a0e6-2b1c4bd0c0a1"
    assert result.value.access_token == "eyJhbGciOiJIUzI1NiJ9.session"

    request = requests[0]
    assert request.method == "POST"
    assert request.url.path == "/auth/v1/signup"
    assert json.loads(request.content) == {
        "email": "jane@glam.com",
        "password": "SecurePass123!",
        "data": {"full_name": "Jane Doe", "username": "janeglam", "role": "customer"},
    }


@pytest.mark.asyncio
async def test_signup_pending_confirmation_has_no_token(test_data):
    service = make_service(
        lambda request: httpx.Response(200, json=test_data.get("supabase_signup_user"))
    )

    result = await service.create_account("jane@glam.com", "SecurePass123!", METADATA)

    assert result.is_ok()
    assert result.value.email == "jane@glam.com"
    assert result.value.access_token is None


@pytest.mark.asyncio
async def test_signup_auth_error_keeps_status_and_code(test_data):
    service = make_service(
        lambda request: httpx.Response(422, json=test_data.get("supabase_already_registered"))
    )

    result = await service.create_account("jane@glam.com", "SecurePass123!", METADATA)

    assert result.is_err()
    assert result.error.code == AUTH_ERROR
    assert result.error.message == "User already registered"
    assert result.error.details == {"status": 422, "error_code": "user_already_exists"}


@pytest.mark.asyncio
async def test_signup_transport_error_is_backend_unavailable():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    result = await make_service(handler).create_account(
        "jane@glam.com", "SecurePass123!", METADATA
    )

    assert result.is_err()
    assert result.error.code == BACKEND_UNAVAILABLE


@pytest.mark.asyncio
async def test_flow_treats_no_rows_as_new_account(test_data):
    def handler(request: httpx.Request):
        if request.url.path == "/rest/v1/profiles":
            return httpx.Response(406, json=test_data.get("supabase_no_rows"))
        return httpx.Response(200, json=test_data.get("supabase_signup_session"))

    outcome = await SignupUseCase(make_service(handler)).execute(
        test_data.get("customer_signup")
    )

    assert isinstance(outcome, SignupSuccess)


@pytest.mark.asyncio
async def test_flow_maps_already_registered_to_duplicate(test_data):
    def handler(request: httpx.Request):
        if request.url.path == "/rest/v1/profiles":
            return httpx.Response(406, json=test_data.get("supabase_no_rows"))
        return httpx.Response(422, json=test_data.get("supabase_already_registered"))

    outcome = await SignupUseCase(make_service(handler)).execute(
        test_data.get("customer_signup")
    )

    assert isinstance(outcome, DuplicateAccount)
    assert outcome.navigation.target_path == "/login"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [[{"email": "a@x.com"}], [], {"id": "8f14e45f"}, "a@x.com"],
)
async def test_non_object_profile_response_is_query_failure(body):
    service = make_service(lambda request: httpx.Response(200, json=body))

    result = await service.get_profile_by_email("a@x.com")

    assert result.is_err()
    assert result.error.code == PROFILE_QUERY_FAILED
    assert result.error.details == {"status": 200}


@pytest.mark.asyncio
async def test_row_list_response_is_never_reported_as_not_found():
    service = make_service(
        lambda request: httpx.Response(200, json=[{"email": "a@x.com"}])
    )

    check = await DuplicateAccountChecker(service).check("a@x.com")

    assert isinstance(check, QueryFailed)
