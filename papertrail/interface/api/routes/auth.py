"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from papertrail.adapter.error import ProviderError
from papertrail.application.usecase.auth import (
    FederatedLoginUseCase,
    GetCurrentAccountUseCase,
    RequestOTPUseCase,
    VerifyOTPUseCase,
)
from papertrail.application.usecase.auth.account_info import AccountInfo
from papertrail.application.usecase.auth.federated_login import FederatedLoginRequest
from papertrail.application.usecase.auth.get_current_account import (
    GetCurrentAccountRequest,
)
from papertrail.application.usecase.auth.request_otp import (
    RequestOTPRequest,
    RequestOTPResponse,
)
from papertrail.application.usecase.auth.verify_otp import (
    VerifyOTPRequest,
    VerifyOTPResponse,
)
from papertrail.config import Settings
from papertrail.domain.error import (
    AccountNotFoundError,
    DeliveryFailedError,
    DomainError,
    DuplicateAccountError,
    InvalidOrExpiredOTPError,
    NotFoundError,
    ValidationError,
)
from papertrail.domain.service import AuthService
from papertrail.interface.api.security import extract_bearer_token, unauthorized
from papertrail.util.jwt import SessionTokenError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post("/request-otp", response_model=RequestOTPResponse)
async def request_otp(
    request: RequestOTPRequest,
    request_otp_use_case: FromDishka[RequestOTPUseCase],
):
    """Issue a one-time passcode and email it.

    ``mode=signup`` creates the account if needed and requires ``name`` and
    ``dob``. ``mode=login`` requires an existing account.

    Example:
        POST /auth/request-otp
        {"email": "alice@example.com", "mode": "signup", "name": "Alice", "dob": "1990-04-01"}

        Response:
        {"ok": true, "message": "OTP sent to your email"}
    """
    try:
        return await request_otp_use_case.execute(request)
    except DeliveryFailedError:
        logger.error(f"OTP delivery failed for {request.email}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Could not send code"
        )
    except AccountNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateAccountError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/verify-otp", response_model=VerifyOTPResponse)
async def verify_otp(
    request: VerifyOTPRequest,
    verify_otp_use_case: FromDishka[VerifyOTPUseCase],
) -> VerifyOTPResponse:
    """Redeem a passcode for a session token.

    Example:
        POST /auth/verify-otp
        {"email": "alice@example.com", "otp": "482913"}

        Response:
        {"token": "eyJ...", "expires_at": "...", "account": {...}}
    """
    try:
        return await verify_otp_use_case.execute(request)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidOrExpiredOTPError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/google")
async def google_login(auth_service: FromDishka[AuthService]) -> RedirectResponse:
    """Redirect the browser to Google's consent screen."""
    state = secrets.token_urlsafe(32)
    auth_url = await auth_service.initiate_login(state)
    logger.info("Redirecting to Google for sign-in")
    return RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)


@router.get("/google/callback")
async def google_callback(
    federated_login_use_case: FromDishka[FederatedLoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Handle Google's redirect and complete sign-in.

    On success the browser is sent to the frontend with the session token in
    the query string; any failure sends it to the frontend's auth page with
    ``error=oauth_failed``.

    Example:
        GET /auth/google/callback?code=abc123&state=xyz789

        Redirects to: http://localhost:8080/auth/callback?token=eyJ...
    """
    failure_url = f"{settings.api.frontend_url}/auth?error=oauth_failed"

    if error or not code or not state:
        logger.warning(f"Google callback without a usable code: error={error}")
        return RedirectResponse(url=failure_url, status_code=status.HTTP_302_FOUND)

    try:
        login_response = await federated_login_use_case.execute(
            FederatedLoginRequest(code=code, state=state)
        )
    except (ProviderError, DomainError) as e:
        logger.error(f"Google sign-in failed: {e}")
        return RedirectResponse(url=failure_url, status_code=status.HTTP_302_FOUND)

    logger.info(f"Google sign-in successful for {login_response.account.account_id}")
    query = urlencode({"token": login_response.token})
    return RedirectResponse(
        url=f"{settings.api.frontend_url}/auth/callback?{query}",
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/me", response_model=AccountInfo)
async def get_current_account(
    get_current_account_use_case: FromDishka[GetCurrentAccountUseCase],
    authorization: str | None = Header(default=None),
) -> AccountInfo:
    """Return the account behind the bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid, or its account is gone
    """
    try:
        return await get_current_account_use_case.execute(
            GetCurrentAccountRequest(token=extract_bearer_token(authorization))
        )
    except (SessionTokenError, NotFoundError):
        raise unauthorized()


@router.post("/logout", response_model=LogoutResponse)
async def logout() -> LogoutResponse:
    """Acknowledge logout.

    Sessions are stateless, so the client ends one by discarding its token.
    """
    return LogoutResponse(success=True, message="Successfully logged out")
