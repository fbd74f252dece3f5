"""Google OAuth 2.0 client implementation.

Implements the OpenID Connect authorization code flow with PKCE and reads
the verified email from the userinfo endpoint.
"""

from urllib.parse import urlencode

import httpx
import logfire

from papertrail.adapter.error import ProviderError
from papertrail.adapter.google.pkce import generate_pkce_pair
from papertrail.domain.service.auth_service import OAuthClient
from papertrail.domain.value import FederatedIdentity


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client with PKCE support."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
            timeout: HTTP timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout

        self.authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
        self.token_url = "https://oauth2.googleapis.com/token"
        self.user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

        # PKCE verifiers per state, held in process memory
        self._pkce_verifiers: dict[str, str] = {}

    async def initiate_authorization(self, state: str) -> str:
        """Initiate Google OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        code_verifier, code_challenge = generate_pkce_pair()
        self._pkce_verifiers[state] = code_verifier

        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "openid email profile",
            "state": state,
            "code_challenge": code_challenge,
            "code_challenge_method": "S256",
            "prompt": "select_account",
        }

        auth_url = f"{self.authorize_url}?{urlencode(params)}"

        logfire.info(
            "Google OAuth authorization initiated",
            state=state,
            redirect_uri=self.redirect_uri,
        )

        return auth_url

    async def complete_authorization(self, code: str, state: str) -> FederatedIdentity:
        """Complete Google OAuth authorization flow.

        Args:
            code: Authorization code from Google callback
            state: State parameter for verification

        Returns:
            Identity asserted by Google

        Raises:
            GoogleOAuthError: If the flow fails or Google has not verified the email
        """
        code_verifier = self._pkce_verifiers.pop(state, None)
        if not code_verifier:
            raise GoogleOAuthError("Invalid state or PKCE verifier not found")

        access_token = await self._exchange_code_for_token(code, code_verifier)
        user_info = await self._get_user_info(access_token)

        email = user_info.get("email")
        if not email or not user_info.get("email_verified", False):
            logfire.warn(
                "Google account has no verified email", subject=user_info.get("sub")
            )
            raise GoogleOAuthError("Google account email is not verified")

        logfire.info("Google OAuth completed", subject=user_info["sub"])

        return FederatedIdentity(
            external_id=user_info["sub"],
            email=email,
            display_name=user_info.get("name"),
        )

    async def _exchange_code_for_token(self, code: str, code_verifier: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code_verifier": code_verifier,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                return response.json()["access_token"]

        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}")

    async def _get_user_info(self, access_token: str) -> dict:
        """Get the OpenID Connect userinfo claims.

        Raises:
            GoogleOAuthError: If the request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google userinfo request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"User info request failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("Google userinfo HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}")


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns a configurable identity without making real API calls. The callback
    code ``"fail"`` simulates a provider-side failure.
    """

    def __init__(self, identity: FederatedIdentity | None = None):
        """Initialize mock client.

        Args:
            identity: Identity to assert on every completed login
        """
        self.identity = identity or FederatedIdentity(
            external_id="mock-google-123",
            email="mock.user@gmail.com",
            display_name="Mock Google User",
        )

    async def initiate_authorization(self, state: str) -> str:
        return f"https://accounts.google.com/o/oauth2/v2/auth?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> FederatedIdentity:
        if code == "fail":
            raise GoogleOAuthError("Mock provider rejected the code")
        return self.identity
