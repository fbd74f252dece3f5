"""Federated authentication domain service."""

from papertrail.domain.value import FederatedIdentity

from .base import Service


class OAuthClient:
    """OAuth client interface for external identity providers."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str, state: str) -> FederatedIdentity:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Identity asserted by the provider
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for the Google sign-in redirect flow."""

    def __init__(self, oauth_client: OAuthClient) -> None:
        """Initialize auth service.

        Args:
            oauth_client: Provider client implementation
        """
        self.oauth_client = oauth_client

    async def initiate_login(self, state: str) -> str:
        """Build the provider authorization URL for a new login."""
        return await self.oauth_client.initiate_authorization(state)

    async def complete_login(self, code: str, state: str) -> FederatedIdentity:
        """Exchange the callback code for the provider's identity assertion."""
        return await self.oauth_client.complete_authorization(code, state)
