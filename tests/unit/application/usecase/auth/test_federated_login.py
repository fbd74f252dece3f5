"""Unit tests for FederatedLoginUseCase."""

import pytest
from dishka import AsyncContainer

from papertrail.adapter.google import GoogleOAuthError
from papertrail.application.usecase.auth import FederatedLoginUseCase
from papertrail.application.usecase.auth.federated_login import FederatedLoginRequest
from papertrail.domain.repository import AccountRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

# MockGoogleOAuthClient asserts this identity
MOCK_EMAIL = "mock.user@gmail.com"
MOCK_SUBJECT = "mock-google-123"


class TestFederatedLoginUseCase:
    @pytest.mark.asyncio
    async def test_new_identity_creates_verified_account(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(FederatedLoginUseCase)
        repo = await unit_env.get(AccountRepository)

        response = await use_case.execute(FederatedLoginRequest(code="c", state="s"))

        account = await repo.find_by_federated_id(MOCK_SUBJECT)
        assert account is not None
        assert account.email == MOCK_EMAIL
        assert account.name == "Mock Google User"
        assert account.is_verified is True
        assert response.account.account_id == str(account.id)
        assert response.token

    @pytest.mark.asyncio
    async def test_existing_email_account_is_linked(self, unit_env: AsyncContainer):
        """An OTP account with the same email gains the Google identity."""
        use_case = await unit_env.get(FederatedLoginUseCase)
        repo = await unit_env.get(AccountRepository)
        existing, _ = await repo.find_or_create(MOCK_EMAIL, name="Mock")

        response = await use_case.execute(FederatedLoginRequest(code="c", state="s"))

        linked = await repo.find_by_id(existing.id)
        assert linked.federated_id == MOCK_SUBJECT
        assert linked.is_verified is True
        assert linked.name == "Mock"
        assert response.account.account_id == str(existing.id)

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(FederatedLoginUseCase)
        repo = await unit_env.get(AccountRepository)

        with pytest.raises(GoogleOAuthError):
            await use_case.execute(FederatedLoginRequest(code="fail", state="s"))

        assert await repo.find_by_email(MOCK_EMAIL) is None
