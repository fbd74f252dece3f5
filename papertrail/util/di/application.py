"""Application layer DI providers."""

from dishka import Scope, provide

from papertrail.application.usecase.auth import (
    FederatedLoginUseCase,
    GetCurrentAccountUseCase,
    RequestOTPUseCase,
    VerifyOTPUseCase,
)
from papertrail.application.usecase.note import (
    CreateNoteUseCase,
    DeleteNoteUseCase,
    ListNotesUseCase,
)
from papertrail.domain.service import (
    AuthService,
    IdentityService,
    NoteService,
    OTPService,
    SessionService,
)
from papertrail.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_request_otp_use_case(self, otp_service: OTPService) -> RequestOTPUseCase:
        """Provide request OTP use case."""
        return RequestOTPUseCase(otp_service=otp_service)

    @provide(scope=Scope.REQUEST)
    def get_verify_otp_use_case(
        self, otp_service: OTPService, session_service: SessionService
    ) -> VerifyOTPUseCase:
        """Provide verify OTP use case."""
        return VerifyOTPUseCase(
            otp_service=otp_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_federated_login_use_case(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        session_service: SessionService,
    ) -> FederatedLoginUseCase:
        """Provide federated login use case."""
        return FederatedLoginUseCase(
            auth_service=auth_service,
            identity_service=identity_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_account_use_case(
        self, session_service: SessionService, identity_service: IdentityService
    ) -> GetCurrentAccountUseCase:
        """Provide get current account use case."""
        return GetCurrentAccountUseCase(
            session_service=session_service, identity_service=identity_service
        )

    # Note use cases
    @provide(scope=Scope.REQUEST)
    def get_create_note_use_case(self, note_service: NoteService) -> CreateNoteUseCase:
        """Provide create note use case."""
        return CreateNoteUseCase(note_service=note_service)

    @provide(scope=Scope.REQUEST)
    def get_list_notes_use_case(self, note_service: NoteService) -> ListNotesUseCase:
        """Provide list notes use case."""
        return ListNotesUseCase(note_service=note_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_note_use_case(self, note_service: NoteService) -> DeleteNoteUseCase:
        """Provide delete note use case."""
        return DeleteNoteUseCase(note_service=note_service)
