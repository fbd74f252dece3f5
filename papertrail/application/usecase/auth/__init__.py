"""Authentication use cases."""

from .federated_login import FederatedLoginUseCase
from .get_current_account import GetCurrentAccountUseCase
from .request_otp import RequestOTPUseCase
from .verify_otp import VerifyOTPUseCase

__all__ = [
    "FederatedLoginUseCase",
    "GetCurrentAccountUseCase",
    "RequestOTPUseCase",
    "VerifyOTPUseCase",
]
