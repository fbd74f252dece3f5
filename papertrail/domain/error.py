"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or malformed input, detected before the store is touched."""

    pass


class AccountNotFoundError(DomainError):
    """Raised when no account matches the given email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"No account found for {email}")


class InvalidOrExpiredOTPError(DomainError):
    """Raised for any failed passcode verification.

    Missing, mismatched and expired codes all raise this same error so callers
    cannot tell which check failed.
    """

    def __init__(self) -> None:
        super().__init__("Invalid or expired OTP")


class DeliveryFailedError(DomainError):
    """Raised when a passcode could not be handed to the delivery channel."""

    pass


class DuplicateAccountError(DomainError):
    """Raised when a write would violate email or federated ID uniqueness."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"An account with {field} {value} already exists")


class UnverifiedAccountError(DomainError):
    """Raised when a session is requested for an account that is not verified."""

    def __init__(self, account_id: str):
        super().__init__(f"Account {account_id} is not verified")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
