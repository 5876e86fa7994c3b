"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class AccountAlreadyExistsError(AccountError):
    """Raised when the email or username of a new account is already taken."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"{field} already registered: {value}")
        self.field = field
        self.value = value


class InvalidCredentialsError(AccountError):
    """Raised when an email/password pair does not match a stored account."""
