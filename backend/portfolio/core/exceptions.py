"""
Business errors raised by the service layer.

Every subclass of PortfolioError is turned into a failure envelope by the
exception handler registered in portfolio.main.
"""


class PortfolioError(Exception):
    """Base class for failures reported to the client as an envelope."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PortfolioError):
    """A required field is missing or a parameter is out of range."""


class DuplicateEntityError(PortfolioError):
    """A unique business key is already taken."""


class DuplicateUserError(DuplicateEntityError):
    def __init__(self, username: str):
        super().__init__(f"User '{username}' already exists")
        self.username = username


class NotFoundError(PortfolioError):
    """The id or code named by an update/delete does not exist."""


class AuthenticationFailed(PortfolioError):
    """Login credentials were rejected."""
