"""Authentication errors.

The core raises these; the HTTP layer turns them into JSON responses.
"""


class AuthError(Exception):
    """Base exception for all authentication failures."""

    status_code = 400
    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UserAlreadyExistsError(AuthError):
    """Raised when signing up with an email that is already registered."""

    status_code = 409
    default_message = "User already exists with this email"

    def __init__(self, email: str | None = None):
        self.email = email
        super().__init__()


class InvalidCredentialsError(AuthError):
    """Raised on signin for an unknown email or a wrong password.

    Both cases share one message so callers cannot tell them apart.
    """

    status_code = 401
    default_message = "Invalid credentials"

    def __init__(self):
        super().__init__()


class UnauthorizedError(AuthError):
    """Raised when a request carries no usable identity."""

    status_code = 401
    default_message = "Unauthorized"


class InvalidTokenError(ValueError):
    """Raised by the token verifier for malformed, tampered or expired tokens."""

    pass
