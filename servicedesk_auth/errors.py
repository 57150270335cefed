"""Errors raised while authenticating against the service desk."""

from __future__ import annotations

from typing import Optional


class AuthError(Exception):
    """Base class for every login failure."""

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(message)
        self.details = details


class AuthenticationFailedError(AuthError):
    """The service desk rejected the credentials."""

    def __init__(self, details: str, status_code: Optional[int] = None) -> None:
        status = f" (status {status_code})" if status_code is not None else ""
        super().__init__(f"Authentication failed{status}: {details}", details)
        self.status_code = status_code


class ManualLoginRequiredError(AuthError):
    """The service desk wants an interactive browser login first."""

    def __init__(self, details: str) -> None:
        super().__init__(
            "Login failed. Please log in manually in the browser to initialise the session. "
            f"Details: {details}",
            details,
        )


class TransportError(AuthError):
    """The HTTP request never produced a response."""

    def __init__(self, details: str) -> None:
        super().__init__(f"HTTP request failed: {details}", details)


class ResponseDecodeError(AuthError):
    """A successful response carried a body we could not read."""

    def __init__(self, details: str) -> None:
        super().__init__(f"Could not decode login response: {details}", details)


class UserInfoMissingError(AuthError):
    """A required user attribute was absent or invalid in the login response."""

    def __init__(self, details: str) -> None:
        super().__init__(f"User info field missing or invalid: {details}", details)
