"""SDK-level errors."""

from __future__ import annotations


class SDKError(Exception):
    """Non-2xx answer from a platform service.

    Carries the message returned by the server and the HTTP status code.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"

    def __repr__(self) -> str:
        return f"SDKError(message={self.message!r}, status_code={self.status_code})"


def handle_error(message: str | None, status_code: int) -> SDKError:
    """Build the error raised for a failed request."""

    return SDKError(message or "", status_code)
