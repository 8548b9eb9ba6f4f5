"""Exceptions raised by the Dynalist API client."""

from typing import Any


class DynalistError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(DynalistError, RuntimeError):
    """The client cannot be built, usually because no API token was found."""


class TransportError(DynalistError):
    """The HTTP round trip failed or returned no body."""


class ResponseDecodeError(DynalistError, ValueError):
    """The response body is not a valid API response."""

    def __init__(self, message: str, *, body: Any = None) -> None:
        super().__init__(message)
        self.body = body


class ChangeError(DynalistError, ValueError):
    """A change does not make sense for the endpoint it is sent to."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


class ApiError(DynalistError):
    """The API answered with a non-Ok code.

    Never raised by the client itself; see ``Response.raise_for_code``.
    """

    def __init__(self, code: str, message: str = "") -> None:
        text = f"API returned {code!s}"
        if message:
            text += f": {message}"
        super().__init__(text)
        self.code = code
        self.message = message
