"""Application-layer errors – misuse of the library rather than I/O failure."""

from __future__ import annotations

from typing import Any

from listfetch.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidRequestError(ApplicationError):
    """A request could not be built (malformed URL, unsupported scheme, …)."""

    default_code = "invalid_request"


class ControllerClosedError(ApplicationError):
    """An operation was invoked on a controller that has been closed."""

    default_code = "controller_closed"
    detail_fields = ("name",)

    def __init__(
        self,
        name: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Controller '{name}' is closed", **kwargs)
        self.name = name


__all__ = [
    "ApplicationError",
    "ControllerClosedError",
    "InvalidRequestError",
]
