"""Infrastructure errors – transport failures and unexpected responses."""

from __future__ import annotations

from typing import Any

from listfetch.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure raised by a fetch collaborator."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """The remote service could not be reached (DNS, refused, reset, …)."""

    default_code = "connection_error"
    detail_fields = ("resource",)

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class TimeoutError(InfrastructureError):  # noqa: A001
    """A transport operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class SerializationError(InfrastructureError):
    """A response payload could not be decoded."""

    default_code = "serialization_error"
    detail_fields = ("payload_type",)

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """The remote service answered with a non-success status."""

    default_code = "external_service_error"
    detail_fields = ("service", "status_code")

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class ClientError(ExternalServiceError):
    """4xx response; ``message`` is the first message reported by the service."""

    default_code = "client_error"


class ServerError(ExternalServiceError):
    """5xx response."""

    default_code = "server_error"

    def __init__(self, service: str, status_code: int, **kwargs: Any) -> None:
        super().__init__(
            service,
            f"Server error {status_code} from '{service}'",
            status_code=status_code,
            **kwargs,
        )


class InvalidResponseError(ExternalServiceError):
    """The response status is outside the 2xx/4xx/5xx ranges."""

    default_code = "invalid_response"


__all__ = [
    "ClientError",
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidResponseError",
    "SerializationError",
    "ServerError",
    "TimeoutError",
]
