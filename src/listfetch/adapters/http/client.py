"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from listfetch.kernel.errors import (
    ClientError,
    ConnectionError as AppConnectionError,
    InvalidRequestError,
    InvalidResponseError,
    SerializationError,
    ServerError,
    TimeoutError as AppTimeoutError,
)

_NO_MESSAGE = "No error message found"


def _client_error_message(response: httpx.Response) -> str:
    """Extract the service's message from a 4xx body, tolerating any shape."""
    try:
        body = response.json()
    except ValueError:
        return _NO_MESSAGE
    if not isinstance(body, dict):
        return _NO_MESSAGE
    message = body.get("message")
    if isinstance(message, list):
        message = message[0] if message else None
    if message:
        return str(message)
    error = body.get("error")
    if error:
        return str(error)
    return _NO_MESSAGE


class HttpxHttpClient:
    """Thin async httpx wrapper that decodes JSON and maps failures to kernel errors."""

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        kwargs.setdefault("headers", {"accept": "application/json"})
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self._request("GET", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request timed out: {method} {url}") from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise InvalidRequestError(f"Invalid request: {method} {url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise AppConnectionError(resource=url, message=str(exc) or None) from exc
        return self._decode(method, url, response)

    def _decode(self, method: str, url: str, response: httpx.Response) -> Any:
        status = response.status_code
        if 200 <= status < 300:
            try:
                return response.json()
            except ValueError as exc:
                raise SerializationError(
                    f"Response from {method} {url} is not valid JSON",
                    payload_type=response.headers.get("content-type"),
                ) from exc
        if 400 <= status < 500:
            raise ClientError(service=url, message=_client_error_message(response), status_code=status)
        if 500 <= status < 600:
            raise ServerError(service=url, status_code=status)
        raise InvalidResponseError(
            service=url,
            message=f"Unexpected HTTP {status} from {method} {url}",
            status_code=status,
        )


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
