"""HTTP adapter – HttpPageFetcher.

Fetches one page of a listing endpoint that answers with the envelope::

    {"info": {"count": 826, "pages": 42, "next": "...", "prev": null},
     "results": [{...}, {...}]}
"""
from __future__ import annotations

import enum
from typing import Any, Callable, Generic, Mapping, TypeVar

from listfetch.adapters.http.client import HttpxHttpClient
from listfetch.application.pagination import FetchQuery, PageInfo, ResultPage
from listfetch.config.settings import ListFetchSettings
from listfetch.kernel.errors import SerializationError
from listfetch.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


def _identity(item: Mapping[str, Any]) -> Any:
    return item


def render_filter(filter: Any, filter_param: str) -> dict[str, str]:  # noqa: A002
    """Turn a filter value into query parameters.

    ``None`` contributes nothing, an ``Enum`` member its value, a mapping its
    non-``None`` entries, and anything else ``str(value)`` under *filter_param*.
    """
    if filter is None:
        return {}
    if isinstance(filter, enum.Enum):
        return {filter_param: str(filter.value)}
    if isinstance(filter, Mapping):
        return {str(k): str(v.value if isinstance(v, enum.Enum) else v) for k, v in filter.items() if v is not None}
    return {filter_param: str(filter)}


class HttpPageFetcher(Generic[T]):
    """:class:`~listfetch.application.list_fetch.PageFetcher` backed by :class:`HttpxHttpClient`."""

    def __init__(
        self,
        client: HttpxHttpClient,
        resource_path: str,
        *,
        filter_param: str = "status",
        item_parser: Callable[[Mapping[str, Any]], T] = _identity,
    ) -> None:
        self._client = client
        self._resource_path = resource_path
        self._filter_param = filter_param
        self._item_parser = item_parser

    @classmethod
    def from_settings(
        cls,
        settings: ListFetchSettings,
        *,
        item_parser: Callable[[Mapping[str, Any]], T] = _identity,
    ) -> "HttpPageFetcher[T]":
        client = HttpxHttpClient(base_url=settings.base_url, timeout=settings.timeout_seconds)
        return cls(
            client,
            settings.resource_path,
            filter_param=settings.filter_param,
            item_parser=item_parser,
        )

    def params_for(self, query: FetchQuery) -> dict[str, str]:
        params = {"page": str(query.page)}
        params.update(render_filter(query.filter, self._filter_param))
        return params

    async def fetch_page(self, query: FetchQuery) -> ResultPage[T]:
        params = self.params_for(query)
        _log.debug("http_page_fetcher.request", path=self._resource_path, params=params)
        body = await self._client.get(self._resource_path, params=params)
        return self._parse(body)

    async def aclose(self) -> None:
        await self._client.aclose()

    def _parse(self, body: Any) -> ResultPage[T]:
        if not isinstance(body, Mapping):
            raise SerializationError("Listing response is not a JSON object", payload_type=type(body).__name__)
        results = body.get("results")
        if not isinstance(results, list):
            raise SerializationError("Listing response has no 'results' array", payload_type="results")
        raw_info = body.get("info")
        try:
            info = PageInfo.from_dict(raw_info) if isinstance(raw_info, Mapping) else None
            items = [self._item_parser(item) for item in results]
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Could not decode listing item: {exc}", payload_type="results") from exc
        return ResultPage.of(items, info=info)


__all__ = ["HttpPageFetcher", "render_filter"]
