"""List fetch – PageFetcher port."""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from listfetch.application.pagination import FetchQuery, ResultPage

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PageFetcher(Protocol[T_co]):
    """Port: fetch one page of entities matching an optional filter.

    Implementations may raise any exception on failure and must tolerate
    ``asyncio`` cancellation while awaiting I/O.
    """

    async def fetch_page(self, query: FetchQuery) -> ResultPage[T_co]: ...


__all__ = ["PageFetcher"]
