"""Application pagination – ResultPage, PageInfo."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Iterable, Iterator, Mapping, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class PageInfo:
    """Listing metadata reported by the remote service alongside a page."""

    count: int = 0
    pages: int = 0
    next: str | None = None
    prev: str | None = None

    @property
    def has_next(self) -> bool:
        return bool(self.next)

    @property
    def has_previous(self) -> bool:
        return bool(self.prev)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageInfo":
        """Build from the service's ``info`` object; missing keys take defaults."""
        return cls(
            count=int(data.get("count", 0)),
            pages=int(data.get("pages", 0)),
            next=data.get("next") or None,
            prev=data.get("prev") or None,
        )


@dataclasses.dataclass(frozen=True)
class ResultPage(Generic[T]):
    """One page of results in server order."""

    items: tuple[T, ...] = ()
    info: PageInfo | None = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    @classmethod
    def of(cls, items: Iterable[T], info: PageInfo | None = None) -> "ResultPage[T]":
        """Build a :class:`ResultPage` from any iterable, freezing it into a tuple."""
        return cls(items=tuple(items), info=info)


__all__ = ["PageInfo", "ResultPage"]
