"""Application pagination – FetchQuery."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class FetchQuery:
    """Request for one page of results (1-based) under an optional filter."""

    page: int = 1
    filter: Any = None

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")

    @classmethod
    def first(cls, filter: Any = None) -> "FetchQuery":  # noqa: A002
        return cls(page=1, filter=filter)

    def next(self) -> "FetchQuery":
        """Return the query for the following page under the same filter."""
        return dataclasses.replace(self, page=self.page + 1)


__all__ = ["FetchQuery"]
