"""List fetch – ControllerState snapshot and the NOT_LOADED sentinel."""
from __future__ import annotations

import dataclasses
from typing import Any, Final, Generic, TypeVar

from listfetch.application.pagination import PageInfo

T = TypeVar("T")


class _NotLoaded:
    """Marker for a list that has not been fetched yet (distinct from empty)."""

    __slots__ = ()
    _instance: "_NotLoaded | None" = None

    def __new__(cls) -> "_NotLoaded":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_LOADED"

    def __reduce__(self) -> str:
        return "NOT_LOADED"


NOT_LOADED: Final = _NotLoaded()


@dataclasses.dataclass(frozen=True)
class ControllerState(Generic[T]):
    """Immutable view of a :class:`ListFetchController` at one instant."""

    items: tuple[T, ...] | _NotLoaded = NOT_LOADED
    page: int = 0
    filter: Any = None
    is_loading: bool = False
    error: BaseException | None = None
    info: PageInfo | None = None

    @property
    def is_loaded(self) -> bool:
        return self.items is not NOT_LOADED

    @property
    def has_more(self) -> bool:
        """``False`` once the service reported no further page."""
        if self.info is None:
            return True
        return self.info.has_next


__all__ = ["NOT_LOADED", "ControllerState"]
