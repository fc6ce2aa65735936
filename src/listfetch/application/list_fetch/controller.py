"""List fetch – ListFetchController.

Owns the pagination cursor, the accumulated items, the active filter and the
loading/error flags of one list view. Fetches run as ``asyncio`` tasks on the
caller's event loop; at most one of them is *current* at any time.

Every issued fetch is tagged with an epoch. Superseding a fetch (reset,
filter change, teardown) cancels its task and bumps the epoch, and a
completion whose epoch is no longer current is discarded without touching
state. This holds even when the fetcher ignores cancellation and returns.

Usage::

    controller = ListFetchController(HttpPageFetcher.from_settings(settings))
    controller.subscribe(render)
    controller.reset()                 # initial load
    controller.set_filter("alive")     # restarts at page 1
    controller.load_more()             # near end of list
    ...
    await controller.aclose()
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Generic, TypeVar

from listfetch.application.list_fetch.ports import PageFetcher
from listfetch.application.list_fetch.state import NOT_LOADED, ControllerState, _NotLoaded
from listfetch.application.pagination import FetchQuery, PageInfo, ResultPage
from listfetch.kernel.errors import ControllerClosedError
from listfetch.observability.logging import get_logger

T = TypeVar("T")

StateListener = Callable[[ControllerState[Any]], None]

_log = get_logger(__name__)


class ListFetchController(Generic[T]):
    """Paginated, filterable list state driven by presentation events.

    ``set_filter``, ``reset`` and ``load_more`` must be called from the
    running event loop. They never raise for fetch failures; the failure is
    stored in :attr:`error` instead.
    """

    def __init__(self, fetcher: PageFetcher[T], *, name: str = "list") -> None:
        self._fetcher: PageFetcher[T] | None = fetcher
        self._name = name
        self._items: list[T] | _NotLoaded = NOT_LOADED
        self._page = 0
        self._filter: Any = None
        self._is_loading = False
        self._error: BaseException | None = None
        self._info: PageInfo | None = None
        self._epoch = 0
        self._task: asyncio.Task[None] | None = None
        self._listeners: list[StateListener] = []
        self._closed = False
        self._log = _log.bind(controller=name)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def items(self) -> tuple[T, ...] | _NotLoaded:
        if isinstance(self._items, _NotLoaded):
            return NOT_LOADED
        return tuple(self._items)

    @property
    def page(self) -> int:
        return self._page

    @property
    def filter(self) -> Any:
        return self._filter

    @filter.setter
    def filter(self, value: Any) -> None:
        self.set_filter(value)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> BaseException | None:
        return self._error

    @property
    def info(self) -> PageInfo | None:
        return self._info

    @property
    def has_more(self) -> bool:
        return self.state.has_more

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def state(self) -> ControllerState[T]:
        return ControllerState(
            items=self.items,
            page=self._page,
            filter=self._filter,
            is_loading=self._is_loading,
            error=self._error,
            info=self._info,
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for state snapshots; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Presentation triggers
    # ------------------------------------------------------------------

    def set_filter(self, new_filter: Any) -> None:
        """Record *new_filter* and restart from page 1 if it differs from the current one."""
        self._ensure_open()
        loop = asyncio.get_running_loop()
        if new_filter == self._filter:
            self._log.debug("list_fetch.filter_unchanged", filter=new_filter)
            return
        self._filter = new_filter
        self._restart(loop)

    def reset(self) -> None:
        """Discard all results and fetch page 1 under the current filter."""
        self._ensure_open()
        self._restart(asyncio.get_running_loop())

    def load_more(self) -> None:
        """Fetch the page after the cursor and append it; no-op while loading."""
        self._ensure_open()
        loop = asyncio.get_running_loop()
        if self._is_loading:
            self._log.debug("list_fetch.load_more_skipped", page=self._page)
            return
        self._is_loading = True
        self._error = None
        self._issue(loop, FetchQuery(page=self._page + 1, filter=self._filter), append=True)

    def _restart(self, loop: asyncio.AbstractEventLoop) -> None:
        self._page = 0
        self._items = NOT_LOADED
        self._is_loading = True
        self._error = None
        self._info = None
        self._issue(loop, FetchQuery.first(self._filter), append=False)

    # ------------------------------------------------------------------
    # Settling / teardown
    # ------------------------------------------------------------------

    async def wait_idle(self) -> None:
        """Wait until no fetch is outstanding, following any superseding fetch."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    def close(self) -> None:
        """Cancel the outstanding fetch and release the fetcher. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._cancel_current()
        self._epoch += 1
        self._fetcher = None
        self._listeners.clear()
        self._log.debug("list_fetch.closed", page=self._page)

    async def aclose(self) -> None:
        task = self._task
        self.close()
        if task is not None and not task.done():
            await asyncio.wait({task})

    async def __aenter__(self) -> "ListFetchController[T]":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._closed:
            raise ControllerClosedError(self._name)

    def _cancel_current(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def _issue(self, loop: asyncio.AbstractEventLoop, query: FetchQuery, *, append: bool) -> None:
        fetcher = self._fetcher
        if fetcher is None:
            raise ControllerClosedError(self._name)
        self._cancel_current()
        self._epoch += 1
        epoch = self._epoch
        self._task = loop.create_task(
            self._run(fetcher, query, epoch, append=append),
            name=f"{self._name}-fetch-{epoch}",
        )
        self._log.debug("list_fetch.issued", page=query.page, filter=query.filter, epoch=epoch, append=append)
        self._notify()

    async def _run(self, fetcher: PageFetcher[T], query: FetchQuery, epoch: int, *, append: bool) -> None:
        try:
            result = await fetcher.fetch_page(query)
        except asyncio.CancelledError as exc:
            task = asyncio.current_task()
            if epoch != self._epoch or (task is not None and task.cancelling()):
                self._log.debug("list_fetch.cancelled", page=query.page, epoch=epoch)
                raise
            # Raised by the fetcher itself, not by cancelling this task.
            self._apply_failure(query, exc)
            return
        except Exception as exc:  # noqa: BLE001
            if epoch != self._epoch:
                self._log.debug("list_fetch.discarded", page=query.page, epoch=epoch, outcome="failure")
                return
            self._apply_failure(query, exc)
            return
        if epoch != self._epoch:
            self._log.debug("list_fetch.discarded", page=query.page, epoch=epoch, outcome="success")
            return
        self._apply_success(query, result, append=append)

    def _apply_success(self, query: FetchQuery, result: ResultPage[T], *, append: bool) -> None:
        received = list(result.items)
        if append and not isinstance(self._items, _NotLoaded):
            self._items = self._items + received
        else:
            self._items = received
        self._page = query.page
        self._info = result.info
        self._is_loading = False
        self._log.debug("list_fetch.applied", page=self._page, received=len(received), total=len(self._items))
        self._notify()

    def _apply_failure(self, query: FetchQuery, exc: BaseException) -> None:
        self._error = exc
        self._is_loading = False
        self._log.warning(
            "list_fetch.failed",
            page=query.page,
            filter=query.filter,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:  # noqa: BLE001
                self._log.exception("list_fetch.listener_failed", listener=repr(listener))


__all__ = ["ListFetchController", "StateListener"]
