"""Application list fetch – controller, state snapshot and fetch port."""
from listfetch.application.list_fetch.controller import ListFetchController, StateListener
from listfetch.application.list_fetch.ports import PageFetcher
from listfetch.application.list_fetch.state import NOT_LOADED, ControllerState

__all__ = ["NOT_LOADED", "ControllerState", "ListFetchController", "PageFetcher", "StateListener"]
