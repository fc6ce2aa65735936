"""Application pagination – query, page and listing metadata primitives."""
from listfetch.application.pagination.query import FetchQuery
from listfetch.application.pagination.page import PageInfo, ResultPage

__all__ = ["FetchQuery", "PageInfo", "ResultPage"]
