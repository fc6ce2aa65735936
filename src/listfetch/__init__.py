"""
listfetch – paginated, filterable list fetching for presentation layers.

Import path convention::

    from listfetch.application.list_fetch import ListFetchController
    from listfetch.application.pagination import FetchQuery, ResultPage
    from listfetch.adapters.http import HttpPageFetcher
    from listfetch.kernel.errors import ServerError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
