"""HTTP adapter – async httpx client and listing page fetcher."""
from listfetch.adapters.http.client import HttpClient, HttpxHttpClient
from listfetch.adapters.http.page_fetcher import HttpPageFetcher, render_filter

__all__ = ["HttpClient", "HttpPageFetcher", "HttpxHttpClient", "render_filter"]
