"""Testing fakes – in-memory doubles for the fetch port."""
from listfetch.testing.fakes.page_fetcher import FakePageFetcher

__all__ = ["FakePageFetcher"]
