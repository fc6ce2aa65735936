"""Config settings – Settings base class and ListFetchSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from listfetch.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ListFetchSettings(Settings):
    """Where :class:`~listfetch.adapters.http.HttpPageFetcher` fetches from, and how to log.

    Environment variables use the ``LISTFETCH_`` prefix, e.g.
    ``LISTFETCH_BASE_URL`` or ``LISTFETCH_TIMEOUT_SECONDS``.
    """

    _prefix: ClassVar[str] = "LISTFETCH"

    base_url: str = "https://rickandmortyapi.com/api"
    resource_path: str = "/character"
    filter_param: str = "status"
    timeout_seconds: float = 10.0
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.base_url:
            raise InvalidSettingValueError("base_url", self.base_url, "must not be empty")
        if not self.resource_path.startswith("/"):
            raise InvalidSettingValueError("resource_path", self.resource_path, "must start with '/'")
        if not self.filter_param:
            raise InvalidSettingValueError("filter_param", self.filter_param, "must not be empty")
        if self.timeout_seconds <= 0:
            raise InvalidSettingValueError("timeout_seconds", self.timeout_seconds, "must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")


__all__ = ["ListFetchSettings", "Settings"]
