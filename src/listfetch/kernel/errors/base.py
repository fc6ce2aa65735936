"""Root error class for the listfetch error hierarchy.

Errors raised by a fetch end up in ``ListFetchController.error`` and are
rendered by the presentation layer, so every error flattens to a plain dict.
Subclasses name the attributes that belong in that dict in ``detail_fields``.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context merged over the ``detail_fields`` attributes.
    """

    default_code: ClassVar[str] = "base_error"
    detail_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self._extra_detail: dict[str, Any] = dict(detail or {})

    @property
    def detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {}
        for name in self.detail_fields:
            value = getattr(self, name, None)
            if value is not None:
                detail[name] = value
        detail.update(self._extra_detail)
        return detail

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise for logging or for an error banner; includes the chained cause."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
