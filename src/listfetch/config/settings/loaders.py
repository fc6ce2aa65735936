"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, TypeVar

from dotenv import load_dotenv

from listfetch.config.settings.base import Settings
from listfetch.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def _as_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


# Annotations arrive as strings under ``from __future__ import annotations``.
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _as_bool,
    "int": int,
    "float": float,
    "list": _as_list,
}


def _type_name(type_hint: Any) -> str:
    if isinstance(type_hint, str):
        return type_hint.split("[", 1)[0].strip()
    origin = getattr(type_hint, "__origin__", None)
    return getattr(origin or type_hint, "__name__", "")


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is not dataclasses.MISSING
        or field.default_factory is not dataclasses.MISSING
    )


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from ``<PREFIX>_<FIELD>`` environment variables.

    Unset variables fall back to the dataclass default. ``bool``, ``int``,
    ``float`` and ``list[str]`` (comma separated) fields are coerced; every
    other field receives the raw string.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is None:
                if not _has_default(field):
                    raise MissingRequiredSettingError(env_key)
                continue
            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to build {settings_class.__name__}: {exc}") from exc

    def _coerce(self, env_key: str, raw: str, type_hint: Any) -> Any:
        coerce = _COERCERS.get(_type_name(type_hint))
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError as exc:
            raise ConfigError(f"{env_key}={raw!r} is not a valid {_type_name(type_hint)}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Read a ``.env`` file into the process environment, then load from it."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
