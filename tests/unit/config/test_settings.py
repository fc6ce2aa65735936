"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from listfetch.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ListFetchSettings,
    Settings,
)
from listfetch.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_LISTFETCH_KEYS = (
    "LISTFETCH_BASE_URL",
    "LISTFETCH_RESOURCE_PATH",
    "LISTFETCH_FILTER_PARAM",
    "LISTFETCH_TIMEOUT_SECONDS",
    "LISTFETCH_LOG_LEVEL",
    "LISTFETCH_LOG_JSON",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so teardown also removes values written by load_dotenv
    for key in _LISTFETCH_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


# ---------------------------------------------------------------------------
# ListFetchSettings
# ---------------------------------------------------------------------------


class TestListFetchSettings:
    def test_defaults(self) -> None:
        s = ListFetchSettings()
        assert s.base_url == "https://rickandmortyapi.com/api"
        assert s.resource_path == "/character"
        assert s.filter_param == "status"
        assert s.timeout_seconds == 10.0
        assert s.log_json is True

    def test_empty_base_url_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ListFetchSettings(base_url="")
        assert exc_info.value.setting_name == "base_url"

    def test_relative_resource_path_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ListFetchSettings(resource_path="character")

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ListFetchSettings(timeout_seconds=0)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ListFetchSettings(log_level="CHATTY")

    def test_log_level_is_case_insensitive(self) -> None:
        assert ListFetchSettings(log_level="debug").log_level == "debug"

    def test_invalid_value_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            ListFetchSettings(filter_param="")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self, clean_env: pytest.MonkeyPatch) -> None:
        assert EnvSettingsLoader().load(ListFetchSettings) == ListFetchSettings()

    def test_loads_strings(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LISTFETCH_BASE_URL", "http://localhost:8080/api")
        clean_env.setenv("LISTFETCH_RESOURCE_PATH", "/location")
        s = EnvSettingsLoader().load(ListFetchSettings)
        assert s.base_url == "http://localhost:8080/api"
        assert s.resource_path == "/location"

    def test_loads_float(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LISTFETCH_TIMEOUT_SECONDS", "2.5")
        assert EnvSettingsLoader().load(ListFetchSettings).timeout_seconds == 2.5

    def test_loads_bool(self, clean_env: pytest.MonkeyPatch) -> None:
        for falsy in ("false", "0", "no", "off"):
            clean_env.setenv("LISTFETCH_LOG_JSON", falsy)
            assert EnvSettingsLoader().load(ListFetchSettings).log_json is False
        clean_env.setenv("LISTFETCH_LOG_JSON", "yes")
        assert EnvSettingsLoader().load(ListFetchSettings).log_json is True

    def test_bad_float_raises_config_error(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LISTFETCH_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(ListFetchSettings)

    def test_validation_error_propagates(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LISTFETCH_TIMEOUT_SECONDS", "-1")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ListFetchSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class TokenSettings(Settings):
            _prefix: ClassVar[str] = "SVC"

            api_token: str
            scopes: list[str] = field(default_factory=list)

        monkeypatch.delenv("SVC_API_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(TokenSettings)
        assert exc_info.value.setting_name == "SVC_API_TOKEN"

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class TokenSettings(Settings):
            _prefix: ClassVar[str] = "SVC"

            api_token: str = "t"
            scopes: list[str] = field(default_factory=list)

        monkeypatch.setenv("SVC_SCOPES", "read, write,")
        assert EnvSettingsLoader().load(TokenSettings).scopes == ["read", "write"]


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LISTFETCH_FILTER_PARAM=species\nLISTFETCH_LOG_LEVEL=DEBUG\n")
        s = DotenvSettingsLoader(str(env_file)).load(ListFetchSettings)
        assert s.filter_param == "species"
        assert s.log_level == "DEBUG"

    def test_process_env_wins_without_override(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LISTFETCH_FILTER_PARAM=species\n")
        clean_env.setenv("LISTFETCH_FILTER_PARAM", "gender")
        s = DotenvSettingsLoader(str(env_file)).load(ListFetchSettings)
        assert s.filter_param == "gender"
