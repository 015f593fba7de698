"""Unit tests for config settings & validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

import pytest

from mp_cloudevents.config import (
    CloudEventSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    SettingsValidator,
)
from mp_cloudevents.core import SpecVersion

_KEYS = ("CLOUDEVENTS_DEFAULT_SPEC_VERSION", "CLOUDEVENTS_STRICT_EXTENSION_NAMES")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch restores "absent" even after load_dotenv writes
    for key in _KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str
    retries: int = 3


class TestCloudEventSettings:
    def test_defaults(self) -> None:
        settings = CloudEventSettings()
        assert settings.spec_version is SpecVersion.V1
        assert settings.strict_extension_names is True

    def test_invalid_version(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            CloudEventSettings(default_spec_version="2.0")
        assert exc_info.value.setting_name == "default_spec_version"
        assert isinstance(exc_info.value, ConfigError)


class TestEnvSettingsLoader:
    def test_defaults_without_env(self) -> None:
        settings = EnvSettingsLoader().load(CloudEventSettings)
        assert settings == CloudEventSettings()

    def test_loads_version(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDEVENTS_DEFAULT_SPEC_VERSION", "0.3")
        assert EnvSettingsLoader().load(CloudEventSettings).spec_version is SpecVersion.V03

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("1", True), ("off", False), ("no", False)])
    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("CLOUDEVENTS_STRICT_EXTENSION_NAMES", raw)
        assert EnvSettingsLoader().load(CloudEventSettings).strict_extension_names is expected

    def test_invalid_version_surfaces(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDEVENTS_DEFAULT_SPEC_VERSION", "banana")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(CloudEventSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_bad_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_TOKEN", "abc")
        monkeypatch.setenv("REQ_RETRIES", "many")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(RequiredSettings)

    def test_int_coerced(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_TOKEN", "abc")
        monkeypatch.setenv("REQ_RETRIES", "7")
        assert EnvSettingsLoader().load(RequiredSettings).retries == 7


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CLOUDEVENTS_DEFAULT_SPEC_VERSION=0.3\nCLOUDEVENTS_STRICT_EXTENSION_NAMES=false\n")
        settings = DotenvSettingsLoader(str(env_file)).load(CloudEventSettings)
        assert settings.spec_version is SpecVersion.V03
        assert settings.strict_extension_names is False

    def test_process_env_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CLOUDEVENTS_DEFAULT_SPEC_VERSION=0.3\n")
        monkeypatch.setenv("CLOUDEVENTS_DEFAULT_SPEC_VERSION", "1.0")
        settings = DotenvSettingsLoader(str(env_file)).load(CloudEventSettings)
        assert settings.spec_version is SpecVersion.V1


class TestSettingsValidator:
    def test_no_errors_for_defaults(self) -> None:
        assert SettingsValidator().validate(CloudEventSettings()) == []

    def test_reports_none_required_field(self) -> None:
        errors = SettingsValidator().validate(RequiredSettings(token=None))  # type: ignore[arg-type]
        assert errors == ["token is required but None"]

    def test_reports_mistyped_scalar(self) -> None:
        settings = CloudEventSettings(strict_extension_names="false")  # type: ignore[arg-type]
        assert SettingsValidator().validate(settings) == [
            "strict_extension_names must be bool, got str"
        ]

    def test_int_is_not_a_bool(self) -> None:
        settings = CloudEventSettings(strict_extension_names=1)  # type: ignore[arg-type]
        assert len(SettingsValidator().validate(settings)) == 1

    def test_ensure_valid_raises_first_problem(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SettingsValidator().ensure_valid(RequiredSettings(token=None))  # type: ignore[arg-type]
        assert exc_info.value.setting_name == "token"

    def test_ensure_valid_passes_loaded_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDEVENTS_STRICT_EXTENSION_NAMES", "off")
        SettingsValidator().ensure_valid(EnvSettingsLoader().load(CloudEventSettings))


class TestSettingsBase:
    def test_env_key(self) -> None:
        assert CloudEventSettings.env_key("default_spec_version") == "CLOUDEVENTS_DEFAULT_SPEC_VERSION"
        assert Settings.env_key("token") == "TOKEN"

    def test_field_types_resolved(self) -> None:
        assert RequiredSettings.field_types() == {"token": str, "retries": int}
