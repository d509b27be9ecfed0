# pyright: reportAny=false
from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from rulesd.config import (
    ConfigLoadError,
    ConfigValidationError,
    build_configuration,
    parse_env_vars,
    read_toml_file,
    settings_from_mapping,
)
from rulesd.enums import LogLevel


class TestReadTomlFile:
    def test_reads_valid_file(self, fs: FakeFilesystem) -> None:
        path = Path("/etc/rulesd/rulesd.toml")
        fs.create_file(path, contents='storage_path = "/var/lib/rulesd"\n')

        assert read_toml_file(path) == {"storage_path": "/var/lib/rulesd"}

    def test_raises_file_not_found_for_missing_file(self, fs: FakeFilesystem) -> None:
        with pytest.raises(FileNotFoundError):
            read_toml_file(Path("/etc/rulesd/missing.toml"))

    def test_raises_load_error_for_invalid_toml(self, fs: FakeFilesystem) -> None:
        path = Path("/etc/rulesd/broken.toml")
        fs.create_file(path, contents='[service\nstorage_path = "/x"\n')

        with pytest.raises(ConfigLoadError) as exc_info:
            read_toml_file(path)

        assert exc_info.value.path == path
        assert "Failed to parse TOML file" in str(exc_info.value)


class TestParseEnvVars:
    def test_empty_when_nothing_set(self) -> None:
        assert parse_env_vars() == {}

    def test_reads_storage_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULESD_STORAGE_PATH", "/var/lib/rulesd")

        assert parse_env_vars() == {"storage_path": "/var/lib/rulesd"}

    def test_splits_admin_ips(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULESD_ADMIN_IPS", "10.0.0.1, 10.0.0.2,,")

        assert parse_env_vars() == {"admin_ips": ["10.0.0.1", "10.0.0.2"]}

    def test_empty_admin_ips_is_empty_list(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RULESD_ADMIN_IPS", "")

        assert parse_env_vars() == {"admin_ips": []}

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", True), ("TRUE", True), ("yes", True), ("off", False), ("0", False)],
    )
    def test_parses_periodic_pruning(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
    ) -> None:
        monkeypatch.setenv("RULESD_PERIODIC_PRUNING", raw)

        assert parse_env_vars() == {"periodic_pruning": expected}

    def test_keeps_unrecognized_boolean(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULESD_PERIODIC_PRUNING", "sometimes")

        assert parse_env_vars() == {"periodic_pruning": "sometimes"}

    def test_lowercases_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULESD_LOG_LEVEL", "DEBUG")

        assert parse_env_vars() == {"log_level": "debug"}

    def test_ignores_unknown_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULESD_DEBUG", "1")
        monkeypatch.setenv("RULESD_SOMETHING_ELSE", "value")

        assert parse_env_vars() == {}

    def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULES_STORAGE_PATH", "/data")

        assert parse_env_vars(prefix="RULES_") == {"storage_path": "/data"}


class TestSettingsFromMapping:
    def test_empty_mapping_gives_no_settings(self) -> None:
        assert settings_from_mapping({}) == []

    def test_top_level_keys(self) -> None:
        settings = settings_from_mapping(
            {
                "storage_path": "/data",
                "admin_ips": ["10.0.0.1"],
                "periodic_pruning": True,
                "log_level": "debug",
            }
        )

        config = build_configuration(*settings, default_log_level=LogLevel.INFO)

        assert config.storage_path == "/data"
        assert config.admin_ips == ("10.0.0.1",)
        assert config.periodic_pruning is True
        assert config.log_level == LogLevel.DEBUG

    def test_service_table(self) -> None:
        settings = settings_from_mapping({"service": {"storage_path": "/data"}})

        config = build_configuration(*settings)

        assert config.storage_path == "/data"

    def test_service_table_wins_over_top_level(self) -> None:
        settings = settings_from_mapping(
            {"storage_path": "/top", "service": {"storage_path": "/table"}}
        )

        config = build_configuration(*settings)

        assert config.storage_path == "/table"

    def test_service_must_be_a_table(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            settings_from_mapping(
                {"storage_path": "/data", "service": "oops"}, source="file"
            )

        error = exc_info.value
        assert error.key == "service"
        assert error.value == "oops"
        assert error.expected == "table"
        assert error.source == "file"

    def test_only_present_keys_produce_settings(self) -> None:
        settings = settings_from_mapping({"periodic_pruning": False})

        assert [setting.name for setting in settings] == ["periodic_pruning"]  # pyright: ignore[reportAttributeAccessIssue]

    def test_ignores_unknown_keys(self) -> None:
        assert settings_from_mapping({"listen_address": "0.0.0.0:8080"}) == []

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            settings_from_mapping({"log_level": "verbose"}, source="file")

        error = exc_info.value
        assert error.key == "log_level"
        assert error.value == "verbose"
        assert "debug" in error.expected
        assert error.source == "file"

    def test_invalid_admin_ips(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            settings_from_mapping({"admin_ips": "10.0.0.1"})

        assert exc_info.value.key == "admin_ips"
        assert exc_info.value.expected == "list of strings"
        assert exc_info.value.source is None

    def test_invalid_periodic_pruning(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            settings_from_mapping({"periodic_pruning": "sometimes"}, source="env")

        assert exc_info.value.key == "periodic_pruning"
        assert exc_info.value.source == "env"

    def test_empty_storage_path_is_passed_through(self) -> None:
        settings = settings_from_mapping({"storage_path": ""})

        assert len(settings) == 1
