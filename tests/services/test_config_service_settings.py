"""Tests for ConfigService and config value parsing."""

from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest

from taskdesk_cli.services.config_service import (
    ConfigService,
    get_config_service,
    parse_config_value,
)


@pytest.fixture
def service():
    return ConfigService()


class TestLoad:
    def test_defaults_when_file_missing(self, service):
        config = service.config

        assert config.storage.db_path is None
        assert config.output.format == "pretty"
        assert config.ui.date_format == "%Y-%m-%d"
        assert config.ui.confirm_changes is True

    def test_reads_existing_file(self, service):
        service.config_path.parent.mkdir(parents=True)
        service.config_path.write_text(json.dumps({"output": {"format": "json"}}))

        assert service.config.output.format == "json"

    def test_corrupted_file_falls_back_to_defaults(self, service):
        service.config_path.parent.mkdir(parents=True)
        service.config_path.write_text("{not json")

        assert service.config.output.format == "pretty"
        assert service.config_path.read_text() == "{not json"


class TestGetSet:
    def test_get_leaf_and_section(self, service):
        assert service.get("ui.confirm_changes") is True
        assert service.get("output") == {"format": "pretty", "color": True}

    @pytest.mark.parametrize("key", ["nope", "ui.nope", "ui.date_format.extra"])
    def test_get_unknown_key(self, service, key):
        with pytest.raises(KeyError):
            service.get(key)

    def test_set_persists_to_disk(self, service):
        service.set("ui.confirm_changes", False)

        reloaded = ConfigService()
        assert reloaded.get("ui.confirm_changes") is False

    def test_saved_file_is_owner_only(self, service):
        service.set("output.color", False)

        assert stat.S_IMODE(service.config_path.stat().st_mode) == 0o600

    def test_set_invalid_value(self, service):
        with pytest.raises(ValueError, match="output.format"):
            service.set("output.format", "xml")

    def test_set_blank_db_path_rejected(self, service):
        with pytest.raises(ValueError):
            service.set("storage.db_path", "   ")

    def test_set_unknown_key(self, service):
        with pytest.raises(KeyError):
            service.set("storage.nope", 1)


class TestReset:
    def test_reset_single_key(self, service):
        service.set("output.format", "json")
        service.set("output.color", False)

        service.reset("output.format")

        assert service.get("output.format") == "pretty"
        assert service.get("output.color") is False

    def test_reset_all(self, service):
        service.set("output.format", "json")

        service.reset()

        assert service.get("output.format") == "pretty"

    def test_reset_unknown_key(self, service):
        with pytest.raises(KeyError):
            service.reset("bogus")


class TestResolveDbPath:
    def test_override_wins(self, service, monkeypatch, tmp_path):
        monkeypatch.setenv("TASKDESK_DB", str(tmp_path / "env.db"))
        service.set("storage.db_path", str(tmp_path / "config.db"))

        assert service.resolve_db_path(tmp_path / "cli.db") == tmp_path / "cli.db"

    def test_env_before_config(self, service, monkeypatch, tmp_path):
        monkeypatch.setenv("TASKDESK_DB", str(tmp_path / "env.db"))
        service.set("storage.db_path", str(tmp_path / "config.db"))

        assert service.resolve_db_path() == tmp_path / "env.db"

    def test_config_before_default(self, service, tmp_path):
        service.set("storage.db_path", str(tmp_path / "config.db"))

        assert service.resolve_db_path() == tmp_path / "config.db"

    def test_default_in_data_dir(self, service, isolated_dirs):
        assert service.resolve_db_path() == Path(isolated_dirs) / "data" / "tasks.db"


class TestParseConfigValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("False", False),
            ("null", None),
            ("42", 42),
            ("-3", -3),
            ('{"a": 1}', {"a": 1}),
            ("%d/%m/%Y", "%d/%m/%Y"),
            ("table", "table"),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_config_value(raw) == expected


def test_get_config_service_is_cached():
    assert get_config_service() is get_config_service()
