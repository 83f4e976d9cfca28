"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ledgerlite.configuration import LedgerSettings


def test_settings_read_prefixed_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("LEDGERLITE_DATA_DIRECTORY", str(tmp_path / "snapshots"))
    monkeypatch.setenv("LEDGERLITE_STORAGE_KEY", "household")
    monkeypatch.setenv("LEDGERLITE_LOG_LEVEL", "debug")

    settings = LedgerSettings()

    assert settings.data_directory == (tmp_path / "snapshots").resolve()
    assert settings.data_directory.is_dir()
    assert settings.storage_key == "household"
    assert settings.log_level == "DEBUG"


def test_settings_reject_bad_port(tmp_path) -> None:
    with pytest.raises(ValidationError):
        LedgerSettings(data_directory=tmp_path, interface_port=70000)
