"""Tests for loader settings resolution."""

from pathlib import Path

import pytest

from envloader.config import load_settings


def test_defaults() -> None:
    settings = load_settings()
    assert settings.path == Path(".env")
    assert settings.encoding == "utf-8-sig"
    assert settings.override is True
    assert settings.verbose is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVLOADER_PATH", "config/app.env")
    monkeypatch.setenv("ENVLOADER_ENCODING", "latin-1")
    monkeypatch.setenv("ENVLOADER_OVERRIDE", "no")
    monkeypatch.setenv("ENVLOADER_VERBOSE", "TRUE")

    settings = load_settings()

    assert settings.path == Path("config/app.env")
    assert settings.encoding == "latin-1"
    assert settings.override is False
    assert settings.verbose is True


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVLOADER_PATH", "")
    monkeypatch.setenv("ENVLOADER_OVERRIDE", " ")
    settings = load_settings()
    assert settings.path == Path(".env")
    assert settings.override is True
