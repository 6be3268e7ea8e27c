"""Test configuration helpers for import path setup."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]

root_path = str(ROOT)

if root_path not in sys.path:
    sys.path.insert(0, root_path)


@pytest.fixture(autouse=True)
def _clear_loader_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVLOADER_PATH", "ENVLOADER_ENCODING", "ENVLOADER_OVERRIDE", "ENVLOADER_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing ``content`` to a dotenv file under ``tmp_path``."""

    def _write(content: str, name: str = ".env", newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes(content.replace("\n", newline).encode("utf-8"))
        return path

    return _write
