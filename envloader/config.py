from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENV_PATH = ".env"
DEFAULT_ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class LoaderSettings:
    path: Path
    encoding: str
    override: bool
    verbose: bool


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> LoaderSettings:
    """Resolve loader defaults from ``ENVLOADER_*`` variables."""

    return LoaderSettings(
        path=Path(os.environ.get("ENVLOADER_PATH") or DEFAULT_ENV_PATH),
        encoding=os.environ.get("ENVLOADER_ENCODING") or DEFAULT_ENCODING,
        override=_parse_bool("ENVLOADER_OVERRIDE", True),
        verbose=_parse_bool("ENVLOADER_VERBOSE", False),
    )


__all__ = ["DEFAULT_ENCODING", "DEFAULT_ENV_PATH", "LoaderSettings", "load_settings"]
