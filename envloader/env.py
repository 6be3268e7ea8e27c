"""Dotenv loader writing ``KEY=VALUE`` pairs into an environment map."""

from __future__ import annotations

import contextlib
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import ContextManager, MutableMapping

from .config import load_settings
from .helpers.logging import LoadTally, log_load, log_loaded
from .lines import aiter_lines, iter_lines
from .parsing import classify_line, parse_line, substitute

logger = logging.getLogger(__name__)

EnvironmentMap = MutableMapping[str, str]


@dataclass(frozen=True)
class _LoadOptions:
    path: Path
    environ: EnvironmentMap
    encoding: str
    override: bool
    verbose: bool


def _resolve_options(
    path: Path | str | None,
    environ: EnvironmentMap | None,
    encoding: str | None,
    override: bool | None,
    verbose: bool | None,
) -> _LoadOptions:
    settings = load_settings()
    return _LoadOptions(
        path=Path(path) if path is not None else settings.path,
        environ=environ if environ is not None else os.environ,
        encoding=encoding or settings.encoding,
        override=settings.override if override is None else override,
        verbose=settings.verbose if verbose is None else verbose,
    )


def _env_file_exists(options: _LoadOptions) -> bool:
    if options.path.is_file():
        return True
    logger.debug("No env file at %s, skipping", options.path)
    return False


def _progress(options: _LoadOptions) -> ContextManager[LoadTally]:
    if options.verbose:
        return log_load(str(options.path))
    return contextlib.nullcontext(LoadTally())


def _apply_line(lineno: int, line: str, options: _LoadOptions) -> bool:
    """Commit ``line`` to the environment map; return ``True`` if it was written."""

    assignment = parse_line(line)
    if assignment is None:
        logger.debug(
            "Skipping %s line %d of %s", classify_line(line).value, lineno, options.path
        )
        return False
    if not assignment.key or not assignment.value:
        logger.debug("Skipping line %d of %s: empty key or value", lineno, options.path)
        return False

    environ = options.environ
    if not options.override and assignment.key in environ:
        logger.debug("Keeping existing value for %s", assignment.key)
        return False

    value = substitute(assignment.value, environ)
    try:
        environ[assignment.key] = value
    except ValueError:
        # os.environ rejects keys and values holding a NUL
        logger.debug("Skipping line %d of %s: value not storable", lineno, options.path)
        return False

    if options.verbose:
        log_loaded(assignment.key, value)
    return True


def _log_summary(tally: LoadTally, options: _LoadOptions) -> None:
    logger.info(
        "Loaded %d variable(s) from %s (%d line(s) skipped)",
        tally.loaded,
        options.path,
        tally.skipped,
    )


def load_env(
    path: Path | str | None = None,
    *,
    environ: EnvironmentMap | None = None,
    encoding: str | None = None,
    override: bool | None = None,
    verbose: bool | None = None,
) -> None:
    """Load environment variables from ``path`` if it exists.

    Parameters
    ----------
    path:
        Dotenv file to read. Defaults to ``ENVLOADER_PATH`` or ``.env``.
        A missing file is not an error.
    environ:
        Mapping to update. Defaults to :data:`os.environ`.
    encoding:
        Text encoding of the file, ``utf-8-sig`` unless configured otherwise.
    override:
        Overwrite variables that are already set. Defaults to ``True``.
    verbose:
        Print colored progress and the loaded keys.

    Lines are applied in file order. ``$NAME`` tokens in a value are replaced
    with the current value of ``NAME``, which includes variables set by
    earlier lines of the same file.
    """

    options = _resolve_options(path, environ, encoding, override, verbose)
    if not _env_file_exists(options):
        return

    with _progress(options) as tally:
        try:
            for lineno, line in enumerate(iter_lines(options.path, options.encoding), 1):
                tally.record(_apply_line(lineno, line, options))
        except (OSError, UnicodeDecodeError):
            logger.exception("Failed to read env file %s", options.path)
            raise
    _log_summary(tally, options)


async def load_env_async(
    path: Path | str | None = None,
    *,
    environ: EnvironmentMap | None = None,
    encoding: str | None = None,
    override: bool | None = None,
    verbose: bool | None = None,
) -> None:
    """Asynchronous variant of :func:`load_env`.

    The coroutine suspends at every line read. Await it before relying on any
    loaded variable.
    """

    options = _resolve_options(path, environ, encoding, override, verbose)
    if not _env_file_exists(options):
        return

    lineno = 0
    lines = aiter_lines(options.path, options.encoding)
    with _progress(options) as tally:
        try:
            async for line in lines:
                lineno += 1
                tally.record(_apply_line(lineno, line, options))
        except (OSError, UnicodeDecodeError):
            logger.exception("Failed to read env file %s", options.path)
            raise
        finally:
            await lines.aclose()
    _log_summary(tally, options)


__all__ = ["EnvironmentMap", "load_env", "load_env_async"]
