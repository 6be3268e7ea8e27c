"""Lazy line sequences over a text file."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import AsyncGenerator, Iterator

from .config import DEFAULT_ENCODING


def _strip_terminator(line: str) -> str:
    # universal newlines turn \r\n and \r into \n
    return line[:-1] if line.endswith("\n") else line


def iter_lines(path: Path | str, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """Yield the lines of ``path`` in file order without line terminators."""

    with open(path, "r", encoding=encoding, newline=None) as handle:
        for line in handle:
            yield _strip_terminator(line)


async def aiter_lines(
    path: Path | str, encoding: str = DEFAULT_ENCODING
) -> AsyncGenerator[str, None]:
    """Asynchronous counterpart of :func:`iter_lines`.

    Every read runs in a worker thread so the event loop is released between
    lines. The handle is closed once the sequence ends or is abandoned.
    """

    handle = await asyncio.to_thread(open, path, "r", encoding=encoding, newline=None)
    try:
        while True:
            line = await asyncio.to_thread(handle.readline)
            if not line:
                break
            yield _strip_terminator(line)
    finally:
        handle.close()


__all__ = ["aiter_lines", "iter_lines"]
