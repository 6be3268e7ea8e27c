"""Colored progress output for verbose loads."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator

from .formatting import Fore, Style, mask_value


@dataclass
class LoadTally:
    """Running count of committed and skipped lines for one load."""

    loaded: int = 0
    skipped: int = 0

    def record(self, committed: bool) -> None:
        if committed:
            self.loaded += 1
        else:
            self.skipped += 1


@contextmanager
def log_load(source: str) -> Generator[LoadTally, None, None]:
    """Print the file being loaded, then a colored summary with the counts.

    The yielded :class:`LoadTally` is filled in by the caller; its totals show
    up on the completion line.
    """
    print(f"{Fore.CYAN}Loading environment from {source}{Style.RESET_ALL}")
    tally = LoadTally()
    start = time.perf_counter()
    try:
        yield tally
    except Exception as exc:
        elapsed = time.perf_counter() - start
        print(
            f"{Fore.RED}  ↳ failed after {tally.loaded + tally.skipped} line(s) in "
            f"{Fore.MAGENTA}{elapsed:.2f}s{Fore.RED}: {exc}{Style.RESET_ALL}"
        )
        raise
    else:
        elapsed = time.perf_counter() - start
        print(
            f"{Fore.GREEN}  ↳ loaded {Fore.YELLOW}{tally.loaded}{Fore.GREEN} variable(s), "
            f"skipped {tally.skipped} line(s) in {Fore.MAGENTA}{elapsed:.2f}s{Style.RESET_ALL}"
        )


def log_loaded(key: str, value: str) -> None:
    """Print a single committed variable, masking its value."""
    print(f"{Fore.YELLOW}  {key}{Style.RESET_ALL}={mask_value(value)}")


__all__ = ["LoadTally", "log_load", "log_loaded"]
