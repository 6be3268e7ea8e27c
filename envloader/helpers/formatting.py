import colorama
from colorama import Fore, Style

colorama.init(autoreset=True)


def mask_value(value: str, visible: int = 2) -> str:
    """Return ``value`` with everything but the first ``visible`` chars hidden."""
    if len(value) <= visible:
        return '*' * len(value)
    return value[:visible] + '*' * (len(value) - visible)

__all__ = ["Fore", "Style", "mask_value"]
