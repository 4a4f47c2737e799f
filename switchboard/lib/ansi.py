import re
from collections.abc import Callable
from dataclasses import dataclass

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True)
class Theme:
    green: str = "\033[38;5;114m"
    yellow: str = "\033[38;5;221m"
    gold: str = "\033[38;5;220m"
    muted: str = "\033[90m"
    bold: str = "\033[1m"
    reset: str = "\033[0m"


DEFAULT = Theme()

_COLORS = {"green", "yellow", "gold", "muted"}


def __getattr__(name: str) -> Callable[[str], str]:
    if name in _COLORS:

        def _wrap(text: str) -> str:
            return f"{getattr(DEFAULT, name)}{text}{DEFAULT.reset}"

        _wrap.__name__ = name
        return _wrap
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def bold(text: str) -> str:
    return f"{DEFAULT.bold}{text}{DEFAULT.reset}"


def strip(text: str) -> str:
    return _ANSI_RE.sub("", text)
