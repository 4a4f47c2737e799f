import pytest

from switchboard.lib import ansi
from switchboard.lib.ansi import DEFAULT, Theme, bold, strip


def test_theme_defaults():
    assert DEFAULT.bold == "\033[1m"
    assert DEFAULT.reset == "\033[0m"


def test_theme_colors():
    t = Theme()
    assert t.green == "\033[38;5;114m"
    assert t.muted == "\033[90m"


def test_bold():
    result = bold("hi")
    assert result == "\033[1mhi\033[0m"


def test_color_wrappers():
    assert ansi.green("ok") == f"{DEFAULT.green}ok{DEFAULT.reset}"
    assert strip(ansi.yellow("warn")) == "warn"


def test_unknown_color():
    with pytest.raises(AttributeError):
        ansi.red  # noqa: B018


def test_strip():
    assert strip("\033[1mhello\033[0m") == "hello"
