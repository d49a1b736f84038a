"""
Style Renderer - ANSI markup for terminal output.

Every styled string is independently terminated: the markup is followed by
the text and an explicit reset, so styled fragments can be concatenated or
nested without tracking state.

Example:
    ```python
    from agenttrace.observability.style import StyleToken, bold, red, style

    print(red("Unknown function: 'calculate_tax'"))
    print(style("DEMO", StyleToken.BOLD, StyleToken.CYAN))
    ```
"""

from __future__ import annotations

import re
from enum import Enum


class StyleToken(str, Enum):
    """ANSI escape codes for terminal styles."""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    PURPLE = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    @property
    def markup(self) -> str:
        return self.value


_MARKUP_RE = re.compile(
    "|".join(re.escape(token.markup) for token in StyleToken)
)


def style(text: str, *tokens: StyleToken) -> str:
    """Wrap text with the given styles followed by a reset."""
    return "".join(t.markup for t in tokens) + text + StyleToken.RESET.markup


def strip_style(text: str) -> str:
    """Remove all markup produced by this module."""
    return _MARKUP_RE.sub("", text)


def bold(text: str) -> str:
    return style(text, StyleToken.BOLD)


def red(text: str) -> str:
    return style(text, StyleToken.RED)


def green(text: str) -> str:
    return style(text, StyleToken.GREEN)


def yellow(text: str) -> str:
    return style(text, StyleToken.YELLOW)


def blue(text: str) -> str:
    return style(text, StyleToken.BLUE)


def purple(text: str) -> str:
    return style(text, StyleToken.PURPLE)


def cyan(text: str) -> str:
    return style(text, StyleToken.CYAN)


def white(text: str) -> str:
    return style(text, StyleToken.WHITE)


class Styler:
    """Applies styles based on config."""

    def __init__(self, use_colors: bool = True) -> None:
        self.use_colors = use_colors

    def _wrap(self, text: str, *tokens: StyleToken) -> str:
        if not self.use_colors:
            return text
        return style(text, *tokens)

    def header(self, text: str) -> str:
        return self._wrap(text, StyleToken.BOLD, StyleToken.CYAN)

    def sub_header(self, text: str) -> str:
        return self._wrap(text, StyleToken.BOLD)

    def error(self, text: str) -> str:
        return self._wrap(text, StyleToken.BOLD, StyleToken.RED)
