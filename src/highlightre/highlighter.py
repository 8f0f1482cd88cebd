"""Wraps regex substitution with highlighting markup."""

from __future__ import annotations

import logging
from typing import Final

import regex

from highlightre.types import Pattern

logger = logging.getLogger(__name__)

OPEN_MARKER: Final[str] = "<b>"
CLOSE_MARKER: Final[str] = "</b>"

Matcher = Pattern | regex.Pattern


def _resolve(pattern: Matcher) -> tuple[regex.Pattern[str], int]:
    """Return the compiled pattern and the substitution count to use with it."""
    if isinstance(pattern, Pattern):
        return pattern.compile(), pattern.count
    # An already-compiled pattern carries no global flag; treat it as global.
    return pattern, 0


def highlight(
    text: str,
    pattern: Matcher,
    *,
    group: int | str | None = None,
    open_marker: str = OPEN_MARKER,
    close_marker: str = CLOSE_MARKER,
) -> str:
    """
    Wrap every match of `pattern` in `text` with the highlight markers.

    Matches are found left to right and never overlap; touching matches are
    wrapped independently. Text outside the matches is copied through unchanged.

    Args:
        text: The text to scan.
        pattern: A Pattern, or a compiled `regex` pattern (treated as global).
        group: If given, the whole match is replaced by this group's captured
            text wrapped in markers. A group that did not participate wraps
            an empty string.
        open_marker: The marker inserted before each highlighted span.
        close_marker: The marker inserted after each highlighted span.

    Returns:
        A new string; `text` is not modified.

    """
    compiled, count = _resolve(pattern)

    def _wrap(match: regex.Match[str]) -> str:
        content = match.group() if group is None else match.group(group) or ""
        return f"{open_marker}{content}{close_marker}"

    result, replaced = compiled.subn(_wrap, text, count=count)
    logger.debug("Highlighted %d match(es) of %r", replaced, compiled.pattern)
    return result


def substitute(text: str, pattern: Matcher, template: str) -> str:
    r"""
    Replace every match of `pattern` using a replacement template.

    The template uses the engine's syntax: `\1` or `\g<1>` for numbered groups,
    `\g<name>` for named groups, and escapes such as `\n`.
    """
    compiled, count = _resolve(pattern)
    return compiled.sub(template, text, count=count)


def find_spans(text: str, pattern: Matcher) -> list[tuple[int, int]]:
    """Return the (start, end) spans that `highlight` would wrap, in order."""
    compiled, count = _resolve(pattern)
    spans = [match.span() for match in compiled.finditer(text)]
    return spans[:count] if count else spans
