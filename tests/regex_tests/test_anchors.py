"""Tests for anchors and word boundaries."""

from highlightre.highlighter import highlight
from highlightre.types import Pattern

DATES = "12/1/16\n12-16-13\n11/12/16\n12-12-2016"


def test_line_anchors_with_multiline() -> None:
    """Test ^ and $ match at every line when the multiline flag is set."""
    expected = "<b>12/1/16</b>\n12-16-13\n11/12/16\n<b>12-12-2016</b>"
    assert highlight(DATES, Pattern.from_flags("^12.+16$", "gm")) == expected


def test_line_anchors_without_multiline() -> None:
    """Test ^ and $ only match the whole text's ends without the multiline flag."""
    assert highlight(DATES, Pattern.from_flags("^12.+16$")) == DATES


def test_start_anchor_only() -> None:
    """Test ^ without multiline highlights the first line's prefix only."""
    assert highlight(DATES, Pattern.from_flags("^12")) == "<b>12</b>" + DATES[2:]


def test_inside_word_boundary() -> None:
    r"""Test \Bis\B only matches 'is' in the middle of a word."""
    result = highlight("This history is his, it is", Pattern.from_flags(r"\Bis\B"))
    assert result == "This h<b>is</b>tory is his, it is"


def test_whole_word_boundary() -> None:
    r"""Test \bis\b only matches the standalone word."""
    result = highlight("This history is his, it is", Pattern.from_flags(r"\bis\b"))
    assert result == "This history <b>is</b> his, it <b>is</b>"


def test_word_end_boundary() -> None:
    r"""Test is\b matches 'is' at the end of any word."""
    result = highlight("This history is his, it is", Pattern.from_flags(r"is\b"))
    assert result == "Th<b>is</b> history <b>is</b> h<b>is</b>, it <b>is</b>"


def test_end_anchor_before_final_line_break() -> None:
    r"""Test $ also matches before a final line break, while \Z only matches at the very end."""
    assert highlight("ab\n", Pattern.from_flags("b$")) == "a<b>b</b>\n"
    assert highlight("ab\n", Pattern.from_flags(r"b\Z")) == "ab\n"
