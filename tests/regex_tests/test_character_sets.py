"""
Tests for character sets, ranges and shorthand classes.

Every case highlights the matches in the same short list of words so the
effect of each set is easy to compare.
"""

from highlightre.highlighter import highlight
from highlightre.types import Pattern

WORDS = "cat mat bat Hat ?at 0at"


def test_any_character_dot() -> None:
    """Test that the dot matches any single character."""
    result = highlight("Cat sat on the hat.", Pattern.from_flags(".at", "gi"))
    assert result == "<b>Cat</b> <b>sat</b> on the <b>hat</b>."


def test_dot_does_not_cross_line_breaks() -> None:
    """Test that the dot never matches a line break."""
    result = highlight("Cat\nsat on\nthe hat.", Pattern.from_flags("......."))
    assert result == "Cat\nsat on\n<b>the hat</b>."


def test_escaped_dot_is_literal() -> None:
    """Test that an escaped dot only matches a period."""
    result = highlight("Cat sat on the hat.", Pattern.from_flags(r"\."))
    assert result == "Cat sat on the hat<b>.</b>"


def test_included_characters() -> None:
    """Test a set listing the allowed first characters."""
    assert highlight(WORDS, Pattern.from_flags("[bc]at")) == "<b>cat</b> mat <b>bat</b> Hat ?at 0at"


def test_negated_characters() -> None:
    """Test a negated set: any character except b or c."""
    expected = "cat <b>mat</b> bat <b>Hat</b> <b>?at</b> <b>0at</b>"
    assert highlight(WORDS, Pattern.from_flags("[^bc]at")) == expected


def test_letter_ranges() -> None:
    """Test lower and upper case letter ranges in one set."""
    expected = "<b>cat</b> <b>mat</b> <b>bat</b> <b>Hat</b> ?at 0at"
    assert highlight(WORDS, Pattern.from_flags("[a-zA-Z]at")) == expected


def test_negated_letter_ranges() -> None:
    """Test excluding every letter."""
    assert highlight(WORDS, Pattern.from_flags("[^a-zA-Z]at")) == "cat mat bat Hat <b>?at</b> <b>0at</b>"


def test_special_characters_are_literal_inside_sets() -> None:
    """Test that '?' needs no escaping inside a set."""
    expected = "<b>cat</b> <b>mat</b> <b>bat</b> <b>Hat</b> <b>?at</b> <b>0at</b>"
    assert highlight(WORDS, Pattern.from_flags("[a-zA-Z0-9?]at")) == expected


def test_non_whitespace_shorthand() -> None:
    r"""Test [\S]: every non-space character is its own match."""
    expected = "<b>A</b><b>u</b> <b>$</b><b>1</b> <b>5</b><b>.</b><b>5</b><b>%</b>"
    assert highlight("Au $1 5.5%", Pattern.from_flags(r"[\S]")) == expected


def test_digit_shorthand() -> None:
    r"""Test \d+ on a price list."""
    assert highlight("3 apples for 120 cents", Pattern.from_flags(r"\d+")) == "<b>3</b> apples for <b>120</b> cents"


def test_word_shorthand() -> None:
    r"""Test \w+ treats underscores and digits as word characters."""
    assert highlight("snake_case, v2!", Pattern.from_flags(r"\w+")) == "<b>snake_case</b>, <b>v2</b>!"


def test_whitespace_shorthand() -> None:
    r"""Test \s matches spaces, tabs and newlines alike."""
    assert highlight("a b\tc\nd", Pattern.from_flags(r"\s")) == "a<b> </b>b<b>\t</b>c<b>\n</b>d"
