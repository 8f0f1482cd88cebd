"""Tests for the shared data structures."""

import dataclasses
import unittest

import pytest
import regex

from highlightre.types import CaseResult, Pattern, Sample, SuiteResult


class TestPattern(unittest.TestCase):
    """Test suite for the Pattern dataclass."""

    def test_from_flags_parses_each_letter(self) -> None:
        """1. Flags: g, i and m map onto the three booleans."""
        pattern = Pattern.from_flags("x", "gim")
        assert pattern.global_match is True
        assert pattern.ignore_case is True
        assert pattern.multiline is True

    def test_from_flags_defaults_to_global(self) -> None:
        """2. Default: Only the global flag is set."""
        pattern = Pattern.from_flags("x")
        assert pattern == Pattern(source="x", global_match=True, ignore_case=False, multiline=False)

    def test_from_flags_order_and_duplicates_do_not_matter(self) -> None:
        """3. Normalisation: 'mig' and 'ggim' render as 'gim'."""
        assert Pattern.from_flags("x", "mig").flags == "gim"
        assert Pattern.from_flags("x", "ggim").flags == "gim"

    def test_from_flags_rejects_unknown_letters(self) -> None:
        """4. Validation: Unsupported letters raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported pattern flag"):
            Pattern.from_flags("x", "gs")

    def test_count(self) -> None:
        """5. Count: 0 for global patterns, 1 otherwise."""
        assert Pattern.from_flags("x", "g").count == 0
        assert Pattern.from_flags("x", "i").count == 1

    def test_compile_applies_engine_flags(self) -> None:
        """6. Compile: ignore_case and multiline become regex flags."""
        compiled = Pattern.from_flags("^x", "gim").compile()
        assert compiled.flags & regex.IGNORECASE
        assert compiled.flags & regex.MULTILINE

    def test_compile_without_flags(self) -> None:
        """7. Compile: No engine flags for a plain pattern."""
        compiled = Pattern.from_flags("x").compile()
        assert not compiled.flags & regex.IGNORECASE
        assert not compiled.flags & regex.MULTILINE

    def test_str(self) -> None:
        """8. Display: Rendered as /source/flags."""
        assert str(Pattern.from_flags("is", "gi")) == "/is/gi"

    def test_is_immutable(self) -> None:
        """9. Immutability: Fields cannot be reassigned."""
        pattern = Pattern.from_flags("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.source = "y"  # type: ignore[misc]


class TestSample(unittest.TestCase):
    """Test suite for the Sample dataclass."""

    def test_rejects_template_and_group_together(self) -> None:
        """1. Validation: Only one evaluation mode may be chosen."""
        with pytest.raises(ValueError, match="cannot define both"):
            Sample(name="bad", text="", pattern=Pattern.from_flags("x"), expected="", template=r"\1", group=1)

    def test_title_with_and_without_section(self) -> None:
        """2. Title: Prefixed by the section when there is one."""
        pattern = Pattern.from_flags("x")
        assert Sample(name="n", text="", pattern=pattern, expected="", section="S").title == "S > n"
        assert Sample(name="n", text="", pattern=pattern, expected="").title == "n"

    def test_render_highlight(self) -> None:
        """3. Render: Highlights whole matches by default."""
        sample = Sample(name="n", text="ab", pattern=Pattern.from_flags("b"), expected="")
        assert sample.render() == "a<b>b</b>"

    def test_render_group(self) -> None:
        """4. Render: Highlights a group when asked."""
        sample = Sample(name="n", text="ab", pattern=Pattern.from_flags("a(b)"), expected="", group=1)
        assert sample.render() == "<b>b</b>"

    def test_render_template(self) -> None:
        """5. Render: Uses the template when one is given."""
        sample = Sample(name="n", text="ab", pattern=Pattern.from_flags("(a)(b)"), expected="", template=r"\2\1")
        assert sample.render() == "ba"


class TestSuiteResult(unittest.TestCase):
    """Test suite for the SuiteResult counters."""

    def test_counters(self) -> None:
        """1. Counters: passed, failed, total and ok agree with the results."""
        sample = Sample(name="n", text="a", pattern=Pattern.from_flags("a"), expected="<b>a</b>")
        suite = SuiteResult(
            name="s",
            results=[
                CaseResult(sample=sample, actual="<b>a</b>", passed=True),
                CaseResult(sample=sample, actual="a", passed=False, diff=["-<b>a</b>", "+a"]),
            ],
        )
        assert suite.total == 2
        assert suite.passed == 1
        assert suite.failed == 1
        assert suite.ok is False
        assert suite.failures == [suite.results[1]]

    def test_empty_suite_is_ok(self) -> None:
        """2. Empty: A suite with no cases counts as passing."""
        assert SuiteResult(name="empty").ok is True


if __name__ == "__main__":
    unittest.main()
