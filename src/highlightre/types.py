"""Defines shared data structures and types for HighlightRe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

import regex

_FLAG_ORDER: Final[str] = "gim"


@dataclass(frozen=True)
class Pattern:
    """
    An immutable matcher specification: a pattern source plus its flags.

    Attributes:
        source: The regular expression text, in the `regex` library's syntax.
        global_match: Highlight every non-overlapping match instead of only the first.
        ignore_case: Match case-insensitively.
        multiline: Let `^` and `$` match at line boundaries.

    """

    source: str
    global_match: bool = True
    ignore_case: bool = False
    multiline: bool = False

    @classmethod
    def from_flags(cls, source: str, flags: str = "g") -> "Pattern":
        """
        Build a Pattern from a compact flag string such as 'gi' or 'gm'.

        Raises:
            ValueError: If the flag string contains a letter other than g, i or m.

        """
        unknown = sorted(set(flags) - set(_FLAG_ORDER))
        if unknown:
            msg = f"Unsupported pattern flag(s) {''.join(unknown)!r}; expected a combination of '{_FLAG_ORDER}'."
            raise ValueError(msg)
        return cls(
            source=source,
            global_match="g" in flags,
            ignore_case="i" in flags,
            multiline="m" in flags,
        )

    @property
    def flags(self) -> str:
        """Render the flags back into their compact string form."""
        enabled = (self.global_match, self.ignore_case, self.multiline)
        return "".join(letter for letter, on in zip(_FLAG_ORDER, enabled, strict=True) if on)

    @property
    def count(self) -> int:
        """Return the substitution count: 0 replaces all matches, 1 only the first."""
        return 0 if self.global_match else 1

    def compile(self) -> regex.Pattern[str]:
        """Compile the source with the engine flags this pattern asks for."""
        engine_flags = 0
        if self.ignore_case:
            engine_flags |= regex.IGNORECASE
        if self.multiline:
            engine_flags |= regex.MULTILINE
        return regex.compile(self.source, engine_flags)

    def __str__(self) -> str:
        """Render the pattern as '/source/flags'."""
        return f"/{self.source}/{self.flags}"


@dataclass(frozen=True)
class Sample:
    """
    A single example: an input text, a pattern and the output it must produce.

    By default the sample highlights whole matches. Setting `group` highlights
    only that group's captured text, and setting `template` switches to plain
    template substitution.
    """

    name: str
    text: str
    pattern: Pattern
    expected: str
    template: str | None = None
    group: int | str | None = None
    section: str = ""

    def __post_init__(self) -> None:
        """Validate that at most one evaluation mode is selected."""
        if self.template is not None and self.group is not None:
            msg = f"Sample '{self.name}' cannot define both 'template' and 'group'."
            raise ValueError(msg)

    @property
    def title(self) -> str:
        """Return the display title, prefixed by the section when there is one."""
        return f"{self.section} > {self.name}" if self.section else self.name

    def render(self) -> str:
        """Evaluate the sample and return the actual output."""
        # Imported here because the highlighter module imports this one.
        from highlightre.highlighter import highlight, substitute

        if self.template is not None:
            return substitute(self.text, self.pattern, self.template)
        return highlight(self.text, self.pattern, group=self.group)


@dataclass
class CaseResult:
    """The outcome of evaluating one Sample."""

    sample: Sample
    actual: str
    passed: bool
    diff: list[str] = field(default_factory=list)


@dataclass
class SuiteResult:
    """The outcomes of every case in a suite, in execution order."""

    name: str
    results: list[CaseResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        """Check how many cases produced their expected output."""
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        """Check how many cases produced a mismatch."""
        return len(self.results) - self.passed

    @property
    def total(self) -> int:
        """Return the number of evaluated cases."""
        return len(self.results)

    @property
    def ok(self) -> bool:
        """Check whether every case passed."""
        return self.failed == 0

    @property
    def failures(self) -> list[CaseResult]:
        """Return only the mismatched cases."""
        return [result for result in self.results if not result.passed]
