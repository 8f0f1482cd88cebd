"""Evaluates example samples and collects their results."""

import difflib
import logging
from collections.abc import Iterable

from highlightre.types import CaseResult, Sample, SuiteResult

logger = logging.getLogger(__name__)


def _diff(expected: str, actual: str) -> list[str]:
    """Build a unified diff between the expected and actual outputs, one entry per line."""
    return [
        line.rstrip("\n")
        for line in difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile="expected",
            tofile="actual",
        )
    ]


def run_case(sample: Sample) -> CaseResult:
    """
    Evaluate a single sample and compare its output with the expected text.

    A mismatch is recorded on the result rather than raised.
    """
    actual = sample.render()
    passed = actual == sample.expected
    if passed:
        logger.debug("Case '%s' produced %r", sample.title, actual)
        return CaseResult(sample=sample, actual=actual, passed=True)

    logger.debug("Case '%s' mismatch: expected %r, got %r", sample.title, sample.expected, actual)
    return CaseResult(sample=sample, actual=actual, passed=False, diff=_diff(sample.expected, actual))


def run_suite(samples: Iterable[Sample], name: str = "catalog") -> SuiteResult:
    """
    Run every sample and gather the results.

    Cases are independent: a mismatch in one never stops the others.

    Args:
        samples: The samples to evaluate, in order.
        name: The suite name used in reports.

    Returns:
        A SuiteResult holding one CaseResult per sample.

    """
    suite = SuiteResult(name=name)
    for sample in samples:
        suite.results.append(run_case(sample))
    logger.debug("Suite '%s' finished: %d passed, %d failed", name, suite.passed, suite.failed)
    return suite


def select(samples: Iterable[Sample], keyword: str | None) -> list[Sample]:
    """Keep the samples whose section or name contains `keyword`, ignoring case."""
    if not keyword:
        return list(samples)
    needle = keyword.casefold()
    return [sample for sample in samples if needle in f"{sample.section} {sample.name}".casefold()]
