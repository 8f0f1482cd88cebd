"""A reporter for logging per-case results and a concise suite summary."""

import logging

from highlightre.types import SuiteResult

logger = logging.getLogger(__name__)


class SummaryReporter:
    """Logs one line per case, the diff of every mismatch, and the suite totals."""

    def generate(self, suite: SuiteResult) -> None:
        """Log the results of a suite run to the console."""
        logger.info("--- Suite '%s' ---", suite.name)

        for result in suite.results:
            if result.passed:
                logger.info("PASS | %s", result.sample.title)
                continue
            logger.error("FAIL | %s", result.sample.title)
            for line in result.diff:
                logger.error("       %s", line)

        logger.info("Total cases: %d", suite.total)
        logger.info("  - Passed: %d", suite.passed)
        logger.info("  - Failed: %d", suite.failed)
        logger.info("-------------------------------------------------")
