"""A reporter for writing suite results to a Markdown file."""

import logging
from pathlib import Path

from highlightre import paths
from highlightre.types import CaseResult, SuiteResult

logger = logging.getLogger(__name__)


class MarkdownReporter:
    """Generates a Markdown report of a suite run."""

    def __init__(self, report_dir: Path) -> None:
        """
        Initialize the reporter.

        Args:
            report_dir: The directory the report file is written into.

        """
        self.report_dir = report_dir
        self._reported: dict[str, int] = {}

    def _report_path(self, name: str) -> Path:
        """Return the report path for a suite name, numbering repeated names."""
        seen = self._reported.get(name, 0)
        self._reported[name] = seen + 1
        if seen:
            logger.warning("Suite name '%s' was already reported; writing report #%d.", name, seen + 1)
            return self.report_dir / f"{name}_{seen + 1}_report.md"
        return self.report_dir / f"{name}_report.md"

    def generate(self, suite: SuiteResult) -> Path | None:
        """
        Write `<suite name>_report.md` into the report directory.

        A name this reporter has already written gets a numbered file,
        `<suite name>_2_report.md` and so on, instead of overwriting the first.

        Returns:
            The report path, or None if it could not be written.

        """
        report_path = self._report_path(suite.name)
        try:
            paths.ensure_dir_exists(self.report_dir)
            logger.info("Generating report at: %s", report_path)
            with report_path.open("w", encoding="utf-8") as f:
                f.write(self._build_report_content(suite))
        except OSError:
            logger.exception("Failed to write report to %s", report_path)
            return None
        logger.info("Successfully wrote report to %s", report_path)
        return report_path

    def _build_report_content(self, suite: SuiteResult) -> str:
        """Construct the full Markdown content for the report."""
        parts = [self._build_header(suite), self._build_overview(suite)]
        parts.extend(self._build_failure(result) for result in suite.failures)
        return "\n".join(parts)

    def _build_header(self, suite: SuiteResult) -> str:
        status = "All cases passed" if suite.ok else f"{suite.failed} case(s) failed"
        return f"# Report for Suite: `{suite.name}`\n\n- **Total Cases:** {suite.total}\n- **Passed:** {suite.passed}\n- **Failed:** {suite.failed}\n- **Status:** {status}\n"

    def _build_overview(self, suite: SuiteResult) -> str:
        rows = [
            f"| {result.sample.section or '-'} | {result.sample.name} | `{self._cell(str(result.sample.pattern))}` | {'PASS' if result.passed else 'FAIL'} |"
            for result in suite.results
        ]
        table = "\n".join(["| Section | Case | Pattern | Result |", "|---|---|---|---|", *rows])
        return f"## Overview\n\n{table}\n"

    def _build_failure(self, result: CaseResult) -> str:
        sample = result.sample
        diff = "\n".join(result.diff)
        return (
            f"## FAIL: {sample.title}\n\n"
            f"- **Pattern:** `{sample.pattern}`\n"
            f"- **Input:** `{sample.text!r}`\n"
            f"- **Expected:** `{sample.expected!r}`\n"
            f"- **Actual:** `{result.actual!r}`\n\n"
            f"```diff\n{diff}\n```\n"
        )

    @staticmethod
    def _cell(text: str) -> str:
        """Escape pipes so a value fits in a table cell."""
        return text.replace("|", "\\|")
