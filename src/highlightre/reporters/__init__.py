"""Exposes the reporters for use by other modules."""

from .markdown_reporter import MarkdownReporter
from .summary_reporter import SummaryReporter

__all__ = ["MarkdownReporter", "SummaryReporter"]
