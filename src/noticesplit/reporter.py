import os
from typing import Iterable, List

from noticesplit.models import LicenseEntry, SplitResult

SUMMARY_SECTION_SEPARATOR = "============="


def sort_by_title(entries: Iterable[LicenseEntry]) -> List[LicenseEntry]:
    """Sorts entries by title, ignoring case."""
    return sorted(entries, key=lambda entry: entry.title.lower())


class ReportGenerator:
    """Generates the split notice documents and the summary report."""

    def __init__(self, line_terminator: str = os.linesep):
        self.line_terminator = line_terminator

    def generate_notice(self, header: str, entries: Iterable[LicenseEntry]) -> str:
        """
        Builds one notice document from the shared header and the given entries.

        Args:
            header: The text preceding the first license block of the source.
            entries: The license entries belonging to one package registry.

        Returns:
            The header followed by each entry body, ordered by title.
        """
        sections = [header]
        sections.extend(entry.body for entry in sort_by_title(entries))
        return self.line_terminator.join(sections)

    def count_lines(self, result: SplitResult) -> List[str]:
        return [
            f"total components: {result.total_components} "
            f"(parsed {result.lines_scanned} lines)",
            f"npm components  : {len(result.npm_entries)}",
            f"nuget components: {len(result.nuget_entries)}",
        ]

    def generate_summary(self, result: SplitResult) -> str:
        """
        Formats the counts and the titles found per package registry.

        Args:
            result: The outcome of scanning the source notice file.

        Returns:
            The summary report text.
        """
        summary = self.count_lines(result)
        summary.extend(self._format_titles("npm", result.npm_entries))
        summary.extend(self._format_titles("nuget", result.nuget_entries))
        return self.line_terminator.join(summary)

    def _format_titles(self, label: str, entries: List[LicenseEntry]) -> List[str]:
        # the blank separator is the terminator itself, which renders as two
        # empty lines once joined
        section = [self.line_terminator, f"{label} package titles found:"]
        section.append(SUMMARY_SECTION_SEPARATOR)
        section.extend(sorted((entry.title for entry in entries), key=str.lower))
        return section
