import os
import pathlib
from typing import Iterable, Optional

from rich.console import Console

from noticesplit.config import SplitterConfig
from noticesplit.models import (
    ComponentType,
    SourceNotFoundError,
    SplitOutput,
    SplitResult,
)
from noticesplit.parser import NoticeParser
from noticesplit.reporter import ReportGenerator


class NoticeSplitOrchestrator:
    """
    Orchestrates splitting one aggregated notice file.

    Checks the source, scans it, writes the npm and nuget notice documents to
    every configured destination and finishes with the summary report.
    """

    def __init__(
        self,
        config: SplitterConfig,
        console: Optional[Console] = None,
        line_terminator: str = os.linesep,
    ):
        """
        Initialize the orchestrator with necessary components.

        Args:
            config: Source and destination paths.
            console: Console progress is echoed to. Defaults to stdout.
            line_terminator: Terminator used to join lines in every output.
        """
        self.config = config
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.parser = NoticeParser(line_terminator=line_terminator)
        self.reporter = ReportGenerator(line_terminator=line_terminator)

    def split(
        self, source_path: Optional[pathlib.Path] = None
    ) -> tuple[SplitResult, SplitOutput]:
        """
        Scan the source and build all three documents without writing them.

        Args:
            source_path: Overrides the configured source path.

        Returns:
            The scan result and the generated documents.

        Raises:
            SourceNotFoundError: If the source file does not exist.
        """
        source = source_path or self.config.source_path
        if not source.exists():
            raise SourceNotFoundError(source)

        result = self.parser.parse_file(source)
        npm_document, nuget_document = (
            self.reporter.generate_notice(result.header, result.entries_for(kind))
            for kind in (ComponentType.NPM, ComponentType.NUGET)
        )
        output = SplitOutput(
            npm_document=npm_document,
            nuget_document=nuget_document,
            summary_report=self.reporter.generate_summary(result),
        )
        return result, output

    def run(self, source_path: Optional[pathlib.Path] = None) -> SplitOutput:
        """
        Split the source notice file and write every output file.

        Args:
            source_path: Overrides the configured source path.

        Returns:
            The documents that were written.

        Raises:
            SourceNotFoundError: If the source file does not exist. No file is
                written in that case.
        """
        result, output = self.split(source_path)

        for line in self.reporter.count_lines(result):
            self._echo(line)

        self._write_all("npm", self.config.npm_destinations, output.npm_document)
        self._write_all("nuget", self.config.nuget_destinations, output.nuget_document)

        if self.config.summary_path is not None:
            summary_path = self.config.summary_path
            summary_path.parent.mkdir(parents=True, exist_ok=True)
            self._write(summary_path, output.summary_report)
            self._echo(f"summary file written to: {summary_path}")

        self._echo("DONE!")
        return output

    def _write_all(
        self, label: str, destinations: Iterable[pathlib.Path], document: str
    ) -> None:
        for destination in destinations:
            self._echo(f"writing {label} notice file: {destination}")
            self._write(destination, document)

    def _write(self, path: pathlib.Path, content: str) -> None:
        # newline="" keeps the configured terminator as-is
        path.write_text(content, encoding="utf-8", newline="")

    def _echo(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, emoji=False)
