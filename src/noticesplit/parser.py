import io
import os
import pathlib
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from noticesplit.models import ComponentType, LicenseEntry, SplitResult

SEPARATOR_START = "-" * 53


def is_separator(line: str) -> bool:
    """Return True for a line that starts (after indentation) with 53 hyphens."""
    return line.lstrip().startswith(SEPARATOR_START)


def determine_component_type(line: str) -> ComponentType:
    """
    Classify a candidate title line by its first character.

    Titles starting with a lowercase letter, a digit, a symbol or ``@`` are npm
    packages. Anything else (an uppercase letter) is a nuget package.

    Args:
        line: The candidate title line.

    Returns:
        The component type, or ComponentType.UNKNOWN for a blank line.
    """
    stripped = line.lstrip()
    if not stripped:
        return ComponentType.UNKNOWN

    first_char = stripped[0]
    if first_char.lower() == first_char or first_char == "@":
        return ComponentType.NPM
    return ComponentType.NUGET


@dataclass
class ScanState:
    """Mutable state carried from one line of the source to the next."""

    reading_header: bool = True
    header: Optional[str] = None
    buffer: List[str] = field(default_factory=list)
    component_type: ComponentType = ComponentType.UNKNOWN
    pending_titles: Dict[ComponentType, str] = field(default_factory=dict)
    separator_count: int = 0
    line_count: int = 0
    npm_entries: List[LicenseEntry] = field(default_factory=list)
    nuget_entries: List[LicenseEntry] = field(default_factory=list)
    total_components: int = 0


class NoticeParser:
    """Splits an aggregated notice file into per-component license blocks."""

    def __init__(self, line_terminator: str = os.linesep):
        self.line_terminator = line_terminator

    def parse(self, lines: Iterable[str]) -> SplitResult:
        """
        Scans the given lines and returns the classified license entries.

        Args:
            lines: The lines of the notice file, with or without terminators.

        Returns:
            A SplitResult holding the header and the npm and nuget entries.
        """
        state = ScanState()
        for line in lines:
            self.process_line(state, line)
        return self.finish(state)

    def parse_text(self, text: str) -> SplitResult:
        return self.parse(io.StringIO(text, newline=None))

    def parse_file(self, path: pathlib.Path) -> SplitResult:
        with path.open(encoding="utf-8") as handle:
            return self.parse(handle)

    def process_line(self, state: ScanState, line: str) -> None:
        line = line.rstrip("\r\n")
        state.line_count += 1
        state.buffer.append(line.rstrip())

        if state.reading_header:
            self._process_header(state, line)
        else:
            self._process_notice(state, line)

    def finish(self, state: ScanState) -> SplitResult:
        """Builds the result; an unterminated trailing block is discarded."""
        return SplitResult(
            header=state.header or "",
            npm_entries=list(state.npm_entries),
            nuget_entries=list(state.nuget_entries),
            total_components=state.total_components,
            lines_scanned=state.line_count,
        )

    def _process_header(self, state: ScanState, line: str) -> None:
        if not is_separator(line):
            return

        state.reading_header = False
        state.header = self.line_terminator.join(state.buffer)
        state.buffer = [line]

    def _process_notice(self, state: ScanState, line: str) -> None:
        if state.component_type is ComponentType.UNKNOWN and not is_separator(line):
            state.component_type = determine_component_type(line)
            if state.component_type is not ComponentType.UNKNOWN:
                state.pending_titles[state.component_type] = line.strip()

        if state.component_type is ComponentType.UNKNOWN:
            return

        if self._closes_license_block(state, line):
            self._flush_entry(state)

    def _closes_license_block(self, state: ScanState, line: str) -> bool:
        """
        Counts separator lines towards a double separator.

        Blank lines between the two separators are allowed, any other content
        starts the count again.
        """
        if is_separator(line):
            state.separator_count += 1
            if state.separator_count == 2:
                state.separator_count = 0
                return True
        elif state.separator_count > 0 and line.strip():
            state.separator_count = 0
        return False

    def _flush_entry(self, state: ScanState) -> None:
        closing_separator = state.buffer.pop()
        body = self.line_terminator.join(state.buffer)
        entry = LicenseEntry(
            title=state.pending_titles[state.component_type], body=body
        )

        if state.component_type is ComponentType.NPM:
            state.npm_entries.append(entry)
        else:
            state.nuget_entries.append(entry)

        state.total_components += 1
        state.buffer = [closing_separator]
        state.component_type = ComponentType.UNKNOWN
