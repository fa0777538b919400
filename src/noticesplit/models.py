import pathlib
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ComponentType(Enum):
    """Package registry a license block is attributed to."""

    UNKNOWN = "unknown"
    NPM = "npm"
    NUGET = "nuget"


@dataclass(frozen=True)
class LicenseEntry:
    """One classified license block taken from the source notice file."""

    title: str
    "First non-blank line of the block, right-trimmed"

    body: str
    "Block text, starting with its opening separator line"


@dataclass(frozen=True)
class SplitResult:
    """Outcome of scanning a complete notice file."""

    header: str
    npm_entries: List[LicenseEntry] = field(default_factory=list)
    nuget_entries: List[LicenseEntry] = field(default_factory=list)
    total_components: int = 0
    lines_scanned: int = 0

    def entries_for(self, component_type: ComponentType) -> List[LicenseEntry]:
        if component_type is ComponentType.NPM:
            return self.npm_entries
        if component_type is ComponentType.NUGET:
            return self.nuget_entries
        raise ValueError(f"No entries are kept for {component_type.name}")


@dataclass(frozen=True)
class SplitOutput:
    """The three documents produced from one source notice file."""

    npm_document: str
    nuget_document: str
    summary_report: str


class SourceNotFoundError(FileNotFoundError):
    """Raised when the source notice file does not exist."""

    def __init__(self, path: pathlib.Path):
        self.path = path
        super().__init__(f"The file {path} does not exist.")
