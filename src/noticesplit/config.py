import pathlib
from dataclasses import dataclass, field
from typing import List, Optional

NPM_NOTICE_NAME = "npm_NOTICE.txt"
NUGET_NOTICE_NAME = "nuget_NOTICE.txt"
SUMMARY_RELATIVE_PATH = pathlib.Path("out") / "noticeSplitterResults.txt"


def default_source_path() -> pathlib.Path:
    """The aggregated notice file as downloaded into the user's Downloads folder."""
    return pathlib.Path.home() / "Downloads" / "NOTICE.txt"


@dataclass
class SplitterConfig:
    """Where the source notice is read from and where the split files go."""

    source_path: pathlib.Path
    npm_destinations: List[pathlib.Path] = field(default_factory=list)
    nuget_destinations: List[pathlib.Path] = field(default_factory=list)
    summary_path: Optional[pathlib.Path] = None

    @classmethod
    def from_defaults(
        cls,
        repo_root: pathlib.Path,
        source_path: Optional[pathlib.Path] = None,
    ) -> "SplitterConfig":
        """
        Builds the configuration used when nothing else is specified.

        Args:
            repo_root: Directory the notice and summary files are written under.
            source_path: The aggregated notice file. Defaults to
                        ~/Downloads/NOTICE.txt.
        """
        repo_root = repo_root.resolve()
        return cls(
            source_path=source_path or default_source_path(),
            npm_destinations=[repo_root / NPM_NOTICE_NAME],
            nuget_destinations=[repo_root / NUGET_NOTICE_NAME],
            summary_path=repo_root / SUMMARY_RELATIVE_PATH,
        )
