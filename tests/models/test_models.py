import pathlib

import pytest

from noticesplit.models import (
    ComponentType,
    LicenseEntry,
    SourceNotFoundError,
    SplitResult,
)


class TestSplitResult:
    """Tests for the SplitResult class."""

    def test_entries_for_each_registry(self) -> None:
        """Test that entries are looked up by component type."""
        # Arrange
        npm = [LicenseEntry(title="lodash", body="lodash body")]
        nuget = [LicenseEntry(title="Azure.Core", body="Azure body")]
        result = SplitResult(header="", npm_entries=npm, nuget_entries=nuget)

        # Act / Assert
        assert result.entries_for(ComponentType.NPM) == npm
        assert result.entries_for(ComponentType.NUGET) == nuget

    def test_entries_for_unknown_raises(self) -> None:
        """Test that unclassified entries are never kept."""
        result = SplitResult(header="")

        with pytest.raises(ValueError):
            result.entries_for(ComponentType.UNKNOWN)


def test_source_not_found_message() -> None:
    error = SourceNotFoundError(pathlib.Path("missing/NOTICE.txt"))

    assert isinstance(error, FileNotFoundError)
    assert error.path == pathlib.Path("missing/NOTICE.txt")
    assert str(error) == f"The file {pathlib.Path('missing/NOTICE.txt')} does not exist."
