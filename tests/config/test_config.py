import pathlib

import pytest

from noticesplit.config import SplitterConfig, default_source_path


def test_default_source_in_downloads(
    monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_source_path() == tmp_path / "Downloads" / "NOTICE.txt"


class TestSplitterConfig:
    """Tests for the SplitterConfig class."""

    def test_from_defaults(self, tmp_path: pathlib.Path) -> None:
        """Test the repo relative default destinations."""
        # Arrange
        source = tmp_path / "NOTICE.txt"

        # Act
        config = SplitterConfig.from_defaults(tmp_path, source)

        # Assert
        root = tmp_path.resolve()
        assert config.source_path == source
        assert config.npm_destinations == [root / "npm_NOTICE.txt"]
        assert config.nuget_destinations == [root / "nuget_NOTICE.txt"]
        assert config.summary_path == root / "out" / "noticeSplitterResults.txt"

    def test_from_defaults_without_source(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path
    ) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))

        config = SplitterConfig.from_defaults(tmp_path)

        assert config.source_path == tmp_path / "Downloads" / "NOTICE.txt"
