import pathlib
from typing import List

import pytest

SEPARATOR = "-" * 57


@pytest.fixture
def sample_lines() -> List[str]:
    """An aggregated notice with two npm and two nuget components."""
    return [
        "NOTICES AND INFORMATION",
        "Do Not Translate or Localize",
        "",
        "This software incorporates material from third parties.",
        "",
        SEPARATOR,
        SEPARATOR,
        "",
        "lodash 4.17.21 - MIT",
        "https://github.com/lodash/lodash",
        "",
        "Copyright OpenJS Foundation",
        "",
        "MIT License text",
        "",
        SEPARATOR,
        "",
        SEPARATOR,
        "",
        "Newtonsoft.Json 13.0.1 - MIT",
        "",
        "Copyright James Newton-King",
        "",
        SEPARATOR,
        "",
        SEPARATOR,
        "",
        "@babel/core 7.22.0 - MIT",
        "",
        "Copyright Sebastian McKenzie",
        "",
        SEPARATOR,
        "",
        SEPARATOR,
        "",
        "Azure.Core 1.35.0 - MIT",
        "",
        "Copyright Microsoft",
        "",
        SEPARATOR,
        "",
        SEPARATOR,
        "",
        "zone.js 0.13.0 - MIT",
        "trailing block without closing separators",
    ]


@pytest.fixture
def sample_notice(tmp_path: pathlib.Path, sample_lines: List[str]) -> pathlib.Path:
    """Write the sample notice to disk and return its path."""
    path = tmp_path / "NOTICE.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
