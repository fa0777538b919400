import argparse
import os
import pathlib
import sys
from typing import List, Optional

from rich.console import Console

from noticesplit.config import SplitterConfig
from noticesplit.models import SourceNotFoundError
from noticesplit.orchestrator import NoticeSplitOrchestrator

LINE_ENDINGS = {"native": os.linesep, "lf": "\n", "crlf": "\r\n"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noticesplit",
        description="Split an aggregated NOTICE file into npm and nuget notice files",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=os.getenv("NOTICE_SPLIT_SOURCE"),
        help="Aggregated notice file (default: ~/Downloads/NOTICE.txt)",
    )
    parser.add_argument(
        "--repo-root",
        dest="repo_root",
        default=os.getenv("NOTICE_SPLIT_REPO_ROOT", "."),
        help="Directory the default output files are written under (default: .)",
    )
    parser.add_argument(
        "--npm-out",
        dest="npm_out",
        action="append",
        default=[],
        help="npm notice file to write. May be given more than once.",
    )
    parser.add_argument(
        "--nuget-out",
        dest="nuget_out",
        action="append",
        default=[],
        help="nuget notice file to write. May be given more than once.",
    )
    parser.add_argument(
        "--summary",
        dest="summary_path",
        default="",
        help="Summary report path (default: <repo-root>/out/noticeSplitterResults.txt)",
    )
    parser.add_argument(
        "--line-ending",
        dest="line_ending",
        choices=sorted(LINE_ENDINGS),
        default="native",
        help="Line terminator used in the written files",
    )
    return parser


def build_config(args: argparse.Namespace) -> SplitterConfig:
    source = pathlib.Path(args.source).expanduser() if args.source else None
    config = SplitterConfig.from_defaults(pathlib.Path(args.repo_root), source)

    if args.npm_out:
        config.npm_destinations = [pathlib.Path(p) for p in args.npm_out]
    if args.nuget_out:
        config.nuget_destinations = [pathlib.Path(p) for p in args.nuget_out]
    if args.summary_path:
        config.summary_path = pathlib.Path(args.summary_path)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = build_config(args)

    orchestrator = NoticeSplitOrchestrator(
        config, line_terminator=LINE_ENDINGS[args.line_ending]
    )
    try:
        orchestrator.run()
    except SourceNotFoundError as e:
        Console(stderr=True, highlight=False, soft_wrap=True).print(
            f"Error: {e}", style="bold red", markup=False, emoji=False
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
