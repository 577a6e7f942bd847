from __future__ import annotations

"""Command line interface.

``xd-toolkit info FILE`` lists the artboards of a container and
``xd-toolkit assets FILE -o DIR`` exports its pattern-fill bitmaps.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xd_toolkit.core.assets import export_pattern_assets
from xd_toolkit.core.exceptions import XdParserError
from xd_toolkit.core.importers import XdPackageImporter
from xd_toolkit.core.traversal import iter_objects
from xd_toolkit.logging_config import setup_logging
from xd_toolkit.version import get_app_version

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="xd-toolkit",
        description="Inspect Adobe XD containers.",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging.")
    p.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")

    sub = p.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="List the artboards of a container.")
    info.add_argument("file", type=Path)
    info.add_argument("--workers", type=int, default=None,
                      help="Threads used to load artboards (overrides parser.yml).")

    assets = sub.add_parser("assets", help="Export pattern-fill bitmaps.")
    assets.add_argument("file", type=Path)
    assets.add_argument("-o", "--output", dest="output_dir", type=Path, required=True)

    return p


def _cmd_info(args: argparse.Namespace) -> int:
    overrides = {"max_workers": args.workers} if args.workers else None
    importer = XdPackageImporter(overrides)
    with importer.import_package(args.file) as xd_file:
        for index, artboard in enumerate(xd_file.artboards):
            node_count = sum(1 for _ in iter_objects(artboard))
            href = artboard.artboard.resources.href if artboard.artboard.resources else ""
            print(f"{index}\t{artboard.name}\t{artboard.id}\t{artboard.path}\t{node_count}\t{href}")
    return 0


def _cmd_assets(args: argparse.Namespace) -> int:
    importer = XdPackageImporter()
    with importer.import_package(args.file) as xd_file:
        written = export_pattern_assets(xd_file, args.output_dir)
    for uid, path in sorted(written.items()):
        print(f"{uid}\t{path}")
    return 0


_COMMANDS = {
    "info": _cmd_info,
    "assets": _cmd_assets,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.debug else None)
    logger.debug("Running command %s on %s", args.command, args.file)

    try:
        return _COMMANDS[args.command](args)
    except XdParserError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
