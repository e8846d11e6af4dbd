"""Command line interface for searching Javadoc archives.

Loads every archive in the configured directory and either searches for
class names or prints the details and documentation URL of one class.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from src.class_info import ClassInfo
from src.errors import JavadocError
from src.javadoc_library import JavadocLibrary
from src.load_config import load_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the javadoc-index command."""
    ap = argparse.ArgumentParser(
        description="Look up Java classes in Javadoc ZIP archives.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--archive-dir",
        type=Path,
        help="Directory containing Javadoc *.zip archives (overrides config)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log archive loading details",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Find fully-qualified class names")
    search.add_argument("query", help='Simple or fully-qualified name, e.g. "string"')

    info = sub.add_parser("info", help="Show a class's description and URL")
    info.add_argument("name", help='Fully-qualified name, e.g. "java.lang.String"')
    info.add_argument(
        "--frames",
        action="store_true",
        default=None,
        help="Link to the framed version of the Javadoc page",
    )
    return ap


def run(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Execute a parsed command against the configured archives."""
    directory = args.archive_dir or Path(config["archives"]["directory"])
    library = JavadocLibrary.from_directory(directory, config["archives"]["pattern"])

    if args.command == "search":
        names = library.search(args.query)
        if not names:
            print(f"No classes found matching: {args.query}", file=sys.stderr)
            return 1
        for name in names:
            print(name)
        return 0

    info = library.get_class_info(args.name)
    if info is None:
        print(f"Class not found: {args.name}", file=sys.stderr)
        return 1

    frames = config["urls"]["frames"] if args.frames is None else args.frames
    print(format_class_info(info, frames=frames))
    return 0


def format_class_info(info: ClassInfo, *, frames: bool = False) -> str:
    """Render a class's info as plain text."""
    header = " ".join([*info.modifiers, info.kind, info.name.full_name])
    lines = [header]
    if info.deprecated:
        lines.append("(deprecated)")
    url = info.frames_url if frames else info.url
    if url:
        lines.append(url)
    if info.archive is not None and info.archive.name:
        library = info.archive.name
        if info.archive.version:
            library += f" {info.archive.version}"
        lines.append(f"From: {library}")
    if info.description:
        lines.extend(["", info.description])
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run the command."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        level = logging.DEBUG if args.verbose else config["logging"]["level"]
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
        return run(args, config)
    except (JavadocError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
