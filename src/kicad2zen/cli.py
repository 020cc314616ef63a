"""Command-line interface.

Usage:
    kicad2zen import kicad <project-dir> [-o FILE] [--stdout] [--mode MODE] [-v]

Examples:
    # Write blinky-imported.zen to the current directory
    kicad2zen import kicad ./blinky

    # Print faithful-mode output instead of writing a file
    kicad2zen import kicad ./blinky --mode faithful --stdout
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .constants import IMPORTED_SUFFIX
from .emit import OutputMode
from .exceptions import Kicad2ZenError
from .logging_config import setup_logging
from .project import convert_project


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kicad2zen",
        description="Convert KiCad projects to Zener source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"kicad2zen {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    import_parser = subparsers.add_parser("import", help="Import designs from external formats")
    import_subparsers = import_parser.add_subparsers(dest="import_format", help="Source formats")

    kicad = import_subparsers.add_parser("kicad", help="Import a KiCad project directory")
    kicad.add_argument("path", help="Directory containing .kicad_sch / .kicad_pcb / .kicad_pro files")
    kicad.add_argument(
        "-o",
        "--output",
        help=f"Output file (default: <project>{IMPORTED_SUFFIX}.zen in the current directory)",
    )
    kicad.add_argument("--stdout", action="store_true", help="Print to stdout instead of a file")
    kicad.add_argument(
        "--mode",
        choices=[m.value for m in OutputMode],
        default=OutputMode.IDIOMATIC.value,
        help="idiomatic: stdlib generics; faithful: raw components",
    )
    kicad.add_argument("--strict", action="store_true", help="Fail on duplicate KiCad files")
    kicad.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def run_import_kicad(args: argparse.Namespace) -> int:
    path = Path(args.path)
    if not path.exists():
        print(f"Error: Path does not exist: {path}", file=sys.stderr)
        return 1
    if not path.is_dir():
        print(f"Error: Path must be a directory containing KiCad files: {path}", file=sys.stderr)
        return 1

    print(f"Parsing KiCad project: {path}", file=sys.stderr)
    try:
        project, source = convert_project(path, OutputMode(args.mode), strict=args.strict)
    except Kicad2ZenError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if project.schematic is not None:
        print("  Found schematic (.kicad_sch)", file=sys.stderr)
    if project.pcb is not None:
        print("  Found PCB layout (.kicad_pcb)", file=sys.stderr)
    if project.settings is not None:
        print("  Found project settings (.kicad_pro)", file=sys.stderr)
    if project.schematic is None and project.pcb is None:
        print("  Warning: No .kicad_sch or .kicad_pcb files found in directory", file=sys.stderr)

    if args.stdout:
        sys.stdout.write(source)
        return 0

    output = Path(args.output) if args.output else Path(f"{project.name}{IMPORTED_SUFFIX}.zen")
    try:
        output.write_text(source, encoding="utf-8")
    except OSError as e:
        print(f"Error: Failed to write output file {output}: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {output}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the kicad2zen CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "import" or getattr(args, "import_format", None) != "kicad":
        parser.print_help(sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else None)
    return run_import_kicad(args)


if __name__ == "__main__":
    sys.exit(main())
