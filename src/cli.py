"""
Command-line interface for generating `glib_wrapper!` declarations from a
resolved metadata description.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from analysis import Version
from codegen import UnitDescription
from emitter import write_unit
from frontend import LoadError, load_unit

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _override_baseline(unit: UnitDescription, min_version: Optional[Version]) -> UnitDescription:
    if min_version is None:
        return unit
    config = unit.env.config.with_min_cfg_version(min_version)
    return replace(unit, env=replace(unit.env, config=config))


def generate_command(args: argparse.Namespace) -> int:
    input_path = Path(args.input).resolve()
    if not input_path.exists():
        sys.stderr.write(f"ERROR: Input file not found: {input_path}\n")
        return 1

    try:
        source = input_path.read_text(encoding="utf-8")
    except OSError as exc:
        sys.stderr.write(f"ERROR: Failed to read {input_path}: {exc}\n")
        return 1

    min_version: Optional[Version] = None
    if args.min_version:
        try:
            min_version = Version.parse(args.min_version)
        except ValueError as exc:
            sys.stderr.write(f"ERROR: {exc}\n")
            return 1

    try:
        unit = load_unit(source, source_name=str(input_path))
    except LoadError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 1
    unit = _override_baseline(unit, min_version)

    output_path = Path(args.out) if args.out else input_path.with_suffix(".rs")
    try:
        write_unit(unit, output_path)
    except OSError as exc:
        sys.stderr.write(f"ERROR: Failed to write {output_path}: {exc}\n")
        return 1

    logger.info("wrote %d types to %s", len(unit.types), output_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glib-wrapper-gen",
        description="Generate glib_wrapper! declarations from resolved library metadata",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log emission decisions to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate one Rust source file from a JSON description"
    )
    generate_parser.add_argument("input", help="Path to the JSON metadata description")
    generate_parser.add_argument(
        "--out",
        help="Output Rust file path (defaults to same directory with .rs extension)",
    )
    generate_parser.add_argument(
        "--min-version",
        help="Override the baseline library version below which no cfg gate is written.",
    )
    generate_parser.set_defaults(func=generate_command)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
