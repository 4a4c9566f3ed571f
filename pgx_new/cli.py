"""pgx-new command-line entry point.

Usage::

    pgx-new my_extension
    pgx-new my_worker --bgworker -o ./extensions
    python -m pgx_new my_extension --staged -vv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from pgx_new.config import Config
from pgx_new.scaffolder import ExtensionConfig, ScaffoldError, ScaffoldGenerator
from pgx_new.utils import print_error, print_success, print_summary_table
from pgx_new.validator import ExtensionNameError, validate_extension_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgx-new",
        description="Create a new Postgres extension crate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  pgx-new my_extension\n"
            "  pgx-new my_worker --bgworker -o ./extensions\n"
        ),
    )
    parser.add_argument("name", help="The name of the extension ([a-z0-9_])")
    parser.add_argument(
        "--bgworker", "-b",
        action="store_true",
        help="Create a background worker template",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory in which to create the extension (default: current directory)",
    )
    parser.add_argument(
        "--staged",
        action="store_true",
        default=None,
        help="Build in a temporary directory and move into place only on success",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=None,
        help="Print each created file (-vv for a summary table)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``pgx-new`` and ``python -m pgx_new``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid PGX_NEW_* environment setting: {escape(str(exc))}")
        return 1
    if args.output is not None:
        config.output_dir = Path(args.output)
    if args.staged is not None:
        config.staged = args.staged
    if args.verbose is not None:
        config.verbose = args.verbose

    extension = ExtensionConfig(name=args.name, bgworker=args.bgworker)

    try:
        validate_extension_name(extension.name)
    except ExtensionNameError as exc:
        print_error(f"Error: {escape(str(exc))} (got {escape(repr(exc.name))})")
        return 1

    if config.verbose >= 2:
        print_summary_table(
            {
                "Name": extension.name,
                "Variant": extension.variant.value,
                "Destination": str(config.destination(extension.name)),
                "Mode": "staged" if config.staged else "direct",
            },
            title="pgx-new",
        )

    generator = ScaffoldGenerator(
        extension,
        staged=config.staged,
        verbose=config.verbose >= 1,
    )
    try:
        root = generator.generate(config.output_dir)
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    print_success(f"Created extension {extension.name} at {escape(str(root))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
