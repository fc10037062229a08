from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rotaug.constants import MALFORMED_POLICIES, OUTPUT_MODES

EXIT_SUCCESS = 0
EXIT_INVALID_ARGUMENTS = 1
EXIT_UNHANDLED_ERROR = 2


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad arguments; rotaug reserves 2 for runtime failures."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_INVALID_ARGUMENTS, f"{self.prog}: error: {message}\n")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("filelist", help="Fold file list: one '<path> <label>' per line")
    parser.add_argument("--config", help="Path to TOML/YAML/JSON config file")
    parser.add_argument(
        "--on-malformed",
        choices=list(MALFORMED_POLICIES),
        help="Abort on lines with fewer than two tokens, or skip them with a warning",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="rotaug",
        description="Generate augmented file lists of rotated and flipped image variants",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    expand = subparsers.add_parser("expand", help="Expand a fold file list into rotation/flip variants")
    _add_common_args(expand)
    expand.add_argument("rot_step", type=int, help="Rotation step amount in degrees")
    expand.add_argument("--output", help="Output manifest path (overrides --output-mode)")
    expand.add_argument(
        "--output-mode",
        choices=list(OUTPUT_MODES),
        help="Name output 'augmented_<input>' or use the fixed name (output.txt)",
    )
    expand.add_argument("--sort", action="store_true", help="Sort output lines lexicographically")
    expand.add_argument("--workers", type=int, help="Thread pool size for per-record expansion")
    expand.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs")
    expand.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level")

    categories = subparsers.add_parser("categories", help="List top-level categories in a fold file list")
    _add_common_args(categories)
    categories.add_argument("--output", help="Also write categories, one per line, to this path")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    work_dir = Path.cwd()

    if args.command == "expand":
        from rotaug.commands.expand import run_expand

        return run_expand(args, work_dir)
    if args.command == "categories":
        from rotaug.commands.categories import run_categories

        return run_categories(args, work_dir)

    parser.error(f"Unknown command: {args.command}")
    return EXIT_INVALID_ARGUMENTS


if __name__ == "__main__":
    raise SystemExit(main())
