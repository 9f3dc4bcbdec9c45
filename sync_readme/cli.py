"""Command-line interface of cargo-sync-readme."""

import argparse
import logging
import sys
from collections.abc import Sequence

from sync_readme.run_sync import run_sync

# cargo runs `cargo-sync-readme sync-readme ...` for `cargo sync-readme ...`.
CARGO_SUBCOMMAND = "sync-readme"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        prog="cargo sync-readme",
        description=(
            "Generate a Markdown section in your README based on your Rust "
            "documentation."
        ),
    )
    ap.add_argument(
        "-z",
        "--show-hidden-doc",
        action="store_true",
        help="Show Rust hidden documentation lines in the generated README",
    )
    ap.add_argument(
        "-f",
        "--prefer-doc-from",
        choices=["bin", "lib"],
        help="Read documentation from the binary or the library entry point",
    )
    ap.add_argument(
        "--crlf",
        action="store_true",
        help=(
            "Generate documentation with CRLF line endings. Already present "
            "newlines are not affected"
        ),
    )
    ap.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Check whether the README is synchronized instead of writing it",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file (default: .sync-readme.yml in the crate)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery and resolution details",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    if args_list and args_list[0] == CARGO_SUBCOMMAND:
        args_list = args_list[1:]
    args = build_parser().parse_args(args_list)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_sync(args)


if __name__ == "__main__":
    raise SystemExit(main())
