"""Orchestration logic for synchronizing a crate's README."""

import argparse
import logging
import sys
from pathlib import Path

from sync_readme.errors import EntryPointNotFoundError, ManifestError, SyncReadmeError
from sync_readme.load_config import CONFIG_FILE_NAME, load_config
from sync_readme.manifest import Manifest, PreferDocFrom, find_manifest
from sync_readme.sync_document import sync_document

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_WARNINGS = 2
EXIT_NOT_SYNCHRONIZED = 3

CANNOT_FIND_ENTRY_POINT_MSG = """\
cannot find the entry point (defaults to src/lib.rs or src/main.rs). This is likely \
due to a special configuration in your Cargo.toml manifest, or the entry point files \
are missing.

If your crate defines both a binary and a library, use the -f option to tell \
sync-readme which file to read the documentation from."""


def run_sync(args: argparse.Namespace) -> int:
    """Execute a synchronization and return the process exit code."""
    try:
        return _run(args)
    except SyncReadmeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as exc:
        print(f"error: cannot access {exc.filename}: {exc.strerror}", file=sys.stderr)
        return EXIT_ERROR


def _run(args: argparse.Namespace) -> int:
    manifest = Manifest.load(find_manifest(Path.cwd()))
    crate_name = manifest.crate_name()
    if not crate_name:
        msg = "failed to get the name of the crate"
        raise ManifestError(msg)

    prefer = PreferDocFrom(args.prefer_doc_from) if args.prefer_doc_from else None
    entry_point = manifest.entry_point(prefer)
    if entry_point is None:
        raise EntryPointNotFoundError(CANNOT_FIND_ENTRY_POINT_MSG)

    config = load_config(args.config or manifest.root / CONFIG_FILE_NAME)
    readme_path = manifest.readme()
    old_readme = _read_text(readme_path)

    result = sync_document(
        _read_text(entry_point),
        old_readme,
        crate_name,
        show_hidden=args.show_hidden_doc,
        crlf=args.crlf,
        config=config,
    )

    for warning in result.warnings:
        print(warning, file=sys.stderr)

    if args.check:
        if result.is_synchronized(old_readme):
            print(f"{readme_path.name} is synchronized")
            return EXIT_OK
        print(f"error: {readme_path.name} is not synchronized!", file=sys.stderr)
        return EXIT_NOT_SYNCHRONIZED

    if result.is_synchronized(old_readme):
        logger.info("%s already up to date", readme_path)
    else:
        _write_text(readme_path, result.text)
        print(f"Synchronized {readme_path.name} from {entry_point.name}")

    if result.warnings:
        print(f"there were {len(result.warnings)} warning(s)", file=sys.stderr)
        return EXIT_WARNINGS
    return EXIT_OK


def _read_text(path: Path) -> str:
    """Read a file without newline translation."""
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, text: str) -> None:
    """Write a file without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
