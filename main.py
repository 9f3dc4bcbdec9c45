"""Run cargo-sync-readme from a source checkout, in the crate directory."""

from sync_readme.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
