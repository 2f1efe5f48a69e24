"""`build-binaries` — build bls-tools for every target and stage into bin/."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from bls_tooling.build.config import load_build_config
from bls_tooling.build.orchestrator import run as run_build
from bls_tooling.build.targets import BuildConfig
from bls_tooling.errors import ConfigError


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="build-binaries",
        description="Cross-compile bls-tools for all targets and copy to bin/<platform>/<arch>/",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Cargo project root (default: cwd)",
    )
    ap.add_argument("--config", type=Path, default=None, help="YAML target/binary config")
    ap.add_argument(
        "--target",
        action="append",
        dest="targets",
        default=None,
        metavar="TRIPLE",
        help="Only build this target (repeatable; default: all mapped targets)",
    )
    ap.add_argument("--bin-dir", default=None, help="Output directory (default: bin)")
    ap.add_argument("--dry-run", action="store_true", help="Print commands, build nothing")
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 if any target failed (default: always exit 0)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def run_build_argv(argv: list[str] | None = None) -> int:
    """Parse argv and run the build. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    root = args.project_root.resolve()
    try:
        config = load_build_config(args.config) if args.config else BuildConfig()
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    if args.bin_dir:
        config = dataclasses.replace(config, bin_dir=args.bin_dir)
    report = run_build(config, root, only=args.targets, dry_run=args.dry_run)
    if args.strict and not report.ok:
        print(f"❌ Failed targets: {', '.join(report.failed)}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run_build_argv())


if __name__ == "__main__":
    main()
