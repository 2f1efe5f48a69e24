"""cargo / cargo zigbuild invocation and output paths."""

from __future__ import annotations

import logging
from pathlib import Path

from bls_tooling.build.targets import is_windows_target, uses_cross_driver
from bls_tooling.errors import BuildInvocationError
from bls_tooling.helpers import run_command, with_exe_suffix

log = logging.getLogger(__name__)

CROSS = "cross"
NATIVE = "native"


def build_mode(target: str) -> str:
    """cross for *unknown-linux-gnu, native otherwise."""
    return CROSS if uses_cross_driver(target) else NATIVE


def build_command(target: str) -> list[str]:
    """cargo zigbuild for Linux glibc targets, cargo build for everything else. Always --release."""
    sub = "zigbuild" if build_mode(target) == CROSS else "build"
    return ["cargo", sub, "--release", "--target", target]


def invoke_build(target: str, project_root: Path, *, dry_run: bool = False) -> list[str]:
    """Run the build for target in project_root; blocks until done, no timeout.

    Returns the command run. Raises BuildInvocationError on non-zero exit or missing cargo.
    """
    cmd = build_command(target)
    if dry_run:
        print(f"  [dry-run] {' '.join(cmd)}")
        return cmd
    r = run_command(cmd, project_root)
    if r is None:
        raise BuildInvocationError(target, cmd, None)
    if r.returncode != 0:
        log.debug("build failed for %s: exit %s", target, r.returncode)
        raise BuildInvocationError(target, cmd, r.returncode)
    return cmd


def locate_output_binary(
    target: str,
    base_name: str,
    target_dir: str = "target",
    profile: str = "release",
) -> Path:
    """target/<triple>/release/<base_name>[.exe]; .exe for windows-gnu and windows-msvc. Relative path."""
    name = with_exe_suffix(base_name, is_windows_target(target))
    return Path(target_dir) / target / profile / name
