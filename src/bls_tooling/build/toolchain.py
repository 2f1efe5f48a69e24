"""Best-effort toolchain setup: cargo-zigbuild, rustup targets, cross-linkers.

None of these raise. A failed install is reported as a StepResult with ok=False
and logged; the target may still build if the component was already present.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from bls_tooling.errors import PrerequisiteInstallError, ToolchainInstallError
from bls_tooling.helpers import command_output, run_command, tool_available

log = logging.getLogger(__name__)

# Triple suffix -> extra system packages (installed with brew). Families not
# listed here (apple-darwin, unknown-linux-gnu) need nothing beyond rustup.
PREREQUISITE_PACKAGES: dict[str, list[str]] = {
    "windows-gnu": ["mingw-w64"],
}


@dataclass(frozen=True)
class StepResult:
    """Outcome of a best-effort step."""

    step: str
    ok: bool
    detail: str = ""


def _failed(step: str, err: Exception) -> StepResult:
    log.warning("%s failed (continuing): %s", step, err)
    print(f"⚠️  {err}", file=sys.stderr)
    return StepResult(step, False, str(err))


def ensure_cross_helper(
    helper: str = "cargo-zigbuild",
    cwd: Path | None = None,
    *,
    dry_run: bool = False,
) -> StepResult:
    """Install the cross build helper with `cargo install` unless it is already on PATH."""
    step = "cross-helper"
    if tool_available(helper):
        log.debug("%s already installed", helper)
        return StepResult(step, True, f"{helper} already installed")
    print(f"Installing {helper} for cross-compilation support...")
    cmd = ["cargo", "install", helper]
    if dry_run:
        print(f"  [dry-run] {' '.join(cmd)}")
        return StepResult(step, True, "dry run")
    r = run_command(cmd, cwd)
    if r is None or r.returncode != 0:
        if r is None:
            reason = "cargo not found in PATH"
        else:
            reason = f"exit {r.returncode} {command_output(r)}".strip()
        return _failed(step, ToolchainInstallError(f"cargo install {helper} failed: {reason}"))
    return StepResult(step, True, f"installed {helper}")


def ensure_toolchain(target: str, cwd: Path | None = None, *, dry_run: bool = False) -> StepResult:
    """`rustup target add <target>`; idempotent, failures are returned not raised."""
    step = "toolchain"
    cmd = ["rustup", "target", "add", target]
    if dry_run:
        print(f"  [dry-run] {' '.join(cmd)}")
        return StepResult(step, True, "dry run")
    r = run_command(cmd, cwd, capture=True)
    if r is None:
        return _failed(step, ToolchainInstallError("rustup not found in PATH"))
    if r.returncode != 0:
        out = command_output(r)
        return _failed(
            step, ToolchainInstallError(f"rustup target add {target} failed: {out[:200]}")
        )
    return StepResult(step, True, f"rust target {target} installed")


def prerequisite_packages(target: str) -> list[str]:
    """System packages needed to link for target ([] when none)."""
    for suffix, packages in PREREQUISITE_PACKAGES.items():
        if target.endswith(suffix):
            return list(packages)
    return []


def install_platform_prerequisites(
    target: str, cwd: Path | None = None, *, dry_run: bool = False
) -> StepResult:
    """Install extra system dependencies for target's OS family (e.g. mingw-w64 for windows-gnu)."""
    step = "prerequisites"
    packages = prerequisite_packages(target)
    if not packages:
        return StepResult(step, True, "nothing to install")
    cmd = ["brew", "install", *packages]
    if dry_run:
        print(f"  [dry-run] {' '.join(cmd)}")
        return StepResult(step, True, "dry run")
    r = run_command(cmd, cwd, capture=True)
    if r is None:
        return _failed(step, PrerequisiteInstallError("brew not found in PATH"))
    if r.returncode != 0:
        out = command_output(r)
        return _failed(
            step,
            PrerequisiteInstallError(f"brew install {' '.join(packages)} failed: {out[:200]}"),
        )
    return StepResult(step, True, f"installed {' '.join(packages)}")
