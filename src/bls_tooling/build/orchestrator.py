"""Build every mapped target and stage its binary under bin/<platform>/<arch>/.

Targets are processed one at a time. Each target is one unit
(resolve -> toolchain -> prerequisites -> build -> locate -> stage); a failure
anywhere in the unit marks that target failed and the loop moves on.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from bls_tooling.build.cargo import build_mode, invoke_build, locate_output_binary
from bls_tooling.build.stage import stage_artifact, staged_name
from bls_tooling.build.targets import BuildConfig, resolve_mapping
from bls_tooling.build.toolchain import (
    StepResult,
    ensure_cross_helper,
    ensure_toolchain,
    install_platform_prerequisites,
)
from bls_tooling.errors import BlsToolingError

log = logging.getLogger(__name__)

DONE_MESSAGE = "All done. Binaries are in the bin/ directory."


class TargetState(str, Enum):
    PENDING = "pending"
    TOOLCHAIN_READY = "toolchain_ready"
    PREREQS_READY = "prereqs_ready"
    BUILT = "built"
    LOCATED = "located"
    STAGED = "staged"
    FAILED = "failed"


@dataclass
class BuildAttempt:
    """Per-target record; lives for one loop iteration."""

    target: str
    platform: str | None = None
    arch: str | None = None
    mode: str | None = None
    output_path: Path | None = None
    staged_path: Path | None = None
    state: TargetState = TargetState.PENDING
    steps: list[StepResult] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.state is TargetState.STAGED


@dataclass
class BuildReport:
    """Outcome of a run: one BuildAttempt per target, in processing order."""

    attempts: list[BuildAttempt] = field(default_factory=list)
    helper: StepResult | None = None

    @property
    def succeeded(self) -> list[str]:
        return [a.target for a in self.attempts if a.ok]

    @property
    def failed(self) -> list[str]:
        return [a.target for a in self.attempts if not a.ok]

    @property
    def ok(self) -> bool:
        return not self.failed

    def get(self, target: str) -> BuildAttempt | None:
        for a in self.attempts:
            if a.target == target:
                return a
        return None


def _build_unit(
    attempt: BuildAttempt,
    config: BuildConfig,
    project_root: Path,
    dry_run: bool,
) -> None:
    target = attempt.target
    attempt.platform, attempt.arch = resolve_mapping(target, config.targets)
    print(f"Building for target: {target} ({attempt.platform} {attempt.arch})")

    attempt.steps.append(ensure_toolchain(target, project_root, dry_run=dry_run))
    attempt.state = TargetState.TOOLCHAIN_READY

    attempt.steps.append(install_platform_prerequisites(target, project_root, dry_run=dry_run))
    attempt.state = TargetState.PREREQS_READY

    attempt.mode = build_mode(target)
    invoke_build(target, project_root, dry_run=dry_run)
    attempt.state = TargetState.BUILT

    attempt.output_path = project_root / locate_output_binary(
        target, config.binary_name, config.target_dir
    )
    attempt.state = TargetState.LOCATED

    bin_dir = project_root / config.bin_dir
    if dry_run:
        name = staged_name(attempt.platform, config.binary_name)
        dest = bin_dir / attempt.platform / attempt.arch / name
        print(f"  [dry-run] copy {attempt.output_path} -> {dest}")
        attempt.staged_path = dest
    else:
        attempt.staged_path = stage_artifact(
            attempt.output_path, attempt.platform, attempt.arch, config.binary_name, bin_dir
        )
    attempt.state = TargetState.STAGED


def build_target(
    target: str,
    config: BuildConfig,
    project_root: Path,
    *,
    dry_run: bool = False,
) -> BuildAttempt:
    """Run the whole unit for one target. Never raises; check attempt.ok."""
    attempt = BuildAttempt(target)
    try:
        _build_unit(attempt, config, project_root, dry_run)
    except BlsToolingError as e:
        log.debug("target %s failed in state %s: %s", target, attempt.state.value, e)
        return _fail(attempt, e)
    except Exception as e:
        log.warning(
            "target %s: unexpected %s in state %s: %s",
            target,
            type(e).__name__,
            attempt.state.value,
            e,
            exc_info=True,
        )
        return _fail(attempt, e)
    print(f"Successfully built for {target}")
    return attempt


def _fail(attempt: BuildAttempt, e: Exception) -> BuildAttempt:
    attempt.state = TargetState.FAILED
    attempt.error = str(e)
    print(f"❌ {e}", file=sys.stderr)
    print(f"Failed to build for {attempt.target}")
    return attempt


def run(
    config: BuildConfig | None = None,
    project_root: Path | None = None,
    *,
    only: Iterable[str] | None = None,
    dry_run: bool = False,
) -> BuildReport:
    """Build all targets in config (or only the given triples) and stage them.

    Per-target failures are recorded in the report, never raised. The completion
    message is printed even if every target failed.
    """
    config = config or BuildConfig()
    root = project_root or Path.cwd()
    report = BuildReport()

    if not dry_run:
        (root / config.bin_dir).mkdir(parents=True, exist_ok=True)

    report.helper = ensure_cross_helper(config.cross_helper, root, dry_run=dry_run)

    targets = list(only) if only is not None else list(config.targets)
    for target in targets:
        report.attempts.append(build_target(target, config, root, dry_run=dry_run))

    print(DONE_MESSAGE)
    if report.failed:
        log.info("failed targets: %s", ", ".join(report.failed))
    return report
