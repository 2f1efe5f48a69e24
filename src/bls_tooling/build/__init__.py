"""Cross-target cargo builds (cargo / cargo zigbuild) staged into bin/<platform>/<arch>/."""

from .cargo import build_command, invoke_build, locate_output_binary
from .config import load_build_config
from .orchestrator import BuildAttempt, BuildReport, build_target, run
from .stage import stage_artifact
from .targets import (
    DEFAULT_BINARY_NAME,
    DEFAULT_TARGETS,
    BuildConfig,
    is_windows_target,
    resolve_mapping,
    uses_cross_driver,
)
from .toolchain import (
    StepResult,
    ensure_cross_helper,
    ensure_toolchain,
    install_platform_prerequisites,
)

__all__ = [
    "DEFAULT_BINARY_NAME",
    "DEFAULT_TARGETS",
    "BuildAttempt",
    "BuildConfig",
    "BuildReport",
    "StepResult",
    "build_command",
    "build_target",
    "ensure_cross_helper",
    "ensure_toolchain",
    "install_platform_prerequisites",
    "invoke_build",
    "is_windows_target",
    "load_build_config",
    "locate_output_binary",
    "resolve_mapping",
    "run",
    "stage_artifact",
    "uses_cross_driver",
]
