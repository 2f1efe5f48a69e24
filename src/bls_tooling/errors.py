"""Errors raised by the build orchestrator.

Per-target errors are caught at the loop boundary in
``bls_tooling.build.orchestrator.run``; install errors never leave their step.
"""

from __future__ import annotations


class BlsToolingError(Exception):
    """Base class for all bls_tooling errors."""


class ConfigError(BlsToolingError):
    """Invalid build configuration (bad YAML, empty platform/arch)."""


class UnknownTargetError(BlsToolingError):
    """Target triple has no (platform, arch) mapping."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Unknown target mapping for {target}")


class ToolchainInstallError(BlsToolingError):
    """`rustup target add` (or the cross helper install) failed."""


class PrerequisiteInstallError(BlsToolingError):
    """System package install for cross-linking failed."""


class BuildInvocationError(BlsToolingError):
    """cargo build / cargo zigbuild exited non-zero or could not be started."""

    def __init__(self, target: str, cmd: list[str], returncode: int | None) -> None:
        self.target = target
        self.cmd = cmd
        self.returncode = returncode
        if returncode is None:
            msg = f"{cmd[0]} not found in PATH (building {target})"
        else:
            msg = f"{' '.join(cmd)} exited with {returncode}"
        super().__init__(msg)


class CopyError(BlsToolingError):
    """Staging the built binary into bin/ failed."""


class ArtifactNotFoundError(CopyError):
    """The build finished but the expected binary is missing."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Binary not found: {path}")
