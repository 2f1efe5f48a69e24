"""Target table and build configuration.

Maps rustc target triples to the (platform, arch) pair used for the bin/ layout.
Platform names follow Node's ``process.platform`` (linux, darwin, win32) and arch
names follow ``process.arch`` (arm64, x64).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from bls_tooling.errors import ConfigError, UnknownTargetError

DEFAULT_BINARY_NAME = "bls-tools"
WINDOWS_PLATFORM = "win32"

DEFAULT_TARGETS: Mapping[str, tuple[str, str]] = MappingProxyType(
    {
        "aarch64-unknown-linux-gnu": ("linux", "arm64"),
        "aarch64-apple-darwin": ("darwin", "arm64"),
        "x86_64-apple-darwin": ("darwin", "x64"),
        "x86_64-pc-windows-gnu": ("win32", "x64"),
        "x86_64-unknown-linux-gnu": ("linux", "x64"),
    }
)

# Triple suffixes that select behaviour.
CROSS_DRIVER_SUFFIX = "unknown-linux-gnu"
WINDOWS_SUFFIXES = ("windows-gnu", "windows-msvc")


def uses_cross_driver(target: str) -> bool:
    """True if target is built with cargo zigbuild (Linux glibc family)."""
    return target.endswith(CROSS_DRIVER_SUFFIX)


def is_windows_target(target: str) -> bool:
    """True for *windows-gnu and *windows-msvc triples."""
    return target.endswith(WINDOWS_SUFFIXES)


def _freeze_targets(targets: Mapping[str, tuple[str, str]]) -> Mapping[str, tuple[str, str]]:
    frozen: dict[str, tuple[str, str]] = {}
    for triple, value in targets.items():
        if not triple:
            msg = "Empty target triple in target mapping"
            raise ConfigError(msg)
        try:
            platform, arch = value
        except (TypeError, ValueError) as e:
            msg = f"Target {triple} must map to (platform, arch), got {value!r}"
            raise ConfigError(msg) from e
        if not platform or not arch:
            msg = f"Target {triple} has an empty platform or arch: {value!r}"
            raise ConfigError(msg)
        frozen[triple] = (str(platform), str(arch))
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class BuildConfig:
    """Immutable inputs of a build run. BuildConfig() reproduces the default table."""

    targets: Mapping[str, tuple[str, str]] = field(
        default_factory=lambda: DEFAULT_TARGETS, hash=False
    )
    binary_name: str = DEFAULT_BINARY_NAME
    bin_dir: str = "bin"
    target_dir: str = "target"
    cross_helper: str = "cargo-zigbuild"

    def __post_init__(self) -> None:
        for name in ("binary_name", "bin_dir", "target_dir", "cross_helper"):
            if not getattr(self, name):
                msg = f"{name} must not be empty"
                raise ConfigError(msg)
        object.__setattr__(self, "targets", _freeze_targets(self.targets))


def resolve_mapping(target: str, targets: Mapping[str, tuple[str, str]]) -> tuple[str, str]:
    """Return (platform, arch) for target. Raises UnknownTargetError if unmapped."""
    try:
        return targets[target]
    except KeyError:
        raise UnknownTargetError(target) from None
