"""Copy a built binary into bin/<platform>/<arch>/."""

from __future__ import annotations

import shutil
from pathlib import Path

from bls_tooling.build.targets import WINDOWS_PLATFORM
from bls_tooling.errors import ArtifactNotFoundError, CopyError
from bls_tooling.helpers import with_exe_suffix


def staged_name(platform: str, base_name: str) -> str:
    """Destination file name; .exe only when platform is win32."""
    return with_exe_suffix(base_name, platform == WINDOWS_PLATFORM)


def stage_artifact(
    source: Path,
    platform: str,
    arch: str,
    base_name: str,
    bin_dir: Path,
) -> Path:
    """Copy source to bin_dir/platform/arch/<name>, overwriting. Returns the destination.

    Raises ArtifactNotFoundError if source is missing, CopyError if the copy fails.
    """
    if not source.is_file():
        raise ArtifactNotFoundError(source)
    dest_dir = bin_dir / platform / arch
    dest = dest_dir / staged_name(platform, base_name)
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, dest)
        dest.chmod(0o755)
    except OSError as e:
        msg = f"Could not copy {source} -> {dest}: {e}"
        raise CopyError(msg) from e
    return dest
