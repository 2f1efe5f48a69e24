"""Shared helpers for bls_tooling (external commands, PATH lookup, file names)."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)

EXE_SUFFIX = ".exe"


# --- Commands ---


def tool_available(name: str) -> bool:
    """True if name resolves on PATH."""
    return shutil.which(name) is not None


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    capture: bool = False,
) -> subprocess.CompletedProcess | None:
    """Run cmd to completion. Returns None when the executable is not on PATH.

    Output is streamed to the terminal unless capture is set (used for installers,
    whose stderr only matters when they fail). Undecodable output is replaced, not
    raised. Any other OSError while starting the process (not executable, bad
    format) comes back as returncode 126 with the error text in stderr.
    """
    log.debug("running: %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        return subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=capture,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as e:
        log.debug("%s not in PATH: %s", cmd[0], e)
        return None
    except OSError as e:
        log.warning("could not start %s: %s", cmd[0], e)
        return subprocess.CompletedProcess(cmd, 126, stdout="", stderr=f"{cmd[0]}: {e}")


def command_output(r: subprocess.CompletedProcess | None) -> str:
    """stderr + stdout of a captured run, trimmed; '' when nothing was captured."""
    if r is None:
        return ""
    return ((r.stderr or "") + (r.stdout or "")).strip()


# --- Naming ---


def with_exe_suffix(name: str, windows: bool) -> str:
    """Append .exe when windows is true."""
    return f"{name}{EXE_SUFFIX}" if windows else name
