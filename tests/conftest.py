"""Pytest fixtures for bls_tooling tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

BUILD_SUBCOMMANDS = ("build", "zigbuild")


def _fake_cargo(failing: set[str], produce: bool) -> Callable[..., MagicMock]:
    """subprocess.run stand-in: cargo build/zigbuild writes target/<t>/release/<bin> under cwd."""

    def fake_run(cmd, cwd=None, capture_output=False, text=False, errors=None):  # noqa: ARG001
        if cmd[0] == "cargo" and cmd[1] in BUILD_SUBCOMMANDS:
            target = cmd[cmd.index("--target") + 1]
            if target in failing:
                return MagicMock(returncode=101, stdout="", stderr="error: linker failed")
            if produce:
                name = "bls-tools.exe" if "windows" in target else "bls-tools"
                out = Path(cwd) / "target" / target / "release" / name
                out.parent.mkdir(parents=True, exist_ok=True)
                out.write_bytes(b"\x7fELF" + target.encode())
        return MagicMock(returncode=0, stdout="", stderr="")

    return fake_run


@pytest.fixture
def fake_cargo() -> Callable[..., Callable[..., MagicMock]]:
    """Factory: fake_cargo(failing={"triple"}, produce=True) -> side_effect for subprocess.run."""

    def make(failing: set[str] | None = None, produce: bool = True) -> Callable[..., MagicMock]:
        return _fake_cargo(failing or set(), produce)

    return make


@pytest.fixture
def built_binary(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a fake build output at tmp_path/target/<triple>/release/<name>."""

    def make(triple: str, name: str = "bls-tools") -> Path:
        p = tmp_path / "target" / triple / "release" / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(b"binary")
        return p

    return make
