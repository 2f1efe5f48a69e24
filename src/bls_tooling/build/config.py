"""Load a BuildConfig from YAML.

Format::

    binary_name: bls-tools      # optional
    bin_dir: bin                # optional
    target_dir: target          # optional
    targets:                    # optional; defaults to DEFAULT_TARGETS
      x86_64-unknown-linux-gnu: {platform: linux, arch: x64}
      aarch64-apple-darwin: darwin arm64

Unknown top-level keys are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from bls_tooling.build.targets import BuildConfig
from bls_tooling.errors import ConfigError

_SCALAR_KEYS = ("binary_name", "bin_dir", "target_dir", "cross_helper")


def _parse_target_value(triple: str, value: Any) -> tuple[str, str]:
    if isinstance(value, dict):
        return str(value.get("platform") or ""), str(value.get("arch") or "")
    if isinstance(value, str):
        parts = value.split()
        if len(parts) == 2:
            return parts[0], parts[1]
    if isinstance(value, list) and len(value) == 2:
        return str(value[0]), str(value[1])
    msg = f"Target {triple}: expected {{platform, arch}} or 'platform arch', got {value!r}"
    raise ConfigError(msg)


def config_from_dict(data: dict[str, Any]) -> BuildConfig:
    """Build a BuildConfig from an already-parsed mapping; missing keys use defaults."""
    kwargs: dict[str, Any] = {
        k: "" if data[k] is None else str(data[k]) for k in _SCALAR_KEYS if k in data
    }
    raw_targets = data.get("targets")
    if raw_targets is not None:
        if not isinstance(raw_targets, dict):
            msg = f"targets must be a mapping, got {type(raw_targets).__name__}"
            raise ConfigError(msg)
        kwargs["targets"] = {
            str(triple): _parse_target_value(str(triple), value)
            for triple, value in raw_targets.items()
        }
    return BuildConfig(**kwargs)


def load_build_config(config_path: Path) -> BuildConfig:
    """Load BuildConfig from a YAML file. Raises ConfigError if missing or malformed."""
    if not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigError(msg)
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        msg = f"Could not parse {config_path}: {e}"
        raise ConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"{config_path}: top level must be a mapping"
        raise ConfigError(msg)
    return config_from_dict(data)
