"""Build tooling for bls-tools: cross-compile per target and stage binaries under bin/."""

__version__ = "0.1.0"
