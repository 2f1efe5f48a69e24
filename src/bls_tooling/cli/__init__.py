"""Command-line entry points for bls_tooling."""
