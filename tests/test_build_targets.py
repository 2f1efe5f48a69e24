"""Tests for bls_tooling.build.targets."""

import pytest

EXPECTED = {
    "aarch64-unknown-linux-gnu": ("linux", "arm64"),
    "aarch64-apple-darwin": ("darwin", "arm64"),
    "x86_64-apple-darwin": ("darwin", "x64"),
    "x86_64-pc-windows-gnu": ("win32", "x64"),
    "x86_64-unknown-linux-gnu": ("linux", "x64"),
}


class TestResolveMapping:
    @pytest.mark.parametrize(("triple", "expected"), sorted(EXPECTED.items()))
    def test_default_targets(self, triple: str, expected: tuple[str, str]) -> None:
        from bls_tooling.build.targets import DEFAULT_TARGETS, resolve_mapping

        assert resolve_mapping(triple, DEFAULT_TARGETS) == expected

    def test_default_table_has_exactly_five_targets(self) -> None:
        from bls_tooling.build.targets import DEFAULT_TARGETS

        assert dict(DEFAULT_TARGETS) == EXPECTED

    def test_unknown_target_raises(self) -> None:
        from bls_tooling.build.targets import DEFAULT_TARGETS, resolve_mapping
        from bls_tooling.errors import UnknownTargetError

        with pytest.raises(UnknownTargetError) as exc:
            resolve_mapping("riscv64gc-unknown-linux-gnu", DEFAULT_TARGETS)
        assert exc.value.target == "riscv64gc-unknown-linux-gnu"
        assert "Unknown target mapping for riscv64gc-unknown-linux-gnu" in str(exc.value)

    def test_custom_mapping(self) -> None:
        from bls_tooling.build.targets import BuildConfig, resolve_mapping

        cfg = BuildConfig(targets={"x86_64-unknown-linux-musl": ("linux", "x64")})
        assert resolve_mapping("x86_64-unknown-linux-musl", cfg.targets) == ("linux", "x64")


class TestSuffixPredicates:
    @pytest.mark.parametrize(
        ("triple", "cross"),
        [
            ("x86_64-unknown-linux-gnu", True),
            ("aarch64-unknown-linux-gnu", True),
            ("x86_64-unknown-linux-musl", False),
            ("aarch64-apple-darwin", False),
            ("x86_64-pc-windows-gnu", False),
        ],
    )
    def test_uses_cross_driver(self, triple: str, cross: bool) -> None:
        from bls_tooling.build.targets import uses_cross_driver

        assert uses_cross_driver(triple) is cross

    @pytest.mark.parametrize(
        ("triple", "windows"),
        [
            ("x86_64-pc-windows-gnu", True),
            ("x86_64-pc-windows-msvc", True),
            ("x86_64-unknown-linux-gnu", False),
            ("x86_64-apple-darwin", False),
        ],
    )
    def test_is_windows_target(self, triple: str, windows: bool) -> None:
        from bls_tooling.build.targets import is_windows_target

        assert is_windows_target(triple) is windows


class TestBuildConfig:
    def test_defaults(self) -> None:
        from bls_tooling.build.targets import BuildConfig

        cfg = BuildConfig()
        assert cfg.binary_name == "bls-tools"
        assert cfg.bin_dir == "bin"
        assert cfg.target_dir == "target"
        assert len(cfg.targets) == 5

    def test_is_immutable(self) -> None:
        import dataclasses

        from bls_tooling.build.targets import BuildConfig

        cfg = BuildConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.binary_name = "other"  # type: ignore[misc]
        with pytest.raises(TypeError):
            cfg.targets["x"] = ("linux", "x64")  # type: ignore[index]

    def test_caller_dict_changes_do_not_leak(self) -> None:
        from bls_tooling.build.targets import BuildConfig

        targets = {"x86_64-unknown-linux-gnu": ("linux", "x64")}
        cfg = BuildConfig(targets=targets)
        targets["aarch64-apple-darwin"] = ("darwin", "arm64")
        assert list(cfg.targets) == ["x86_64-unknown-linux-gnu"]

    @pytest.mark.parametrize("value", [("", "x64"), ("linux", ""), ("linux",)])
    def test_rejects_incomplete_value(self, value: tuple) -> None:
        from bls_tooling.build.targets import BuildConfig
        from bls_tooling.errors import ConfigError

        with pytest.raises(ConfigError):
            BuildConfig(targets={"x86_64-unknown-linux-gnu": value})

    def test_rejects_empty_binary_name(self) -> None:
        from bls_tooling.build.targets import BuildConfig
        from bls_tooling.errors import ConfigError

        with pytest.raises(ConfigError):
            BuildConfig(binary_name="")

    @pytest.mark.parametrize("name", ["bin_dir", "target_dir", "cross_helper"])
    def test_rejects_empty_paths(self, name: str) -> None:
        from bls_tooling.build.targets import BuildConfig
        from bls_tooling.errors import ConfigError

        with pytest.raises(ConfigError, match=name):
            BuildConfig(**{name: ""})

    def test_is_hashable(self) -> None:
        from bls_tooling.build.targets import BuildConfig

        assert hash(BuildConfig()) == hash(BuildConfig())
        assert {BuildConfig(), BuildConfig()} == {BuildConfig()}
        assert BuildConfig(bin_dir="dist") != BuildConfig()
