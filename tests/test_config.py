"""Tests for ibanlib.infra.config — IbanConfig and environment overrides."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from ibanlib.infra.config import (
    DEFAULT_MISTRANSCRIPTIONS_PATH,
    DEFAULT_REGISTRY_PATH,
    ENV_MISTRANSCRIPTIONS_PATH,
    ENV_MOD97_BACKEND,
    ENV_REGISTRY_PATH,
    IbanConfig,
    Mod97Backend,
    default_config,
)


class TestIbanConfig:
    def test_defaults(self) -> None:
        cfg = IbanConfig()
        assert cfg.registry_path == DEFAULT_REGISTRY_PATH
        assert cfg.mistranscriptions_path == DEFAULT_MISTRANSCRIPTIONS_PATH
        assert (cfg.min_suggestion_length, cfg.max_suggestion_length) == (5, 34)
        assert cfg.mod97_backend is Mod97Backend.CHUNKED

    def test_bundled_files_exist(self) -> None:
        assert DEFAULT_REGISTRY_PATH.is_file()
        assert DEFAULT_MISTRANSCRIPTIONS_PATH.is_file()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            IbanConfig().min_suggestion_length = 1  # type: ignore[misc]

    def test_default_config_is_cached(self) -> None:
        assert default_config() is default_config()


class TestFromEnv:
    def test_empty_environment_gives_defaults(self) -> None:
        assert IbanConfig.from_env({}) == IbanConfig()

    def test_paths_overridden(self) -> None:
        cfg = IbanConfig.from_env({
            ENV_REGISTRY_PATH: "/data/registry.txt",
            ENV_MISTRANSCRIPTIONS_PATH: "/data/mt.txt",
        })
        assert cfg.registry_path == Path("/data/registry.txt")
        assert cfg.mistranscriptions_path == Path("/data/mt.txt")

    @pytest.mark.parametrize("raw", ["native", "NATIVE", " native "])
    def test_native_backend(self, raw: str) -> None:
        assert IbanConfig.from_env({ENV_MOD97_BACKEND: raw}).mod97_backend is Mod97Backend.NATIVE

    def test_unknown_backend_falls_back_to_chunked(self) -> None:
        cfg = IbanConfig.from_env({ENV_MOD97_BACKEND: "gpu"})
        assert cfg.mod97_backend is Mod97Backend.CHUNKED

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_MOD97_BACKEND, "native")
        assert IbanConfig.from_env().mod97_backend is Mod97Backend.NATIVE
