"""Tests for ibanlib.registry.tables — lazily loaded process-wide defaults."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

import pytest
from conftest import REGISTRY_HEADER, registry_row

from ibanlib.core.errors import TableLoadError
from ibanlib.infra.config import IbanConfig
from ibanlib.registry.country import CountryRegistry
from ibanlib.registry.tables import (
    default_mistranscriptions,
    default_registry,
    resolve_registry,
    reset_default_tables,
)


@pytest.mark.usefixtures("fresh_tables")
class TestDefaultTables:
    def test_registry_loaded_once(self) -> None:
        assert default_registry() is default_registry()

    def test_mistranscriptions_loaded_once(self) -> None:
        assert default_mistranscriptions() is default_mistranscriptions()

    def test_reset_reloads(self) -> None:
        first = default_registry()
        reset_default_tables()
        second = default_registry()
        assert first is not second
        assert first == second

    def test_resolve_prefers_explicit(self) -> None:
        explicit = CountryRegistry(formats=default_registry().formats)
        assert resolve_registry(explicit) is explicit
        assert resolve_registry(None) is default_registry()

    def test_load_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="ibanlib.registry.loader"):
            default_registry()
        assert "84 countries" in caplog.text

    def test_missing_registry_raises(self, tmp_path: Path) -> None:
        cfg = IbanConfig(registry_path=tmp_path / "absent.txt")
        with pytest.raises(TableLoadError) as exc_info:
            default_registry(cfg)
        assert exc_info.value.error.code == "IBAN-500"

    def test_incomplete_mistranscriptions_raise(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture,
    ) -> None:
        path = tmp_path / "mt.txt"
        path.write_text(' c-0 = "O"\n', encoding="utf-8")
        cfg = IbanConfig(mistranscriptions_path=path)
        with caplog.at_level(logging.ERROR, logger="ibanlib.registry.tables"):
            with pytest.raises(TableLoadError):
                default_mistranscriptions(cfg)
        assert "IBAN-500" in caplog.text

    def test_failed_load_is_retried(self, tmp_path: Path) -> None:
        with pytest.raises(TableLoadError):
            default_registry(IbanConfig(registry_path=tmp_path / "absent.txt"))
        assert len(default_registry()) == 84

    def test_config_path_selects_registry(self, tmp_path: Path) -> None:
        path = tmp_path / "registry.txt"
        path.write_text(REGISTRY_HEADER + "\n" + registry_row() + "\n", encoding="utf-8")
        custom = default_registry(IbanConfig(registry_path=path))
        assert custom.countries() == ("ZZ",)
        assert default_registry(IbanConfig(registry_path=path)) is custom
        assert len(default_registry()) == 84
        assert resolve_registry(None, IbanConfig(registry_path=path)) is custom

    def test_config_path_after_default_loaded(self, tmp_path: Path) -> None:
        default_registry()
        path = tmp_path / "registry.txt"
        path.write_text(REGISTRY_HEADER + "\n" + registry_row() + "\n", encoding="utf-8")
        assert "GB" not in default_registry(IbanConfig(registry_path=path))

    def test_concurrent_first_access(self) -> None:
        results: list[CountryRegistry] = []
        barrier = threading.Barrier(8)

        def load() -> None:
            barrier.wait()
            results.append(default_registry())

        threads = [threading.Thread(target=load) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 8
        assert all(r is results[0] for r in results)
        assert len(results[0]) == 84
