"""Process-wide default tables, loaded lazily and once per source path.

Every public function that consults the registry or the mistranscription
table accepts an explicit table argument; these defaults are only used
when the caller passes None. First access takes a lock so that concurrent
callers never observe a half-built table; later accesses read a fully
constructed immutable object without locking.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from ibanlib.core.errors import DataIntegrityError, TableLoadError
from ibanlib.core.result import Err, Ok
from ibanlib.infra.config import IbanConfig, default_config
from ibanlib.registry.confusions import MistranscriptionTable
from ibanlib.registry.country import CountryRegistry
from ibanlib.registry.loader import load_mistranscriptions, load_registry

logger = logging.getLogger(__name__)

_lock = threading.Lock()
# Keyed by source path; an entry is only inserted once fully built.
_registries: dict[Path, CountryRegistry] = {}
_mistranscriptions: dict[Path, MistranscriptionTable] = {}


def _raise_on_err[T](result: Ok[T] | Err[DataIntegrityError]) -> T:
    match result:
        case Ok(value):
            return value
        case Err(error):
            logger.error("%s [%s]: %s", error.table, error.code, error.detail)
            raise TableLoadError(error)


def default_registry(config: IbanConfig | None = None) -> CountryRegistry:
    """The shared registry for config.registry_path (process config when None).

    Each path is loaded at most once. Raises TableLoadError if it cannot be
    loaded; a failed path is retried on the next call.
    """
    path = (config or default_config()).registry_path
    registry = _registries.get(path)
    if registry is None:
        with _lock:
            registry = _registries.get(path)
            if registry is None:
                registry = _raise_on_err(load_registry(path))
                _registries[path] = registry
    return registry


def default_mistranscriptions(config: IbanConfig | None = None) -> MistranscriptionTable:
    """The shared mistranscription table for config.mistranscriptions_path."""
    path = (config or default_config()).mistranscriptions_path
    table = _mistranscriptions.get(path)
    if table is None:
        with _lock:
            table = _mistranscriptions.get(path)
            if table is None:
                table = _raise_on_err(load_mistranscriptions(path))
                _mistranscriptions[path] = table
    return table


def resolve_registry(
    registry: CountryRegistry | None, config: IbanConfig | None = None,
) -> CountryRegistry:
    return registry if registry is not None else default_registry(config)


def reset_default_tables() -> None:
    """Forget the loaded defaults so the next access reloads them."""
    with _lock:
        _registries.clear()
        _mistranscriptions.clear()
