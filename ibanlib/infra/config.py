"""Runtime configuration: table locations, search bounds, MOD97 backend.

Pure configuration data. The only side effect is reading environment
variables in IbanConfig.from_env().
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import cache
from pathlib import Path
from typing import final

# ---------------------------------------------------------------------------
# Bundled data files
# ---------------------------------------------------------------------------

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "registry" / "data"
DEFAULT_REGISTRY_PATH: Path = DATA_DIR / "registry.txt"
DEFAULT_MISTRANSCRIPTIONS_PATH: Path = DATA_DIR / "mistranscriptions.txt"

ENV_REGISTRY_PATH: str = "IBANLIB_REGISTRY_PATH"
ENV_MISTRANSCRIPTIONS_PATH: str = "IBANLIB_MISTRANSCRIPTIONS_PATH"
ENV_MOD97_BACKEND: str = "IBANLIB_MOD97_BACKEND"


class Mod97Backend(Enum):
    """How the MOD97-10 remainder of a long digit string is computed."""

    CHUNKED = "chunked"  # 9-digit running reduction, no big integers
    NATIVE = "native"  # int(digits) % 97 on Python's arbitrary-precision int


@final
@dataclass(frozen=True, slots=True)
class IbanConfig:
    """Process-wide settings for table loading and the suggestion engine."""

    registry_path: Path = DEFAULT_REGISTRY_PATH
    mistranscriptions_path: Path = DEFAULT_MISTRANSCRIPTIONS_PATH
    min_suggestion_length: int = 5
    max_suggestion_length: int = 34
    mod97_backend: Mod97Backend = Mod97Backend.CHUNKED

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> IbanConfig:
        """Build a config, letting IBANLIB_* variables override the defaults.

        An unrecognised IBANLIB_MOD97_BACKEND value falls back to CHUNKED.
        """
        env = os.environ if environ is None else environ
        backend_name = env.get(ENV_MOD97_BACKEND, Mod97Backend.CHUNKED.value).strip().lower()
        try:
            backend = Mod97Backend(backend_name)
        except ValueError:
            backend = Mod97Backend.CHUNKED
        return IbanConfig(
            registry_path=Path(env.get(ENV_REGISTRY_PATH, str(DEFAULT_REGISTRY_PATH))),
            mistranscriptions_path=Path(
                env.get(ENV_MISTRANSCRIPTIONS_PATH, str(DEFAULT_MISTRANSCRIPTIONS_PATH))
            ),
            mod97_backend=backend,
        )


@cache
def default_config() -> IbanConfig:
    """The environment-derived config, computed once per process."""
    return IbanConfig.from_env()
