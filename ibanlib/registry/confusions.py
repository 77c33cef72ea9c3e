"""MistranscriptionTable — characters commonly written or read in place of others."""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import ClassVar, final

from ibanlib.core.errors import DataIntegrityError, data_integrity
from ibanlib.core.result import Err, Ok
from ibanlib.core.types import FrozenMap


@final
@dataclass(frozen=True, slots=True)
class MistranscriptionTable:
    """Seen character -> ordered characters it was plausibly transcribed from."""

    entries: FrozenMap[str, tuple[str, ...]]

    ALPHABET: ClassVar[str] = string.ascii_uppercase + string.digits

    @staticmethod
    def create(
        entries: Mapping[str, Iterable[str]],
    ) -> Ok[MistranscriptionTable] | Err[DataIntegrityError]:
        """Validate and freeze a table.

        The table must hold exactly one entry per character of ALPHABET and
        every confusion must be a single alphabet character.
        """
        source = "registry.confusions.MistranscriptionTable.create"
        normalized: dict[str, tuple[str, ...]] = {}
        for char, origins in entries.items():
            key = char.upper()
            if len(key) != 1 or key not in MistranscriptionTable.ALPHABET:
                return Err(data_integrity(
                    "mistranscriptions", f"unexpected character '{char}'", source,
                ))
            values = tuple(o.upper() for o in origins)
            bad = [o for o in values if len(o) != 1 or o not in MistranscriptionTable.ALPHABET]
            if bad:
                return Err(data_integrity(
                    "mistranscriptions", f"entry '{key}' has invalid confusions {bad}", source,
                ))
            normalized[key] = values
        expected = len(MistranscriptionTable.ALPHABET)
        if len(normalized) != expected:
            return Err(data_integrity(
                "mistranscriptions",
                f"expected {expected} entries, found {len(normalized)}",
                source,
            ))
        missing = set(MistranscriptionTable.ALPHABET) - normalized.keys()
        if missing:
            return Err(data_integrity(
                "mistranscriptions", f"missing entries for {''.join(sorted(missing))}", source,
            ))
        match FrozenMap.create(normalized):
            case Err(e):
                return Err(data_integrity("mistranscriptions", e, source))
            case Ok(frozen):
                return Ok(MistranscriptionTable(entries=frozen))

    def confusions(self, char: str) -> tuple[str, ...]:
        """Characters that `char` may have been mistranscribed from."""
        return self.entries.get(char.upper(), ()) or ()

    def __len__(self) -> int:
        return len(self.entries)
