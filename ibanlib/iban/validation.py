"""Full IBAN validation and the validated Iban value type.

Checks run cheapest first: registered country, exact length, country
regex, and only then the MOD97-10 check digits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from ibanlib.core.errors import MalformedInputError, malformed_input
from ibanlib.core.result import Err, Ok
from ibanlib.iban.checksum import verify_checksum
from ibanlib.iban.formats import to_human_format, to_machine_format, to_obfuscated_format
from ibanlib.registry.country import CountryFormat, CountryRegistry
from ibanlib.registry.tables import resolve_registry


def _check(
    iban: str,
    registry: CountryRegistry | None,
    source: str,
) -> Ok[CountryFormat] | Err[MalformedInputError]:
    found = resolve_registry(registry).lookup(iban[:2])
    if isinstance(found, Err):
        return Err(malformed_input(
            "country", iban[:2], "must be a registered IBAN country", source,
        ))
    fmt = found.value
    if len(iban) != fmt.iban_length:
        return Err(malformed_input(
            "iban_length", str(len(iban)), f"must be {fmt.iban_length} for {fmt.code}", source,
        ))
    if not fmt.matches_iban_format(iban):
        return Err(malformed_input(
            "iban", to_obfuscated_format(iban), f"must match {fmt.iban_format_swift}", source,
        ))
    if not verify_checksum(iban):
        return Err(malformed_input(
            "checksum", iban[2:4], "must satisfy MOD97-10", source,
        ))
    return Ok(fmt)


def verify_iban(
    iban: str,
    machine_format_only: bool = False,
    registry: CountryRegistry | None = None,
) -> bool:
    """True iff the IBAN is structurally valid and its check digits are correct.

    With machine_format_only the input is taken as-is; otherwise it is
    normalized first, so separators, lowercase and an "IBAN" prefix are
    accepted.
    """
    candidate = iban if machine_format_only else to_machine_format(iban)
    return isinstance(_check(candidate, registry, "iban.validation.verify_iban"), Ok)


@final
@dataclass(frozen=True, slots=True)
class Iban:
    """A verified IBAN, held in machine format."""

    value: str

    @staticmethod
    def parse(
        raw: str,
        registry: CountryRegistry | None = None,
    ) -> Ok[Iban] | Err[MalformedInputError]:
        machine = to_machine_format(raw)
        match _check(machine, registry, "iban.validation.Iban.parse"):
            case Err(e):
                return Err(e)
            case Ok(_):
                return Ok(Iban(value=machine))

    @property
    def human(self) -> str:
        return to_human_format(self.value)

    @property
    def obfuscated(self) -> str:
        return to_obfuscated_format(self.value)

    @property
    def country(self) -> str:
        return self.value[0:2]

    @property
    def checksum(self) -> str:
        return self.value[2:4]

    @property
    def bban(self) -> str:
        return self.value[4:]

    def __str__(self) -> str:
        return self.value
