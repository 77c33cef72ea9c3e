"""National checksum dispatch — country code to algorithm.

NATIONAL_CHECKSUMS is the complete, static table. A country missing from
it, or an account an algorithm declines, yields UnsupportedChecksumError,
which is never the same thing as Verified(valid=False).
"""

from __future__ import annotations

from ibanlib.core.errors import (
    IbanError,
    malformed_input,
    unsupported_checksum,
)
from ibanlib.core.result import Err, Ok
from ibanlib.core.types import FrozenMap
from ibanlib.iban.checksum import set_checksum
from ibanlib.iban.formats import to_machine_format
from ibanlib.national import countries
from ibanlib.national.types import (
    ChecksumMode,
    Corrected,
    Found,
    NationalChecksumAlgorithm,
    NationalChecksumOutcome,
    Verified,
)
from ibanlib.registry.country import CountryRegistry
from ibanlib.registry.tables import resolve_registry

_FRENCH_FAMILY = ("CF", "CG", "DJ", "FR", "GA", "GQ", "KM", "MC", "TD")
_MOD97_10_COUNTRIES = ("ME", "MK", "PT", "TL")

NATIONAL_CHECKSUMS: FrozenMap[str, NationalChecksumAlgorithm] = FrozenMap.create({
    "BE": countries.belgium,
    "ES": countries.spain,
    **{code: countries.france for code in _FRENCH_FAMILY},
    "IT": countries.italy,
    "SM": countries.italy,
    **{code: countries.mod97_10 for code in _MOD97_10_COUNTRIES},
    "RS": countries.serbia,
    "SI": countries.slovenia,
    "NL": countries.netherlands,
    "NO": countries.norway,
    "SK": countries.slovakia,
}).unwrap()


def supported_countries() -> tuple[str, ...]:
    """Country codes with a national checksum algorithm, sorted."""
    return NATIONAL_CHECKSUMS.keys()


def national_checksum(
    iban: str,
    mode: ChecksumMode,
    registry: CountryRegistry | None = None,
) -> Ok[NationalChecksumOutcome] | Err[IbanError]:
    """Run the country's national checksum algorithm in the given mode.

    SET also recomputes the IBAN-level check digits of the corrected IBAN.
    """
    source = "national.dispatch.national_checksum"
    machine = to_machine_format(iban)
    found = resolve_registry(registry).lookup(machine[:2])
    if isinstance(found, Err):
        return found
    fmt = found.value
    algorithm = NATIONAL_CHECKSUMS.get(fmt.code)
    if algorithm is None:
        return Err(unsupported_checksum(fmt.code, "no national checksum algorithm", source))
    if len(machine) != fmt.iban_length:
        return Err(malformed_input(
            "iban_length", str(len(machine)), f"must be {fmt.iban_length} for {fmt.code}", source,
        ))
    match algorithm(machine, mode, fmt):
        case Ok(Corrected(iban=corrected)) if mode is ChecksumMode.SET:
            return Ok(Corrected(iban=set_checksum(corrected)))
        case result:
            return result


def find_national_checksum(
    iban: str, registry: CountryRegistry | None = None,
) -> Ok[str] | Err[IbanError]:
    match national_checksum(iban, ChecksumMode.FIND, registry):
        case Ok(Found(value=value)):
            return Ok(value)
        case Ok(other):
            raise TypeError(f"FIND produced {type(other).__name__}")
        case Err(e):
            return Err(e)


def verify_national_checksum(
    iban: str, registry: CountryRegistry | None = None,
) -> Ok[bool] | Err[IbanError]:
    match national_checksum(iban, ChecksumMode.VERIFY, registry):
        case Ok(Verified(valid=valid)):
            return Ok(valid)
        case Ok(other):
            raise TypeError(f"VERIFY produced {type(other).__name__}")
        case Err(e):
            return Err(e)


def set_national_checksum(
    iban: str, registry: CountryRegistry | None = None,
) -> Ok[str] | Err[IbanError]:
    """The IBAN with both its national and IBAN-level check digits corrected."""
    match national_checksum(iban, ChecksumMode.SET, registry):
        case Ok(Corrected(iban=corrected)):
            return Ok(corrected)
        case Ok(other):
            raise TypeError(f"SET produced {type(other).__name__}")
        case Err(e):
            return Err(e)
