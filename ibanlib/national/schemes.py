"""Mode handling shared by every national algorithm, plus reusable schemes.

apply_mode() turns an expected check value into a Found / Corrected /
Verified outcome. The scheme factories build algorithms that are not tied
to any one country: they compute the check value over a slice of the BBAN
and write it back at the country's national checksum offsets.
"""

from __future__ import annotations

from collections.abc import Callable

from ibanlib.core.errors import IbanError, malformed_input, unsupported_checksum
from ibanlib.core.result import Err, Ok, from_optional
from ibanlib.iban.formats import to_obfuscated_format
from ibanlib.national.primitives import damm, iso7064_mod11_2, iso7064_mod97_10, verhoeff
from ibanlib.national.types import (
    ChecksumMode,
    Corrected,
    Found,
    NationalChecksumAlgorithm,
    NationalChecksumOutcome,
    Verified,
)
from ibanlib.registry.country import CountryFormat


def replace_national_checksum(iban: str, fmt: CountryFormat, value: str) -> str:
    """The IBAN with the national checksum field overwritten by value.

    The IBAN-level check digits are left untouched.
    """
    offsets = fmt.national_checksum_offsets
    if offsets is None:
        return iban
    bban = iban[4:]
    return iban[:4] + bban[:offsets.start] + value + bban[offsets.stop + 1:]


def apply_mode(
    iban: str,
    mode: ChecksumMode,
    fmt: CountryFormat,
    expected: str | None,
    source: str,
) -> Ok[NationalChecksumOutcome] | Err[IbanError]:
    """Map an expected check value onto the requested mode.

    expected is None when the primitive rejected its input: VERIFY reports
    the account as invalid, FIND and SET have nothing to return.
    """
    offsets = fmt.national_checksum_offsets
    if offsets is None:
        return Err(unsupported_checksum(fmt.code, "no national checksum field", source))
    if mode is ChecksumMode.VERIFY:
        return Ok(Verified(valid=expected is not None and offsets.slice(iban[4:]) == expected))
    value = from_optional(expected, lambda: malformed_input(
        "bban", to_obfuscated_format(iban), "has no computable national checksum", source,
    ))
    if mode is ChecksumMode.FIND:
        return value.map(lambda v: Found(value=v))
    return value.map(lambda v: Corrected(iban=replace_national_checksum(iban, fmt, v)))


def scheme(
    compute: Callable[[str, CountryFormat], str | None],
    source: str,
) -> NationalChecksumAlgorithm:
    """Build an algorithm from a function of (bban, fmt) -> expected value."""

    def algorithm(
        iban: str, mode: ChecksumMode, fmt: CountryFormat,
    ) -> Ok[NationalChecksumOutcome] | Err[IbanError]:
        return apply_mode(iban, mode, fmt, compute(iban[4:], fmt), source)

    return algorithm


def _checksum_length(fmt: CountryFormat) -> int:
    offsets = fmt.national_checksum_offsets
    return offsets.length if offsets else 0


def mod97_10_scheme() -> NationalChecksumAlgorithm:
    """ISO 7064 MOD 97-10 over the BBAN less its last two digits."""
    return scheme(
        lambda bban, _fmt: iso7064_mod97_10(bban[:-2]),
        "national.schemes.mod97_10_scheme",
    )


def mod11_2_scheme(drop_at_front: int = 0, drop_at_end: int = 1) -> NationalChecksumAlgorithm:
    """ISO 7064 MOD 11-2 over the BBAN with characters dropped at either end."""
    return scheme(
        lambda bban, _fmt: iso7064_mod11_2(bban[drop_at_front:len(bban) - drop_at_end]),
        "national.schemes.mod11_2_scheme",
    )


def damm_scheme() -> NationalChecksumAlgorithm:
    """Damm over the BBAN less its trailing national checksum."""
    return scheme(
        lambda bban, fmt: damm(bban[:len(bban) - _checksum_length(fmt)]),
        "national.schemes.damm_scheme",
    )


def verhoeff_scheme(strip_end: int, strip_front: int = 0) -> NationalChecksumAlgorithm:
    """Verhoeff over the BBAN with characters stripped at either end."""

    def compute(bban: str, _fmt: CountryFormat) -> str | None:
        body = bban[strip_front:]
        return verhoeff(body[:len(body) - strip_end])

    return scheme(compute, "national.schemes.verhoeff_scheme")
