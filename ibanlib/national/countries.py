"""Country national checksum algorithms.

Every function here has the NationalChecksumAlgorithm signature: it gets a
machine-format IBAN whose length already matches the registry, the mode,
and the country's format.
"""

from __future__ import annotations

from ibanlib.core.errors import IbanError, unsupported_checksum
from ibanlib.core.result import Err, Ok
from ibanlib.iban.parts import extract_parts
from ibanlib.national.primitives import (
    belgian_mod97,
    french_rib_key,
    italian_check_character,
    mod11_check_digit,
    spanish_mod11,
    weighted_sum,
)
from ibanlib.national.schemes import apply_mode, mod97_10_scheme, scheme
from ibanlib.national.types import (
    ChecksumMode,
    Corrected,
    NationalChecksumAlgorithm,
    NationalChecksumOutcome,
    Verified,
)
from ibanlib.registry.country import CountryFormat

type Outcome = Ok[NationalChecksumOutcome] | Err[IbanError]


def _less_checksum(bban: str, fmt: CountryFormat) -> str:
    offsets = fmt.national_checksum_offsets
    return bban[:len(bban) - offsets.length] if offsets else bban


# ---------------------------------------------------------------------------
# Belgium
# ---------------------------------------------------------------------------

belgium = scheme(
    lambda bban, fmt: belgian_mod97(_less_checksum(bban, fmt)),
    "national.countries.belgium",
)


# ---------------------------------------------------------------------------
# Spain: two control digits, bank+branch and account
# ---------------------------------------------------------------------------


def spain(iban: str, mode: ChecksumMode, fmt: CountryFormat) -> Outcome:
    parts = extract_parts(iban, fmt)
    first = spanish_mod11("00" + parts.bank + parts.branch)
    second = spanish_mod11(parts.account[2:])
    expected = first + second if first is not None and second is not None else None
    return apply_mode(iban, mode, fmt, expected, "national.countries.spain")


# ---------------------------------------------------------------------------
# France and the countries sharing its RIB key
# ---------------------------------------------------------------------------

france = scheme(lambda bban, _fmt: french_rib_key(bban), "national.countries.france")


# ---------------------------------------------------------------------------
# Italy and San Marino: CIN letter in front of the BBAN
# ---------------------------------------------------------------------------

italy = scheme(lambda bban, _fmt: italian_check_character(bban[1:]), "national.countries.italy")


# ---------------------------------------------------------------------------
# Norway
# ---------------------------------------------------------------------------

NORWAY_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

norway = scheme(
    lambda bban, _fmt: mod11_check_digit(bban[:10], NORWAY_WEIGHTS),
    "national.countries.norway",
)


# ---------------------------------------------------------------------------
# ISO 7064 MOD 97-10 countries, with central-bank exceptions
# ---------------------------------------------------------------------------

mod97_10 = mod97_10_scheme()


def _excluding_bank(
    bank_code: str, reason: str, algorithm: NationalChecksumAlgorithm,
) -> NationalChecksumAlgorithm:
    def guarded(iban: str, mode: ChecksumMode, fmt: CountryFormat) -> Outcome:
        if extract_parts(iban, fmt).bank == bank_code:
            return Err(unsupported_checksum(fmt.code, reason, "national.countries.excluding_bank"))
        return algorithm(iban, mode, fmt)

    return guarded


# Two published accounts of the National Bank of Serbia carry a key off by 97.
serbia = _excluding_bank("908", "National Bank of Serbia accounts", mod97_10)
# The Bank of Slovenia does not use the legacy key.
slovenia = _excluding_bank("01", "Bank of Slovenia accounts", mod97_10)


# ---------------------------------------------------------------------------
# Netherlands: eleven-test over the account, no separate check digit
# ---------------------------------------------------------------------------

NETHERLANDS_WEIGHTS: tuple[int, ...] = (10, 9, 8, 7, 6, 5, 4, 3, 2, 1)


def netherlands(iban: str, mode: ChecksumMode, fmt: CountryFormat) -> Outcome:
    source = "national.countries.netherlands"
    parts = extract_parts(iban, fmt)
    if parts.bank.upper() == "INGB":
        return Err(unsupported_checksum(fmt.code, "INGB accounts are not eleven-tested", source))
    total = weighted_sum(parts.account, NETHERLANDS_WEIGHTS)
    passes = total is not None and total % 11 == 0
    match mode:
        case ChecksumMode.VERIFY:
            return Ok(Verified(valid=passes))
        case ChecksumMode.SET if passes:
            return Ok(Corrected(iban=iban))
        case ChecksumMode.SET:
            return Err(unsupported_checksum(
                fmt.code, "a failing eleven-test cannot be corrected", source,
            ))
        case ChecksumMode.FIND:
            return Err(unsupported_checksum(fmt.code, "no separate check digit", source))


# ---------------------------------------------------------------------------
# Slovakia: account number weights, verification only
# ---------------------------------------------------------------------------

SLOVAKIA_WEIGHTS: tuple[int, ...] = (6, 3, 7, 9, 10, 5, 8, 4, 2, 1)


def slovakia(iban: str, mode: ChecksumMode, fmt: CountryFormat) -> Outcome:
    if mode is not ChecksumMode.VERIFY:
        return Err(unsupported_checksum(
            fmt.code, f"{mode.value} is not defined", "national.countries.slovakia",
        ))
    total = weighted_sum(extract_parts(iban, fmt).account, SLOVAKIA_WEIGHTS)
    return Ok(Verified(valid=total is not None and total % 11 == 0))
