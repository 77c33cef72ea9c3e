"""Structural extraction — country, checksum, BBAN and the BBAN sub-fields.

The first three parts are fixed positions and need no registry. Bank,
branch, account and national checksum are located through the country's
registry offsets; an unknown country is an Err, never an empty string.
Absent offsets yield "".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from ibanlib.core.errors import CountryNotFoundError
from ibanlib.core.result import Err, Ok
from ibanlib.iban.formats import to_machine_format
from ibanlib.registry.country import CountryFormat, CountryRegistry
from ibanlib.registry.tables import resolve_registry


@final
@dataclass(frozen=True, slots=True)
class IbanParts:
    """Every structural field of one IBAN, in machine format."""

    country: str
    checksum: str
    bban: str
    bank: str
    branch: str
    account: str
    national_checksum: str


# ---------------------------------------------------------------------------
# Fixed-position parts
# ---------------------------------------------------------------------------


def country_part(iban: str) -> str:
    return to_machine_format(iban)[0:2]


def checksum_part(iban: str) -> str:
    return to_machine_format(iban)[2:4]


def bban_part(iban: str) -> str:
    return to_machine_format(iban)[4:]


# ---------------------------------------------------------------------------
# Offset-driven parts
# ---------------------------------------------------------------------------


def _bank(bban: str, fmt: CountryFormat) -> str:
    return fmt.bank_id_offsets.slice(bban) if fmt.bank_id_offsets else ""


def _branch(bban: str, fmt: CountryFormat) -> str:
    return fmt.branch_id_offsets.slice(bban) if fmt.branch_id_offsets else ""


def _account(bban: str, fmt: CountryFormat) -> str:
    """BBAN after the branch, else after the bank, else the whole BBAN."""
    if fmt.branch_id_offsets is not None:
        return bban[fmt.branch_id_offsets.stop + 1:]
    if fmt.bank_id_offsets is not None:
        return bban[fmt.bank_id_offsets.stop + 1:]
    return bban


def _national_checksum(bban: str, fmt: CountryFormat) -> str:
    offsets = fmt.national_checksum_offsets
    return offsets.slice(bban) if offsets else ""


def extract_parts(iban: str, fmt: CountryFormat) -> IbanParts:
    """Split an IBAN using an already resolved country format."""
    machine = to_machine_format(iban)
    bban = machine[4:]
    return IbanParts(
        country=machine[0:2],
        checksum=machine[2:4],
        bban=bban,
        bank=_bank(bban, fmt),
        branch=_branch(bban, fmt),
        account=_account(bban, fmt),
        national_checksum=_national_checksum(bban, fmt),
    )


def country_format_for(
    iban: str,
    registry: CountryRegistry | None = None,
) -> Ok[CountryFormat] | Err[CountryNotFoundError]:
    """The registry entry for the IBAN's country code."""
    return resolve_registry(registry).lookup(country_part(iban))


def iban_parts(
    iban: str,
    registry: CountryRegistry | None = None,
) -> Ok[IbanParts] | Err[CountryNotFoundError]:
    """All seven parts at once."""
    return country_format_for(iban, registry).map(lambda fmt: extract_parts(iban, fmt))


def bank_part(
    iban: str, registry: CountryRegistry | None = None,
) -> Ok[str] | Err[CountryNotFoundError]:
    return country_format_for(iban, registry).map(lambda fmt: _bank(bban_part(iban), fmt))


def branch_part(
    iban: str, registry: CountryRegistry | None = None,
) -> Ok[str] | Err[CountryNotFoundError]:
    return country_format_for(iban, registry).map(lambda fmt: _branch(bban_part(iban), fmt))


def account_part(
    iban: str, registry: CountryRegistry | None = None,
) -> Ok[str] | Err[CountryNotFoundError]:
    return country_format_for(iban, registry).map(lambda fmt: _account(bban_part(iban), fmt))


def national_checksum_part(
    iban: str, registry: CountryRegistry | None = None,
) -> Ok[str] | Err[CountryNotFoundError]:
    return country_format_for(iban, registry).map(
        lambda fmt: _national_checksum(bban_part(iban), fmt)
    )
