"""Country registry types: Offsets, Membership, CountryFormat, CountryRegistry.

A CountryFormat is one row of the IBAN registry. Only the lengths, the two
regexes and the three offset pairs drive validation and extraction; the
rest is pass-through metadata.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import final

from ibanlib.core.errors import CountryNotFoundError, country_not_found
from ibanlib.core.result import Err, Ok
from ibanlib.core.types import FrozenMap


@final
@dataclass(frozen=True, slots=True)
class Offsets:
    """Zero-based, inclusive (start, stop) position of a field in the BBAN."""

    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.stop < self.start:
            raise TypeError(f"Offsets require 0 <= start <= stop, got ({self.start}, {self.stop})")

    @property
    def length(self) -> int:
        return self.stop - self.start + 1

    def slice(self, bban: str) -> str:
        return bban[self.start:self.stop + 1]


class Membership(Enum):
    """Economic-area membership of an IBAN country."""

    EU_MEMBER = "eu_member"
    EFTA_MEMBER = "efta_member"
    OTHER_MEMBER = "other_member"
    NON_MEMBER = "non_member"


@final
@dataclass(frozen=True, slots=True)
class CountryFormat:
    """Structural metadata for one IBAN country."""

    code: str
    name: str
    domestic_example: str
    bban_example: str
    bban_format_swift: str
    bban_format_regex: str
    bban_length: int
    iban_example: str
    iban_format_swift: str
    iban_format_regex: str
    iban_length: int
    bank_id_offsets: Offsets | None
    branch_id_offsets: Offsets | None
    national_checksum_offsets: Offsets | None
    registry_edition: date | None
    sepa: bool
    swift_official: bool
    iana: str
    iso3166: str
    parent_registrar: str
    currency_iso4217: str
    central_bank_host: str
    central_bank_name: str
    membership: Membership

    def __post_init__(self) -> None:
        if self.iban_length != 4 + self.bban_length:
            raise TypeError(
                f"{self.code}: iban_length {self.iban_length} != 4 + bban_length {self.bban_length}"
            )

    @property
    def is_eu_member(self) -> bool:
        return self.membership is Membership.EU_MEMBER

    @property
    def central_bank_url(self) -> str:
        """Central bank home page, or '' when the country has none."""
        if not self.central_bank_host:
            return ""
        return f"https://{self.central_bank_host}/"

    def matches_iban_format(self, iban: str) -> bool:
        # ASCII: \d must not accept non-Latin digits that machine format would drop
        return re.fullmatch(self.iban_format_regex, iban, flags=re.ASCII) is not None

    def matches_bban_format(self, bban: str) -> bool:
        return re.fullmatch(self.bban_format_regex, bban, flags=re.ASCII) is not None


@final
@dataclass(frozen=True, slots=True)
class CountryRegistry:
    """Immutable code -> CountryFormat table."""

    formats: FrozenMap[str, CountryFormat]

    def lookup(self, country_code: str) -> Ok[CountryFormat] | Err[CountryNotFoundError]:
        """Find a country's format. Codes are matched case-insensitively."""
        code = country_code.upper()
        fmt = self.formats.get(code)
        if fmt is None:
            return Err(country_not_found(code, "registry.country.CountryRegistry.lookup"))
        return Ok(fmt)

    def countries(self) -> tuple[str, ...]:
        return self.formats.keys()

    def __contains__(self, country_code: object) -> bool:
        return isinstance(country_code, str) and country_code.upper() in self.formats

    def __len__(self) -> int:
        return len(self.formats)
