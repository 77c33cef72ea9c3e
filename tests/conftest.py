"""Hypothesis strategies and pytest fixtures for ibanlib.

Strategies build IBANs from the bundled registry's SWIFT formats, so every
generated IBAN is structurally valid for its country by construction.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from ibanlib.core.result import unwrap
from ibanlib.iban.checksum import set_checksum
from ibanlib.registry.country import CountryFormat, CountryRegistry
from ibanlib.registry.loader import parse_registry
from ibanlib.registry.tables import default_registry, reset_default_tables

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# KNOWN-GOOD IBANS
# ===================================================================

GB_VALID = "GB29NWBK60161331926819"
GB_BAD_CHECKSUM = "GB28NWBK60161331926819"
HU_VALID = "HU42117730161111101800000000"
BE_VALID = "BE68539007547034"
ES_VALID = "ES9121000418450200051332"
FR_VALID = "FR1420041010050500013M02606"
IT_VALID = "IT60X0542811101000000123456"
SM_VALID = "SM86U0322509800000000270100"
NL_VALID = "NL91ABNA0417164300"
NO_VALID = "NO9386011117947"
SK_VALID = "SK3112000000198742637541"
DE_VALID = "DE89370400440532013000"


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

_SWIFT_ALPHABETS = {
    "n": string.digits,
    "a": string.ascii_uppercase,
    "c": string.ascii_uppercase + string.digits,
}
_SWIFT_TOKEN = re.compile(r"(\d+)!([nac])")


def digit_strings(min_size: int = 1, max_size: int = 34) -> SearchStrategy[str]:
    """ASCII decimal digit strings."""
    return st.text(alphabet=string.digits, min_size=min_size, max_size=max_size)


def alnum_strings(min_size: int = 0, max_size: int = 40) -> SearchStrategy[str]:
    """Uppercase letters and digits, i.e. anything already in machine format."""
    return st.text(
        alphabet=string.ascii_uppercase + string.digits, min_size=min_size, max_size=max_size,
    )


def bbans_for(fmt: CountryFormat) -> SearchStrategy[str]:
    """BBANs matching a country's SWIFT format, e.g. 4!a6!n8!n."""
    pieces = [
        st.text(alphabet=_SWIFT_ALPHABETS[kind], min_size=int(n), max_size=int(n))
        for n, kind in _SWIFT_TOKEN.findall(fmt.bban_format_swift)
    ]
    return st.tuples(*pieces).map("".join)


# ===================================================================
# IBAN STRATEGIES
# ===================================================================


@st.composite
def valid_ibans(draw: st.DrawFn, countries: tuple[str, ...] | None = None) -> str:
    """Machine-format IBANs with correct check digits for a registered country."""
    registry = default_registry()
    code = draw(st.sampled_from(countries or registry.countries()))
    fmt = unwrap(registry.lookup(code))
    bban = draw(bbans_for(fmt))
    return set_checksum(code + "00" + bban)


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture
def registry() -> CountryRegistry:
    return default_registry()


@pytest.fixture
def fresh_tables() -> Iterator[None]:
    """Drop the cached default tables before and after the test."""
    reset_default_tables()
    yield
    reset_default_tables()


REGISTRY_HEADER = "|".join(["header"] * 27)


def registry_row(**overrides: str) -> str:
    """One registry record for a synthetic country ZZ, fields overridable by name."""
    row = {
        "country": "ZZ",
        "country_name": "Testland",
        "domestic_example": "",
        "bban_example": "5724",
        "bban_format_swift": "4!n",
        "bban_format_regex": r"^(\d{4})$",
        "bban_length": "4",
        "iban_example": "",
        "iban_format_swift": "ZZ2!n4!n",
        "iban_format_regex": r"^ZZ(\d{2})(\d{4})$",
        "iban_length": "8",
        "bban_bankid_start_offset": "0",
        "bban_bankid_stop_offset": "1",
        "bban_branchid_start_offset": "",
        "bban_branchid_stop_offset": "",
        "registry_edition": "2024-01-01",
        "country_sepa": "0",
        "country_swift_official": "0",
        "bban_checksum_start_offset": "3",
        "bban_checksum_stop_offset": "3",
        "country_iana": ".zz",
        "country_iso3166": "ZZ",
        "parent_registrar": "",
        "currency_iso4217": "XTS",
        "central_bank_url": "",
        "central_bank_name": "",
        "membership": "non_member",
    }
    row.update(overrides)
    return "|".join(row.values())


def synthetic_registry(*rows: str) -> CountryRegistry:
    return unwrap(parse_registry("\n".join([REGISTRY_HEADER, *rows]) + "\n"))
