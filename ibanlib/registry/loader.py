"""Decode the registry and mistranscription flat files into immutable tables.

Registry: pipe-delimited, a header line, then 27 fields per country in a
fixed order. Mistranscriptions: lines of the form

    c-<seen> = "<origin>" / "<origin>" / ...

Any structural problem fails the whole load with a DataIntegrityError. A
half-readable registry would otherwise turn broken rows into "country not
found" or, worse, into guessed formats.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from pathlib import Path

from dateutil.parser import isoparse

from ibanlib.core.errors import DataIntegrityError, data_integrity
from ibanlib.core.result import Err, Ok
from ibanlib.core.types import FrozenMap
from ibanlib.registry.confusions import MistranscriptionTable
from ibanlib.registry.country import CountryFormat, CountryRegistry, Membership, Offsets

logger = logging.getLogger(__name__)

REGISTRY_FIELDS: tuple[str, ...] = (
    "country",
    "country_name",
    "domestic_example",
    "bban_example",
    "bban_format_swift",
    "bban_format_regex",
    "bban_length",
    "iban_example",
    "iban_format_swift",
    "iban_format_regex",
    "iban_length",
    "bban_bankid_start_offset",
    "bban_bankid_stop_offset",
    "bban_branchid_start_offset",
    "bban_branchid_stop_offset",
    "registry_edition",
    "country_sepa",
    "country_swift_official",
    "bban_checksum_start_offset",
    "bban_checksum_stop_offset",
    "country_iana",
    "country_iso3166",
    "parent_registrar",
    "currency_iso4217",
    "central_bank_url",
    "central_bank_name",
    "membership",
)

_MISTRANSCRIPTION_LINE = re.compile(r"^ *c-(\w) = (.*?)$")


class _RowError(Exception):
    """Internal: aborts decoding of one registry row."""


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def _int_field(row: dict[str, str], name: str) -> int:
    raw = row[name].strip()
    if not raw.isdigit():
        raise _RowError(f"{name} must be a non-negative integer, got '{raw}'")
    return int(raw)


def _offsets(row: dict[str, str], start_name: str, stop_name: str) -> Offsets | None:
    start, stop = row[start_name].strip(), row[stop_name].strip()
    if not start and not stop:
        return None
    if not start or not stop:
        raise _RowError(f"{start_name}/{stop_name} must both be set or both be empty")
    if not start.isdigit() or not stop.isdigit():
        raise _RowError(f"{start_name}/{stop_name} must be integers, got '{start}'/'{stop}'")
    try:
        return Offsets(start=int(start), stop=int(stop))
    except TypeError as e:
        raise _RowError(str(e)) from e


def _flag(row: dict[str, str], name: str) -> bool:
    raw = row[name].strip()
    if raw not in ("", "0", "1"):
        raise _RowError(f"{name} must be 0 or 1, got '{raw}'")
    return raw == "1"


def _regex(row: dict[str, str], name: str) -> str:
    raw = row[name]
    try:
        re.compile(raw)
    except re.error as e:
        raise _RowError(f"{name} is not a valid regex: {e}") from e
    return raw


def _country_format(row: dict[str, str]) -> CountryFormat:
    code = row["country"].strip().upper()
    if len(code) != 2 or not code.isalpha():
        raise _RowError(f"country code must be two letters, got '{code}'")
    edition_raw = row["registry_edition"].strip()
    try:
        edition = isoparse(edition_raw).date() if edition_raw else None
    except ValueError as e:
        raise _RowError(f"registry_edition '{edition_raw}' is not an ISO date") from e
    try:
        membership = Membership(row["membership"].strip())
    except ValueError as e:
        raise _RowError(f"unknown membership '{row['membership']}'") from e
    bban_length = _int_field(row, "bban_length")
    iban_length = _int_field(row, "iban_length")
    if iban_length != 4 + bban_length:
        raise _RowError(f"iban_length {iban_length} != 4 + bban_length {bban_length}")
    return CountryFormat(
        code=code,
        name=row["country_name"],
        domestic_example=row["domestic_example"],
        bban_example=row["bban_example"],
        bban_format_swift=row["bban_format_swift"],
        bban_format_regex=_regex(row, "bban_format_regex"),
        bban_length=bban_length,
        iban_example=row["iban_example"],
        iban_format_swift=row["iban_format_swift"],
        iban_format_regex=_regex(row, "iban_format_regex"),
        iban_length=iban_length,
        bank_id_offsets=_offsets(row, "bban_bankid_start_offset", "bban_bankid_stop_offset"),
        branch_id_offsets=_offsets(
            row, "bban_branchid_start_offset", "bban_branchid_stop_offset",
        ),
        national_checksum_offsets=_offsets(
            row, "bban_checksum_start_offset", "bban_checksum_stop_offset",
        ),
        registry_edition=edition,
        sepa=_flag(row, "country_sepa"),
        swift_official=_flag(row, "country_swift_official"),
        iana=row["country_iana"],
        iso3166=row["country_iso3166"],
        parent_registrar=row["parent_registrar"],
        currency_iso4217=row["currency_iso4217"],
        central_bank_host=row["central_bank_url"].strip(),
        central_bank_name=row["central_bank_name"],
        membership=membership,
    )


def parse_registry(text: str) -> Ok[CountryRegistry] | Err[DataIntegrityError]:
    """Decode registry text. The first line is a header and is skipped."""
    source = "registry.loader.parse_registry"
    reader = csv.reader(io.StringIO(text), delimiter="|", quoting=csv.QUOTE_NONE)
    next(reader, None)
    formats: dict[str, CountryFormat] = {}
    for line_no, fields in enumerate(reader, start=2):
        if not fields or fields == [""]:
            continue
        if len(fields) != len(REGISTRY_FIELDS):
            return Err(data_integrity(
                "registry",
                f"line {line_no}: expected {len(REGISTRY_FIELDS)} fields, got {len(fields)}",
                source,
            ))
        try:
            fmt = _country_format(dict(zip(REGISTRY_FIELDS, fields, strict=True)))
        except _RowError as e:
            return Err(data_integrity("registry", f"line {line_no}: {e}", source))
        if fmt.code in formats:
            return Err(data_integrity(
                "registry", f"line {line_no}: duplicate country '{fmt.code}'", source,
            ))
        formats[fmt.code] = fmt
    if not formats:
        return Err(data_integrity("registry", "no country records", source))
    match FrozenMap.create(formats):
        case Err(e):
            return Err(data_integrity("registry", e, source))
        case Ok(frozen):
            return Ok(CountryRegistry(formats=frozen))


def load_registry(path: Path) -> Ok[CountryRegistry] | Err[DataIntegrityError]:
    """Read and decode a registry file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(data_integrity(
            "registry", f"cannot read {path}: {e}", "registry.loader.load_registry",
        ))
    result = parse_registry(text)
    if isinstance(result, Ok):
        logger.info("Loaded IBAN registry: %d countries from %s", len(result.value), path)
    return result


# ---------------------------------------------------------------------------
# Mistranscriptions
# ---------------------------------------------------------------------------


def parse_mistranscriptions(text: str) -> Ok[MistranscriptionTable] | Err[DataIntegrityError]:
    """Decode `c-<x> = "a" / "b"` lines; anything else is a comment."""
    entries: dict[str, list[str]] = {}
    for line in text.splitlines():
        m = _MISTRANSCRIPTION_LINE.match(line)
        if m is None:
            continue
        origins = [o.strip().strip('"') for o in m.group(2).split("/")]
        entries[m.group(1).upper()] = [o for o in origins if o]
    return MistranscriptionTable.create(entries)


def load_mistranscriptions(path: Path) -> Ok[MistranscriptionTable] | Err[DataIntegrityError]:
    """Read and decode a mistranscription file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(data_integrity(
            "mistranscriptions", f"cannot read {path}: {e}",
            "registry.loader.load_mistranscriptions",
        ))
    result = parse_mistranscriptions(text)
    if isinstance(result, Ok):
        logger.info("Loaded mistranscription table: %d entries from %s", len(result.value), path)
    return result
