"""Error value hierarchy — lookups and checksums return these inside Err.

Every error is a frozen dataclass value that can be pattern-matched and
serialized. Base class IbanError, four @final subclasses. TableLoadError is
the one exception type: it carries a DataIntegrityError out of the lazy
default-table loaders, where there is no Result to return it in.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final


@dataclass(frozen=True, slots=True)
class IbanError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> IbanError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class CountryNotFoundError(IbanError):
    """Country code has no registry entry."""

    country: str

    def to_dict(self) -> dict[str, object]:
        return {**IbanError.to_dict(self), "country": self.country}


@final
@dataclass(frozen=True, slots=True)
class UnsupportedChecksumError(IbanError):
    """No national checksum algorithm applies to this IBAN."""

    country: str
    reason: str

    def to_dict(self) -> dict[str, object]:
        return {**IbanError.to_dict(self), "country": self.country, "reason": self.reason}


@final
@dataclass(frozen=True, slots=True)
class MalformedInputError(IbanError):
    """Input has the wrong shape for the requested computation."""

    field: str  # e.g. "bban", "iban_length"
    actual_value: str
    constraint: str  # e.g. "digits only"

    def to_dict(self) -> dict[str, object]:
        return {
            **IbanError.to_dict(self),
            "field": self.field,
            "actual_value": self.actual_value,
            "constraint": self.constraint,
        }


@final
@dataclass(frozen=True, slots=True)
class DataIntegrityError(IbanError):
    """A registry or mistranscription table is missing or structurally broken."""

    table: str  # "registry" | "mistranscriptions"
    detail: str

    def to_dict(self) -> dict[str, object]:
        return {**IbanError.to_dict(self), "table": self.table, "detail": self.detail}


# ---------------------------------------------------------------------------
# Constructors with stable codes
# ---------------------------------------------------------------------------


def country_not_found(country: str, source: str) -> CountryNotFoundError:
    return CountryNotFoundError(
        message=f"Unknown IBAN country '{country}'",
        code="IBAN-404",
        source=source,
        country=country,
    )


def unsupported_checksum(country: str, reason: str, source: str) -> UnsupportedChecksumError:
    return UnsupportedChecksumError(
        message=f"National checksum unsupported for '{country}': {reason}",
        code="IBAN-501",
        source=source,
        country=country,
        reason=reason,
    )


def malformed_input(
    field: str, actual_value: str, constraint: str, source: str,
) -> MalformedInputError:
    return MalformedInputError(
        message=f"{field} {constraint}, got '{actual_value}'",
        code="IBAN-422",
        source=source,
        field=field,
        actual_value=actual_value,
        constraint=constraint,
    )


def data_integrity(table: str, detail: str, source: str) -> DataIntegrityError:
    return DataIntegrityError(
        message=f"{table} table is unusable: {detail}",
        code="IBAN-500",
        source=source,
        table=table,
        detail=detail,
    )


class TableLoadError(RuntimeError):
    """A default lookup table could not be loaded. Fatal for every lookup."""

    def __init__(self, error: DataIntegrityError) -> None:
        super().__init__(error.message)
        self.error = error
