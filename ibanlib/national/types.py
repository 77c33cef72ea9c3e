"""National checksum modes, outcomes and the algorithm protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, final

from ibanlib.core.errors import IbanError
from ibanlib.core.result import Err, Ok
from ibanlib.registry.country import CountryFormat


class ChecksumMode(Enum):
    FIND = "find"
    SET = "set"
    VERIFY = "verify"


@final
@dataclass(frozen=True, slots=True)
class Found:
    """FIND: the national check value the BBAN should carry."""

    value: str


@final
@dataclass(frozen=True, slots=True)
class Corrected:
    """SET: the IBAN with its national check value rewritten."""

    iban: str


@final
@dataclass(frozen=True, slots=True)
class Verified:
    """VERIFY: whether the BBAN's national check value is correct."""

    valid: bool


type NationalChecksumOutcome = Found | Corrected | Verified


class NationalChecksumAlgorithm(Protocol):
    """One country's national checksum in all three modes.

    Receives the machine-format IBAN and its country format, already
    length-checked. Returns UnsupportedChecksumError when the algorithm does
    not apply to this particular account.
    """

    def __call__(
        self, iban: str, mode: ChecksumMode, fmt: CountryFormat,
    ) -> Ok[NationalChecksumOutcome] | Err[IbanError]: ...
