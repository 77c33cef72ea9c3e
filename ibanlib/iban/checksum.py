"""IBAN check digits — ISO 13616 MOD97-10.

The IBAN is rotated (country code and check digits to the end), every
letter is replaced by its two-digit value (A=10 ... Z=35) and the digit
string is reduced modulo 97. A correct IBAN leaves remainder 1.

The portable reduction works on 9-digit windows so that no intermediate
value exceeds 999_999_999; Mod97Backend.NATIVE delegates to Python's
arbitrary-precision int instead. Both must agree on every input.
"""

from __future__ import annotations

from ibanlib.iban.formats import to_machine_format
from ibanlib.infra.config import Mod97Backend, default_config

_LETTER_BASE = ord("A") - 10
_WINDOW = 9


def to_numeric(iban: str) -> str:
    """Replace each letter A-Z with 10-35; digits pass through."""
    return "".join(str(ord(c) - _LETTER_BASE) if "A" <= c <= "Z" else c for c in iban)


def mod97_chunked(digits: str) -> int:
    """Remainder of a decimal digit string modulo 97, in 9-digit windows."""
    rest = ""
    position = 0
    while position < len(digits):
        take = _WINDOW - len(rest)
        rest = str(int(rest + digits[position:position + take]) % 97)
        position += take
    return int(rest) if rest else 0


def mod97_native(digits: str) -> int:
    return int(digits) % 97 if digits else 0


def mod97(digits: str, backend: Mod97Backend | None = None) -> int:
    """Remainder modulo 97 using the configured backend."""
    chosen = backend or default_config().mod97_backend
    if chosen is Mod97Backend.NATIVE:
        return mod97_native(digits)
    return mod97_chunked(digits)


def verify_checksum(iban: str, backend: Mod97Backend | None = None) -> bool:
    """True iff the IBAN's check digits are correct (remainder == 1)."""
    machine = to_machine_format(iban)
    rotated = machine[4:] + machine[:4]
    return mod97(to_numeric(rotated), backend) == 1


def find_checksum(iban: str, backend: Mod97Backend | None = None) -> str:
    """The correct two check digits for this IBAN, zero-padded."""
    machine = to_machine_format(iban)
    rotated = machine[4:] + machine[:2] + "00"
    return f"{98 - mod97(to_numeric(rotated), backend):02d}"


def set_checksum(iban: str, backend: Mod97Backend | None = None) -> str:
    """The IBAN in machine format with its check digits recomputed."""
    machine = to_machine_format(iban)
    return machine[:2] + find_checksum(machine, backend) + machine[4:]
