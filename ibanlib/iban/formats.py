"""Presentation formats: machine, human (ECBS grouping) and obfuscated.

All three are total functions over str. Whether the result is a plausible
IBAN is decided later by the registry length and regex checks.
"""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^A-Z0-9]")
# "IBAN" / "IIBAN" written in front of the number. Stripped repeatedly so
# that machine format is a fixed point of itself.
_IBAN_PREFIX = re.compile(r"^(?:I?IBAN)+")

GROUP_SIZE = 4
VISIBLE_TAIL = 4
VISIBLE_HEAD = 2


def to_machine_format(iban: str) -> str:
    """Uppercase, drop separators and any leading 'IBAN'/'IIBAN' token.

    >>> to_machine_format("IBAN gb29 nwbk 6016-1331-9268-19")
    'GB29NWBK60161331926819'
    """
    cleaned = _NON_ALNUM.sub("", iban.strip().upper())
    return _IBAN_PREFIX.sub("", cleaned, count=1)


def to_human_format(iban: str) -> str:
    """Remove spaces, then insert one every four characters."""
    compact = iban.replace(" ", "")
    return " ".join(compact[i:i + GROUP_SIZE] for i in range(0, len(compact), GROUP_SIZE))


def to_obfuscated_format(iban: str) -> str:
    """Mask everything but the country code and the last four characters.

    The checksum is masked too: in countries with few banks and branches it
    narrows down the rest of the number. The visible tail only helps a user
    tell stored accounts apart and must not be treated as secret-safe.

    >>> to_obfuscated_format("HU69107000246667654851100005")
    'HU** **** **** **** **** **** 0005'
    """
    machine = to_machine_format(iban)
    tail_start = max(VISIBLE_HEAD, len(machine) - VISIBLE_TAIL)
    masked = (
        machine[:VISIBLE_HEAD]
        + "*" * (tail_start - VISIBLE_HEAD)
        + machine[tail_start:]
    )
    return to_human_format(masked)
