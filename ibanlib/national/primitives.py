"""Checksum primitives used by the national algorithms.

Each primitive is a pure function of its input string. Input outside the
primitive's domain (a non-digit where digits are required, an empty or
wrong-length string) yields None; no primitive raises for any str.
"""

from __future__ import annotations

from collections.abc import Sequence

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_digits(s: str) -> bool:
    """Non-empty and ASCII 0-9 only."""
    return s.isascii() and s.isdigit()


def weighted_sum(digits: str, weights: Sequence[int]) -> int | None:
    """Sum of digit[i] * weights[i]. None unless lengths match and all are digits."""
    if len(digits) != len(weights) or not is_digits(digits):
        return None
    return sum(int(d) * w for d, w in zip(digits, weights, strict=True))


# ---------------------------------------------------------------------------
# ISO 7064
# ---------------------------------------------------------------------------


def iso7064_mod97_10(digits: str) -> str | None:
    """ISO 7064 MOD 97-10 check digits, two characters."""
    if not is_digits(digits):
        return None
    p = 0
    for d in digits:
        p = ((p + int(d)) * 10) % 97
    p = (p * 10) % 97
    return f"{(97 - p + 1) % 97:02d}"


def iso7064_mod11_2(digits: str) -> str | None:
    """ISO 7064 MOD 11-2 check character, one of 0-9 or X."""
    if not is_digits(digits):
        return None
    p = 0
    for d in digits:
        p = ((p + int(d)) * 2) % 11
    return "0123456789X"[(11 - p + 1) % 11]


# ---------------------------------------------------------------------------
# Verhoeff, Damm, Luhn
# ---------------------------------------------------------------------------

_VERHOEFF_D: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)
_VERHOEFF_P: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)
_VERHOEFF_INV: tuple[int, ...] = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)

# Totally anti-symmetric quasigroup of order 10
_DAMM: tuple[tuple[int, ...], ...] = (
    (0, 3, 1, 7, 5, 9, 8, 6, 4, 2),
    (7, 0, 9, 2, 1, 5, 4, 8, 6, 3),
    (4, 2, 0, 6, 8, 7, 1, 3, 5, 9),
    (1, 7, 5, 0, 9, 8, 3, 4, 2, 6),
    (6, 1, 2, 3, 0, 4, 5, 9, 7, 8),
    (3, 6, 7, 4, 2, 0, 9, 5, 8, 1),
    (5, 8, 6, 9, 7, 2, 0, 1, 3, 4),
    (8, 9, 4, 5, 3, 6, 2, 0, 1, 7),
    (9, 4, 3, 8, 6, 1, 7, 2, 0, 5),
    (2, 5, 8, 1, 4, 3, 6, 7, 9, 0),
)


def verhoeff(digits: str) -> str | None:
    """Verhoeff check digit to append to `digits`."""
    if not is_digits(digits):
        return None
    r = 0
    for n, d in enumerate(reversed(digits)):
        r = _VERHOEFF_D[r][_VERHOEFF_P[(n + 1) % 8][int(d)]]
    return str(_VERHOEFF_INV[r])


def damm(digits: str) -> str | None:
    """Damm check digit to append to `digits`."""
    if not is_digits(digits):
        return None
    interim = 0
    for d in digits:
        interim = _DAMM[interim][int(d)]
    return str(interim)


def luhn(digits: str) -> int | None:
    """Luhn sum modulo 10 over a number that already carries its check digit.

    Every second digit from the right is doubled and the digits of the
    result are summed. 0 means the number is valid.
    """
    if not is_digits(digits):
        return None
    expanded = "".join(
        str(int(d) * 2) if i % 2 else d for i, d in enumerate(reversed(digits))
    )
    return sum(int(c) for c in expanded) % 10


# ---------------------------------------------------------------------------
# Country-specific building blocks
# ---------------------------------------------------------------------------

# French RIB letter values: A-I and J-R map to 1-9, S-Z to 2-9
_FRENCH_LETTERS: dict[str, str] = {
    **{c: str(i + 1) for i, c in enumerate("ABCDEFGHI")},
    **{c: str(i + 1) for i, c in enumerate("JKLMNOPQR")},
    **{c: str(i + 2) for i, c in enumerate("STUVWXYZ")},
}


def letters_to_digits(bban: str) -> str | None:
    """Replace letters with their French RIB digit values."""
    out = []
    for c in bban.upper():
        if "0" <= c <= "9":
            out.append(c)
        elif c in _FRENCH_LETTERS:
            out.append(_FRENCH_LETTERS[c])
        else:
            return None
    return "".join(out)


def french_rib_key(bban: str) -> str | None:
    """RIB key: 97 - (89*bank + 15*branch + 3*account) mod 97."""
    numeric = letters_to_digits(bban)
    if numeric is None or len(numeric) < 21:
        return None
    bank, branch, account = int(numeric[0:5]), int(numeric[5:10]), int(numeric[10:21])
    return f"{97 - (89 * bank + 15 * branch + 3 * account) % 97:02d}"


_ITALIAN_DIGITS = "0123456789"
_ITALIAN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ-. "
_ITALIAN_ODD: tuple[int, ...] = (
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18, 20, 11,
    3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23, 27, 28, 26,
)
ITALIAN_CHECKED_LENGTH = 22


def italian_check_character(chars: str) -> str | None:
    """CIN check letter over the 22 characters after it in the BBAN.

    Characters at even (0-based) positions are weighted through the odd
    table, the rest by their own value.
    """
    if len(chars) != ITALIAN_CHECKED_LENGTH:
        return None
    total = 0
    for k, c in enumerate(chars):
        i = _ITALIAN_DIGITS.find(c)
        if i < 0:
            i = _ITALIAN_LETTERS.find(c)
        if i < 0:
            return None
        total += _ITALIAN_ODD[i] if k % 2 == 0 else i
    return _ITALIAN_LETTERS[total % 26]


def belgian_mod97(digits: str) -> str | None:
    """Belgian account check: number mod 97, where remainder 0 is written 97."""
    if not is_digits(digits):
        return None
    return f"{int(digits) % 97 or 97:02d}"


_SPANISH_WEIGHTS: tuple[int, ...] = (1, 2, 4, 8, 5, 10, 9, 7, 3, 6)


def spanish_mod11(digits: str) -> str | None:
    """One CCC control digit over ten digits: 11 - sum mod 11, 11 -> 0, 10 -> 1."""
    total = weighted_sum(digits, _SPANISH_WEIGHTS)
    if total is None:
        return None
    check = 11 - total % 11
    return str({11: 0, 10: 1}.get(check, check))


def mod11_check_digit(digits: str, weights: Sequence[int]) -> str | None:
    """11 - weighted sum mod 11, with 11 -> 0. No digit exists when that gives 10."""
    total = weighted_sum(digits, weights)
    if total is None:
        return None
    check = (11 - total % 11) % 11
    return None if check == 10 else str(check)
