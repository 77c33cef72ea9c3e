"""Mistranscription suggestions — checksum-valid corrections of a bad IBAN.

Two passes over the normalized input, each keeping only candidates that
pass verify_iban:

1. Single position: replace one character with each character it is
   commonly mistaken for. The country code only takes letters and the
   check digits only take digits.
2. Uniform: for a character that occurs more than once, replace every
   occurrence at once (someone who writes 1 for I tends to do it
   throughout).

A hit only proves the candidate is checksum-valid, not that it is the
account the user meant.
"""

from __future__ import annotations

import logging
from collections import Counter

from ibanlib.core.errors import TableLoadError
from ibanlib.iban.formats import to_machine_format, to_obfuscated_format
from ibanlib.iban.validation import verify_iban
from ibanlib.infra.config import IbanConfig, default_config
from ibanlib.registry.confusions import MistranscriptionTable
from ibanlib.registry.country import CountryRegistry
from ibanlib.registry.tables import default_mistranscriptions, resolve_registry

logger = logging.getLogger(__name__)

LENGTH_INSANE = "(supplied iban length insane)"
TABLE_UNAVAILABLE = "(failed to load mistranscriptions)"

_COUNTRY_END = 2
_CHECKSUM_END = 4


def _accepts(position: int, origin: str) -> bool:
    if position < _COUNTRY_END:
        return not origin.isdigit()
    if position < _CHECKSUM_END:
        return origin.isdigit()
    return True


def _single_position(iban: str, table: MistranscriptionTable) -> list[str]:
    return [
        iban[:i] + origin + iban[i + 1:]
        for i, seen in enumerate(iban)
        for origin in table.confusions(seen)
        if _accepts(i, origin)
    ]


def _uniform(iban: str, table: MistranscriptionTable) -> list[str]:
    # Counter preserves first-occurrence order
    return [
        iban.replace(seen, origin)
        for seen, count in Counter(iban).items()
        if count > 1
        for origin in table.confusions(seen)
    ]


def mistranscription_suggestions(
    iban: str,
    table: MistranscriptionTable | None = None,
    registry: CountryRegistry | None = None,
    config: IbanConfig | None = None,
) -> list[str]:
    """Checksum-valid candidates for what a mistyped IBAN was meant to be.

    Never raises for bad input: an implausible length, or a default
    mistranscription table that cannot be loaded, comes back as a single
    diagnostic string. Candidates are de-duplicated in discovery order.
    """
    cfg = config or default_config()
    machine = to_machine_format(iban)
    if not cfg.min_suggestion_length <= len(machine) <= cfg.max_suggestion_length:
        return [LENGTH_INSANE]
    if table is None:
        try:
            table = default_mistranscriptions(cfg)
        except TableLoadError as e:
            logger.warning("Mistranscription suggestions unavailable: %s", e)
            return [TABLE_UNAVAILABLE]
    reg = resolve_registry(registry, cfg)
    candidates = _single_position(machine, table) + _uniform(machine, table)
    verified = (c for c in candidates if verify_iban(c, machine_format_only=True, registry=reg))
    suggestions = list(dict.fromkeys(verified))
    logger.debug(
        "Suggestions for %s: %d candidates tried, %d verified",
        to_obfuscated_format(machine), len(candidates), len(suggestions),
    )
    return suggestions
