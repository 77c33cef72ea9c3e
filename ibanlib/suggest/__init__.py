"""ibanlib.suggest — Corrections for mistyped IBANs."""

from ibanlib.suggest.mistranscription import (
    mistranscription_suggestions as mistranscription_suggestions,
)
