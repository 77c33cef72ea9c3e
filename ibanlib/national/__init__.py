"""ibanlib.national — National (domestic) account checksums."""

from ibanlib.national.dispatch import NATIONAL_CHECKSUMS as NATIONAL_CHECKSUMS
from ibanlib.national.dispatch import find_national_checksum as find_national_checksum
from ibanlib.national.dispatch import national_checksum as national_checksum
from ibanlib.national.dispatch import set_national_checksum as set_national_checksum
from ibanlib.national.dispatch import supported_countries as supported_countries
from ibanlib.national.dispatch import verify_national_checksum as verify_national_checksum
from ibanlib.national.schemes import damm_scheme as damm_scheme
from ibanlib.national.schemes import mod11_2_scheme as mod11_2_scheme
from ibanlib.national.schemes import mod97_10_scheme as mod97_10_scheme
from ibanlib.national.schemes import verhoeff_scheme as verhoeff_scheme
from ibanlib.national.types import ChecksumMode as ChecksumMode
from ibanlib.national.types import Corrected as Corrected
from ibanlib.national.types import Found as Found
from ibanlib.national.types import NationalChecksumAlgorithm as NationalChecksumAlgorithm
from ibanlib.national.types import NationalChecksumOutcome as NationalChecksumOutcome
from ibanlib.national.types import Verified as Verified
