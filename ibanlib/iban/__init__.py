"""ibanlib.iban — Formats, MOD97-10 check digits, parts and validation."""

from ibanlib.iban.checksum import find_checksum as find_checksum
from ibanlib.iban.checksum import set_checksum as set_checksum
from ibanlib.iban.checksum import verify_checksum as verify_checksum
from ibanlib.iban.formats import to_human_format as to_human_format
from ibanlib.iban.formats import to_machine_format as to_machine_format
from ibanlib.iban.formats import to_obfuscated_format as to_obfuscated_format
from ibanlib.iban.parts import IbanParts as IbanParts
from ibanlib.iban.parts import account_part as account_part
from ibanlib.iban.parts import bank_part as bank_part
from ibanlib.iban.parts import bban_part as bban_part
from ibanlib.iban.parts import branch_part as branch_part
from ibanlib.iban.parts import checksum_part as checksum_part
from ibanlib.iban.parts import country_format_for as country_format_for
from ibanlib.iban.parts import country_part as country_part
from ibanlib.iban.parts import iban_parts as iban_parts
from ibanlib.iban.parts import national_checksum_part as national_checksum_part
from ibanlib.iban.validation import Iban as Iban
from ibanlib.iban.validation import verify_iban as verify_iban
