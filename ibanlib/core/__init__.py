"""ibanlib.core — Result values, error values and FrozenMap."""

from ibanlib.core.errors import CountryNotFoundError as CountryNotFoundError
from ibanlib.core.errors import DataIntegrityError as DataIntegrityError
from ibanlib.core.errors import IbanError as IbanError
from ibanlib.core.errors import MalformedInputError as MalformedInputError
from ibanlib.core.errors import TableLoadError as TableLoadError
from ibanlib.core.errors import UnsupportedChecksumError as UnsupportedChecksumError
from ibanlib.core.result import Err as Err
from ibanlib.core.result import Ok as Ok
from ibanlib.core.result import Result as Result
from ibanlib.core.result import from_optional as from_optional
from ibanlib.core.result import unwrap as unwrap
from ibanlib.core.types import FrozenMap as FrozenMap
