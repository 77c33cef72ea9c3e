"""ibanlib.infra — Runtime configuration."""

from ibanlib.infra.config import IbanConfig as IbanConfig
from ibanlib.infra.config import Mod97Backend as Mod97Backend
from ibanlib.infra.config import default_config as default_config
