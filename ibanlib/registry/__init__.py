"""ibanlib.registry — Country formats, mistranscription table and their loaders."""

from ibanlib.registry.confusions import MistranscriptionTable as MistranscriptionTable
from ibanlib.registry.country import CountryFormat as CountryFormat
from ibanlib.registry.country import CountryRegistry as CountryRegistry
from ibanlib.registry.country import Membership as Membership
from ibanlib.registry.country import Offsets as Offsets
from ibanlib.registry.loader import load_mistranscriptions as load_mistranscriptions
from ibanlib.registry.loader import load_registry as load_registry
from ibanlib.registry.loader import parse_mistranscriptions as parse_mistranscriptions
from ibanlib.registry.loader import parse_registry as parse_registry
from ibanlib.registry.tables import default_mistranscriptions as default_mistranscriptions
from ibanlib.registry.tables import default_registry as default_registry
from ibanlib.registry.tables import reset_default_tables as reset_default_tables
