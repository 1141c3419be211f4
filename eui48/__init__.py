"""
eui48 - IEEE 48-bit extended identifiers and MAC addresses
"""

VERSION = "0.1.0"

from eui48.exceptions import EUIException, InvalidInput
from eui48.octet import Octet
from eui48.identifier import ExtendedIdentifier, IdentifierType, Notation
from eui48.mac import (
    MacAddress,
    is_broadcast,
    is_laa,
    is_multicast,
    is_uaa,
    is_unicast,
)
