"""
eui48/mac.py - Media access control addresses
"""

from eui48.identifier import ExtendedIdentifier


BROADCAST = "ffffffffffff"


def is_broadcast(identifier: ExtendedIdentifier) -> bool:
    return identifier.normalized == BROADCAST


def is_multicast(identifier: ExtendedIdentifier) -> bool:
    """
    Layer two multicast is flagged by the least-significant bit of the first
    octet.
    """
    return identifier.first_octet.binary[7] == "1"


def is_unicast(identifier: ExtendedIdentifier) -> bool:
    return not is_multicast(identifier)


def is_uaa(identifier: ExtendedIdentifier) -> bool:
    """
    Whether the identifier is a universally administered unicast address.

    Multicast addresses are neither universally nor locally administered.
    """
    return is_unicast(identifier) and identifier.first_octet.binary[6] == "0"


def is_laa(identifier: ExtendedIdentifier) -> bool:
    """
    Whether the identifier is a locally administered unicast address.
    """
    return is_unicast(identifier) and identifier.first_octet.binary[6] == "1"


class MacAddress:
    """
    A MAC address.

    Wraps an ExtendedIdentifier and adds the MAC address classification. All
    other identifier attributes, such as ``normalized``, ``type`` or
    ``to_dot_notation()``, are available directly.
    """

    __slots__ = ("_identifier",)

    def __init__(self, address: str | ExtendedIdentifier):
        if isinstance(address, MacAddress):
            address = address.identifier
        if not isinstance(address, ExtendedIdentifier):
            address = ExtendedIdentifier(address)
        self._identifier = address

    @classmethod
    def from_bytes(cls, data: bytes):
        return cls(ExtendedIdentifier.from_bytes(data))

    @property
    def identifier(self) -> ExtendedIdentifier:
        return self._identifier

    @property
    def is_broadcast(self) -> bool:
        return is_broadcast(self._identifier)

    @property
    def is_multicast(self) -> bool:
        return is_multicast(self._identifier)

    @property
    def is_unicast(self) -> bool:
        return is_unicast(self._identifier)

    @property
    def is_uaa(self) -> bool:
        return is_uaa(self._identifier)

    @property
    def is_laa(self) -> bool:
        return is_laa(self._identifier)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._identifier, name)

    def __bytes__(self) -> bytes:
        return bytes(self._identifier)

    def __int__(self) -> int:
        return int(self._identifier)

    def __str__(self) -> str:
        return str(self._identifier)

    def __repr__(self) -> str:
        return f"MacAddress('{self._identifier.normalized}')"

    def __eq__(self, other):
        if isinstance(other, MacAddress):
            other = other.identifier
        if not isinstance(other, ExtendedIdentifier):
            return NotImplemented
        return self._identifier == other

    def __hash__(self):
        return hash(self._identifier)
