"""
eui48/identifier.py - IEEE 48-bit extended identifiers (EUI-48 and ELI-48)
"""

import binascii
import logging
import re
from enum import Enum

from eui48.exceptions import InvalidInput
from eui48.octet import Octet


logger = logging.getLogger(__name__)


class IdentifierType(str, Enum):
    UNIQUE = "unique"
    LOCAL = "local"
    UNKNOWN = "unknown"


class Notation(str, Enum):
    PLAIN = "plain"
    HYPHEN = "hyphen"
    COLON = "colon"
    DOT = "dot"


NOTATION_RE = {
    Notation.PLAIN: re.compile(r"[0-9A-Fa-f]{12}"),
    Notation.HYPHEN: re.compile(r"([0-9A-Fa-f]{2}-){5}[0-9A-Fa-f]{2}"),
    Notation.COLON: re.compile(r"([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}"),
    Notation.DOT: re.compile(r"([0-9A-Fa-f]{4}\.){2}[0-9A-Fa-f]{4}"),
}

NON_HEX_RE = re.compile(r"[^0-9a-f]")


class ExtendedIdentifier:
    """
    Represents an IEEE 48-bit extended identifier.

    An extended unique identifier (EUI) carries a 24- or 36-bit
    organizationally unique identifier (OUI) as its prefix. An extended local
    identifier (ELI) carries a company ID (CID) instead. Which one an
    identifier is follows from the low bits of its first octet.

    Accepted notations are plain (``a0b1c2d3e4f5``), hyphen
    (``a0-b1-c2-d3-e4-f5``), colon (``a0:b1:c2:d3:e4:f5``) and dot
    (``a0b1.c2d3.e4f5``), with hex digits in either case.
    """

    __slots__ = ("_original", "_normalized", "_octets")

    def __init__(self, identifier: str):
        if self.notation_of(identifier) is None:
            logger.debug(f"Rejecting identifier {identifier!r}")
            raise InvalidInput("Pass in 12 hexadecimal digits.")

        self._original = identifier
        self._normalized = NON_HEX_RE.sub("", identifier.lower())
        self._octets = tuple(
            Octet(self._normalized[i:i+2]) for i in range(0, 12, 2)
        )

    @classmethod
    def from_bytes(cls, data: bytes):
        """
        Build an identifier from its 6-byte network representation.
        """
        if not isinstance(data, (bytes, bytearray)) or len(data) != 6:
            logger.debug(f"Rejecting identifier bytes {data!r}")
            raise InvalidInput("Pass in 6 bytes.")
        return cls(binascii.hexlify(bytes(data)).decode())

    @staticmethod
    def notation_of(identifier) -> Notation | None:
        """
        Return the notation ``identifier`` is written in, or None if it is not
        a valid identifier.
        """
        if not isinstance(identifier, str):
            return None
        for notation, pattern in NOTATION_RE.items():
            if pattern.fullmatch(identifier):
                return notation
        return None

    @classmethod
    def is_valid(cls, identifier) -> bool:
        return cls.notation_of(identifier) is not None

    @property
    def original(self) -> str:
        return self._original

    @property
    def normalized(self) -> str:
        return self._normalized

    @property
    def octets(self) -> tuple[Octet, ...]:
        return self._octets

    @property
    def first_octet(self) -> Octet:
        return self._octets[0]

    @property
    def decimal(self) -> int:
        return int(self._normalized, 16)

    @property
    def binary(self) -> str:
        """
        Binary digits of each octet, most-significant bit of each octet first.
        """
        return "".join(octet.binary for octet in self._octets)

    @property
    def reverse_binary(self) -> str:
        """
        Binary digits of each octet, least-significant bit of each octet first.
        """
        return "".join(octet.reverse_binary for octet in self._octets)

    @property
    def type(self) -> IdentifierType:
        """
        The two least-significant bits of the first octet being 00 mark a
        unique identifier. Failing that, the four least-significant bits being
        1010 mark a local identifier.
        """
        binary = self.first_octet.binary
        if binary[6:] == "00":
            return IdentifierType.UNIQUE
        elif binary[4:] == "1010":
            return IdentifierType.LOCAL
        return IdentifierType.UNKNOWN

    @property
    def has_oui(self) -> bool:
        return self.type == IdentifierType.UNIQUE

    @property
    def has_cid(self) -> bool:
        return self.type == IdentifierType.LOCAL

    def to_fragments(self, bits: int = 24) -> list[str]:
        """
        Split the identifier into its OUI or CID prefix of ``bits`` bits and
        the remaining extension identifier.

        For ``a0b1c2d3e4f5``, 24 bits gives ``["a0b1c2", "d3e4f5"]`` and 36
        bits gives ``["a0b1c2d3e", "4f5"]``.
        """
        if not isinstance(bits, int) or bits <= 0 or bits > 48 or bits % 4:
            raise InvalidInput("Pass in a positive multiple of 4 bits up to 48.")
        digits = bits // 4
        return [self._normalized[:digits], self._normalized[digits:]]

    def to_plain_notation(self) -> str:
        return self._normalized

    def to_hyphen_notation(self) -> str:
        return "-".join(octet.normalized for octet in self._octets)

    def to_colon_notation(self) -> str:
        return ":".join(octet.normalized for octet in self._octets)

    def to_dot_notation(self) -> str:
        s = self._normalized
        return ".".join(s[i:i+4] for i in range(0, 12, 4))

    def to_notation(self, notation: Notation | str) -> str:
        try:
            notation = Notation(notation)
        except ValueError:
            raise InvalidInput(f"Unknown notation '{notation}'")

        if notation == Notation.HYPHEN:
            return self.to_hyphen_notation()
        elif notation == Notation.COLON:
            return self.to_colon_notation()
        elif notation == Notation.DOT:
            return self.to_dot_notation()
        return self.to_plain_notation()

    def __bytes__(self) -> bytes:
        return binascii.unhexlify(self._normalized)

    def __int__(self) -> int:
        return self.decimal

    def __str__(self) -> str:
        return self.to_colon_notation()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._normalized}')"

    def __eq__(self, other):
        if not isinstance(other, ExtendedIdentifier):
            return NotImplemented
        return self._normalized == other._normalized

    def __hash__(self):
        return hash(self._normalized)
