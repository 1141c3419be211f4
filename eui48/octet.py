"""
eui48/octet.py - Single octet of an extended identifier
"""

import logging
import re

from eui48.exceptions import InvalidInput


logger = logging.getLogger(__name__)


class Octet:
    """
    Represents one byte as two hexadecimal digits.

    The binary forms are strings of "0" and "1". ``binary`` has the
    most-significant bit first, ``reverse_binary`` the least-significant bit
    first, which is the order IEEE 802 transmits bits on the wire.
    """

    OCTET_RE = re.compile(r"[0-9A-Fa-f]{2}")

    __slots__ = ("_original", "_normalized")

    def __init__(self, digits: str):
        if not self.is_valid(digits):
            logger.debug(f"Rejecting octet {digits!r}")
            raise InvalidInput("Pass in two hexadecimal digits.")
        self._original = digits
        self._normalized = digits.lower()

    @classmethod
    def is_valid(cls, digits) -> bool:
        return isinstance(digits, str) and cls.OCTET_RE.fullmatch(digits) is not None

    @property
    def original(self) -> str:
        return self._original

    @property
    def normalized(self) -> str:
        return self._normalized

    @property
    def decimal(self) -> int:
        return int(self._normalized, 16)

    @property
    def binary(self) -> str:
        return bin(self.decimal)[2:].zfill(8)

    @property
    def reverse_binary(self) -> str:
        return self.binary[::-1]

    def __str__(self) -> str:
        return self._normalized

    def __repr__(self) -> str:
        return f"Octet('{self._normalized}')"

    def __eq__(self, other):
        if not isinstance(other, Octet):
            return NotImplemented
        return self._normalized == other._normalized

    def __hash__(self):
        return hash(self._normalized)
