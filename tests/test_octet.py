import pytest

from eui48.exceptions import InvalidInput
from eui48.octet import Octet


@pytest.mark.parametrize(
    (
        "digits",
        "normalized",
        "binary",
        "reverse_binary",
    ),
    [
        ("A0", "a0", "10100000", "00000101"),
        ("a0", "a0", "10100000", "00000101"),
        ("0F", "0f", "00001111", "11110000"),
        ("00", "00", "00000000", "00000000"),
        ("ff", "ff", "11111111", "11111111"),
        ("1c", "1c", "00011100", "00111000"),
    ],
)
def test_octet(digits, normalized, binary, reverse_binary):
    octet = Octet(digits)
    assert octet.original == digits
    assert octet.normalized == normalized
    assert octet.binary == binary
    assert octet.reverse_binary == reverse_binary
    assert str(octet) == normalized


@pytest.mark.parametrize(
    "digits",
    [
        "f",
        "fff",
        "gg",
        "",
        "0a\n",
        10,
        None,
    ],
)
def test_octet_invalid(digits):
    with pytest.raises(InvalidInput) as excinfo:
        Octet(digits)
    assert str(excinfo.value) == "Pass in two hexadecimal digits."
    assert not Octet.is_valid(digits)


def test_octet_invalid_is_value_error():
    with pytest.raises(ValueError):
        Octet("zz")


def test_octet_all_values():
    for value in range(256):
        octet = Octet(f"{value:02X}")
        assert octet.decimal == value
        assert int(octet.binary, 2) == value
        assert len(octet.binary) == 8
        assert octet.reverse_binary == octet.binary[::-1]


def test_octet_eq():
    assert Octet("A0") == Octet("a0")
    assert Octet("a0") != Octet("a1")
    assert hash(Octet("A0")) == hash(Octet("a0"))


def test_octet_immutable():
    octet = Octet("a0")
    with pytest.raises(AttributeError):
        octet.normalized = "b1"
