import pytest

from sms_split_lib import Encoding, UnsupportedEncodingError, choose_encoding


@pytest.mark.parametrize(
    "value, expected",
    [
        ("GSM", Encoding.GSM),
        ("gsm7", Encoding.GSM),
        ("7bit", Encoding.GSM),
        ("Unicode", Encoding.UNICODE),
        (" ucs2 ", Encoding.UNICODE),
        ("UTF-16", Encoding.UNICODE),
        (Encoding.UNICODE, Encoding.UNICODE),
    ],
)
def test_parse_accepts_aliases(value, expected):
    assert Encoding.parse(value) is expected


@pytest.mark.parametrize("value", ["8bit", "latin-1", "", None, 7])
def test_parse_rejects_unknown_encodings(value):
    with pytest.raises(UnsupportedEncodingError):
        Encoding.parse(value)


def test_unsupported_encoding_is_a_value_error():
    assert issubclass(UnsupportedEncodingError, ValueError)


def test_bits_per_unit():
    assert Encoding.GSM.bits_per_unit == 7
    assert Encoding.UNICODE.bits_per_unit == 16


def test_choose_encoding():
    assert choose_encoding("See you at 5pm {room 2}") is Encoding.GSM
    assert choose_encoding("See you at 5pm 🙂") is Encoding.UNICODE
    assert choose_encoding("") is Encoding.GSM
