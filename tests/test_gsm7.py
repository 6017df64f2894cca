import pytest

from sms_split_lib.gsm import (
    GSM7_BASIC_TABLE,
    GSM7_ESCAPED_CHARACTERS,
    gsm7_width,
    is_gsm7_text,
)


def test_basic_table_has_128_entries():
    assert len(GSM7_BASIC_TABLE) == 128
    assert GSM7_BASIC_TABLE[0] == "@"
    assert GSM7_BASIC_TABLE[0x1B] == "\x1b"


def test_escaped_set_is_exactly_the_extension_symbols():
    assert GSM7_ESCAPED_CHARACTERS == set("|^€{}[]~\\")


@pytest.mark.parametrize("char", list("|^€{}[]~\\"))
def test_escaped_symbols_take_two_septets(char):
    assert gsm7_width(char) == 2


@pytest.mark.parametrize("char", ["a", "Z", "0", "@", " ", "\n", "é", "\x0c", "🙂"])
def test_other_characters_take_one_septet(char):
    assert gsm7_width(char) == 1


def test_is_gsm7_text():
    assert is_gsm7_text("Hello, world! £5 @ 10:00")
    assert is_gsm7_text("price: 5€ [approx]")
    assert is_gsm7_text("")
    assert not is_gsm7_text("smile 🙂")
    assert not is_gsm7_text("Привет")
    assert not is_gsm7_text("\x1b")
