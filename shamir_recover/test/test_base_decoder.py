import pytest
from shamir_recover.sharing.base_decoder import decode, decode_share, digit_value, encode
from shamir_recover.sharing.errors import InvalidBaseError
from shamir_recover.sharing.models import DigitWarning, Point, Share


def test_digit_value():
    assert digit_value("0") == 0
    assert digit_value("9") == 9
    assert digit_value("a") == 10
    assert digit_value("F") == 15
    assert digit_value("g") is None
    assert digit_value("") is None
    assert digit_value("ab") is None


def test_decode_matches_positional_value():
    digits = "aed7015a346d63"
    value, warnings = decode(digits, 15)
    expected = 0
    for i, ch in enumerate(digits):
        expected += int(ch, 16) * 15 ** (len(digits) - 1 - i)
    assert value == expected
    assert value == int(digits, 15)
    assert warnings == ()


def test_decode_every_base_agrees_with_int():
    for base in range(2, 17):
        digits = "0123456789abcdef"[:base] * 3
        assert decode(digits, base).value == int(digits, base)
        assert decode("0", base).value == 0


def test_decode_beyond_64_bits_is_exact():
    assert decode("f" * 40, 16).value == 16**40 - 1
    assert decode("1" + "0" * 30, 10).value == 10**30


def test_decode_is_case_insensitive():
    assert decode("DeadBeef", 16) == decode("deadbeef", 16)
    assert decode("A", 16).value == 10


def test_single_digits_agree_across_bases():
    for d in "0123456789":
        assert decode(d, 16).value == decode(d, 10).value == int(d)


def test_invalid_digit_is_skipped_with_warning():
    value, warnings = decode("19", 8)
    assert value == 1
    assert warnings == (DigitWarning(position=1, char="9", base=8),)

    value, warnings = decode("1a1", 10)
    assert value == 11
    assert len(warnings) == 1


def test_character_outside_alphabet_is_skipped_silently():
    assert decode("g", 16) == (0, ())
    assert decode("1 2-3", 10) == (123, ())


def test_empty_string_decodes_to_zero():
    assert decode("", 2).value == 0


def test_decode_rejects_unsupported_base():
    for bad in (0, 1, 17, 36):
        with pytest.raises(InvalidBaseError):
            decode("1", bad)
    with pytest.raises(InvalidBaseError):
        decode("1", "10")
    with pytest.raises(InvalidBaseError):
        decode("1", True)


def test_encode():
    assert encode(255, 16) == "ff"
    assert encode(0, 2) == "0"
    assert encode(7, 2) == "111"
    assert decode(encode(2**100 + 3, 13), 13).value == 2**100 + 3
    with pytest.raises(ValueError):
        encode(-1, 10)
    with pytest.raises(InvalidBaseError):
        encode(5, 1)


def test_decode_share_logs_warnings(caplog):
    share = Share(identifier=4, base=8, digits="19")
    with caplog.at_level("WARNING", logger="shamir_recover"):
        point = decode_share(share)
    assert point == Point(x=4, y=1)
    assert "invalid digit '9'" in caplog.text


def test_decode_share_clean_input_logs_nothing(caplog):
    with caplog.at_level("WARNING", logger="shamir_recover"):
        assert decode_share(Share(2, 2, "111")) == Point(2, 7)
    assert caplog.text == ""
