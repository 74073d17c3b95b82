import pytest

from base62 import DecodeError, InvalidCharacter, decode_base62, encode_base62


def test_single_digits_follow_alphabet_order():
    assert decode_base62("0") == 0
    assert decode_base62("9") == 9
    assert decode_base62("A") == 10
    assert decode_base62("Z") == 35
    assert decode_base62("a") == 36
    assert decode_base62("z") == 61


def test_most_significant_digit_first():
    assert decode_base62("10") == 62
    assert decode_base62("fxSK") == 10_000_000


def test_long_runs_do_not_overflow():
    assert decode_base62("z" * 40) == 62 ** 40 - 1


def test_invalid_character_is_reported():
    with pytest.raises(InvalidCharacter) as exc:
        decode_base62("fx$K")
    assert exc.value.char == "$"
    assert exc.value.position == 2
    assert isinstance(exc.value, ValueError)


def test_empty_string_is_rejected():
    with pytest.raises(DecodeError):
        decode_base62("")


def test_encode_base62():
    assert encode_base62(0) == "0"
    assert encode_base62(61) == "z"
    assert encode_base62(62) == "10"
    assert encode_base62(10_000_000) == "fxSK"
    assert decode_base62(encode_base62(62 ** 30 + 7)) == 62 ** 30 + 7


def test_encode_base62_rejects_negative():
    with pytest.raises(ValueError):
        encode_base62(-1)
