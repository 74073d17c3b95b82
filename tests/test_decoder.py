import pytest

from base62 import DecodeError, InvalidCharacter
from decoder import PrecisionLoss, decode_chain, encode_chain

LINE = "fxSK-fxSK-0-0-0-0-KyjA-0-KyjA-fxSK-fxSK-fxSK"
NEGATIVE = "-fxSK--fxSK-0-0-0-0-fxSK-fxSK-0-0-fxSK-fxSK"
SCALED = "1Luue-2hppI--21sMy-3NnHc-0-0-fxSK-fxSK-0-0-fxSK-fxSK"


def test_decode_reference_chain():
    assert decode_chain(LINE) == [1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.5, 0.0, 0.5, 1.0, 1.0, 1.0]


def test_double_hyphen_marks_negative():
    assert decode_chain(NEGATIVE)[:4] == [-1.0, -1.0, 0.0, 0.0]
    assert decode_chain(SCALED)[:4] == [2.0, 4.0, -3.0, 5.0]


def test_empty_string_decodes_to_nothing():
    assert decode_chain("") == []


def test_decoding_is_deterministic():
    assert decode_chain(SCALED) == decode_chain(SCALED)


def test_invalid_character_position_is_in_caller_string():
    with pytest.raises(InvalidCharacter) as exc:
        decode_chain("fx$SK")
    assert exc.value.char == "$"
    assert exc.value.position == 2

    with pytest.raises(InvalidCharacter) as exc:
        decode_chain("fxSK-fx SK")
    assert exc.value.char == " "
    assert exc.value.position == 7


def test_extra_hyphens_are_skipped():
    assert decode_chain("fxSK---fxSK") == [1.0, -1.0]
    assert decode_chain("fxSK-") == [1.0]
    assert decode_chain("fxSK-0-") == [1.0, 0.0]
    assert decode_chain("--fxSK") == [-1.0]
    assert decode_chain("-") == []


def test_extra_hyphens_do_not_hide_invalid_characters():
    with pytest.raises(InvalidCharacter) as exc:
        decode_chain("fxSK--@-fxSK")
    assert exc.value.char == "@"
    assert exc.value.position == 6


def test_huge_magnitude_reports_precision_loss():
    with pytest.raises(PrecisionLoss):
        decode_chain("z" * 200)


def test_all_decode_failures_share_a_base_class():
    for bad in ("fx$SK", "fxSK-$", "z" * 200):
        with pytest.raises(DecodeError):
            decode_chain(bad)


def test_non_string_input():
    with pytest.raises(TypeError):
        decode_chain(None)


def test_encode_reference_chains():
    assert encode_chain([1, 1, 0, 0, 0, 0, 0.5, 0, 0.5, 1, 1, 1]) == LINE
    assert encode_chain([-1, -1, 0, 0, 0, 0, 1, 1, 0, 0, 1, 1]) == NEGATIVE
    assert encode_chain([2, 4, -3, 5, 0, 0, 1, 1, 0, 0, 1, 1]) == SCALED


def test_encode_rounds_to_fixed_point_grid():
    assert decode_chain(encode_chain([0.123456789])) == [0.1234568]
    assert encode_chain([-0.0]) == "0"


def test_encode_rejects_non_finite():
    with pytest.raises(ValueError):
        encode_chain([1.0, float("nan")])
    with pytest.raises(ValueError):
        encode_chain([float("inf")])
