import pytest

from encryption.errors import EncodingOverflow
from encryption.text_codec import MASK, decode, encode


def test_known_values():
    assert encode("") == 0
    assert encode("\x00") == 0xAA
    assert encode("A") == 0xAA ^ ord("A")
    assert encode("AB") == (0xAA ^ ord("A")) + 256 * (0xAA ^ ord("B"))


def test_round_trip_preserves_order():
    for s in ["Hi Buckaroos!", "a", "\x00\x00", "tail\x00", "\xff\xfe latin-1 \xe9"]:
        assert decode(encode(s)) == s


def test_encoded_value_bound():
    s = "\x55" * 10  # masks to 0xff
    assert encode(s) == 256**10 - 1
    assert encode(s) < 256**len(s)


def test_decode_zero_is_empty():
    assert decode(0) == ""


def test_mask_character_dropped_only_at_the_end():
    assert decode(encode("ab" + chr(MASK))) == "ab"
    assert decode(encode(chr(MASK) + "ab")) == chr(MASK) + "ab"


def test_wide_characters_are_rejected():
    with pytest.raises(EncodingOverflow) as info:
        encode("price: €5")
    assert info.value.position == 7
    assert info.value.char == "€"


def test_decode_negative():
    with pytest.raises(ValueError):
        decode(-1)
