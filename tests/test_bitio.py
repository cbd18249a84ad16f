import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from huffzip.bitio import BitReader, BitWriter, format_bits


def _chunks():
    return st.lists(
        st.integers(min_value=0, max_value=32).flatmap(
            lambda n: st.tuples(st.just(n), st.integers(min_value=0, max_value=(1 << n) - 1))
        ),
        max_size=40,
    )


def test_partial_byte_is_padded_with_zeros_on_close():
    out = io.BytesIO()
    writer = BitWriter(out)
    writer.write_bits(0b101, 3)
    writer.close()
    assert out.getvalue() == b"\xa0"


def test_full_byte_written():
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bits(0xAB, 8)
    assert out.getvalue() == b"\xab"


def test_prefilled_full_byte_is_emitted():
    out = io.BytesIO()
    with BitWriter(out, 8, 0xFE):
        pass
    assert out.getvalue() == b"\xfe"


def test_empty_writer_writes_nothing():
    out = io.BytesIO()
    with BitWriter(out):
        pass
    assert out.getvalue() == b""


def test_write_after_close_rejected():
    writer = BitWriter(io.BytesIO())
    writer.close()
    with pytest.raises(ValueError):
        writer.write_bits(1, 1)


def test_value_too_wide_rejected():
    writer = BitWriter(io.BytesIO())
    with pytest.raises(ValueError):
        writer.write_bits(4, 2)


def test_invalid_initial_state_rejected():
    with pytest.raises(ValueError):
        BitWriter(io.BytesIO(), 9, 0)
    with pytest.raises(ValueError):
        BitWriter(io.BytesIO(), 0, 256)


def test_unaligned_byte_round_trip():
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bits(1, 1)
        writer.write_bits(0x5A, 8)
    reader = BitReader(out.getvalue())
    assert reader.read_bit() == 1
    assert reader.read_byte() == 0x5A


def test_exhausted_after_all_bits():
    reader = BitReader(b"\x80")
    assert reader.exhausted() is False
    assert reader.read_bit() == 1
    for _ in range(7):
        assert reader.read_bit() == 0
    assert reader.exhausted() is True


def test_read_past_end_raises():
    reader = BitReader(b"\x00")
    reader.read_byte()
    with pytest.raises(EOFError):
        reader.read_bit()


def test_read_byte_needs_eight_bits():
    reader = BitReader(b"\xff")
    reader.read_bit()
    with pytest.raises(EOFError):
        reader.read_byte()


@given(_chunks())
def test_write_read_round_trip(chunks):
    out = io.BytesIO()
    with BitWriter(out) as writer:
        for length, value in chunks:
            writer.write_bits(value, length)
    data = out.getvalue()
    total = sum(length for length, _ in chunks)
    assert len(data) == (total + 7) // 8
    reader = BitReader(data)
    for length, value in chunks:
        got = 0
        for _ in range(length):
            got = (got << 1) | reader.read_bit()
        assert got == value


def test_format_bits_top_of_word():
    assert format_bits(0b101 << 29, 3, 32) == "101"
    assert format_bits(0xA0, 3, 8) == "101"


def test_format_bits_zero_length_and_bounds():
    assert format_bits(0xFF, 0, 8) == ""
    with pytest.raises(ValueError):
        format_bits(0, 9, 8)


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_format_bits_full_width_matches_length(value):
    text = format_bits(value, 32, 32)
    assert len(text) == 32
    assert int(text, 2) == value