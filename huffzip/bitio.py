"""Bit-level reading and writing over bytes, most significant bit first."""

from __future__ import annotations

from typing import BinaryIO


class BitWriter:
    """Packs bits into bytes, most significant bit first, and writes them to a stream.

    The writer may start with a partly filled byte: ``current_byte`` holds its
    first ``bits_present`` bits in its high-order positions. Closing the writer
    flushes a final partial byte. The stream itself stays open.
    """

    def __init__(self, stream: BinaryIO, bits_present: int = 0, current_byte: int = 0) -> None:
        if not 0 <= bits_present <= 8:
            raise ValueError(f"bits_present must be between 0 and 8, got {bits_present}")
        if not 0 <= current_byte <= 0xFF:
            raise ValueError(f"current_byte must fit in one byte, got {current_byte}")
        self._stream = stream
        self._bits_present = bits_present
        self._current = current_byte
        self._closed = False

    def write_bits(self, bits: int, length: int) -> None:
        """Append the low ``length`` bits of ``bits``, highest first."""
        if self._closed:
            raise ValueError("write to a closed BitWriter")
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if bits < 0 or bits >> length:
            raise ValueError(f"value {bits} does not fit in {length} bits")
        while length:
            if self._bits_present == 8:
                self._flush()
            space = 8 - self._bits_present
            take = min(space, length)
            length -= take
            chunk = (bits >> length) & ((1 << take) - 1)
            self._current |= chunk << (space - take)
            self._bits_present += take

    def _flush(self) -> None:
        self._stream.write(bytes((self._current,)))
        self._current = 0
        self._bits_present = 0

    def close(self) -> None:
        """Write any pending partial byte; later writes are refused."""
        if self._closed:
            return
        if self._bits_present > 0:
            self._flush()
        self._closed = True

    def __enter__(self) -> BitWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class BitReader:
    """Reads bits and bytes, most significant bit first, from a bytes object."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def _total_bits(self) -> int:
        return len(self._data) * 8

    def read_bit(self) -> int:
        """Return the next bit as 0 or 1."""
        if self._pos >= self._total_bits:
            raise EOFError("no bits left to read")
        byte_index, offset = divmod(self._pos, 8)
        self._pos += 1
        return (self._data[byte_index] >> (7 - offset)) & 1

    def read_byte(self) -> int:
        """Return the next eight bits as an unsigned byte, aligned or not."""
        if self._pos + 8 > self._total_bits:
            raise EOFError("fewer than eight bits left to read")
        value = 0
        for _ in range(8):
            value = (value << 1) | self.read_bit()
        return value

    def exhausted(self) -> bool:
        """Return True once every bit of the data has been read."""
        return self._pos >= self._total_bits


def format_bits(bits: int, length: int, width: int) -> str:
    """Render the first ``length`` bits of a ``width``-bit word as '0'/'1' text."""
    if not 0 <= length <= width:
        raise ValueError(f"length {length} must be between 0 and width {width}")
    if length == 0:
        return ""
    word = bits & ((1 << width) - 1)
    return format(word >> (width - length), f"0{length}b")