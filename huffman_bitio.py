# filename: huffman_bitio.py

"""Bit-level packing for the payload section.

Bits are packed most-significant first. The writer left-justifies the final
partial byte and leaves its low bits as zero filler.
"""

from typing import BinaryIO, Optional

BUFFER_SIZE = 64 * 1024


class BitWriter:
    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.buf = bytearray()
        self.acc = 0
        self.bits = 0
        self.bytes_written = 0

    def write_bit(self, bit: int) -> None:
        self.acc = ((self.acc << 1) | (bit & 1)) & 0xFF
        self.bits += 1
        if self.bits == 8:
            self._emit()

    def write_code(self, code: str) -> None:
        # codes are kept as strings of "0"/"1"
        for ch in code:
            self.write_bit(1 if ch == "1" else 0)

    def flush(self) -> int:
        """Emit any pending bits and return the number of filler bits used.

        Call once, after the last code has been written.
        """
        padding = 0
        if self.bits > 0:
            padding = 8 - self.bits
            self.acc = (self.acc << padding) & 0xFF
            self._emit()
        if self.buf:
            self.stream.write(bytes(self.buf))
            self.buf.clear()
        return padding

    def _emit(self) -> None:
        self.buf.append(self.acc)
        self.bytes_written += 1
        self.acc = 0
        self.bits = 0
        if len(self.buf) >= BUFFER_SIZE:
            self.stream.write(bytes(self.buf))
            self.buf.clear()


class BitReader:
    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.chunk = b""
        self.pos = 0
        self.acc = 0
        self.bits = 0

    def read_bit(self) -> Optional[int]:
        """Return the next bit, or None once the input is exhausted."""
        if self.bits == 0:
            if self.pos >= len(self.chunk):
                self.chunk = self.stream.read(BUFFER_SIZE)
                self.pos = 0
                if not self.chunk:
                    return None
            self.acc = self.chunk[self.pos]
            self.pos += 1
            self.bits = 8
        self.bits -= 1
        return (self.acc >> self.bits) & 1
