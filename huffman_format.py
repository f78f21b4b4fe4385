# filename: huffman_format.py

"""On-disk layout of a compressed container.

    offset  size  field
    0       4     magic, 0x48554646 ("HUFF")
    4       4     original size in bytes
    8       4     payload size in bytes
    12      4     number of frequency records
    16      1     filler bits in the last payload byte
    17      5*n   frequency records: symbol (1 byte), count (4 bytes)
    ...           payload

All integers are unsigned little-endian.
"""

import logging
import struct
from dataclasses import dataclass
from typing import BinaryIO, List

from huffman_core import ALPHABET_SIZE
from huffman_errors import TruncatedFrequencyTableError, TruncatedHeaderError

MAGIC = 0x48554646
MAX_UINT32 = 0xFFFFFFFF

HEADER_STRUCT = struct.Struct("<IIIIB")
HEADER_SIZE = HEADER_STRUCT.size

FREQ_STRUCT = struct.Struct("<BI")
FREQ_RECORD_SIZE = FREQ_STRUCT.size

logger = logging.getLogger(__name__)


@dataclass
class ContainerHeader:
    magic: int = MAGIC
    original_size: int = 0
    compressed_size: int = 0
    frequency_count: int = 0
    padding_bits: int = 0

    def pack(self) -> bytes:
        return HEADER_STRUCT.pack(
            self.magic,
            self.original_size,
            self.compressed_size,
            self.frequency_count,
            self.padding_bits,
        )

    @classmethod
    def unpack(cls, raw: bytes) -> "ContainerHeader":
        if len(raw) < HEADER_SIZE:
            logger.error("header truncated at %d bytes", len(raw))
            raise TruncatedHeaderError(
                f"header needs {HEADER_SIZE} bytes, got {len(raw)}"
            )
        return cls(*HEADER_STRUCT.unpack(raw[:HEADER_SIZE]))

    @property
    def payload_offset(self) -> int:
        return HEADER_SIZE + self.frequency_count * FREQ_RECORD_SIZE


def write_header(stream: BinaryIO, header: ContainerHeader) -> None:
    stream.write(header.pack())


def read_header(stream: BinaryIO) -> ContainerHeader:
    return ContainerHeader.unpack(stream.read(HEADER_SIZE))


def write_frequencies(stream: BinaryIO, freqs: List[int]) -> int:
    """Write one record per present symbol, ascending; return the record count."""
    count = 0
    for sym in range(ALPHABET_SIZE):
        if freqs[sym] > 0:
            stream.write(FREQ_STRUCT.pack(sym, freqs[sym]))
            count += 1
    return count


def read_frequencies(stream: BinaryIO, count: int) -> List[int]:
    freqs = [0] * ALPHABET_SIZE
    for i in range(count):
        raw = stream.read(FREQ_RECORD_SIZE)
        if len(raw) < FREQ_RECORD_SIZE:
            logger.error("frequency table ends after %d of %d records", i, count)
            raise TruncatedFrequencyTableError(
                f"frequency table ends after {i} of {count} records"
            )
        sym, freq = FREQ_STRUCT.unpack(raw)
        freqs[sym] = freq
    return freqs
