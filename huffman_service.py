# filename: huffman_service.py

import io
import logging
import os

from huffman_bitio import BitReader, BitWriter
from huffman_core import ALPHABET_SIZE, HuffmanLogic, encoded_bit_length
from huffman_errors import (
    BadMagicError,
    CorruptPayloadError,
    EmptyInputError,
    FormatError,
    HuffmanError,
    InputError,
    InternalConsistencyError,
    IOFailure,
    TruncatedPayloadError,
)
from huffman_format import (
    MAGIC,
    MAX_UINT32,
    ContainerHeader,
    read_frequencies,
    read_header,
    write_frequencies,
    write_header,
)

CHUNK_SIZE = 64 * 1024

logger = logging.getLogger(__name__)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def compress(self, data):
        src = io.BytesIO(data)
        dst = io.BytesIO()
        self.compress_stream(src, dst)
        return dst.getvalue()

    def decompress(self, data):
        dst = io.BytesIO()
        self.decompress_stream(io.BytesIO(data), dst)
        return dst.getvalue()

    def compress_stream(self, src, dst):
        """Compress everything readable from src into dst.

        Both streams must be seekable: src is read twice (frequency count,
        then encoding) and the header at the start of dst is rewritten once
        the payload size is known. Returns the final header.
        """
        start = src.tell()
        freqs = [0] * ALPHABET_SIZE
        for chunk in iter(lambda: src.read(CHUNK_SIZE), b""):
            self.logic.count_frequencies(chunk, freqs)

        original_size = sum(freqs)
        if original_size == 0:
            raise EmptyInputError()
        if original_size > MAX_UINT32:
            raise InputError(f"input of {original_size} bytes does not fit the header")

        tree = self.logic.build_tree(freqs)
        codes = self.logic.generate_codes(tree)

        header = ContainerHeader(
            magic=MAGIC,
            original_size=original_size,
            compressed_size=0,
            frequency_count=sum(1 for f in freqs if f > 0),
            padding_bits=0,
        )
        header_pos = dst.tell()
        write_header(dst, header)
        write_frequencies(dst, freqs)

        # Second pass over the same input
        src.seek(start)
        writer = BitWriter(dst)
        for chunk in iter(lambda: src.read(CHUNK_SIZE), b""):
            for byte in chunk:
                code = codes[byte]
                if not code:
                    raise InternalConsistencyError(f"no code found for byte {byte}")
                writer.write_code(code)
        header.padding_bits = writer.flush()
        header.compressed_size = writer.bytes_written

        end_pos = dst.tell()
        dst.seek(header_pos)
        write_header(dst, header)
        dst.seek(end_pos)

        logger.info(
            "compressed %d bytes into %d payload bytes (%d distinct symbols)",
            header.original_size,
            header.compressed_size,
            header.frequency_count,
        )
        return header

    def decompress_stream(self, src, dst):
        """Decode one container from src and write the original bytes to dst.

        Nothing is written to dst unless the whole payload decodes.
        Returns the header that was read.
        """
        header = read_header(src)
        self._check_header(header)
        freqs = read_frequencies(src, header.frequency_count)
        if sum(freqs) != header.original_size:
            logger.error("frequency table does not match the original size")
            raise FormatError(
                f"frequency table sums to {sum(freqs)}, header says {header.original_size}"
            )

        payload = src.read(header.compressed_size)
        if len(payload) < header.compressed_size:
            logger.error("payload ended after %d of %d bytes", len(payload), header.compressed_size)
            raise TruncatedPayloadError(
                f"payload has {len(payload)} of {header.compressed_size} bytes"
            )

        # Rebuild the tree from the stored table; it is never stored itself.
        tree = self.logic.build_tree(freqs)
        codes = self.logic.generate_codes(tree)
        expected_bits = encoded_bit_length(freqs, codes)
        if header.compressed_size * 8 - header.padding_bits != expected_bits:
            logger.error("payload bit count disagrees with the frequency table")
            raise CorruptPayloadError(
                f"payload holds {header.compressed_size * 8 - header.padding_bits} bits, "
                f"frequency table implies {expected_bits}"
            )

        out = self._decode_payload(tree, BitReader(io.BytesIO(payload)), header.original_size)
        dst.write(out)
        logger.info(
            "decompressed %d payload bytes into %d bytes",
            header.compressed_size,
            header.original_size,
        )
        return header

    def _check_header(self, header):
        if header.magic != MAGIC:
            logger.error("invalid file format (magic number mismatch)")
            raise BadMagicError(header.magic)
        if header.original_size == 0:
            logger.error("header records an empty original")
            raise FormatError("header records an empty original")
        if header.frequency_count == 0 or header.frequency_count > ALPHABET_SIZE:
            logger.error("bad distinct symbol count %d", header.frequency_count)
            raise FormatError(f"bad distinct symbol count {header.frequency_count}")
        if header.padding_bits > 7:
            logger.error("bad padding bit count %d", header.padding_bits)
            raise FormatError(f"bad padding bit count {header.padding_bits}")

    def _decode_payload(self, root, reader, original_size):
        out = bytearray()
        node = root
        while len(out) < original_size:
            bit = reader.read_bit()
            if bit is None:
                logger.error("payload ended after %d of %d bytes", len(out), original_size)
                raise TruncatedPayloadError(
                    f"payload ended after {len(out)} of {original_size} bytes"
                )

            node = node.left if bit == 0 else node.right
            if node is None:
                logger.error("invalid bit sequence encountered during decoding")
                raise CorruptPayloadError("invalid bit sequence encountered during decoding")

            if node.is_leaf:
                out.append(node.char)
                node = root
        return bytes(out)

    def read_header(self, data):
        header = ContainerHeader.unpack(data)
        self._check_header(header)
        return header

    def compress_file(self, input_path, output_path):
        logger.info("compressing %s -> %s", input_path, output_path)
        check_distinct_paths(input_path, output_path)
        created = False
        try:
            with open(input_path, "rb") as src:
                with open(output_path, "wb") as dst:
                    created = True
                    return self.compress_stream(src, dst)
        except HuffmanError:
            if created:
                _discard(output_path)
            raise
        except OSError as e:
            if created:
                _discard(output_path)
            raise IOFailure(f"cannot compress {input_path}: {e}") from e

    def decompress_file(self, input_path, output_path):
        logger.info("decompressing %s -> %s", input_path, output_path)
        check_distinct_paths(input_path, output_path)
        out = io.BytesIO()
        try:
            with open(input_path, "rb") as src:
                header = self.decompress_stream(src, out)
            with open(output_path, "wb") as dst:
                dst.write(out.getvalue())
        except OSError as e:
            raise IOFailure(f"cannot decompress {input_path}: {e}") from e
        return header


def check_distinct_paths(input_path, output_path):
    """Refuse to write over the file being read."""
    try:
        same = os.path.samefile(input_path, output_path)
    except OSError:
        # at least one side does not exist yet
        return
    if same:
        raise InputError(f"input and output are the same file: '{input_path}'")


def _discard(path):
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


_service = HuffmanService()


def compress(data):
    return _service.compress(data)


def decompress(data):
    return _service.decompress(data)
