import io
import os
import sys

# Add the repository root to path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from huffman_bitio import BitReader, BitWriter


def test_writer_emits_full_bytes_msb_first():
	out = io.BytesIO()
	writer = BitWriter(out)
	for bit in (1, 0, 1, 1, 0, 0, 1, 0):
		writer.write_bit(bit)
	assert writer.flush() == 0
	assert out.getvalue() == bytes([0b10110010])
	assert writer.bytes_written == 1


def test_flush_left_justifies_partial_byte():
	out = io.BytesIO()
	writer = BitWriter(out)
	writer.write_code("101")
	assert writer.flush() == 5
	assert out.getvalue() == bytes([0b10100000])


def test_flush_with_nothing_written():
	out = io.BytesIO()
	writer = BitWriter(out)
	assert writer.flush() == 0
	assert out.getvalue() == b""
	assert writer.bytes_written == 0


def test_writer_spans_multiple_bytes():
	out = io.BytesIO()
	writer = BitWriter(out)
	writer.write_code("1" * 9)
	assert writer.flush() == 7
	assert out.getvalue() == bytes([0xFF, 0x80])
	assert writer.bytes_written == 2


def test_reader_returns_bits_then_none():
	reader = BitReader(io.BytesIO(bytes([0b10010000, 0x01])))
	bits = [reader.read_bit() for _ in range(16)]
	assert bits == [1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]
	assert reader.read_bit() is None
	assert reader.read_bit() is None


def test_reader_on_empty_input():
	reader = BitReader(io.BytesIO(b""))
	assert reader.read_bit() is None


def test_writer_output_reads_back():
	code = "1101001110001011101"
	out = io.BytesIO()
	writer = BitWriter(out)
	writer.write_code(code)
	padding = writer.flush()

	reader = BitReader(io.BytesIO(out.getvalue()))
	bits = []
	while True:
		bit = reader.read_bit()
		if bit is None:
			break
		bits.append(str(bit))
	assert "".join(bits) == code + "0" * padding
