import os
import sys

# Add the repository root to path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

import pytest

from huffman_cli import build_parser, main


def test_compress_then_decompress(tmp_path, capsys):
	original = tmp_path / "doc.txt"
	packed = tmp_path / "doc.huf"
	restored = tmp_path / "doc_restored.txt"
	original.write_bytes(b"Huffman coding compression tool test file\n" * 30)

	assert main(["-c", str(original), str(packed)]) == 0
	out = capsys.readouterr().out
	assert "COMPRESSION STATISTICS" in out
	assert packed.exists()

	assert main(["-q", "-d", str(packed), str(restored)]) == 0
	assert restored.read_bytes() == original.read_bytes()


def test_stats_option(tmp_path, capsys):
	original = tmp_path / "a.txt"
	packed = tmp_path / "a.huf"
	original.write_bytes(b"aaaaaaaabbbc" * 10)
	assert main(["-q", "-c", str(original), str(packed)]) == 0
	capsys.readouterr()

	assert main(["-s", str(original), str(packed)]) == 0
	assert "Original size:     120 bytes" in capsys.readouterr().out


def test_codes_option(tmp_path, capsys):
	original = tmp_path / "a.txt"
	original.write_bytes(b"aab")
	assert main(["--codes", str(original)]) == 0
	lines = capsys.readouterr().out.splitlines()
	assert lines[1:] == ["a\t97\t1\t1", "b\t98\t0\t1"]


def test_missing_input_fails(tmp_path):
	assert main(["-c", str(tmp_path / "missing.txt"), str(tmp_path / "out.huf")]) == 1


def test_empty_input_fails(tmp_path):
	original = tmp_path / "empty.txt"
	original.write_bytes(b"")
	packed = tmp_path / "empty.huf"
	assert main(["-c", str(original), str(packed)]) == 1
	assert not packed.exists()


def test_corrupt_container_fails(tmp_path):
	bad = tmp_path / "bad.huf"
	bad.write_bytes(b"\x00" * 32)
	assert main(["-d", str(bad), str(tmp_path / "out.txt")]) == 1


def test_mode_is_required():
	assert main([]) == 1
	assert main(["-c", "a", "b", "-d", "c", "d"]) == 1
	assert main(["--help"]) == 0
	with pytest.raises(SystemExit):
		build_parser().parse_args([])
	with pytest.raises(SystemExit):
		build_parser().parse_args(["-c", "a", "b", "-d", "c", "d"])


def test_same_input_and_output_fails(tmp_path):
	doc = tmp_path / "doc.txt"
	doc.write_bytes(b"important text")
	assert main(["-c", str(doc), str(doc)]) == 1
	assert doc.read_bytes() == b"important text"
