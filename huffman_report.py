# filename: huffman_report.py

import os
from dataclasses import dataclass

from huffman_errors import InputError, IOFailure
from huffman_service import check_distinct_paths


@dataclass
class CompressionStats:
    original_size: int
    compressed_size: int

    @property
    def compression_ratio(self):
        if not self.original_size:
            return 0.0
        return self.compressed_size / self.original_size

    @property
    def space_saved(self):
        """Percentage of the original size saved by compression."""
        if not self.original_size:
            return 0.0
        return (self.original_size - self.compressed_size) / self.original_size * 100


def compression_stats(original_path, compressed_path):
    try:
        return CompressionStats(
            original_size=os.path.getsize(original_path),
            compressed_size=os.path.getsize(compressed_path),
        )
    except OSError as e:
        raise IOFailure(f"cannot open files for statistics: {e}") from e


def format_stats(stats):
    lines = [
        "=== COMPRESSION STATISTICS ===",
        f"Original size:     {stats.original_size} bytes",
        f"Compressed size:   {stats.compressed_size} bytes",
        f"Compression ratio: {stats.compression_ratio:.2f}",
        f"Space saved:       {stats.space_saved:.2f}%",
    ]
    return "\n".join(lines)


def format_code_table(codes):
    lines = ["Char\tByte\tCode\tLength"]
    for sym, code in enumerate(codes):
        if code:
            display = chr(sym) if 32 <= sym <= 126 else "?"
            lines.append(f"{display}\t{sym}\t{code}\t{len(code)}")
    return "\n".join(lines)


def validate_files(input_path, output_path):
    if not input_path or not output_path:
        raise InputError("file paths cannot be empty")
    if not os.path.isfile(input_path) or not os.access(input_path, os.R_OK):
        raise InputError(f"cannot access input file '{input_path}'")

    out_dir = os.path.dirname(os.path.abspath(output_path))
    if os.path.isdir(output_path):
        raise InputError(f"output path '{output_path}' is a directory")
    if not os.path.isdir(out_dir) or not os.access(out_dir, os.W_OK):
        raise InputError(f"cannot create output file '{output_path}'")
    check_distinct_paths(input_path, output_path)
