# filename: huffman_core.py

import logging
from collections import Counter

from huffman_errors import EmptyInputError, InternalConsistencyError
from huffman_heap import MinHeap

ALPHABET_SIZE = 256

logger = logging.getLogger(__name__)


class HuffmanNode:
    def __init__(self, char, freq, left=None, right=None):
        self.char = char
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(char={self.char!r}, freq={self.freq})"
        return f"HuffmanNode(freq={self.freq})"


class HuffmanLogic:
    def count_frequencies(self, data, freqs=None):
        # Frequency analysis of the input byte data, one slot per byte value.
        # Passing freqs back in accumulates across chunks.
        if freqs is None:
            freqs = [0] * ALPHABET_SIZE
        for byte, count in Counter(data).items():
            freqs[byte] += count
        return freqs

    def build_tree(self, freqs):
        symbols = [sym for sym in range(ALPHABET_SIZE) if freqs[sym] > 0]
        if not symbols:
            raise EmptyInputError("no symbols with non-zero frequency")

        # A lone symbol still hangs below an internal root so that every code
        # has at least one bit and decoding always ends on a leaf.
        if len(symbols) == 1:
            sym = symbols[0]
            return HuffmanNode(None, freqs[sym], left=HuffmanNode(sym, freqs[sym]))

        priority_queue = MinHeap(len(symbols))
        for sym in symbols:
            priority_queue.insert(HuffmanNode(sym, freqs[sym]))

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            left = priority_queue.extract_min()
            right = priority_queue.extract_min()
            merged = HuffmanNode(None, left.freq + right.freq, left, right)
            priority_queue.insert(merged)

        root = priority_queue.extract_min()
        logger.debug("Huffman tree constructed from %d distinct symbols", len(symbols))
        return root

    def generate_codes(self, root):
        """Walk the tree and return a 256-entry table of bit strings.

        Entries for symbols that do not occur are empty strings. A tree that
        is a bare leaf gets the one-bit code "0".
        """
        codes = [""] * ALPHABET_SIZE
        if root is None:
            return codes
        if root.is_leaf:
            codes[root.char] = "0"
            return codes
        # single-symbol tree: internal root with only a left leaf
        if root.right is None and root.left is not None and root.left.is_leaf:
            codes[root.left.char] = "0"
            return codes

        self._walk(root, "", codes)
        logger.debug("Huffman codes generated for %d symbols", sum(1 for c in codes if c))
        return codes

    def _walk(self, node, current_code, codes):
        if node.is_leaf:
            codes[node.char] = current_code
            return
        if node.left is None or node.right is None:
            raise InternalConsistencyError(f"internal node at '{current_code}' is missing a child")
        self._walk(node.left, current_code + "0", codes)
        self._walk(node.right, current_code + "1", codes)


def code_lengths(codes):
    return [len(code) for code in codes]


def encoded_bit_length(freqs, codes):
    """Total payload size in bits for data with the given frequencies."""
    return sum(freq * len(code) for freq, code in zip(freqs, codes))
