# filename: huffman_heap.py

"""Array-backed binary min-heap of tree nodes, keyed on node weight.

Ties are left to heap position: a node only moves past its parent or child
when its weight is strictly smaller. The decoder rebuilds the tree with the
same heap, so both sides see the same shape.
"""

from huffman_errors import HeapOverflowError


class MinHeap:
    def __init__(self, capacity):
        self.capacity = capacity
        self.nodes = []

    def __len__(self):
        return len(self.nodes)

    def is_empty(self):
        return not self.nodes

    def insert(self, node):
        if len(self.nodes) >= self.capacity:
            raise HeapOverflowError(self.capacity)

        self.nodes.append(node)
        i = len(self.nodes) - 1
        # sift up
        while i and node.freq < self.nodes[(i - 1) // 2].freq:
            self.nodes[i] = self.nodes[(i - 1) // 2]
            i = (i - 1) // 2
        self.nodes[i] = node

    def extract_min(self):
        if not self.nodes:
            return None

        root = self.nodes[0]
        last = self.nodes.pop()
        if self.nodes:
            self.nodes[0] = last
            self._sift_down(0)
        return root

    def _sift_down(self, index):
        size = len(self.nodes)
        while True:
            smallest = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self.nodes[left].freq < self.nodes[smallest].freq:
                smallest = left
            if right < size and self.nodes[right].freq < self.nodes[smallest].freq:
                smallest = right
            if smallest == index:
                return
            self.nodes[index], self.nodes[smallest] = self.nodes[smallest], self.nodes[index]
            index = smallest
