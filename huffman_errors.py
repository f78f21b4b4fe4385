# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure raised by the compressor."""


class InputError(HuffmanError):
    pass


class EmptyInputError(InputError):
    def __init__(self, message="input is empty, nothing to compress"):
        super().__init__(message)


class IOFailure(HuffmanError):
    """An OSError raised while reading or writing a file."""


class FormatError(HuffmanError):
    """The container being decoded is not a valid compressed stream."""


class BadMagicError(FormatError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"invalid file format (magic number mismatch: 0x{found:08X})")


class TruncatedHeaderError(FormatError):
    pass


class TruncatedFrequencyTableError(FormatError):
    pass


class TruncatedPayloadError(FormatError):
    pass


class CorruptPayloadError(FormatError):
    pass


class HeapOverflowError(HuffmanError):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"heap overflow (capacity {capacity})")


class InternalConsistencyError(HuffmanError):
    pass
