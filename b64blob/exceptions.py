EXPECTED_BLOB_VALUE = "a base64-encoded string or a sequence of byte values"


class BlobError(Exception):
    """Base exception class for blob-related errors."""

    pass


class DecodeError(BlobError, ValueError):
    """
    Exception raised when base-64 input violates the rules of the active codec.

    Attributes:
        codec (str | None): Name of the codec that rejected the input. Defaults to None.
    """

    def __init__(self, message: str, codec: str | None = None):
        super().__init__(message)
        self.codec = codec


class InvalidByteError(DecodeError):
    """
    Exception raised when a symbol outside the codec alphabet is found.

    Attributes:
        index (int): Offset of the offending symbol in the encoded input.
        byte (int): The offending byte value.
    """

    def __init__(self, index: int, byte: int, codec: str | None = None):
        super().__init__(f"Invalid byte {byte}, offset {index}", codec=codec)
        self.index = index
        self.byte = byte


class InvalidLastSymbolError(DecodeError):
    """
    Exception raised when the final symbol carries non-zero trailing bits.

    Attributes:
        index (int): Offset of the final symbol.
        byte (int): The final symbol.
    """

    def __init__(self, index: int, byte: int, codec: str | None = None):
        super().__init__(f"Invalid last symbol {chr(byte)!r} at offset {index}", codec=codec)
        self.index = index
        self.byte = byte


class InvalidLengthError(DecodeError):
    """
    Exception raised when the number of symbols can not encode a whole number of bytes.

    Attributes:
        length (int): Number of symbols, padding excluded.
    """

    def __init__(self, length: int, codec: str | None = None):
        super().__init__(f"Encoded text cannot have a length of {length} symbols", codec=codec)
        self.length = length


class InvalidPaddingError(DecodeError):
    """Exception raised when padding is missing, misplaced or not allowed."""

    pass


class DeserializationError(BlobError, ValueError):
    """
    Exception raised when a structured value can not be turned into a blob.

    Attributes:
        expected (str): Description of the values that are accepted.
    """

    def __init__(self, message: str, expected: str = EXPECTED_BLOB_VALUE):
        super().__init__(f"{message}, expected {expected}")
        self.expected = expected


class ByteRangeError(DeserializationError):
    """
    Exception raised when a sequence element does not fit into a byte.

    Attributes:
        index (int): Position of the element in the sequence.
        value (int): The out-of-range element.
    """

    def __init__(self, index: int, value: int, expected: str = EXPECTED_BLOB_VALUE):
        super().__init__(f"invalid value: integer {value} at index {index} is out of range 0..255", expected)
        self.index = index
        self.value = value


class BlobWriteError(BlobError, OSError):
    """Exception raised when a sink rejects base-64 output."""

    pass
