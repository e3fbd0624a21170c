import base64
import binascii
import enum
import re
from typing import ClassVar, Iterator

from b64blob.exceptions import (
    DecodeError,
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_SAFE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
CRYPT_ALPHABET = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

PAD = b"="

BytesLike = bytes | bytearray | memoryview


class CodecName(str, enum.Enum):
    """Enumeration of the available base-64 configurations."""

    STANDARD = "standard"
    STANDARD_NO_PAD = "standard_no_pad"
    URL_SAFE = "url_safe"
    URL_SAFE_NO_PAD = "url_safe_no_pad"
    CRYPT = "crypt"


class BaseCodec:
    """Base class for statically selected base-64 configurations.

    Codecs are used as types, never as instances: a subclass fixes an alphabet and a
    padding policy, and every operation is a classmethod. Translation tables between the
    codec alphabet and the standard one are computed once, when the subclass is defined.

    Attributes:
        name (CodecName): Registry name of the codec.
        alphabet (str): The 64 symbols of the codec, in value order.
        padding (bool): Whether encoded output is padded with `=` to a multiple of 4.
    """

    name: ClassVar[CodecName]
    alphabet: ClassVar[str] = STANDARD_ALPHABET
    padding: ClassVar[bool] = True

    _to_standard: ClassVar[bytes | None] = None
    _from_standard: ClassVar[bytes | None] = None
    _invalid_symbol: ClassVar[re.Pattern]
    _symbol_values: ClassVar[dict[int, int]]

    def __init__(self):
        raise TypeError(f"{type(self).__name__} is a codec selector and cannot be instantiated")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if len(cls.alphabet) != 64 or len(set(cls.alphabet)) != 64 or not cls.alphabet.isascii():
            raise ValueError(f"Codec {cls.__name__} must define 64 distinct ASCII symbols")

        alphabet = cls.alphabet.encode("ascii")
        standard = STANDARD_ALPHABET.encode("ascii")
        if alphabet != standard:
            cls._to_standard = bytes.maketrans(alphabet, standard)
            cls._from_standard = bytes.maketrans(standard, alphabet)
        cls._invalid_symbol = re.compile(b"[^" + re.escape(alphabet) + b"]")
        cls._symbol_values = {symbol: value for value, symbol in enumerate(alphabet)}

    @classmethod
    def encode(cls, data: BytesLike) -> str:
        """Encode raw bytes into a base-64 string.

        Args:
            data (BytesLike): The bytes to encode.

        Returns:
            str: The encoded text. Empty input gives an empty string.
        """
        return cls.encode_bytes(data).decode("ascii")

    @classmethod
    def encode_bytes(cls, data: BytesLike) -> bytes:
        """Encode raw bytes into base-64 ASCII bytes."""
        encoded = base64.b64encode(data)
        if cls._from_standard is not None:
            encoded = encoded.translate(cls._from_standard)
        if not cls.padding:
            encoded = encoded.rstrip(PAD)
        return encoded

    @classmethod
    def iter_encode(cls, data: BytesLike, chunk_size: int) -> Iterator[bytes]:
        """Encode raw bytes chunk by chunk.

        Every chunk but the last one covers a multiple of 3 input bytes, so no padding
        appears mid-stream and the concatenated chunks equal `encode_bytes(data)`.

        Args:
            data (BytesLike): The bytes to encode.
            chunk_size (int): Number of input bytes per chunk, a positive multiple of 3.

        Yields:
            bytes: Encoded ASCII chunks.

        Raises:
            ValueError: If `chunk_size` is not a positive multiple of 3.
        """
        if chunk_size <= 0 or chunk_size % 3:
            raise ValueError(f"Chunk size must be a positive multiple of 3, got {chunk_size}")

        with memoryview(data) as view:
            for start in range(0, len(view), chunk_size):
                yield cls.encode_bytes(view[start : start + chunk_size])

    @classmethod
    def decode(cls, encoded: str | BytesLike) -> bytes:
        """Decode base-64 text into raw bytes.

        Args:
            encoded (str | BytesLike): The encoded text.

        Returns:
            bytes: The decoded bytes.

        Raises:
            InvalidByteError: If a symbol outside the alphabet is found.
            InvalidLengthError: If the symbol count can not encode whole bytes.
            InvalidPaddingError: If padding is missing, malformed or not allowed.
            InvalidLastSymbolError: If the final symbol has non-zero trailing bits.
        """
        # non-ASCII text is rejected by the alphabet check below
        raw = encoded.encode("utf-8") if isinstance(encoded, str) else bytes(encoded)

        symbols = raw.rstrip(PAD)
        pad_count = len(raw) - len(symbols)

        invalid = cls._invalid_symbol.search(symbols)
        if invalid is not None:
            raise InvalidByteError(invalid.start(), symbols[invalid.start()], codec=cls.name.value)

        remainder = len(symbols) % 4
        if remainder == 1:
            raise InvalidLengthError(len(symbols), codec=cls.name.value)

        if cls.padding:
            if pad_count != -len(symbols) % 4:
                raise InvalidPaddingError(
                    f"Expected {-len(symbols) % 4} padding symbols, found {pad_count}", codec=cls.name.value
                )
        elif pad_count:
            raise InvalidPaddingError(f"Padding is not allowed by codec {cls.name.value}", codec=cls.name.value)

        if remainder:
            last = symbols[-1]
            # 2 symbols carry 1 byte and 3 symbols carry 2 bytes; the rest must be zero bits
            if cls._symbol_values[last] & (0x0F if remainder == 2 else 0x03):
                raise InvalidLastSymbolError(len(symbols) - 1, last, codec=cls.name.value)

        if cls._to_standard is not None:
            symbols = symbols.translate(cls._to_standard)
        try:
            return base64.b64decode(symbols + PAD * (-len(symbols) % 4), validate=True)
        except binascii.Error as e:
            raise DecodeError(str(e), codec=cls.name.value) from e

    @classmethod
    def decode_into(cls, encoded: str | BytesLike, dest: bytearray) -> int:
        """Decode base-64 text and append the bytes to `dest`.

        `dest` is left untouched when decoding fails.

        Args:
            encoded (str | BytesLike): The encoded text.
            dest (bytearray): Buffer receiving the decoded bytes.

        Returns:
            int: Number of bytes appended.
        """
        decoded = cls.decode(encoded)
        dest += decoded
        return len(decoded)


class Standard(BaseCodec):
    """Standard character set with padding."""

    name = CodecName.STANDARD


class StandardNoPad(BaseCodec):
    """Standard character set without padding."""

    name = CodecName.STANDARD_NO_PAD
    padding = False


class UrlSafe(BaseCodec):
    """URL-safe character set with padding."""

    name = CodecName.URL_SAFE
    alphabet = URL_SAFE_ALPHABET


class UrlSafeNoPad(BaseCodec):
    """URL-safe character set without padding."""

    name = CodecName.URL_SAFE_NO_PAD
    alphabet = URL_SAFE_ALPHABET
    padding = False


class Crypt(BaseCodec):
    """As per `crypt(3)` requirements."""

    name = CodecName.CRYPT
    alphabet = CRYPT_ALPHABET
    padding = False


CODECS: dict[CodecName, type[BaseCodec]] = {
    codec.name: codec for codec in (Standard, StandardNoPad, UrlSafe, UrlSafeNoPad, Crypt)
}


def get_codec(codec: type[BaseCodec] | CodecName | str) -> type[BaseCodec]:
    """Resolve a codec selector.

    Args:
        codec (type[BaseCodec] | CodecName | str): A codec class, or its registry name.

    Returns:
        type[BaseCodec]: The codec class.

    Raises:
        ValueError: If the name is unknown.
        TypeError: If `codec` is neither a codec class nor a name.
    """
    if isinstance(codec, type) and issubclass(codec, BaseCodec):
        return codec
    if isinstance(codec, str):
        try:
            return CODECS[CodecName(codec)]
        except ValueError:
            raise ValueError(f"Unknown codec '{codec}'. Available: {', '.join(name.value for name in CodecName)}")
    raise TypeError(f"Expected a codec class or name, got {type(codec).__name__}")
