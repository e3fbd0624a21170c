import io
from typing import IO, Any, ClassVar, Iterable, Iterator

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from b64blob.codecs import BaseCodec, BytesLike, CodecName, Standard, get_codec
from b64blob.config import get_config
from b64blob.exceptions import BlobWriteError
from b64blob.utils.logger import logger

_VARIANTS: dict[tuple[type, type[BaseCodec]], type["Blob"]] = {}


class Blob:
    """Binary data that serializes as base-64 text.

    A blob owns a `bytearray` and exposes the usual buffer operations on it. The codec
    used by `encode`/`decode` is selected on the type: `Blob` uses the standard padded
    alphabet and `Blob[UrlSafeNoPad]` (or `Blob["url_safe_no_pad"]`) returns a cached
    subclass bound to another codec. Instances carry no codec state of their own.

    Two blobs are equal when their bytes are equal, whatever their codecs.

    Attributes:
        codec (type[BaseCodec]): Codec used for encoding and decoding. Defaults to Standard.
    """

    __slots__ = ("_data", "_capacity")

    codec: ClassVar[type[BaseCodec]] = Standard
    _origin: ClassVar[type["Blob"] | None] = None

    def __init__(self, data: BytesLike | str | Iterable[int] | "Blob" | None = None):
        if data is None:
            self._data = bytearray()
        elif isinstance(data, Blob):
            self._data = bytearray(data._data)
        elif isinstance(data, str):
            self._data = bytearray(data, "utf-8")
        elif isinstance(data, int):
            raise TypeError("Cannot create a Blob from an int, use Blob.with_capacity() to reserve space")
        else:
            self._data = bytearray(data)
        self._capacity = len(self._data)

    def __class_getitem__(cls, codec: type[BaseCodec] | CodecName | str) -> type["Blob"]:
        codec = get_codec(codec)
        origin = cls._origin or cls
        if codec is origin.codec:
            return origin

        key = (origin, codec)
        if key not in _VARIANTS:
            name = f"{origin.__name__}[{codec.__name__}]"
            _VARIANTS[key] = type(
                name,
                (origin,),
                {
                    "__slots__": (),
                    "__module__": origin.__module__,
                    "__qualname__": name,
                    "codec": codec,
                    "_origin": origin,
                },
            )
        return _VARIANTS[key]

    @classmethod
    def _adopt(cls, data: bytearray, capacity: int = 0) -> "Blob":
        blob = cls.__new__(cls)
        blob._data = data
        blob._capacity = max(capacity, len(data))
        return blob

    @classmethod
    def new(cls) -> "Blob":
        """Create an empty blob."""
        return cls()

    @classmethod
    def from_bytes(cls, data: BytesLike | str | Iterable[int] | "Blob") -> "Blob":
        """Create a blob holding a copy of `data`.

        Args:
            data (BytesLike | str | Iterable[int] | Blob): Source bytes. Strings are stored
                as their UTF-8 bytes, not decoded from base-64.

        Returns:
            Blob: The new blob.
        """
        return cls(data)

    @classmethod
    def from_iterable(cls, iterable: Iterable[int]) -> "Blob":
        """Create a blob from an iterable of ints in range 0..255."""
        return cls._adopt(bytearray(iterable))

    @classmethod
    def with_capacity(cls, capacity: int) -> "Blob":
        """Create an empty blob with room for `capacity` bytes."""
        blob = cls()
        blob.reserve(capacity)
        return blob

    @classmethod
    def decode(cls, encoded: str | BytesLike) -> "Blob":
        """Decode base-64 data into a new blob.

        Args:
            encoded (str | BytesLike): Base-64 text for the codec of this blob type.

        Returns:
            Blob: Blob holding the decoded bytes.

        Raises:
            DecodeError: If `encoded` is not valid for the codec.
        """
        return cls._adopt(bytearray(cls.codec.decode(encoded)))

    @classmethod
    def parse(cls, text: str) -> "Blob":
        """Parse the textual form of a blob, the inverse of `str(blob)`."""
        return cls.decode(text)

    @classmethod
    def from_value(cls, value: Any) -> "Blob":
        """Build a blob from a deserialized value.

        Accepts base-64 text, raw bytes or a sequence of byte values.

        Raises:
            DeserializationError: If the value has an unsupported shape or content.
        """
        from b64blob.serializers.visitor import BlobVisitor

        return BlobVisitor(cls).visit(value)

    def capacity(self) -> int:
        """Return the number of bytes the blob has room for."""
        return max(self._capacity, len(self._data))

    def reserve(self, additional: int):
        """Reserve room for at least `additional` more bytes.

        Raises:
            ValueError: If `additional` is negative.
        """
        if additional < 0:
            raise ValueError(f"Cannot reserve a negative number of bytes: {additional}")
        self._capacity = max(self.capacity(), len(self._data) + additional)

    def with_codec(self, codec: type[BaseCodec] | CodecName | str) -> "Blob":
        """Move the bytes into a blob bound to another codec.

        The bytes are neither copied nor re-encoded; this blob is left empty.

        Args:
            codec (type[BaseCodec] | CodecName | str): Codec for the returned blob.

        Returns:
            Blob: Blob of type `Blob[codec]` owning the bytes.
        """
        blob = type(self)[codec]._adopt(self._data, self._capacity)
        self._data = bytearray()
        self._capacity = 0
        return blob

    def encode(self) -> str:
        """Encode the blob to a base-64 string."""
        return self.codec.encode(self._data)

    def encode_to(self, sink: IO, chunk_size: int | None = None, text: bool | None = None) -> int:
        """Stream the base-64 encoding of the blob to a writable sink.

        The output is identical to `encode()` without building the whole string first.
        Binary sinks may accept part of a chunk per `write` call; the remainder is written
        until the whole chunk is taken.

        Args:
            sink (IO): Binary or text file-like object.
            chunk_size (int | None): Input bytes encoded per write, a multiple of 3.
                Defaults to the configured `stream_chunk_size`.
            text (bool | None): Write `str` chunks instead of `bytes`. Defaults to
                whether `sink` is an `io.TextIOBase`; pass it explicitly for text sinks
                that do not derive from `io.TextIOBase`.

        Returns:
            int: Number of base-64 symbols written.

        Raises:
            BlobWriteError: If the sink rejects a write, is closed or would block.
        """
        if chunk_size is None:
            chunk_size = get_config().stream_chunk_size
        if text is None:
            text = isinstance(sink, io.TextIOBase)

        written = 0
        for chunk in self.codec.iter_encode(self._data, chunk_size):
            try:
                if text:
                    sink.write(chunk.decode("ascii"))
                else:
                    _write_all(sink, chunk)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to write base64 output after {written} symbols: {e}")
                if isinstance(e, BlobWriteError):
                    raise
                raise BlobWriteError(f"Failed to write base64 output: {e}") from e
            written += len(chunk)
        return written

    def append_decoded(self, encoded: str | BytesLike) -> int:
        """Decode base-64 data and append it to the blob.

        The blob is unchanged if decoding fails.

        Returns:
            int: Number of bytes appended.

        Raises:
            DecodeError: If `encoded` is not valid for the codec.
        """
        return self.codec.decode_into(encoded, self._data)

    def into_bytes(self) -> bytearray:
        """Hand over the underlying bytearray, leaving the blob empty."""
        data = self._data
        self._data = bytearray()
        self._capacity = 0
        return data

    def copy(self) -> "Blob":
        return type(self)._adopt(bytearray(self._data), self._capacity)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "Blob":
        return self.copy()

    def __reduce__(self):
        return _restore_blob, (self._origin or type(self), self.codec.name.value, bytes(self._data))

    def view(self) -> memoryview:
        """Return a memoryview over the bytes. The blob cannot grow while the view is alive."""
        return memoryview(self._data)

    def append(self, byte: int):
        self._data.append(byte)

    def extend(self, data: Iterable[int] | BytesLike):
        self._data.extend(data._data if isinstance(data, Blob) else data)

    def write(self, data: BytesLike) -> int:
        """Append raw bytes, file-style."""
        self._data += data
        return len(data)

    def flush(self):
        pass

    def __iadd__(self, other: Iterable[int] | BytesLike) -> "Blob":
        self.extend(other)
        return self

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._data)

    def __contains__(self, item: int | BytesLike) -> bool:
        return item in self._data

    def __getitem__(self, key: int | slice) -> int | bytes:
        if isinstance(key, slice):
            return bytes(self._data[key])
        return self._data[key]

    def __setitem__(self, key: int | slice, value):
        self._data[key] = value

    def __delitem__(self, key: int | slice):
        del self._data[key]

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Blob):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == other
        if isinstance(other, (list, tuple)):
            return list(self._data) == list(other)
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._data)!r})"

    @classmethod
    def _serialize(cls, value: "Blob") -> str:
        return cls.codec.encode(value._data)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        encoded = {"type": "string", "contentEncoding": "base64", "x-codec": cls.codec.name.value}
        if handler.mode == "serialization":
            return encoded
        return {
            "anyOf": [
                encoded,
                {"type": "array", "items": {"type": "integer", "minimum": 0, "maximum": 255}},
            ]
        }


def _restore_blob(origin: type[Blob], codec: str, data: bytes) -> Blob:
    return origin[codec](data)


def _write_all(sink: IO, chunk: bytes):
    with memoryview(chunk) as view:
        while view:
            count = sink.write(view)
            if count is None:
                raise BlobWriteError("Sink would block")
            if count == 0:
                raise BlobWriteError("Sink accepted no bytes")
            view = view[count:]
