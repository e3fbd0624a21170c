import operator
from collections.abc import Iterable, Iterator
from typing import Any

from b64blob.blob import Blob
from b64blob.config import BlobConfig, get_config
from b64blob.exceptions import ByteRangeError, DecodeError, DeserializationError
from b64blob.utils.logger import logger


class BlobVisitor:
    """Turns a value produced by a structured-data format into a blob.

    The branch is chosen from the Python type the format produced for the value, never
    from its content:

    - `str`: base-64 text, decoded with the codec of the target blob type.
    - `bytes`, `bytearray`, `memoryview` or another blob: copied verbatim.
    - `list`, `tuple` or an iterator: byte values, each checked against 0..255.

    Attributes:
        blob_cls (type[Blob]): Blob type to build, which also selects the codec.
        config (BlobConfig): Preallocation limits.
    """

    def __init__(self, blob_cls: type[Blob] = Blob, config: BlobConfig | None = None):
        self.blob_cls = blob_cls
        self.config = config or get_config()

    def visit(self, value: Any) -> Blob:
        """Dispatch `value` to the matching visit method.

        Raises:
            DeserializationError: If the value has an unsupported type or invalid content.
        """
        if isinstance(value, str):
            return self.visit_str(value)
        if isinstance(value, (bytes, bytearray, memoryview, Blob)):
            return self.visit_bytes(value)
        if isinstance(value, (list, tuple, Iterator)):
            return self.visit_seq(value)
        raise DeserializationError(f"invalid type: {type(value).__name__}")

    def visit_str(self, value: str) -> Blob:
        try:
            return self.blob_cls.decode(value)
        except DecodeError as e:
            logger.debug(f"Failed to decode {self.blob_cls.codec.name.value} base64 value: {e}")
            raise DeserializationError(f"invalid value: {e}") from e

    def visit_bytes(self, value: bytes | bytearray | memoryview | Blob) -> Blob:
        return self.blob_cls(value)

    def visit_seq(self, value: Iterable[Any]) -> Blob:
        # trust the size hint only up to the configured bound
        hint = operator.length_hint(value, 0)
        blob = self.blob_cls.with_capacity(min(hint, self.config.max_preallocation))

        for index, element in enumerate(value):
            if isinstance(element, bool) or not isinstance(element, int):
                raise DeserializationError(f"invalid type: {type(element).__name__} at index {index}")
            if not 0 <= element <= 0xFF:
                raise ByteRangeError(index, element)
            blob.append(element)

        return blob
