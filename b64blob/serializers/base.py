from typing import Any

from b64blob.blob import Blob
from b64blob.config import BlobConfig
from b64blob.serializers.visitor import BlobVisitor


class BaseSerializer:
    """
    Base class for serializers providing interface for dumps and loads methods.

    Attributes:
        blob_cls (type[Blob]): Blob type produced by `loads`, which also selects the codec.
        config (BlobConfig | None): Config passed on to the visitor.
    """

    def __init__(self, blob_cls: type[Blob] = Blob, config: BlobConfig | None = None):
        self.blob_cls = blob_cls
        self.config = config

    def dumps(self, value: Any) -> str:
        """
        Serialize the given value, blobs included, to a string.

        Args:
            value (Any): The value to be serialized.

        Returns:
            str: The serialized string representation of the value.

        Raises:
            NotImplementedError: This method should be implemented by subclasses.
        """
        raise NotImplementedError

    def parse(self, data: str | bytes) -> Any:
        """
        Parse a document into the plain values of the format.

        Raises:
            NotImplementedError: This method should be implemented by subclasses.
        """
        raise NotImplementedError

    def loads(self, data: str | bytes) -> Blob:
        """
        Deserialize a document holding a single blob value.

        Args:
            data (str | bytes): The serialized document.

        Returns:
            Blob: The blob built from the parsed value.

        Raises:
            DeserializationError: If the parsed value cannot be turned into a blob.
        """
        return BlobVisitor(self.blob_cls, self.config).visit(self.parse(data))
