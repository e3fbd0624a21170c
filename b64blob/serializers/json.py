import json
from json import JSONEncoder
from typing import Any

from b64blob.blob import Blob
from b64blob.serializers.base import BaseSerializer


class BlobJSONEncoder(JSONEncoder):
    """
    A JSON encoder that renders blobs as their base-64 text.

    Each blob is encoded with its own codec.
    """

    def default(self, obj: Any) -> Any:
        """
        Encode the given object into a JSON-serializable format.

        Raises:
            TypeError: If the object is neither a blob nor handled by the default encoder.
        """
        if isinstance(obj, Blob):
            return obj.encode()
        return JSONEncoder.default(self, obj)


class JsonSerializer(BaseSerializer):
    """
    Serializer that converts blobs to and from JSON.

    A blob is dumped as a JSON string and loaded from either a JSON string or an array of integers.
    """

    def dumps(self, value: Any, **kwargs) -> str:
        return json.dumps(value, cls=BlobJSONEncoder, **kwargs)

    def parse(self, data: str | bytes) -> Any:
        return json.loads(data)
