from typing import Any

import yaml

from b64blob.blob import Blob
from b64blob.serializers.base import BaseSerializer


class BlobYAMLDumper(yaml.SafeDumper):
    """Safe YAML dumper that writes blobs, of any codec, as base-64 strings."""

    pass


def represent_blob(dumper: yaml.SafeDumper, blob: Blob) -> yaml.ScalarNode:
    return dumper.represent_str(blob.encode())


BlobYAMLDumper.add_multi_representer(Blob, represent_blob)


class YamlSerializer(BaseSerializer):
    """
    Serializer that converts blobs to and from YAML.

    Loading accepts a base-64 string, a `!!binary` scalar or a sequence of integers.
    """

    def dumps(self, value: Any, **kwargs) -> str:
        return yaml.dump(value, Dumper=BlobYAMLDumper, **kwargs)

    def parse(self, data: str | bytes) -> Any:
        return yaml.safe_load(data)
