from .base import BaseSerializer
from .json import BlobJSONEncoder, JsonSerializer
from .visitor import BlobVisitor
from .yaml import BlobYAMLDumper, YamlSerializer
