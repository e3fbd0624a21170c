import json

import pytest

from b64blob import Blob, ByteRangeError, DeserializationError, UrlSafe
from b64blob.serializers import BlobJSONEncoder, JsonSerializer


def test_dumps_blob(blob):
    assert JsonSerializer().dumps(blob) == '"AQIDBAU="'


def test_dumps_nested_blobs(blob):
    value = {"my_blob": blob, "other": [Blob[UrlSafe](b"\xfb\xff")]}

    assert JsonSerializer().dumps(value) == '{"my_blob": "AQIDBAU=", "other": ["-_8="]}'


def test_encoder_with_stdlib_json(blob):
    assert json.loads(json.dumps({"my_blob": blob}, cls=BlobJSONEncoder)) == {"my_blob": "AQIDBAU="}


def test_encoder_rejects_unknown_types():
    with pytest.raises(TypeError):
        json.dumps(object(), cls=BlobJSONEncoder)


@pytest.mark.parametrize("document", ['"AQIDBAU="', "[1, 2, 3, 4, 5]", b'"AQIDBAU="'])
def test_loads(document, data):
    assert JsonSerializer().loads(document) == data


def test_loads_with_codec():
    blob = JsonSerializer(Blob[UrlSafe]).loads('"-_8="')

    assert type(blob) is Blob[UrlSafe]
    assert blob == [0xFB, 0xFF]


def test_loads_overflow():
    with pytest.raises(ByteRangeError):
        JsonSerializer().loads("[1, 2, 3000, 4, 5]")


@pytest.mark.parametrize("document", ['{"a": 1}', "42", "null", "[1, true]"])
def test_loads_unsupported(document):
    with pytest.raises(DeserializationError):
        JsonSerializer().loads(document)


def test_roundtrip(blob):
    serializer = JsonSerializer()

    assert serializer.loads(serializer.dumps(blob)) == blob
