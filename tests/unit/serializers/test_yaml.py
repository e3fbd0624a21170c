import pytest
import yaml

from b64blob import Blob, ByteRangeError, Crypt
from b64blob.serializers import YamlSerializer


def test_dumps_nested_blobs(blob):
    dumped = YamlSerializer().dumps({"my_blob": blob, "salt": Blob[Crypt](b"\xfb\xff")})

    assert yaml.safe_load(dumped) == {"my_blob": "AQIDBAU=", "salt": "yzw"}


def test_dumps_does_not_register_on_safe_dumper(blob):
    with pytest.raises(yaml.representer.RepresenterError):
        yaml.safe_dump({"my_blob": blob})


@pytest.mark.parametrize("document", ["AQIDBAU=", "'AQIDBAU='", "[1, 2, 3, 4, 5]", "- 1\n- 2\n- 3\n- 4\n- 5\n"])
def test_loads_text_and_sequence(document, data):
    assert YamlSerializer().loads(document) == data


def test_loads_binary_tag_is_verbatim(data):
    assert YamlSerializer().loads("!!binary AQIDBAU=") == data


def test_loads_overflow():
    with pytest.raises(ByteRangeError):
        YamlSerializer().loads("[1, 2, 3000, 4, 5]")


def test_roundtrip():
    serializer = YamlSerializer(Blob[Crypt])
    blob = Blob[Crypt](bytes(range(32)))

    assert serializer.loads(serializer.dumps(blob)) == blob
