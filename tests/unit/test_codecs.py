import pytest

from b64blob import (
    BaseCodec,
    CodecName,
    Crypt,
    DecodeError,
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
    Standard,
    StandardNoPad,
    UrlSafe,
    UrlSafeNoPad,
    get_codec,
)

ALL_CODECS = [Standard, StandardNoPad, UrlSafe, UrlSafeNoPad, Crypt]


@pytest.mark.parametrize("codec", ALL_CODECS)
@pytest.mark.parametrize("payload", [b"", b"\x00", b"\xfb\xff", b"hello", bytes(range(256))])
def test_roundtrip(codec, payload):
    assert codec.decode(codec.encode(payload)) == payload


@pytest.mark.parametrize(
    "codec, expected",
    [
        (Standard, "+/8="),
        (StandardNoPad, "+/8"),
        (UrlSafe, "-_8="),
        (UrlSafeNoPad, "-_8"),
        (Crypt, "yzw"),
    ],
)
def test_alphabet_and_padding(codec, expected):
    assert codec.encode(b"\xfb\xff") == expected


def test_padding_differs_for_partial_groups():
    assert Standard.encode(b"hello") == "aGVsbG8="
    assert StandardNoPad.encode(b"hello") == "aGVsbG8"
    assert Standard.encode(b"abc") == StandardNoPad.encode(b"abc") == "YWJj"


def test_empty_input():
    assert Standard.encode(b"") == ""
    assert Standard.decode("") == b""
    assert Crypt.decode(b"") == b""


def test_decode_accepts_bytes_like():
    assert Standard.decode(b"AQIDBAU=") == bytes([1, 2, 3, 4, 5])
    assert Standard.decode(bytearray(b"AQIDBAU=")) == bytes([1, 2, 3, 4, 5])
    assert Standard.decode(memoryview(b"AQIDBAU=")) == bytes([1, 2, 3, 4, 5])


def test_invalid_byte():
    with pytest.raises(InvalidByteError) as exc_info:
        Standard.decode("AQ!D")

    assert exc_info.value.index == 2
    assert exc_info.value.byte == ord("!")
    assert exc_info.value.codec == "standard"


def test_invalid_byte_from_other_alphabet():
    with pytest.raises(InvalidByteError):
        Standard.decode("-_8=")
    with pytest.raises(InvalidByteError):
        UrlSafe.decode("+/8=")


def test_non_ascii_text_is_invalid():
    with pytest.raises(InvalidByteError) as exc_info:
        Standard.decode("AQé=")

    assert exc_info.value.index == 2


def test_padding_in_the_middle_is_invalid():
    with pytest.raises(InvalidByteError):
        Standard.decode("AQ==AQ==")


def test_invalid_length():
    with pytest.raises(InvalidLengthError) as exc_info:
        Standard.decode("AQIDB")

    assert exc_info.value.length == 5


@pytest.mark.parametrize(
    "codec, encoded",
    [
        (Standard, "AQ"),
        (Standard, "AQ="),
        (Standard, "AQ==="),
        (Standard, "AQID="),
        (StandardNoPad, "AQ=="),
        (UrlSafeNoPad, "AQI="),
        (Crypt, "AQ=="),
    ],
)
def test_invalid_padding(codec, encoded):
    with pytest.raises(InvalidPaddingError):
        codec.decode(encoded)


@pytest.mark.parametrize("encoded", ["AR==", "AAF="])
def test_invalid_last_symbol(encoded):
    with pytest.raises(InvalidLastSymbolError):
        Standard.decode(encoded)


def test_decode_errors_are_value_errors():
    with pytest.raises(ValueError):
        Standard.decode("****")
    assert issubclass(InvalidPaddingError, DecodeError)


def test_decode_into_appends():
    dest = bytearray(b"\x00")

    assert Standard.decode_into("AQID", dest) == 3
    assert dest == bytearray(b"\x00\x01\x02\x03")


def test_decode_into_leaves_dest_unchanged_on_error():
    dest = bytearray(b"\x00")

    with pytest.raises(DecodeError):
        Standard.decode_into("AQI", dest)

    assert dest == bytearray(b"\x00")


@pytest.mark.parametrize("codec", ALL_CODECS)
def test_iter_encode_matches_encode(codec):
    payload = bytes(range(100))

    assert b"".join(codec.iter_encode(payload, chunk_size=9)) == codec.encode_bytes(payload)


@pytest.mark.parametrize("chunk_size", [0, -3, 4])
def test_iter_encode_rejects_chunk_size(chunk_size):
    with pytest.raises(ValueError):
        list(Standard.iter_encode(b"abc", chunk_size=chunk_size))


def test_get_codec():
    assert get_codec(UrlSafe) is UrlSafe
    assert get_codec("url_safe_no_pad") is UrlSafeNoPad
    assert get_codec(CodecName.CRYPT) is Crypt


def test_get_codec_unknown():
    with pytest.raises(ValueError, match="Unknown codec"):
        get_codec("base32")
    with pytest.raises(TypeError):
        get_codec(42)


def test_codecs_are_not_instantiated():
    with pytest.raises(TypeError):
        Standard()


def test_codec_alphabet_must_have_64_symbols():
    with pytest.raises(ValueError):

        class Broken(BaseCodec):
            name = CodecName.STANDARD
            alphabet = "ABC"
