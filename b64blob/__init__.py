from .blob import Blob
from .codecs import BaseCodec, CodecName, Crypt, Standard, StandardNoPad, UrlSafe, UrlSafeNoPad, get_codec
from .config import BlobConfig, get_config
from .exceptions import (
    BlobError,
    BlobWriteError,
    ByteRangeError,
    DecodeError,
    DeserializationError,
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)
