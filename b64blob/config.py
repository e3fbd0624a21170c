from functools import lru_cache

from pydantic import BaseModel, Field, field_validator

from b64blob.utils.env import get_env_var

DEFAULT_MAX_PREALLOCATION = 4096
DEFAULT_STREAM_CHUNK_SIZE = 3 * 1024


class BlobConfig(BaseModel):
    """Configuration for blob encoding and deserialization.

    Attributes:
        max_preallocation (int): Upper bound on the capacity reserved from a sequence size hint.
        stream_chunk_size (int): Number of input bytes encoded per write by `Blob.encode_to`.
    """

    max_preallocation: int = Field(default=DEFAULT_MAX_PREALLOCATION, ge=0)
    stream_chunk_size: int = Field(default=DEFAULT_STREAM_CHUNK_SIZE, gt=0)

    @field_validator("stream_chunk_size")
    @classmethod
    def validate_stream_chunk_size(cls, value: int) -> int:
        """Keep padding out of intermediate chunks."""
        if value % 3:
            raise ValueError("stream_chunk_size must be a multiple of 3")
        return value

    @classmethod
    def from_env(cls) -> "BlobConfig":
        """Build a config from `B64BLOB_*` environment variables.

        Returns:
            BlobConfig: Config with environment overrides applied.
        """
        return cls(
            max_preallocation=get_env_var("B64BLOB_MAX_PREALLOCATION", DEFAULT_MAX_PREALLOCATION),
            stream_chunk_size=get_env_var("B64BLOB_STREAM_CHUNK_SIZE", DEFAULT_STREAM_CHUNK_SIZE),
        )

    def to_dict(self, **kwargs) -> dict:
        """Convert config to dictionary."""
        return self.model_dump(**kwargs)


@lru_cache(maxsize=1)
def get_config() -> BlobConfig:
    """Return the process-wide config, read from the environment on first use."""
    return BlobConfig.from_env()
