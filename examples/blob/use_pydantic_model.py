from pydantic import BaseModel

from b64blob import Blob, UrlSafeNoPad


class Attachment(BaseModel):
    name: str
    content: Blob
    token: Blob[UrlSafeNoPad]


def run_model_roundtrip() -> Attachment:
    """
    Load an attachment where one blob is base-64 text and the other a list of bytes, then dump it back.

    Returns:
        Attachment: The parsed attachment.
    """
    attachment = Attachment.model_validate_json('{"name": "notes.bin", "content": "AQIDBAU=", "token": [251, 255]}')
    print(attachment.model_dump_json())

    return attachment


if __name__ == "__main__":
    run_model_roundtrip()
