from b64blob import Blob

DATA = bytes([0x1, 0x2, 0x3, 0x4, 0x5])


def run_basic() -> Blob:
    """
    Build a blob, print its base-64 form, then append raw bytes through the file-style API.

    Returns:
        Blob: The blob after the write.
    """
    my_blob = Blob(DATA)
    print(my_blob)

    assert my_blob == DATA

    my_blob.write("Testing".encode())
    print(my_blob)

    return my_blob


if __name__ == "__main__":
    run_basic()
