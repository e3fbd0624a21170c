import pytest

from b64blob import Blob

DATA = bytes([1, 2, 3, 4, 5])


@pytest.fixture
def data():
    return DATA


@pytest.fixture
def blob(data):
    return Blob(data)
