import pytest

from app_utils.storage import KeyValueStore


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(str(tmp_path / "tracker.db"))
