import os

import pytest

KEY_DIR = os.path.join(os.path.dirname(__file__), 'keys')


@pytest.fixture
def read_key():
    """Return a loader for the PEM fixtures under tests/keys."""
    def _read(name):
        with open(os.path.join(KEY_DIR, name), 'rb') as f:
            return f.read()
    return _read
