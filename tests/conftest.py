"""Root test configuration: isolate tests from the caller's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clear_mdoutline_env(monkeypatch):
    """Drop MDOUTLINE_* env vars so settings come from defaults unless a test sets them."""
    for name in list(os.environ):
        if name.startswith("MDOUTLINE_"):
            monkeypatch.delenv(name, raising=False)
