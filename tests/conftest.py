import os

import pytest

from mobiledetect import MobileDetect


@pytest.fixture(autouse=True)
def _clean_environ(monkeypatch):
    """Keep headers of the process running the tests out of the
    detectors that read them from the environment.
    """
    for key in list(os.environ):
        if key.startswith("HTTP_"):
            monkeypatch.delenv(key)


@pytest.fixture
def detect():
    return MobileDetect(auto_init_http_headers=False)
