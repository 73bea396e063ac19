import logging

import pytest
from PIL import Image


@pytest.fixture(autouse=True)
def _reset_logging():
    """The CLI installs a stderr handler bound to the captured stream; drop it after each test."""
    yield
    logger = logging.getLogger("asciify")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def png_path(tmp_path):
    """Write a solid-colour PNG and return its path."""

    def _make(size=(8, 8), colour=(0, 0, 0), name="image.png"):
        path = tmp_path / name
        Image.new("RGB", size, colour).save(path, format="PNG")
        return path

    return _make
