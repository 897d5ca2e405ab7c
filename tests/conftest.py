"""
Test configuration and fixtures for munsell classifier tests.
"""
import pytest
from loguru import logger

from munsell.utils.logging import disable_logging


# Well-known colors and the category each should land in
KNOWN_COLORS = [
    ("#000000", (0, 0, 0), "Black"),
    ("#FFFFFF", (255, 255, 255), "White"),
    ("#FF0000", (255, 0, 0), "Red"),
    ("#FF8000", (255, 128, 0), "Orange"),
    ("#FFFF00", (255, 255, 0), "Yellow"),
    ("#00FF00", (0, 255, 0), "Green"),
    ("#00FFFF", (0, 255, 255), "Light Blue"),
    ("#0000FF", (0, 0, 255), "Blue"),
    ("#000080", (0, 0, 128), "Blue"),
    ("#8000FF", (128, 0, 255), "Purple"),
    ("#FF00FF", (255, 0, 255), "Purple"),
    ("#800080", (128, 0, 128), "Purple"),
    ("#808080", (128, 128, 128), "Black"),
    ("#C0C0C0", (192, 192, 192), "Black"),
    ("#202020", (32, 32, 32), "Black"),
]


@pytest.fixture
def known_colors():
    """(hex, rgb, display name) triples for well-known colors."""
    return KNOWN_COLORS


@pytest.fixture
def log_messages():
    """Collect loguru messages at DEBUG and above for the duration of a test."""
    logger.enable("munsell")
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("munsell")


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop any munsell sink a test installed."""
    yield
    disable_logging()
