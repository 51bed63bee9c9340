"""
Shared pytest fixtures.
"""
import logging
from io import StringIO

import pytest

from consolebar.style import BarStyle


@pytest.fixture
def buf() -> StringIO:
    """A text stream that captures what a bar writes."""
    return StringIO()


@pytest.fixture
def ascii_style() -> BarStyle:
    """The default style, spelled out so tests read on their own."""
    return BarStyle(left_cap="[", right_cap="]", filled_token="=", unfilled_token=" ")


@pytest.fixture(autouse=True)
def reset_consolebar_logger():
    """Prevent CLI logging setup from leaking between tests."""
    yield
    logger = logging.getLogger("consolebar")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
