"""Shared pytest fixtures for annotext tests."""

import pytest

from annotext.annotated_content import AnnotatedContent
from annotext.contracts import Content

DESTINY = "Destiny 2 is a video game on Microsoft Xbox."
MARY = "Mary had a little lamb."


@pytest.fixture
def destiny_content():
    """Shared content about a video game."""
    return Content(DESTINY)


@pytest.fixture
def mary():
    """Annotated content with no annotations yet."""
    return AnnotatedContent(MARY)
