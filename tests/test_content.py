"""Unit tests for Content."""

import dataclasses

import pytest

from annotext.contracts import Content


class TestContent:
    """Test cases for Content."""

    def test_text_is_retained_verbatim(self):
        """Test that whitespace and unicode survive construction."""
        text = "  Hwæt! We Gardena\n\tin geardagum  "
        content = Content(text)
        assert content.text == text
        assert str(content) == text
        assert len(content) == len(text)

    def test_empty_text(self):
        """Test that empty text is valid."""
        content = Content("")
        assert content.text == ""
        assert len(content) == 0

    def test_text_is_immutable(self):
        """Test that text cannot be reassigned."""
        content = Content("fixed")
        with pytest.raises(dataclasses.FrozenInstanceError):
            content.text = "changed"

    def test_equality_is_identity(self):
        """Test that two buffers with the same text are distinct."""
        a = Content("same")
        b = Content("same")
        assert a == a
        assert a != b

    def test_rejects_non_str(self):
        """Test that non-string text is rejected."""
        with pytest.raises(TypeError):
            Content(b"bytes")
