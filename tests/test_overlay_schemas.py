"""Unit tests for overlay payload schemas."""

import pytest
from pydantic import ValidationError

from schemas.schemas_overlay import (
    Boldface,
    Comment,
    Highlight,
    Underline,
    is_overlay,
    parse_overlay,
)


class TestOverlaySchemas:
    """Test cases for overlay variants."""

    def test_variants_compare_structurally(self):
        """Test that equal payloads are equal values."""
        assert Highlight() == Highlight()
        assert Comment(text="The best gaming system.") == Comment(text="The best gaming system.")
        assert Comment(text="a") != Comment(text="b")
        assert Highlight() != Boldface()

    def test_comment_allows_empty_text(self):
        """Test that a comment can carry an empty string."""
        assert Comment(text="").text == ""

    def test_overlays_are_frozen(self):
        """Test that overlay values cannot be mutated."""
        comment = Comment(text="x")
        with pytest.raises(ValidationError):
            comment.text = "y"

    def test_overlays_are_hashable(self):
        """Test that overlays can be used in sets."""
        assert len({Highlight(), Highlight(), Underline()}) == 2

    def test_parse_overlay_dispatches_on_kind(self):
        """Test parsing each kind from a mapping."""
        assert parse_overlay({"kind": "highlight"}) == Highlight()
        assert parse_overlay({"kind": "boldface"}) == Boldface()
        assert parse_overlay({"kind": "underline"}) == Underline()
        assert parse_overlay({"kind": "comment", "text": "hi"}) == Comment(text="hi")

    def test_parse_overlay_rejects_unknown_kind(self):
        """Test that unknown kinds fail validation."""
        with pytest.raises(ValidationError):
            parse_overlay({"kind": "strikethrough"})

    def test_parse_overlay_rejects_extra_fields(self):
        """Test that extra keys fail validation."""
        with pytest.raises(ValidationError):
            parse_overlay({"kind": "highlight", "color": "yellow"})

    def test_parse_overlay_requires_comment_text(self):
        """Test that a comment without text fails validation."""
        with pytest.raises(ValidationError):
            parse_overlay({"kind": "comment"})

    def test_is_overlay(self):
        """Test overlay type detection."""
        assert is_overlay(Highlight())
        assert not is_overlay("highlight")
        assert not is_overlay({"kind": "highlight"})
