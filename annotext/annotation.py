# annotext/annotation.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from schemas.schemas_overlay import AnnotationType, is_overlay

from .contracts import Content
from .timeutils import utc_now
from .validate_spans import validate_span


@dataclass(frozen=True)
class Annotation:
    """
    A span [start, start + length) over a Content, carrying an overlay.

    The annotation keeps a reference to its parent Content for reading the
    annotated text; it never copies the text. Offsets are str indices
    (code points), so no span can split a character.

    Equality covers start, length, overlay and parent identity. The creation
    timestamp is not compared.
    """
    start: int
    length: int
    overlay: AnnotationType
    parent: Content = field(repr=False)
    timestamp: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.parent, Content):
            raise TypeError(f"Annotation parent must be Content, got {type(self.parent).__name__}")
        if not is_overlay(self.overlay):
            raise TypeError(f"Unsupported overlay type: {type(self.overlay).__name__}")

        # Eager check; the bound is re-checked in text() as well.
        validate_span(len(self.parent), self.start, self.length)

        if self.timestamp is None:
            object.__setattr__(self, "timestamp", utc_now())

    @property
    def end(self) -> int:
        return self.start + self.length

    def text(self) -> str:
        """Gets the span of text that is being annotated."""
        validate_span(len(self.parent), self.start, self.length)
        return self.parent.text[self.start:self.end]
