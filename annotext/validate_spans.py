# annotext/validate_spans.py
from __future__ import annotations


class AnnotationError(ValueError):
    """Base class for annotation overlay errors."""


class InvalidSpanError(AnnotationError):
    pass


class SpanOutOfBoundsError(AnnotationError, IndexError):
    def __init__(self, start: int, length: int, text_length: int) -> None:
        self.start = start
        self.length = length
        self.text_length = text_length
        super().__init__(
            f"Span out of bounds: {start}+{length} exceeds text length {text_length}"
        )


class ForeignAnnotationError(AnnotationError):
    """Annotation points at a different Content than the collection it is added to."""


class SpanCollisionError(AnnotationError):
    def __init__(self, start: int) -> None:
        self.start = start
        super().__init__(f"An annotation already starts at offset {start}")


def _is_offset(value: object) -> bool:
    # bool is an int subclass but never a meaningful offset
    return isinstance(value, int) and not isinstance(value, bool)


def validate_span(text_length: int, start: int, length: int) -> None:
    """
    Fail-closed check of a half-open span [start, start + length).

    The upper bound is inclusive of the text end: start + length == text_length
    is valid, one past it is not.
    """
    if not _is_offset(start) or not _is_offset(length):
        raise InvalidSpanError(f"Span start/length must be int: start={start!r} length={length!r}")

    if start < 0 or length < 0:
        raise InvalidSpanError(f"Span start/length must be non-negative: start={start} length={length}")

    if start + length > text_length:
        raise SpanOutOfBoundsError(start, length, text_length)
