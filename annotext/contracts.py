# annotext/contracts.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Content:
    """
    Immutable text buffer that annotations are overlaid on.

    Shared by reference between an AnnotatedContent and every Annotation
    pointing into it. Equality is identity: two buffers with the same text are
    still different parents.
    """
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Content text must be str, got {type(self.text).__name__}")

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text
