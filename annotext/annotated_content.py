# annotext/annotated_content.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Dict, Iterator, Literal, Mapping, Optional

from schemas.schemas_overlay import AnnotationType

from .annotation import Annotation
from .contracts import Content
from .logs import get_logger
from .validate_spans import ForeignAnnotationError, SpanCollisionError

logger = get_logger(__name__)

CollisionPolicy = Literal["overwrite", "error"]


@dataclass(frozen=True)
class CollectionConfig:
    """
    Behaviour of the start-offset index.

    on_collision:
      - "overwrite": a second annotation at an occupied start replaces the first
      - "error": raise SpanCollisionError and keep the existing annotation
    """
    on_collision: CollisionPolicy = "overwrite"

    def __post_init__(self) -> None:
        if self.on_collision not in ("overwrite", "error"):
            raise ValueError(f"on_collision must be 'overwrite' or 'error', got {self.on_collision!r}")


class AnnotatedContent:
    """
    Raw text and a collection of annotations overlaid on top of it.

    Annotations are retrieved by the start offset of the text they cover; at
    most one annotation is stored per start offset.
    """

    def __init__(self, text: str, config: Optional[CollectionConfig] = None) -> None:
        self.content = Content(text)
        self.config = config or CollectionConfig()
        self._annotations: Dict[int, Annotation] = {}
        self._lock = threading.Lock()

    @property
    def annotations(self) -> Mapping[int, Annotation]:
        """Read-only snapshot of the start offset -> annotation index."""
        with self._lock:
            return MappingProxyType(dict(self._annotations))

    def add_annotation(self, annotation: Annotation) -> None:
        """
        Index an annotation by its start offset.

        Blocks while another thread is inserting. Raises ForeignAnnotationError
        if the annotation was built against a different Content, and
        SpanCollisionError on an occupied start when on_collision == "error".
        """
        if not isinstance(annotation, Annotation):
            raise TypeError(f"Expected Annotation, got {type(annotation).__name__}")

        if annotation.parent is not self.content:
            logger.warning("annotation.rejected", reason="foreign_parent", start=annotation.start)
            raise ForeignAnnotationError(
                f"Annotation at {annotation.start} does not reference this content"
            )

        with self._lock:
            previous = self._annotations.get(annotation.start)
            if previous is not None:
                if self.config.on_collision == "error":
                    logger.warning("annotation.rejected", reason="collision", start=annotation.start)
                    raise SpanCollisionError(annotation.start)
                logger.debug(
                    "annotation.overwritten",
                    start=annotation.start,
                    previous_kind=previous.overlay.kind,
                    kind=annotation.overlay.kind,
                )
            self._annotations[annotation.start] = annotation

        logger.debug(
            "annotation.added",
            start=annotation.start,
            length=annotation.length,
            kind=annotation.overlay.kind,
        )

    def annotate(
        self,
        start: int,
        length: int,
        overlay: AnnotationType,
        timestamp: Optional[datetime] = None,
    ) -> Annotation:
        """Create an annotation against this content, index it, and return it."""
        annotation = Annotation(start, length, overlay, self.content, timestamp=timestamp)
        self.add_annotation(annotation)
        return annotation

    def get(self, start: int, default: Optional[Annotation] = None) -> Optional[Annotation]:
        return self._annotations.get(start, default)

    def __len__(self) -> int:
        return len(self._annotations)

    def __contains__(self, start: object) -> bool:
        return start in self._annotations

    def __iter__(self) -> Iterator[Annotation]:
        # Deterministic order: ascending start offset
        with self._lock:
            snapshot = sorted(self._annotations.items())
        return iter([a for _, a in snapshot])

    def __str__(self) -> str:
        return self.content.text
