# annotext/render.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel

from schemas.schemas_overlay import Comment

from .annotated_content import AnnotatedContent
from .annotation import Annotation
from .timeutils import to_utc_iso


def _md_escape(s: str) -> str:
    return s.replace("\n", " ").strip()


def format_overlay(overlay: BaseModel) -> str:
    if isinstance(overlay, Comment):
        return f'Comment("{overlay.text}")'
    return type(overlay).__name__


def format_annotation(annotation: Annotation) -> str:
    return (
        f"Annotation(text: {annotation.text()}, "
        f"overlay: {format_overlay(annotation.overlay)}, "
        f"timestamp: {to_utc_iso(annotation.timestamp)})"
    )


def render_annotations_markdown(ac: AnnotatedContent) -> str:
    """
    Deterministic markdown preview: the content, then one entry per
    annotation in ascending start order.
    """
    md: List[str] = []
    md.append("# Annotated Content")
    md.append("")
    md.append("```text")
    md.append(ac.content.text)
    md.append("```")
    md.append("")
    md.append("## Annotations")
    md.append("")

    annotations = list(ac)
    if not annotations:
        md.append("_No annotations._")
        md.append("")
        return "\n".join(md)

    for a in annotations:
        line = f"- `{a.start}:{a.end}` **{a.overlay.kind}** \"{_md_escape(a.text())}\""
        if isinstance(a.overlay, Comment) and a.overlay.text:
            line += f": {_md_escape(a.overlay.text)}"
        md.append(line)
    md.append("")
    return "\n".join(md)
