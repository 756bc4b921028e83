# schemas/schemas_overlay.py
from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Highlight(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["highlight"] = "highlight"


class Comment(BaseModel):
    """
    Free-form commentary attached to a span. Empty text is allowed.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["comment"] = "comment"
    text: str


class Boldface(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["boldface"] = "boldface"


class Underline(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["underline"] = "underline"


# Closed variant set: the kinds of markup are known up front.
AnnotationType = Annotated[
    Union[Highlight, Comment, Boldface, Underline],
    Field(discriminator="kind"),
]

OVERLAY_TYPES = (Highlight, Comment, Boldface, Underline)

_OVERLAY_ADAPTER: TypeAdapter = TypeAdapter(AnnotationType)


def parse_overlay(data: Dict[str, Any]) -> BaseModel:
    """
    Validate a mapping like {"kind": "comment", "text": "..."} into an overlay.
    Raises pydantic.ValidationError on unknown kinds or extra keys.
    """
    return _OVERLAY_ADAPTER.validate_python(data)


def is_overlay(value: Any) -> bool:
    return isinstance(value, OVERLAY_TYPES)
