"""Non-fatal content checks for editor tooling.

Rendering never depends on these checks; they only tell the editor which
stored values will be ignored or replaced by defaults.
"""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from site_blocks.models.blocks import Block, ContentRecord, content_model_for
from site_blocks.models.document import Document

UNKNOWN_TYPE = "unknown_type"
UNKNOWN_FIELD = "unknown_field"
MALFORMED_VALUE = "malformed_value"


@dataclass(frozen=True, slots=True)
class ContentWarning:
    block_id: str
    field: str | None
    code: str
    message: str


def validate_block(block: Block) -> list[ContentWarning]:
    warnings: list[ContentWarning] = []
    if block.block_type is None:
        warnings.append(
            ContentWarning(
                block_id=block.id,
                field=None,
                code=UNKNOWN_TYPE,
                message=f"Block type {block.type!r} is not recognised; it renders as a placeholder.",
            )
        )
        return warnings

    annotations = _field_annotations(content_model_for(block.type))
    for field, value in block.content.items():
        if field not in annotations:
            warnings.append(
                ContentWarning(
                    block_id=block.id,
                    field=field,
                    code=UNKNOWN_FIELD,
                    message=f"Field {field!r} is not part of the {block.type!r} schema.",
                )
            )
            continue
        if not _matches(value, annotations[field]):
            warnings.append(
                ContentWarning(
                    block_id=block.id,
                    field=field,
                    code=MALFORMED_VALUE,
                    message=f"Field {field!r} has an unexpected shape; malformed parts render as defaults.",
                )
            )
    return warnings


def validate_document(doc: Document) -> list[ContentWarning]:
    warnings: list[ContentWarning] = []
    for block in doc.blocks:
        warnings.extend(validate_block(block))
    return warnings


def _field_annotations(model: type[ContentRecord]) -> dict[str, Any]:
    """Annotations keyed by wire name and by attribute name; records accept both."""
    annotations: dict[str, Any] = {}
    for attribute, wire, info in model.schema_fields():
        annotations[wire] = info.annotation
        annotations[attribute] = info.annotation
    return annotations


def _matches(value: Any, annotation: Any) -> bool:
    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        return any(_matches(value, option) for option in typing.get_args(annotation))
    if origin is list:
        (item_type,) = typing.get_args(annotation) or (Any,)
        return isinstance(value, list) and all(_matches(item, item_type) for item in value)
    if annotation is Any:
        return True
    if annotation is type(None):
        return value is None
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return _matches_record(value, annotation)
    if annotation is str:
        return isinstance(value, str)
    if isinstance(annotation, type):
        return isinstance(value, annotation)
    return True


def _matches_record(value: Any, model: type[BaseModel]) -> bool:
    if not isinstance(value, dict):
        return False
    if not issubclass(model, ContentRecord):
        return True
    annotations = _field_annotations(model)
    return all(
        _matches(item_value, annotations[key])
        for key, item_value in value.items()
        if key in annotations
    )


__all__ = [
    "ContentWarning",
    "MALFORMED_VALUE",
    "UNKNOWN_FIELD",
    "UNKNOWN_TYPE",
    "validate_block",
    "validate_document",
]
