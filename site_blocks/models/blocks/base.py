"""Shared building blocks for typed page sections."""

from __future__ import annotations

import typing
from enum import Enum
from typing import Any, Callable, ClassVar, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo


class BlockType(str, Enum):
    HERO = "hero"
    ABOUT = "about"
    SERVICES = "services"
    CONTACT = "contact"
    GALLERY = "gallery"
    TESTIMONIALS = "testimonials"
    PRODUCTS = "products"
    FOOTER = "footer"


class ControlKind(str, Enum):
    """Input control used by the property panel for a content field."""

    TEXT = "text"
    TEXTAREA = "textarea"
    URL = "url"
    EMAIL = "email"
    TEL = "tel"
    IMAGE = "image"
    COLOR = "color"
    REPEATER = "repeater"


def content_field(
    default: Any = "",
    *,
    control: ControlKind = ControlKind.TEXT,
    label: str | None = None,
    placeholder: str | None = None,
    default_factory: Callable[[], Any] | None = None,
) -> Any:
    """Declare a content field together with its editor metadata."""
    extra: dict[str, Any] = {"control": control.value}
    if label:
        extra["label"] = label
    if placeholder:
        extra["placeholder"] = placeholder
    if default_factory is not None:
        return Field(default_factory=default_factory, json_schema_extra=extra)
    return Field(default=default, json_schema_extra=extra)


class ContentRecord(BaseModel):
    """Lenient record: malformed values fall back to the field default."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_malformed(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            info_field = cls.model_fields[info.field_name]
            item_model = list_item_model(info_field.annotation)
            if item_model is not None and isinstance(value, list):
                # Drop only the entries that are not records.
                items = [item_model.model_validate(item) for item in value if isinstance(item, (Mapping, item_model))]
                if items:
                    return items
            return info_field.get_default(call_default_factory=True)

    @classmethod
    def schema_fields(cls) -> list[tuple[str, str, FieldInfo]]:
        """Return ``(attribute, wire_name, info)`` for every declared field, in order."""
        return [(name, info.alias or name, info) for name, info in cls.model_fields.items()]

    @classmethod
    def wire_names(cls) -> set[str]:
        return {wire for _, wire, _ in cls.schema_fields()}

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return cls().to_payload()

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")

    def value_or_default(self, attribute: str) -> Any:
        """Return a field value, substituting the default for blank strings."""
        value = getattr(self, attribute)
        if isinstance(value, str) and not value.strip():
            return type(self).model_fields[attribute].get_default(call_default_factory=True)
        return value


class SectionContent(ContentRecord):
    """Base class for the content payload of one block type."""

    block_type: ClassVar[BlockType | None] = None


def list_item_model(annotation: Any) -> type[ContentRecord] | None:
    """Return the record type of a ``list[SomeRecord]`` annotation."""
    if typing.get_origin(annotation) is not list:
        return None
    args = typing.get_args(annotation)
    if args and isinstance(args[0], type) and issubclass(args[0], ContentRecord):
        return args[0]
    return None


def field_control(info: FieldInfo) -> ControlKind:
    extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
    return ControlKind(extra.get("control", ControlKind.TEXT.value))


def field_label(attribute: str, info: FieldInfo) -> str:
    extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
    label = extra.get("label")
    if label:
        return str(label)
    return attribute.replace("_", " ").strip().title()


def field_placeholder(info: FieldInfo) -> str:
    extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
    return str(extra.get("placeholder") or "")


class Block(BaseModel):
    """Immutable representation of one page section."""

    id: str
    type: str
    name: str = Field(default="", validate_default=True)
    visible: bool = True
    content: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("type", mode="before")
    @classmethod
    def _plain_type(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _name_defaults_to_type(cls, value: Any, info: ValidationInfo) -> str:
        if isinstance(value, str) and value.strip():
            return value
        return str(info.data.get("type") or "")

    @property
    def block_type(self) -> BlockType | None:
        """The known type for this block, or ``None`` for unrecognised tags."""
        try:
            return BlockType(self.type)
        except ValueError:
            return None

    def resolved_content(self) -> SectionContent:
        """Typed view of ``content`` with missing or malformed fields defaulted."""
        from .registry import content_model_for

        return content_model_for(self.type).model_validate(self.content)


__all__ = [
    "Block",
    "BlockType",
    "ContentRecord",
    "ControlKind",
    "SectionContent",
    "content_field",
    "field_control",
    "field_label",
    "field_placeholder",
    "list_item_model",
]
