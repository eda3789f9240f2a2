"""Property panel: structured form controls for one selected block.

Every edit helper changes exactly one content field through
``update_content`` so two quick edits to different fields never clobber
each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from site_blocks.document import IndexOutOfRangeError, get_block, update_content
from site_blocks.models.blocks import (
    Block,
    ContentRecord,
    ControlKind,
    content_model_for,
    field_control,
    field_label,
    field_placeholder,
    list_item_model,
)
from site_blocks.models.document import Document


@dataclass(frozen=True, slots=True)
class FieldControl:
    field: str
    label: str
    control: ControlKind
    value: Any = None
    placeholder: str = ""
    item_fields: list["FieldControl"] = field(default_factory=list)

    @property
    def items(self) -> list[dict[str, Any]]:
        if self.control is ControlKind.REPEATER and isinstance(self.value, list):
            return self.value
        return []


@dataclass(frozen=True, slots=True)
class PanelView:
    block_id: str
    block_type: str
    title: str
    controls: list[FieldControl] = field(default_factory=list)

    def control(self, name: str) -> FieldControl:
        for control in self.controls:
            if control.field == name:
                return control
        raise KeyError(name)


class PropertyPanel:
    """Form description and field-granular edit helpers for the selected block."""

    def render(self, block: Block) -> PanelView:
        title = f"{block.name} Settings" if block.name else "Section Settings"
        if block.block_type is None:
            return PanelView(block.id, block.type, title, _raw_text_controls(block))

        resolved = block.resolved_content().to_payload()
        model = content_model_for(block.type)
        controls = [
            _control(attribute, wire, info, resolved.get(wire))
            for attribute, wire, info in model.schema_fields()
        ]
        return PanelView(block.id, block.type, title, controls)

    # ----------------------------------------------------------- Edit helpers
    def edit_field(self, document: Document, block_id: str, field_name: str, value: Any) -> Document:
        return update_content(document, block_id, field_name, value)

    def edit_item(
        self,
        document: Document,
        block_id: str,
        field_name: str,
        index: int,
        item_field: str,
        value: Any,
    ) -> Document:
        items = self._items(document, block_id, field_name)
        if not 0 <= index < len(items):
            raise IndexOutOfRangeError(index, len(items))
        items[index] = {**items[index], item_field: value}
        return update_content(document, block_id, field_name, items)

    def add_item(self, document: Document, block_id: str, field_name: str) -> Document:
        block = get_block(document, block_id)
        items = self._items(document, block_id, field_name)
        items.append(_item_model(block, field_name)().to_payload())
        return update_content(document, block_id, field_name, items)

    def remove_item(self, document: Document, block_id: str, field_name: str, index: int) -> Document:
        items = self._items(document, block_id, field_name)
        if not 0 <= index < len(items):
            raise IndexOutOfRangeError(index, len(items))
        del items[index]
        return update_content(document, block_id, field_name, items)

    def _items(self, document: Document, block_id: str, field_name: str) -> list[dict[str, Any]]:
        """Stored items to edit; a value with no usable items starts from the defaults shown."""
        block = get_block(document, block_id)
        _item_model(block, field_name)
        stored = block.content.get(field_name)
        if isinstance(stored, list):
            kept = [dict(item) for item in stored if isinstance(item, dict)]
            if kept or not stored:
                return kept
        resolved = block.resolved_content().to_payload()
        return [dict(item) for item in resolved.get(field_name) or []]


def _control(attribute: str, wire: str, info, value: Any) -> FieldControl:
    kind = field_control(info)
    item_fields: list[FieldControl] = []
    if kind is ControlKind.REPEATER:
        item_model = list_item_model(info.annotation)
        if item_model is not None:
            item_fields = [
                _control(item_attribute, item_wire, item_info, item_info.get_default(call_default_factory=True))
                for item_attribute, item_wire, item_info in item_model.schema_fields()
            ]
    return FieldControl(
        field=wire,
        label=field_label(attribute, info),
        control=kind,
        value=value,
        placeholder=field_placeholder(info),
        item_fields=item_fields,
    )


def _raw_text_controls(block: Block) -> list[FieldControl]:
    return [
        FieldControl(field=key, label=key, control=ControlKind.TEXT, value=value)
        for key, value in block.content.items()
        if isinstance(value, str)
    ]


def _item_model(block: Block, field_name: str) -> type[ContentRecord]:
    model = content_model_for(block.type)
    for _, wire, info in model.schema_fields():
        if wire == field_name:
            item_model = list_item_model(info.annotation)
            if item_model is not None:
                return item_model
            break
    raise ValueError(f"{field_name!r} is not a repeating field of {block.type!r} blocks.")


__all__ = ["FieldControl", "PanelView", "PropertyPanel"]
