"""Renderer implementations and helpers."""

from .base import RenderMode, RenderOptions, Renderer
from .canvas import CanvasItem, CanvasRenderer, CanvasView
from .html import COMING_SOON, HtmlRenderer
from .panel import FieldControl, PanelView, PropertyPanel

__all__ = [
    "COMING_SOON",
    "CanvasItem",
    "CanvasRenderer",
    "CanvasView",
    "FieldControl",
    "HtmlRenderer",
    "PanelView",
    "PropertyPanel",
    "RenderMode",
    "RenderOptions",
    "Renderer",
]
