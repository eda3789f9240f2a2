"""HTML renderer package."""

from .components import DEFAULT_COMPONENTS, GenericComponent, css_url, safe_color, safe_url
from .renderer import COMING_SOON, HtmlRenderer

__all__ = ["COMING_SOON", "DEFAULT_COMPONENTS", "GenericComponent", "HtmlRenderer", "css_url", "safe_color", "safe_url"]
