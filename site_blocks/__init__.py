"""Top-level package for the block-based site builder."""

__version__ = "0.1.0"

from .startup import ensure_project, open_project_store  # noqa: E402

__all__ = ["__version__", "ensure_project", "open_project_store"]
