"""Register NiceGUI pages by importing submodules."""

from . import home, editor, public  # noqa: F401

__all__ = ["home", "editor", "public"]
