"""Interactive emoji commit message authoring for git."""

__version__ = "0.4.0"
