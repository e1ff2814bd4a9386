"""xan-docs: terminal and Markdown renderer for the xan expression language docs."""

__version__ = "0.1.0"
