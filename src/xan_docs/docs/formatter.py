"""Text helpers shared by the terminal and Markdown renderers."""

import textwrap
from collections.abc import Sequence

import click

from xan_docs.docs.config import INDENT, WRAP_WIDTH


def wrap(text: str, width: int = WRAP_WIDTH) -> str:
    """Greedily wrap prose to `width` columns, keeping existing line breaks."""
    return "\n".join(
        textwrap.fill(line, width) if line.strip() else ""
        for line in text.split("\n")
    )


def indent(text: str, prefix: str = INDENT) -> str:
    """Prefix every non-blank line of `text`."""
    return textwrap.indent(text, prefix)


def escape_markdown_argument(argument: str) -> str:
    return argument.replace("*", "\\*").replace("<", "\\<").replace(">", "\\>")


def escape_markdown_linebreaks(text: str) -> str:
    """Collapse paragraph breaks and newlines into inline `<br>` markers."""
    return text.replace("\n\n", "<br>").replace("\n", "<br>")


def is_placeholder(argument: str) -> bool:
    """Arguments written like `<string>` name a type, not a parameter."""
    return argument.startswith("<")


def style_argument(argument: str) -> str:
    if is_placeholder(argument):
        return click.style(argument, dim=True)
    return click.style(argument, fg="red")


def join_arguments(arguments: Sequence[str]) -> str:
    return ", ".join(style_argument(argument) for argument in arguments)


def heading(text: str) -> str:
    return click.style(text, fg="yellow")
