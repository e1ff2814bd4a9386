"""Terminal colorization of documentation prose.

Two pipelines are built from the pattern library:

- `INLINE_PASSES` for function, operator and prelude text
- `CHEATSHEET_PASSES` for cheatsheet bodies, which also unwrap
  cross-reference links, highlight numbers, recolor fenced code blocks and
  dim indented comments

Both are plain tuples of `RewritePass`. Their order is significant: quoted
spans are colored before operators so that operator passes never reach into
escape sequences already emitted, and comments are dimmed last after their
earlier coloring has been stripped.
"""

from __future__ import annotations

import re

import click

from xan_docs.docs.formatter import indent
from xan_docs.docs.patterns import PATTERNS, RewritePass, apply_passes, literal_pass

# Links to sibling references, rendered as plain code spans
CROSS_REFERENCE_LINKS = (
    ("[`xan help functions`](./functions.md)", "`xan help functions`"),
    ("[`xan help cheatsheet`](./cheatsheet.md)", "`xan help cheatsheet`"),
    ("[`xan help aggs`](./aggs.md)", "`xan help aggs`"),
)


def _styled(**style):
    def replace(match: re.Match) -> str:
        return click.style(match.group(0), **style)

    return replace


def _unary_operator(match: re.Match) -> str:
    return click.style(match.group(1), fg="cyan") + click.style("x", fg="red")


def _binary_operator(match: re.Match) -> str:
    return (
        click.style("x", fg="red")
        + " "
        + click.style(match.group(1), fg="cyan")
        + " "
        + click.style("y", fg="red")
    )


def _pipeline_operator(match: re.Match) -> str:
    return match.group(1) + click.style("|", fg="cyan")


def _slice(match: re.Match) -> str:
    parts = ":".join(click.style(part, fg="cyan") for part in match.group(1).split(":"))
    return click.style("x", fg="red") + "[" + parts + "]"


def _fence_call(match: re.Match) -> str:
    return click.style(match.group(1), fg="blue") + "("


def _fence_operator(match: re.Match) -> str:
    return " " + click.style(match.group(1), fg="cyan") + " "


FENCE_PASSES = (
    RewritePass("fence_literal", PATTERNS["fence_literal"], _styled(fg="yellow")),
    RewritePass("fence_call", PATTERNS["fence_call"], _fence_call),
    RewritePass("fence_operator", PATTERNS["fence_operator"], _fence_operator),
)


def _code_fence(match: re.Match) -> str:
    return indent(apply_passes(match.group(1), FENCE_PASSES))


def strip_ansi(text: str) -> str:
    """Remove every ANSI color escape sequence from `text`."""
    return PATTERNS["ansi_color"].sub("", text)


def _comment(match: re.Match) -> str:
    return click.style(strip_ansi(match.group(0)), dim=True)


INLINE_PASSES = (
    RewritePass("quote", PATTERNS["quote"], _styled(fg="green")),
    RewritePass("section_header", PATTERNS["section_header"], _styled(fg="yellow")),
    RewritePass("url", PATTERNS["url"], _styled(fg="blue")),
    RewritePass("unary_operator", PATTERNS["unary_operator"], _unary_operator),
    RewritePass("binary_operator", PATTERNS["binary_operator"], _binary_operator),
    RewritePass("pipeline_operator", PATTERNS["pipeline_operator"], _pipeline_operator),
    RewritePass("slice", PATTERNS["slice"], _slice),
    RewritePass("flag", PATTERNS["flag"], _styled(fg="cyan")),
)

CROSS_REFERENCE_PASSES = tuple(
    literal_pass(f"link_{code.strip('`').split()[-1]}", link, code)
    for link, code in CROSS_REFERENCE_LINKS
)

CHEATSHEET_PASSES = (
    *CROSS_REFERENCE_PASSES,
    RewritePass("number", PATTERNS["number"], _styled(fg="red")),
    *INLINE_PASSES,
    RewritePass("list_link", PATTERNS["list_link"], r"- \1"),
    RewritePass("code_fence", PATTERNS["code_fence"], _code_fence),
    RewritePass("comment", PATTERNS["comment"], _comment),
)


def colorize_inline(text: str) -> str:
    return apply_passes(text, INLINE_PASSES)


def colorize_cheatsheet(text: str) -> str:
    return apply_passes(text, CHEATSHEET_PASSES)


def unlink_cross_references(text: str) -> str:
    """Replace links to sibling references with their plain code span."""
    return apply_passes(text, CROSS_REFERENCE_PASSES)
