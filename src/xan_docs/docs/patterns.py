"""Pattern library used by the terminal colorizer.

Every pattern is compiled once, at import time, into `PATTERNS`, a read-only
table shared by every rendering call. A `RewritePass` pairs one of those
patterns with the function rewriting each of its matches; passes rewrite the
whole buffer and are chained by `apply_passes`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from xan_docs.errors import PatternCompilationError

Replacement = Union[str, Callable[[re.Match], str]]

_SOURCES: dict[str, tuple[str, int]] = {
    # Inline documentation text
    "quote": (r'"[^"\n]+"|\'[^\'\n]+\'|`[^`\n]+`', 0),
    "section_header": (r"^##{0,2} .+", re.MULTILINE),
    "url": (r"https?://\S+", 0),
    "unary_operator": (r"([!-])x", 0),
    "binary_operator": (
        r"x (==|!=|<=?|>=?|&&|\|\||and|or|not in|in|eq|ne|lt|le|gt|ge|//|\*\*|\+\+|[+\-*/%]) y",
        0,
    ),
    "pipeline_operator": (r"(trim\(name\) )\|", 0),
    "slice": (r"x\[([a-z:]+)\]", 0),
    "flag": (r"--[\w\-]+", 0),
    # Cheatsheet body
    "number": (r"\b-?[0-9][0-9._]*\b", re.MULTILINE),
    "list_link": (r"- \[([^\]]+)\]\(#[^)]+\)", 0),
    "code_fence": (r"```(?:python|scss|javascript)(\n[^`]+)```", 0),
    "comment": (r"^    (?:\x1b\[[0-9;]*m)?#.+", re.MULTILINE),
    # Fenced code interior
    "fence_literal": (r"true|false|null|/john/i?", 0),
    "fence_call": (r"([a-z_]+)\(", 0),
    "fence_operator": (r" (=>|eq|in|as|\|\||[<>/+]) ", 0),
    # Escape sequences
    "ansi_color": (r"\x1b\[[0-9;]*m", 0),
}


def _compile(name: str, source: str, flags: int = 0) -> re.Pattern:
    try:
        return re.compile(source, flags)
    except re.error as exc:
        raise PatternCompilationError(name, str(exc)) from exc


def compile_patterns(sources: dict[str, tuple[str, int]]) -> MappingProxyType:
    """Compile a name -> (source, flags) table into a read-only pattern table."""
    return MappingProxyType(
        {name: _compile(name, source, flags) for name, (source, flags) in sources.items()}
    )


PATTERNS = compile_patterns(_SOURCES)


@dataclass(frozen=True)
class RewritePass:
    """One whole-buffer rewrite: every match of `pattern` goes through `replace`."""

    name: str
    pattern: re.Pattern
    replace: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replace, text)


def literal_pass(name: str, needle: str, replacement: str) -> RewritePass:
    """Build a pass replacing one exact piece of text."""
    return RewritePass(name, _compile(name, re.escape(needle)), lambda _match: replacement)


def apply_passes(text: str, passes: Iterable[RewritePass]) -> str:
    """Run `passes` in order, each one seeing the output of the previous one."""
    for rewrite in passes:
        text = rewrite.apply(text)
    return text
