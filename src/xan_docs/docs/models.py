"""Documentation model for the xan expression language references.

The JSON references are parsed into immutable pydantic models. Parsing is
strict: unknown fields, missing required fields and type mismatches all
fail, and nothing is coerced. Each entity knows how to render itself either
as ANSI-colored terminal text or as Markdown.

`FunctionEntry` is the shared unit of the function, aggregation and scraping
references, so every owner renders its entries through the same methods.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

import click
from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from xan_docs.docs.colorize import colorize_inline
from xan_docs.docs.formatter import (
    escape_markdown_argument,
    escape_markdown_linebreaks,
    heading,
    indent,
    join_arguments,
    wrap,
)
from xan_docs.docs.slug import slug
from xan_docs.errors import DocumentParseError, EmptyExampleSetError

_STRICT = ConfigDict(extra="forbid", strict=True, frozen=True)


class DocumentKind(Enum):
    """Structured reference schemas."""

    OPERATORS = "operators"
    FUNCTIONS = "functions"
    AGGREGATES = "aggregates"
    SCRAPING = "scraping"


# =============================================================================
# Operators
# =============================================================================


class OperatorExample(BaseModel):
    model_config = _STRICT

    snippet: str
    help: Optional[str] = None

    def to_row(self, width: int) -> str:
        """Render as `snippet - help` with the snippet padded to `width`."""
        if self.help is None:
            return self.snippet
        return f"{self.snippet:<{width}} - {self.help}"


class OperatorSection(BaseModel):
    model_config = _STRICT

    title: str
    prelude: Optional[str] = None
    examples: list[OperatorExample]

    def column_width(self) -> int:
        if not self.examples:
            raise EmptyExampleSetError(self.title)
        return max(len(example.snippet) for example in self.examples)

    def to_terminal_text(self) -> str:
        width = self.column_width()
        parts = [f"### {self.title}\n\n"]

        if self.prelude is not None:
            parts.append(wrap(self.prelude))
            parts.append("\n\n")

        for example in self.examples:
            parts.append(indent(example.to_row(width)))
            parts.append("\n")

        parts.append("\n\n")
        return "".join(parts)

    def to_markdown(self) -> str:
        width = self.column_width()
        parts = [f"### {self.title}\n\n"]

        if self.prelude is not None:
            parts.append(self.prelude)
            parts.append("\n\n")

        parts.append("```txt\n")
        for example in self.examples:
            parts.append(example.to_row(width))
            parts.append("\n")
        parts.append("```\n\n")

        return "".join(parts)


class OperatorDocument(RootModel[list[OperatorSection]]):
    model_config = ConfigDict(strict=True, frozen=True)

    @property
    def sections(self) -> list[OperatorSection]:
        return self.root

    def summary_text(self) -> str:
        lines = ["- Operators"]
        lines.extend(f"    - {section.title}" for section in self.sections)
        return "\n".join(lines) + "\n"

    def summary_markdown(self) -> str:
        lines = ["- [Operators](#operators)"]
        lines.extend(
            f"    - [{section.title}](#{slug(section.title)})" for section in self.sections
        )
        return "\n".join(lines) + "\n"

    def to_terminal_text(self) -> str:
        body = "".join(section.to_terminal_text() for section in self.sections)
        return colorize_inline("## Operators\n\n" + body)

    def to_markdown(self) -> str:
        body = "".join(section.to_markdown() for section in self.sections)
        return "## Operators\n\n" + body


# =============================================================================
# Functions
# =============================================================================


class FunctionEntry(BaseModel):
    """A documented callable: function, aggregation or scraping helper."""

    model_config = _STRICT

    name: str
    arguments: Optional[list[str]] = None
    returns: str
    help: str
    aliases: Optional[list[str]] = None
    alternatives: Optional[list[list[str]]] = None

    @property
    def names(self) -> list[str]:
        return [self.name, *(self.aliases or [])]

    def call_forms(self) -> Iterator[tuple[str, Optional[list[str]]]]:
        """Yield (name, arguments) for the main call, each alias, then each alternative."""
        yield self.name, self.arguments
        for alias in self.aliases or []:
            yield alias, self.arguments
        for alternative in self.alternatives or []:
            yield self.name, alternative

    def _signature_text(self, name: str, arguments: Optional[list[str]]) -> str:
        returns = click.style(self.returns, fg="magenta")
        if arguments is None:
            return f"- {click.style(name, fg='cyan')} -> {returns}\n"
        return f"- {click.style(name, fg='cyan')}({join_arguments(arguments)}) -> {returns}\n"

    def to_terminal_text(self) -> str:
        parts = [self._signature_text(name, arguments) for name, arguments in self.call_forms()]
        parts.append(colorize_inline(indent(wrap(self.help))))
        parts.append("\n\n")
        return "".join(parts)

    def _signature_markdown(self, arguments: Optional[list[str]]) -> str:
        if arguments is None:
            call = ""
        else:
            call = "(" + ", ".join(f"*{escape_markdown_argument(arg)}*" for arg in arguments) + ")"

        aliases = ""
        if self.aliases is not None:
            aliases = " (aliases: " + ", ".join(f"**{alias}**" for alias in self.aliases) + ")"

        return (
            f"- **{self.name}**{call} -> `{self.returns}`{aliases}: "
            f"{escape_markdown_linebreaks(self.help)}"
        )

    def to_markdown(self) -> str:
        lines = [self._signature_markdown(self.arguments)]
        lines.extend(self._signature_markdown(alternative) for alternative in self.alternatives or [])
        return "\n".join(lines) + "\n"


def entries_to_terminal_text(entries: list[FunctionEntry]) -> str:
    return "".join(indent(entry.to_terminal_text()) for entry in entries)


def entries_to_markdown(entries: list[FunctionEntry]) -> str:
    return "".join(entry.to_markdown() for entry in entries)


class FunctionSection(BaseModel):
    model_config = _STRICT

    title: str
    functions: list[FunctionEntry]

    def matches(self, query: str) -> bool:
        return query.lower() in self.title.lower()

    def to_terminal_text(self) -> str:
        return heading(f"## {self.title}\n\n") + entries_to_terminal_text(self.functions) + "\n"

    def to_markdown(self) -> str:
        return f"## {self.title}\n\n" + entries_to_markdown(self.functions) + "\n"


class FunctionDocument(RootModel[list[FunctionSection]]):
    model_config = ConfigDict(strict=True, frozen=True)

    @property
    def sections(self) -> list[FunctionSection]:
        return self.root

    def filter(self, query: Optional[str] = None) -> list[FunctionSection]:
        """Sections whose title contains `query`, case-insensitively, in source order."""
        if query is None:
            return list(self.sections)
        return [section for section in self.sections if section.matches(query)]


# =============================================================================
# Aggregations & scraping
# =============================================================================


class AggregateDocument(RootModel[list[FunctionEntry]]):
    model_config = ConfigDict(strict=True, frozen=True)

    @property
    def entries(self) -> list[FunctionEntry]:
        return self.root

    def to_terminal_text(self) -> str:
        return entries_to_terminal_text(self.entries)

    def to_markdown(self) -> str:
        return entries_to_markdown(self.entries)


class ScrapingDocument(BaseModel):
    model_config = _STRICT

    selectors: list[FunctionEntry]
    extractors: list[FunctionEntry]

    def to_terminal_text(self) -> str:
        return (
            heading("## Selector functions")
            + "\n\n"
            + entries_to_terminal_text(self.selectors)
            + "\n"
            + heading("## Extractor functions")
            + "\n\n"
            + entries_to_terminal_text(self.extractors)
        )

    def to_markdown(self) -> str:
        return (
            "## Selector functions\n\n"
            + entries_to_markdown(self.selectors)
            + "\n## Extractor functions\n\n"
            + entries_to_markdown(self.extractors)
        )


_DOCUMENT_MODELS = {
    DocumentKind.OPERATORS: OperatorDocument,
    DocumentKind.FUNCTIONS: FunctionDocument,
    DocumentKind.AGGREGATES: AggregateDocument,
    DocumentKind.SCRAPING: ScrapingDocument,
}


def parse(kind: DocumentKind, raw: bytes | str):
    """Parse a JSON reference blob into the document model of `kind`.

    Raises:
        DocumentParseError: If the blob is not valid JSON or does not match
            the schema of `kind`.
    """
    model = _DOCUMENT_MODELS[kind]
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors(include_url=False)
        ]
        raise DocumentParseError(kind.value, errors) from exc
