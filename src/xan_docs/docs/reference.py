"""Document-level composition of the xan help references.

A reference bundles a parsed document with the free-form prose rendered
around it (preludes, cheatsheets) and lays out the final output: prelude,
then summary, then the operators block, then every section in source order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from xan_docs.docs.colorize import colorize_cheatsheet, colorize_inline, unlink_cross_references
from xan_docs.docs.models import (
    AggregateDocument,
    FunctionDocument,
    FunctionSection,
    OperatorDocument,
    ScrapingDocument,
)
from xan_docs.docs.slug import slug


def keeps_operators(query: Optional[str]) -> bool:
    """Whether a section query still selects the Operators block."""
    # Any fragment of "operators" also counts, so "oper" and "" keep the
    # block even though they do not contain "operator".
    if query is None:
        return True
    folded = query.lower()
    return folded in "operators" or "operator" in folded


@dataclass(frozen=True)
class CheatsheetText:
    """Free-form cheatsheet prose."""

    body: str

    def to_terminal_text(self) -> str:
        return colorize_cheatsheet(self.body)

    def to_markdown(self) -> str:
        return unlink_cross_references(self.body)


@dataclass(frozen=True)
class FunctionReference:
    """Prelude, operators and function sections rendered as one document."""

    prelude: str
    operators: OperatorDocument
    functions: FunctionDocument

    def to_terminal_text(self, query: Optional[str] = None) -> str:
        """Render for the terminal, optionally keeping only sections matching `query`.

        Args:
            query: Case-insensitive text every kept section title must
                contain. The Operators block is dropped unless the query
                designates it.
        """
        sections = self.functions.filter(query)
        with_operators = keeps_operators(query)
        parts = [colorize_inline(self.prelude), "\n"]

        if with_operators:
            parts.append(self.operators.summary_text())
        parts.append("\n".join(f"- {section.title}" for section in sections))
        parts.append("\n\n")

        if with_operators:
            parts.append(self.operators.to_terminal_text())
        parts.extend(section.to_terminal_text() for section in sections)

        return "".join(parts)

    def to_markdown(self) -> str:
        sections: list[FunctionSection] = self.functions.sections
        parts = [self.prelude, "\n", self.operators.summary_markdown()]
        parts.append(
            "\n".join(f"- [{section.title}](#{slug(section.title)})" for section in sections)
        )
        parts.append("\n\n")
        parts.append(self.operators.to_markdown())
        parts.append("\n")
        parts.extend(section.to_markdown() for section in sections)
        return "".join(parts)


@dataclass(frozen=True)
class AggregateReference:
    prelude: str
    aggregates: AggregateDocument

    def to_terminal_text(self) -> str:
        return colorize_inline(self.prelude) + "\n" + self.aggregates.to_terminal_text()

    def to_markdown(self) -> str:
        return self.prelude + "\n" + self.aggregates.to_markdown()


@dataclass(frozen=True)
class ScrapingReference:
    cheatsheet: CheatsheetText
    functions: ScrapingDocument

    def to_terminal_text(self) -> str:
        return self.cheatsheet.to_terminal_text() + "\n\n" + self.functions.to_terminal_text()

    def to_markdown(self) -> str:
        return self.cheatsheet.to_markdown() + "\n\n" + self.functions.to_markdown()
