"""Validation models and utilities for xan-docs tools."""

from typing import Annotated, Literal, Optional

from pydantic import Field


def normalize_input(value: Optional[str]) -> str:
    """Normalize user input: collapse whitespace."""
    if value is None:
        return ""
    return " ".join(value.split())


HelpTopicName = Annotated[
    Literal["cheatsheet", "functions", "aggs", "scraping"],
    Field(
        ...,
        description=(
            "Documentation to render: 'cheatsheet' (how the language works), "
            "'functions' (function and operator reference), 'aggs' "
            "(aggregation functions) or 'scraping' (the `xan scrape` DSL)."
        ),
    ),
]

OutputFormatName = Annotated[
    Literal["text", "markdown", "raw"],
    Field(
        default="markdown",
        description=(
            "'text' for ANSI-colored terminal output, 'markdown' for portable "
            "Markdown, 'raw' for the original JSON data (not for cheatsheet)."
        ),
    ),
]

SectionQuery = Annotated[
    Optional[str],
    Field(
        default=None,
        description=(
            "Only keep function sections whose title contains this "
            "case-insensitive text, matched as given (whitespace included). "
            "'' means no filter. Only valid with topic 'functions' and "
            "format 'text'."
        ),
    ),
]

FunctionName = Annotated[
    Optional[str],
    Field(
        default=None,
        description=(
            "Function, aggregation or scraping helper name (or alias) to look "
            "up. None or '' lists the function sections."
        ),
    ),
]
