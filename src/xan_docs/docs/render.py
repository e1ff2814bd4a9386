"""Rendering facade: pick a help topic and an output format, get a string.

Example:
    >>> from xan_docs.docs.render import HelpTopic, OutputFormat, render
    >>> markdown = render(HelpTopic.AGGS, OutputFormat.MARKDOWN)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import click

from xan_docs.config import get_docs_config
from xan_docs.docs.loader import DocumentationLoader
from xan_docs.docs.models import DocumentKind, parse
from xan_docs.docs.reference import (
    AggregateReference,
    CheatsheetText,
    FunctionReference,
    ScrapingReference,
)
from xan_docs.errors import DocumentParseError, InvalidFilterTargetError, UnsupportedFormatError

logger = logging.getLogger("xan-docs.render")

Reference = Union[CheatsheetText, FunctionReference, AggregateReference, ScrapingReference]


class HelpTopic(Enum):
    CHEATSHEET = "cheatsheet"
    FUNCTIONS = "functions"
    AGGS = "aggs"
    SCRAPING = "scraping"


class OutputFormat(Enum):
    TEXT = "text"
    MARKDOWN = "markdown"
    RAW = "raw"


@dataclass(frozen=True)
class RenderRequest:
    """A validated (topic, format, section query) triple."""

    topic: HelpTopic
    output_format: OutputFormat = OutputFormat.TEXT
    section: Optional[str] = None

    def __post_init__(self) -> None:
        if self.section is not None:
            if self.topic is not HelpTopic.FUNCTIONS:
                raise InvalidFilterTargetError(self.topic.value)
            if self.output_format is not OutputFormat.TEXT:
                raise InvalidFilterTargetError(self.topic.value, self.output_format.value)

        if self.topic is HelpTopic.CHEATSHEET and self.output_format is OutputFormat.RAW:
            raise UnsupportedFormatError(self.topic.value, self.output_format.value)


def online_url(topic: HelpTopic) -> str:
    """URL of the online version of a topic's documentation."""
    return f"{get_docs_config().online_url}/{topic.value}.md"


def load_raw(topic: HelpTopic, loader: DocumentationLoader) -> bytes:
    """The structured blob behind `topic`, exactly as stored."""
    if topic is HelpTopic.FUNCTIONS:
        return loader.load_functions_json()
    if topic is HelpTopic.AGGS:
        return loader.load_aggs_json()
    if topic is HelpTopic.SCRAPING:
        return loader.load_scraping_json()
    raise UnsupportedFormatError(topic.value, OutputFormat.RAW.value)


_RAW_KINDS = {
    HelpTopic.FUNCTIONS: DocumentKind.FUNCTIONS,
    HelpTopic.AGGS: DocumentKind.AGGREGATES,
    HelpTopic.SCRAPING: DocumentKind.SCRAPING,
}


def decode_raw(topic: HelpTopic, blob: bytes) -> str:
    """Decode a raw blob as UTF-8 text.

    Raises:
        DocumentParseError: If the blob is not valid UTF-8.
    """
    try:
        return blob.decode("utf-8")
    except UnicodeDecodeError as exc:
        error = {
            "loc": [exc.start],
            "msg": f"invalid UTF-8: {exc.reason}",
            "type": "unicode_decode",
        }
        raise DocumentParseError(_RAW_KINDS[topic].value, [error]) from exc


def load_reference(topic: HelpTopic, loader: DocumentationLoader) -> Reference:
    """Parse every blob `topic` needs into its reference."""
    if topic is HelpTopic.CHEATSHEET:
        return CheatsheetText(loader.load_cheatsheet())
    if topic is HelpTopic.FUNCTIONS:
        return FunctionReference(
            prelude=loader.load_functions_prelude(),
            operators=parse(DocumentKind.OPERATORS, loader.load_operators_json()),
            functions=parse(DocumentKind.FUNCTIONS, loader.load_functions_json()),
        )
    if topic is HelpTopic.AGGS:
        return AggregateReference(
            prelude=loader.load_aggs_prelude(),
            aggregates=parse(DocumentKind.AGGREGATES, loader.load_aggs_json()),
        )
    return ScrapingReference(
        cheatsheet=CheatsheetText(loader.load_scraping_cheatsheet()),
        functions=parse(DocumentKind.SCRAPING, loader.load_scraping_json()),
    )


def render(
    topic: Union[HelpTopic, str],
    output_format: Union[OutputFormat, str] = OutputFormat.TEXT,
    section: Optional[str] = None,
    *,
    loader: Optional[DocumentationLoader] = None,
) -> str:
    """Render one help topic in the requested output format.

    Args:
        topic: Which documentation to render
        output_format: Terminal text, Markdown, or the raw JSON blob
        section: Case-insensitive section title query (functions, text only)
        loader: Blob source; defaults to the configured resources directory

    Returns:
        The complete rendered document

    Raises:
        InvalidFilterTargetError: If `section` is given where it cannot apply
        UnsupportedFormatError: If raw output is requested for the cheatsheet
        DocumentParseError: If a blob does not match its schema or a raw
            blob is not valid UTF-8
        EmptyExampleSetError: If an operator section has no examples
    """
    request = RenderRequest(HelpTopic(topic), OutputFormat(output_format), section)
    loader = loader or DocumentationLoader()
    logger.debug(
        "Rendering %s as %s (section=%r)",
        request.topic.value,
        request.output_format.value,
        request.section,
    )

    if request.output_format is OutputFormat.RAW:
        return decode_raw(request.topic, load_raw(request.topic, loader))

    reference = load_reference(request.topic, loader)

    if request.output_format is OutputFormat.MARKDOWN:
        return reference.to_markdown()

    if isinstance(reference, FunctionReference):
        text = reference.to_terminal_text(request.section)
    else:
        text = reference.to_terminal_text()

    if not get_docs_config().color:
        text = click.unstyle(text)
    return text
