"""xan Help Tool - Render the xan expression language documentation."""

from typing import Any

from fastmcp import FastMCP

from xan_docs.contracts import build_docs_data, build_error_from_exception, build_ok
from xan_docs.docs.render import HelpTopic, OutputFormat, online_url, render
from xan_docs.errors import XanDocsError
from xan_docs.utils import HelpTopicName, OutputFormatName, SectionQuery


def register(mcp: FastMCP) -> None:
    """Register xan_help tool with the MCP server."""

    @mcp.tool()
    def xan_help(
        topic: HelpTopicName,
        format: OutputFormatName = "markdown",
        section: SectionQuery = None,
    ) -> dict[str, Any]:
        """Render xan expression language documentation.

        Topics:
        - cheatsheet: How the expression language works
        - functions: Every function and operator, grouped by section
        - aggs: Aggregation functions (xan agg, xan groupby)
        - scraping: The DSL used by xan scrape and its helpers

        When to use:
        - Need the signature or behavior of an expression function
        - Need operator precedence or syntax
        - Writing xan map/filter/agg expressions

        Use `section` with topic 'functions' and format 'text' to only keep
        sections whose title matches, e.g. "string" or "date".
        """
        query = section or None
        return build_help_payload(topic, format, query)


def build_help_payload(topic: str, output_format: str, section: str | None) -> dict[str, Any]:
    try:
        content = render(topic, output_format, section)
    except XanDocsError as exc:
        return build_error_from_exception(exc)

    help_topic = HelpTopic(topic)
    return build_ok(
        build_docs_data(
            source="help",
            action="render",
            entries=[
                {
                    "topic": help_topic.value,
                    "format": OutputFormat(output_format).value,
                    "content": content,
                }
            ],
            summary={
                "count": 1,
                "section": section,
                "online_url": online_url(help_topic),
            },
        )
    )
