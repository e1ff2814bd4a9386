"""xan Function Browse Tool - Look up function, aggregation and scraping entries."""

from typing import Any, Iterator

from fastmcp import FastMCP

from xan_docs.contracts import build_docs_data, build_error, build_error_from_exception, build_ok
from xan_docs.docs.loader import DocumentationLoader
from xan_docs.docs.models import DocumentKind, FunctionEntry, parse
from xan_docs.errors import XanDocsError
from xan_docs.utils import FunctionName, normalize_input


def register(mcp: FastMCP) -> None:
    """Register xan_browse_functions tool with the MCP server."""

    @mcp.tool()
    def xan_browse_functions(name: FunctionName = None) -> dict[str, Any]:
        """Browse xan functions, aggregations and scraping helpers by name.

        Navigation levels:
        - No name: Every section with the names it documents
        - Name (e.g., "len", "count", "attr"): Matching entries, aliases included

        Related tools:
        - xan_help: Full rendered references
        """
        name_str = normalize_input(name)
        loader = DocumentationLoader()
        try:
            if not name_str:
                return build_ok(browse_sections(loader))
            return lookup_entry(loader, name_str)
        except XanDocsError as exc:
            return build_error_from_exception(exc)


def iter_sections(loader: DocumentationLoader) -> Iterator[tuple[str, str, list[FunctionEntry]]]:
    """Yield (source, section title, entries) across every structured reference."""
    functions = parse(DocumentKind.FUNCTIONS, loader.load_functions_json())
    for section in functions.sections:
        yield "functions", section.title, section.functions

    aggregates = parse(DocumentKind.AGGREGATES, loader.load_aggs_json())
    yield "aggs", "Aggregation functions", aggregates.entries

    scraping = parse(DocumentKind.SCRAPING, loader.load_scraping_json())
    yield "scraping", "Selector functions", scraping.selectors
    yield "scraping", "Extractor functions", scraping.extractors


def browse_sections(loader: DocumentationLoader) -> dict[str, Any]:
    entries = [
        {
            "source": source,
            "section": title,
            "count": len(section_entries),
            "names": [entry.name for entry in section_entries],
        }
        for source, title, section_entries in iter_sections(loader)
    ]
    return build_docs_data(
        source="functions",
        action="browse",
        entries=entries,
        summary={"count": len(entries)},
    )


def lookup_entry(loader: DocumentationLoader, name: str) -> dict[str, Any]:
    matches = []
    known_names: list[str] = []

    for source, title, section_entries in iter_sections(loader):
        for entry in section_entries:
            known_names.extend(entry.names)
            if name in entry.names:
                matches.append(
                    {
                        "source": source,
                        "section": title,
                        "entry": entry.model_dump(exclude_none=True),
                        "markdown": entry.to_markdown(),
                    }
                )

    if not matches:
        return build_error(
            "function_not_found",
            f"No function, aggregation or scraping helper named '{name}'.",
            {"input": {"name": name}, "available_names": sorted(set(known_names))},
        )

    return build_ok(
        build_docs_data(
            source="functions",
            action="browse",
            entries=matches,
            summary={"count": len(matches), "name": name},
        )
    )
