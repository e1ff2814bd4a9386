"""Shared fixtures: a small documentation resources directory."""

import json
from pathlib import Path

import pytest

from xan_docs.docs.loader import DocumentationLoader

OPERATORS = [
    {
        "title": "Unary operators",
        "examples": [
            {"snippet": "!x", "help": "boolean negation"},
            {"snippet": "-x", "help": "numerical negation"},
        ],
    },
    {
        "title": "Arithmetic operators",
        "prelude": "Operands are cast to numbers.",
        "examples": [
            {"snippet": "x + y", "help": "adds x and y"},
            {"snippet": "x // y", "help": "integer division"},
        ],
    },
]

FUNCTIONS = [
    {
        "title": "Strings",
        "functions": [
            {"name": "len", "arguments": ["<string>"], "returns": "int", "help": "Length."},
            {"name": "lower", "arguments": ["string"], "returns": "string", "help": "Lowercase."},
        ],
    },
    {
        "title": "Lists & maps",
        "functions": [
            {
                "name": "get",
                "arguments": ["col"],
                "returns": "T",
                "help": "Get a value.",
                "alternatives": [["target", "path"]],
            },
        ],
    },
    {
        "title": "Dates",
        "functions": [
            {
                "name": "datetime",
                "arguments": ["string"],
                "returns": "datetime",
                "help": "Parse a date.",
                "aliases": ["to_datetime"],
            },
            {"name": "now", "returns": "datetime", "help": "Current time."},
        ],
    },
]

AGGS = [
    {"name": "count", "arguments": ["<expr>?"], "returns": "int", "help": "Count rows."},
    {
        "name": "mean",
        "arguments": ["<expr>"],
        "returns": "number",
        "help": "Mean of values.",
        "aliases": ["avg"],
    },
]

SCRAPING = {
    "selectors": [{"name": "first", "arguments": ["css"], "returns": "selection", "help": "First match."}],
    "extractors": [{"name": "text", "returns": "string", "help": "Inner text."}],
}

CHEATSHEET = (
    "# Cheatsheet\n\n"
    "- [Literals](#literals)\n\n"
    "See [`xan help functions`](./functions.md) for functions.\n"
)

SCRAPING_CHEATSHEET = "# Scraping\n\nSee [`xan help cheatsheet`](./cheatsheet.md).\n"


def write_resources(root: Path) -> Path:
    # Odd spacing on purpose: raw output must return these bytes untouched
    (root / "operators.json").write_text(json.dumps(OPERATORS), encoding="utf-8")
    (root / "functions.json").write_text(json.dumps(FUNCTIONS, indent=3) + "\n\n", encoding="utf-8")
    (root / "aggs.json").write_text(json.dumps(AGGS, indent=1), encoding="utf-8")
    (root / "scraping.json").write_text(json.dumps(SCRAPING), encoding="utf-8")
    (root / "cheatsheet.md").write_text(CHEATSHEET, encoding="utf-8")
    (root / "scraping.md").write_text(SCRAPING_CHEATSHEET, encoding="utf-8")
    (root / "functions_prelude.txt").write_text("# Functions\n", encoding="utf-8")
    (root / "aggs_prelude.txt").write_text("# Aggregations\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _color_enabled(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("XAN_DOCS_COLOR", raising=False)
    monkeypatch.delenv("XAN_DOCS_RESOURCES", raising=False)


@pytest.fixture
def docs_root(tmp_path) -> Path:
    return write_resources(tmp_path)


@pytest.fixture
def loader(docs_root) -> DocumentationLoader:
    return DocumentationLoader(docs_root)
