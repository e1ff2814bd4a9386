"""Tests for the rendering facade."""

import json

import pytest

from xan_docs.docs.loader import DocumentationLoader
from xan_docs.docs.render import HelpTopic, OutputFormat, RenderRequest, online_url, render
from xan_docs.errors import (
    DocumentParseError,
    EmptyExampleSetError,
    InvalidFilterTargetError,
    UnsupportedFormatError,
)


class TestRequestValidation:
    @pytest.mark.parametrize("topic", [HelpTopic.CHEATSHEET, HelpTopic.AGGS, HelpTopic.SCRAPING])
    def test_section_only_for_functions(self, topic):
        with pytest.raises(InvalidFilterTargetError) as excinfo:
            RenderRequest(topic, OutputFormat.TEXT, "string")
        assert "`functions`" in str(excinfo.value)
        assert excinfo.value.details() == {"topic": topic.value}

    @pytest.mark.parametrize("output_format", [OutputFormat.MARKDOWN, OutputFormat.RAW])
    def test_section_only_for_text(self, output_format):
        with pytest.raises(InvalidFilterTargetError) as excinfo:
            RenderRequest(HelpTopic.FUNCTIONS, output_format, "string")
        assert excinfo.value.details()["format"] == output_format.value

    def test_cheatsheet_has_no_raw_form(self):
        with pytest.raises(UnsupportedFormatError):
            RenderRequest(HelpTopic.CHEATSHEET, OutputFormat.RAW)

    def test_rejected_before_loading(self, tmp_path):
        # Empty resources directory: any load would raise FileNotFoundError
        loader = DocumentationLoader(tmp_path)
        with pytest.raises(InvalidFilterTargetError):
            render("aggs", "text", "count", loader=loader)

    def test_unknown_topic(self, loader):
        with pytest.raises(ValueError):
            render("operators", "text", loader=loader)


class TestRender:
    @pytest.mark.parametrize(
        ("topic", "filename"),
        [("functions", "functions.json"), ("aggs", "aggs.json"), ("scraping", "scraping.json")],
    )
    def test_raw_passthrough_is_byte_identical(self, loader, docs_root, topic, filename):
        rendered = render(topic, "raw", loader=loader)
        assert rendered.encode("utf-8") == (docs_root / filename).read_bytes()

    def test_raw_does_not_parse(self, tmp_path):
        (tmp_path / "aggs.json").write_text("not json at all", encoding="utf-8")
        assert render("aggs", "raw", loader=DocumentationLoader(tmp_path)) == "not json at all"

    def test_text_and_markdown(self, loader):
        text = render(HelpTopic.FUNCTIONS, OutputFormat.TEXT, loader=loader)
        markdown = render(HelpTopic.FUNCTIONS, OutputFormat.MARKDOWN, loader=loader)

        assert "\x1b[" in text
        assert "\x1b[" not in markdown
        assert "- [Strings](#strings)" in markdown

    def test_section_filter(self, loader):
        text = render("functions", "text", "dates", loader=loader)
        assert "Dates" in text
        assert "Strings" not in text
        assert "Operators" not in text

    def test_cheatsheet_markdown(self, loader):
        markdown = render("cheatsheet", "markdown", loader=loader)
        assert "See `xan help functions` for functions." in markdown

    def test_color_can_be_disabled(self, loader, monkeypatch):
        monkeypatch.setenv("XAN_DOCS_COLOR", "0")
        for topic in HelpTopic:
            assert "\x1b[" not in render(topic, "text", loader=loader)

    def test_no_color_env(self, loader, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert "\x1b[" not in render("aggs", "text", loader=loader)

    def test_malformed_blob(self, docs_root):
        (docs_root / "aggs.json").write_text('[{"name": "count"}]', encoding="utf-8")
        with pytest.raises(DocumentParseError) as excinfo:
            render("aggs", "markdown", loader=DocumentationLoader(docs_root))
        assert excinfo.value.kind == "aggregates"

    def test_raw_blob_that_is_not_utf8(self, docs_root):
        (docs_root / "aggs.json").write_bytes(b'[{"name": "\xff\xfe"}]')
        with pytest.raises(DocumentParseError) as excinfo:
            render("aggs", "raw", loader=DocumentationLoader(docs_root))
        assert excinfo.value.code == "malformed_input"
        assert excinfo.value.kind == "aggregates"
        assert excinfo.value.errors[0]["type"] == "unicode_decode"
        assert excinfo.value.errors[0]["loc"] == [11]

    def test_empty_operator_section(self, docs_root):
        operators = [{"title": "Nothing here", "examples": []}]
        (docs_root / "operators.json").write_text(json.dumps(operators), encoding="utf-8")
        loader = DocumentationLoader(docs_root)

        with pytest.raises(EmptyExampleSetError):
            render("functions", "text", loader=loader)

        # Operators block is dropped by this query, so nothing needs a width
        assert "Strings" in render("functions", "text", "strings", loader=loader)

    def test_missing_blob(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            render("cheatsheet", "text", loader=DocumentationLoader(tmp_path))


class TestBundledResources:
    @pytest.mark.parametrize("topic", list(HelpTopic))
    @pytest.mark.parametrize("output_format", [OutputFormat.TEXT, OutputFormat.MARKDOWN])
    def test_every_topic_renders(self, topic, output_format):
        assert render(topic, output_format).strip()

    @pytest.mark.parametrize("topic", [HelpTopic.FUNCTIONS, HelpTopic.AGGS, HelpTopic.SCRAPING])
    def test_raw_is_json(self, topic):
        assert json.loads(render(topic, OutputFormat.RAW))

    def test_resources_root_override(self, docs_root, monkeypatch):
        monkeypatch.setenv("XAN_DOCS_RESOURCES", str(docs_root))
        assert render("aggs", "markdown").startswith("# Aggregations\n")


def test_online_url(monkeypatch):
    assert online_url(HelpTopic.AGGS) == "https://github.com/medialab/xan/blob/master/docs/moonblade/aggs.md"

    monkeypatch.setenv("XAN_DOCS_ONLINE_URL", "https://example.org/docs/")
    assert online_url(HelpTopic.SCRAPING) == "https://example.org/docs/scraping.md"
