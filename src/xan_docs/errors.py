"""Error taxonomy for documentation parsing and rendering."""

from __future__ import annotations

from typing import Any


class XanDocsError(Exception):
    """Base class for every failure surfaced by xan-docs."""

    code = "xan_docs_error"

    def details(self) -> dict[str, Any] | None:
        return None


class DocumentParseError(XanDocsError):
    """Structured input does not match the schema of its document kind."""

    code = "malformed_input"

    def __init__(self, kind: str, errors: list[dict[str, Any]]):
        self.kind = kind
        self.errors = errors
        first = errors[0]["msg"] if errors else "unknown error"
        super().__init__(f"could not parse {kind} documentation: {first}")

    def details(self) -> dict[str, Any]:
        return {"kind": self.kind, "errors": self.errors}


class EmptyExampleSetError(XanDocsError):
    """An operator section has no example to compute a column width from."""

    code = "empty_example_set"

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"operator section '{section}' has no examples")

    def details(self) -> dict[str, Any]:
        return {"section": self.section}


class InvalidFilterTargetError(XanDocsError):
    """A section query was given where rendering cannot filter."""

    code = "invalid_filter_target"

    def __init__(self, topic: str, output_format: str | None = None):
        self.topic = topic
        self.output_format = output_format
        if output_format is None:
            message = f"section query only works with the `functions` topic, not `{topic}`!"
        else:
            message = f"section query only works with text output, not {output_format}!"
        super().__init__(message)

    def details(self) -> dict[str, Any]:
        details: dict[str, Any] = {"topic": self.topic}
        if self.output_format is not None:
            details["format"] = self.output_format
        return details


class UnsupportedFormatError(XanDocsError):
    """The requested output format does not exist for this topic."""

    code = "unsupported_format"

    def __init__(self, topic: str, output_format: str):
        self.topic = topic
        self.output_format = output_format
        super().__init__(f"{topic} does not support {output_format} output!")

    def details(self) -> dict[str, Any]:
        return {"topic": self.topic, "format": self.output_format}


class PatternCompilationError(XanDocsError):
    """A built-in text pattern failed to compile. Never expected at runtime."""

    code = "pattern_compilation_failure"

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"built-in pattern '{name}' does not compile: {reason}")
