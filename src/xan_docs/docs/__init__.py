"""xan documentation rendering.

Components:
    - DocumentationLoader: Load raw documentation blobs with caching
    - parse / DocumentKind: Strict parsing of the JSON references
    - render / HelpTopic / OutputFormat: Rendering facade
"""

from xan_docs.docs.loader import DocumentationLoader
from xan_docs.docs.models import DocumentKind, parse
from xan_docs.docs.render import HelpTopic, OutputFormat, online_url, render

__all__ = [
    "DocumentationLoader",
    "DocumentKind",
    "HelpTopic",
    "OutputFormat",
    "online_url",
    "parse",
    "render",
]
