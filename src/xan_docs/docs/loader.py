"""Data loading layer for the xan documentation blobs.

This module reads the raw documentation resources (JSON references,
cheatsheets and preludes) with caching, so repeated renders never touch the
disk twice for the same file. Blobs are returned untouched: parsing belongs
to `xan_docs.docs.models`.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from xan_docs.config import get_docs_config
from xan_docs.docs import config as files

logger = logging.getLogger("xan-docs.loader")


@lru_cache(maxsize=32)
def _read_blob(path: Path) -> bytes:
    logger.debug("Loading documentation blob %s", path)
    return path.read_bytes()


class DocumentationLoader:
    """Loads and caches the documentation blobs of one resources directory.

    Example:
        >>> loader = DocumentationLoader()
        >>> loader.load_functions_json()[:1]
        b'['
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = root if root is not None else get_docs_config().resources_root

    def load_bytes(self, filename: str) -> bytes:
        """Read one blob from the resources directory.

        Raises:
            FileNotFoundError: If the blob does not exist
        """
        path = self.root / filename
        if not path.exists():
            raise FileNotFoundError(f"Documentation file not found: {path}")
        return _read_blob(path)

    def load_text(self, filename: str) -> str:
        return self.load_bytes(filename).decode("utf-8")

    def load_operators_json(self) -> bytes:
        return self.load_bytes(files.OPERATORS_FILE)

    def load_functions_json(self) -> bytes:
        return self.load_bytes(files.FUNCTIONS_FILE)

    def load_aggs_json(self) -> bytes:
        return self.load_bytes(files.AGGS_FILE)

    def load_scraping_json(self) -> bytes:
        return self.load_bytes(files.SCRAPING_FILE)

    def load_cheatsheet(self) -> str:
        return self.load_text(files.CHEATSHEET_FILE)

    def load_scraping_cheatsheet(self) -> str:
        return self.load_text(files.SCRAPING_CHEATSHEET_FILE)

    def load_functions_prelude(self) -> str:
        return self.load_text(files.FUNCTIONS_PRELUDE_FILE)

    def load_aggs_prelude(self) -> str:
        return self.load_text(files.AGGS_PRELUDE_FILE)
