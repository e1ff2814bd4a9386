"""Runtime configuration for xan-docs."""

from dataclasses import dataclass
import os
from pathlib import Path

# Bundled documentation blobs shipped with the package
_RESOURCES_DIR = Path(__file__).parent / "docs" / "resources"

DEFAULT_ONLINE_URL = "https://github.com/medialab/xan/blob/master/docs/moonblade"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    if not value:
        return default
    return Path(value).expanduser()


@dataclass(frozen=True)
class DocsConfig:
    resources_root: Path
    color: bool
    online_url: str


def get_docs_config() -> DocsConfig:
    """Load docs config from environment variables."""
    return DocsConfig(
        resources_root=_env_path("XAN_DOCS_RESOURCES", _RESOURCES_DIR),
        color=_env_bool("XAN_DOCS_COLOR", "NO_COLOR" not in os.environ),
        online_url=os.getenv("XAN_DOCS_ONLINE_URL", DEFAULT_ONLINE_URL).rstrip("/"),
    )
