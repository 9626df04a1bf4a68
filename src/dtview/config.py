"""Configuration management."""

import logging
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

REMOTE_JSON_URL = (
    "https://dev.deepthought.education/assets/uploads/files/files/others/"
    "ddugky_project.json"
)
DEFAULT_FETCH_TIMEOUT = 10.0


def _fetch_timeout_from_env() -> float:
    """Read DTVIEW_FETCH_TIMEOUT, keeping the default when it is unusable."""
    raw = os.getenv("DTVIEW_FETCH_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_FETCH_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if not value >= 0:
        logger.warning(
            f"Ignoring invalid DTVIEW_FETCH_TIMEOUT={raw!r}, "
            f"using {DEFAULT_FETCH_TIMEOUT:g}s"
        )
        return DEFAULT_FETCH_TIMEOUT
    return value


class Config(BaseModel):
    """Application configuration."""

    remote_url: str = Field(
        default_factory=lambda: os.getenv("DTVIEW_REMOTE_URL", REMOTE_JSON_URL),
        description="Remote project JSON document"
    )
    fetch_timeout: float = Field(
        default_factory=_fetch_timeout_from_env,
        description="Seconds to wait for the remote document (0 disables)",
        ge=0
    )

    class Config:
        """Pydantic config."""
        frozen = False

    @property
    def timeout(self):
        """Return the timeout to hand to requests, or None when disabled."""
        return self.fetch_timeout or None


# Global config instance
config = Config()
