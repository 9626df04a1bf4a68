"""Asset data model."""

import logging
from enum import Enum
from typing import Any, Mapping, Optional
from pydantic import BaseModel, Field

from .fields import as_text, new_asset_id, pick

logger = logging.getLogger(__name__)


class AssetType(str, Enum):
    """Kinds of content an asset can carry."""
    ARTICLE = "article"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def parse(cls, value: Any) -> "AssetType":
        """Parse a raw type value, defaulting to article when unrecognized."""
        if value is None:
            return cls.ARTICLE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug(f"Unrecognized asset type {value!r}, using article")
            return cls.ARTICLE


class Asset(BaseModel):
    """One piece of content attached to a task."""

    id: Optional[str] = Field(default_factory=new_asset_id, description="Asset identifier")
    title: Optional[str] = Field("Untitled asset", description="Display title")
    type: AssetType = Field(default=AssetType.ARTICLE, description="Content kind")
    description: Optional[str] = Field("", description="Free-text description")
    url: Optional[str] = Field(None, description="Resource location")
    subtype: Optional[str] = Field(None, description="Subtype or MIME type (unused)")

    class Config:
        """Pydantic config."""
        frozen = True

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Asset":
        """Build an asset from a source document, resolving field aliases."""
        return cls(
            id=as_text(pick(raw, "assetId", "id", "assetID", default_factory=new_asset_id)),
            title=as_text(pick(raw, "title", "name", "assetName", default="Untitled asset")),
            type=AssetType.parse(pick(raw, "type", "assetType", "format")),
            description=as_text(pick(raw, "description", "desc", "summary", default="")),
            url=as_text(pick(raw, "url", "link", "drive_link")),
            subtype=as_text(pick(raw, "subtype", "mime")),
        )

    @property
    def has_url(self) -> bool:
        """Whether the asset points at a resource."""
        return bool(self.url)
