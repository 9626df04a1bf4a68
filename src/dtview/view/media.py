"""Media embedding decisions for asset URLs."""

import re
from enum import Enum
from typing import Optional

from ..models import Asset, AssetType

VIDEO_FILE_PATTERN = re.compile(r"\.(mp4|webm|ogv|ogg)$", re.IGNORECASE)
AUDIO_FILE_PATTERN = re.compile(r"\.(mp3|wav|ogg|oga)$", re.IGNORECASE)
HOSTED_VIDEO_PATTERN = re.compile(r"(youtube\.com|youtu\.be|drive\.google\.com)", re.IGNORECASE)

# (pattern, embed template), first match wins
EMBED_RULES = [
    (re.compile(r"youtube\.com/watch\?v=([^&#]+)", re.IGNORECASE), "https://www.youtube.com/embed/{id}"),
    (re.compile(r"youtu\.be/([^?&#]+)", re.IGNORECASE), "https://www.youtube.com/embed/{id}"),
    (re.compile(r"drive\.google\.com/file/d/([^/?#]+)", re.IGNORECASE), "https://drive.google.com/file/d/{id}/preview"),
]


class MediaKind(str, Enum):
    """How an asset's resource is presented."""
    VIDEO = "video"
    AUDIO = "audio"
    EMBED = "embed"
    LINK = "link"


def is_video_file(url: str) -> bool:
    return bool(VIDEO_FILE_PATTERN.search(url))


def is_audio_file(url: str) -> bool:
    return bool(AUDIO_FILE_PATTERN.search(url))


def is_hosted_video(url: str) -> bool:
    """Whether the URL belongs to a provider with an embeddable player."""
    return bool(HOSTED_VIDEO_PATTERN.search(url))


def to_embed_url(url: str) -> str:
    """Rewrite a YouTube or Google Drive link into its embeddable form.

    URLs matching none of the known patterns are returned unchanged.
    """
    for pattern, template in EMBED_RULES:
        match = pattern.search(url)
        if match:
            return template.format(id=match.group(1))
    return url


def media_kind(asset: Asset) -> Optional[MediaKind]:
    """Decide how to present an asset's resource, or None without a URL."""
    if not asset.url:
        return None
    url = asset.url
    if asset.type == AssetType.VIDEO and is_video_file(url):
        return MediaKind.VIDEO
    if asset.type == AssetType.AUDIO and is_audio_file(url):
        return MediaKind.AUDIO
    if asset.type == AssetType.VIDEO and is_hosted_video(url):
        return MediaKind.EMBED
    return MediaKind.LINK
