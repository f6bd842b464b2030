"""Data models for the variant selection module."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel


class VideoVariant(BaseModel):
    """A video variant with specific quality/bitrate."""

    bitrate: Optional[int] = None
    url: Optional[str] = None
    content_type: Optional[str] = None

    @classmethod
    def from_json(cls, entry: Any) -> "VideoVariant":
        """Build a variant from a raw JSON entry, dropping mistyped fields."""
        if not isinstance(entry, dict):
            return cls()

        bitrate = entry.get("bitrate")
        # bool is an int subclass; JSON true is not a bitrate
        if not isinstance(bitrate, int) or isinstance(bitrate, bool) or bitrate < 0:
            bitrate = None

        url = entry.get("url")
        content_type = entry.get("content_type")
        return cls(
            bitrate=bitrate,
            url=url if isinstance(url, str) else None,
            content_type=content_type if isinstance(content_type, str) else None,
        )

    @property
    def is_selectable(self) -> bool:
        return self.bitrate is not None and self.url is not None


class IVariantSelector(ABC):
    """Abstract interface for picking a video URL out of tweet metadata."""

    @abstractmethod
    def select_video_url(self, tweet: Dict[str, Any]) -> Optional[str]:
        """Return the best video URL, "" if none is usable, None if no video."""
        pass
