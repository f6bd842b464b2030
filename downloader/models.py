"""Data models for the downloader module."""

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel


class DownloadResult(BaseModel):
    """A video written to disk."""

    video_url: str
    path: Path
    bytes_written: int


class IVideoDownloader(ABC):
    """Abstract interface for saving a video to a local file."""

    @abstractmethod
    async def download(self, video_url: str, target: Path) -> DownloadResult:
        """Download video_url and write it to target."""
        pass
