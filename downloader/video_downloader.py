"""Video download to the local filesystem."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import aiohttp

from api.twitter_client import open_session
from config import Settings, settings as default_settings
from downloader.models import DownloadResult, IVideoDownloader
from errors import FilesystemError, TransportError

logger = logging.getLogger(__name__)


def write_video(video_data: bytes, target: Path) -> int:
    """Write bytes to target, creating at most one missing parent directory."""
    parent = target.parent
    try:
        if not parent.exists():
            # Not recursive: a missing grandparent is an error.
            parent.mkdir()
            logger.debug(f"Created directory {parent}")
        return target.write_bytes(video_data)
    except OSError as e:
        raise FilesystemError(f"failed to write {target}: {e}") from e


class VideoDownloader(IVideoDownloader):
    """Downloads a video into memory and saves it in one write."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    async def _fetch_bytes(self, video_url: str) -> bytes:
        async with open_session(self.settings) as session:
            try:
                response = await session.get(video_url)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise TransportError(f"failed to fetch {video_url}: {e}") from e

            async with response:
                try:
                    return await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    raise TransportError(f"broken video file. {video_url}: {e}") from e

    async def download(self, video_url: str, target: Path) -> DownloadResult:
        logger.info(f"⬇️ Downloading {video_url}")
        video_data = await self._fetch_bytes(video_url)
        logger.info(f"Downloaded video: {len(video_data)} bytes")

        bytes_written = write_video(video_data, Path(target))
        logger.info(f"Wrote {bytes_written} bytes to {target}")
        return DownloadResult(video_url=video_url, path=Path(target), bytes_written=bytes_written)
