"""Video download module."""

from .video_downloader import VideoDownloader, write_video
from .models import DownloadResult, IVideoDownloader

__all__ = ["VideoDownloader", "DownloadResult", "IVideoDownloader", "write_video"]
