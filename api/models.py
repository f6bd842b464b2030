"""Data models for the Twitter API module."""

import re
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel

from config import Credentials
from errors import PatternMismatchError

TWEET_URL_PATTERN = re.compile(r"https://twitter\.com/(.+)/status/(\d+)")


class TweetReference(BaseModel):
    """Author handle and tweet id taken from a tweet URL."""

    author: str
    tweet_id: str

    @classmethod
    def from_url(cls, tweet_url: str) -> "TweetReference":
        """Parse a URL like https://twitter.com/<handle>/status/<digits>.

        The handle is kept exactly as written. Anything after the id, such
        as a query string, is ignored.
        """
        match = TWEET_URL_PATTERN.search(tweet_url)
        if match is None:
            raise PatternMismatchError(f"not a tweet URL: {tweet_url!r}")
        return cls(author=match.group(1), tweet_id=match.group(2))

    @property
    def download_path(self) -> Path:
        return Path(self.author) / f"{self.tweet_id}.mp4"


class ITwitterClient(ABC):
    """Abstract interface for the Twitter API calls."""

    @abstractmethod
    async def fetch_access_token(self, credentials: Credentials) -> str:
        """Exchange consumer credentials for an app-only bearer token."""
        pass

    @abstractmethod
    async def fetch_tweet(self, access_token: str, tweet_id: str) -> str:
        """Fetch the raw JSON body of a single tweet."""
        pass
