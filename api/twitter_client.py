"""Twitter API client using app-only OAuth2 authentication."""

import asyncio
import base64
import json
import logging
from typing import Any, Optional, Union
from urllib.parse import quote

import aiohttp

from api.models import ITwitterClient
from config import Credentials, Settings, settings as default_settings
from errors import ProtocolError, TransportError

logger = logging.getLogger(__name__)

GRANT_BODY = "grant_type=client_credentials"


def basic_auth_header(consumer_key: str, consumer_secret: str) -> str:
    """Build the Basic Authorization value for the token endpoint."""
    pair = f"{quote(consumer_key, safe='')}:{quote(consumer_secret, safe='')}"
    return "Basic " + base64.b64encode(pair.encode("utf-8")).decode("ascii")


def read_body(data: bytes) -> str:
    """Decode a response body, replacing bytes that are not UTF-8."""
    return data.decode("utf-8", errors="replace")


def open_session(settings: Settings) -> aiohttp.ClientSession:
    """Session with the configured timeout and User-Agent."""
    return aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=settings.request_timeout),
        headers={"User-Agent": settings.user_agent},
    )


def parse_json(body: Union[str, bytes], source: str) -> Any:
    """Decode a JSON response body or raise ProtocolError."""
    if isinstance(body, bytes):
        body = read_body(body)
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"JSON parse failed for {source}: {e}") from e


class TwitterClient(ITwitterClient):
    """Client for the OAuth2 token and statuses/show endpoints."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    async def fetch_access_token(self, credentials: Credentials) -> str:
        """Exchange consumer key/secret for a bearer token."""
        headers = {
            "Authorization": basic_auth_header(
                credentials.consumer_key, credentials.consumer_secret
            ),
            "Content-Type": "application/x-www-form-urlencoded;charset=UTF-8",
        }

        logger.info(f"🔑 Requesting bearer token from {self.settings.token_url}")
        try:
            async with open_session(self.settings) as session:
                async with session.post(
                    self.settings.token_url, headers=headers, data=GRANT_BODY
                ) as response:
                    status = response.status
                    body = read_body(await response.read())
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"token request failed: {e}") from e

        payload = parse_json(body, "token response")
        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(access_token, str):
            raise ProtocolError(
                f"token response (HTTP {status}) has no string access_token"
            )

        logger.info("Bearer token obtained")
        return access_token

    async def fetch_tweet(self, access_token: str, tweet_id: str) -> str:
        """Fetch a tweet and return its response body, not yet parsed as JSON."""
        headers = {"Authorization": f"Bearer {access_token}"}

        logger.info(f"🌐 Fetching tweet {tweet_id}")
        try:
            async with open_session(self.settings) as session:
                async with session.get(
                    self.settings.statuses_show_url,
                    params={"id": tweet_id},
                    headers=headers,
                ) as response:
                    body = read_body(await response.read())
                    logger.debug(f"statuses/show returned HTTP {response.status}, {len(body)} chars")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"tweet request failed: {e}") from e

        return body
