"""Shared fixtures: a local stand-in for the Twitter API."""

import json
from typing import Any, Dict, List, Optional, Union

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from config import Settings

VIDEO_BYTES = b"\x00\x00\x00\x18ftypmp42" + bytes(range(256)) * 40


class FakeTwitter:
    """Records requests and serves canned token, tweet and video responses."""

    def __init__(self):
        self.server: Optional[TestServer] = None
        self.requests: List[Dict[str, Any]] = []
        self.token_body: Union[str, bytes] = json.dumps({"token_type": "bearer", "access_token": "AAAA-token"})
        self.tweet_body: Optional[Union[str, bytes]] = None
        self.video_bytes: bytes = VIDEO_BYTES

    def url(self, path: str) -> str:
        return str(self.server.make_url(path))

    def tweet_with_variants(self, variants: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "id_str": "42",
            "extended_entities": {
                "media": [{"type": "video", "video_info": {"variants": variants}}]
            },
        }

    def default_tweet(self) -> Dict[str, Any]:
        return self.tweet_with_variants([
            {"content_type": "application/x-mpegURL", "url": self.url("/playlist.m3u8")},
            {"bitrate": 256000, "content_type": "video/mp4", "url": self.url("/low.mp4")},
            {"bitrate": 2176000, "content_type": "video/mp4", "url": self.url("/video.mp4")},
            {"bitrate": 832000, "content_type": "video/mp4", "url": self.url("/mid.mp4")},
        ])

    async def _record(self, request: web.Request):
        self.requests.append({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "headers": dict(request.headers),
            "body": await request.text(),
        })

    def _json_response(self, body: Union[str, bytes]) -> web.Response:
        if isinstance(body, bytes):
            return web.Response(body=body, content_type="application/json")
        return web.Response(text=body, content_type="application/json")

    async def token(self, request: web.Request) -> web.Response:
        await self._record(request)
        return self._json_response(self.token_body)

    async def show(self, request: web.Request) -> web.Response:
        await self._record(request)
        body = self.tweet_body if self.tweet_body is not None else json.dumps(self.default_tweet())
        return self._json_response(body)

    async def video(self, request: web.Request) -> web.Response:
        await self._record(request)
        return web.Response(body=self.video_bytes, content_type="video/mp4")


@pytest_asyncio.fixture
async def fake_twitter():
    fake = FakeTwitter()
    app = web.Application()
    app.router.add_post("/oauth2/token", fake.token)
    app.router.add_get("/1.1/statuses/show.json", fake.show)
    app.router.add_get("/video.mp4", fake.video)
    server = TestServer(app)
    await server.start_server()
    fake.server = server
    yield fake
    await server.close()


@pytest.fixture
def api_settings(fake_twitter):
    return Settings(
        token_url=fake_twitter.url("/oauth2/token"),
        statuses_show_url=fake_twitter.url("/1.1/statuses/show.json"),
    )


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text("CONSUMER_KEY=my key\nCONSUMER_SECRET=s3cr3t/+=\n", encoding="utf-8")
    return path
