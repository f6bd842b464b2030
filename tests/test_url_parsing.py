"""Tests for tweet URL parsing."""

from pathlib import Path

import pytest

from api.models import TweetReference
from errors import ErrorKind, PatternMismatchError


class TestTweetReference:
    """Test cases for TweetReference.from_url."""

    @pytest.mark.parametrize("url, author, tweet_id", [
        ("https://twitter.com/jack/status/20", "jack", "20"),
        ("https://twitter.com/NASA/status/1445090436218839041", "NASA", "1445090436218839041"),
        ("https://twitter.com/under_score99/status/007", "under_score99", "007"),
    ])
    def test_extracts_author_and_id(self, url, author, tweet_id):
        reference = TweetReference.from_url(url)

        assert reference.author == author
        assert reference.tweet_id == tweet_id

    def test_ignores_trailing_query(self):
        reference = TweetReference.from_url("https://twitter.com/jack/status/20?s=20&t=abc")

        assert reference.tweet_id == "20"

    def test_handle_is_not_normalized(self):
        reference = TweetReference.from_url("https://twitter.com/@MixedCase/status/5")

        assert reference.author == "@MixedCase"

    @pytest.mark.parametrize("url", [
        "https://twitter.com/jack/20",
        "https://twitter.com/jack/status/abc",
        "https://example.com/jack/status/20",
        "http://twitter.com/jack/status/20",
        "",
    ])
    def test_rejects_non_tweet_urls(self, url):
        with pytest.raises(PatternMismatchError) as exc_info:
            TweetReference.from_url(url)

        assert exc_info.value.kind == ErrorKind.PATTERN_MISMATCH
        assert exc_info.value.exit_code == 2

    def test_empty_handle_rejected(self):
        with pytest.raises(PatternMismatchError):
            TweetReference.from_url("https://twitter.com//status/1")

    def test_download_path(self):
        reference = TweetReference(author="jack", tweet_id="20")

        assert reference.download_path == Path("jack") / "20.mp4"
