"""Twitter API access: URL parsing, token exchange and tweet lookup."""

from .twitter_client import TwitterClient, basic_auth_header, open_session, parse_json, read_body
from .models import TweetReference, ITwitterClient

__all__ = ["TwitterClient", "TweetReference", "ITwitterClient", "basic_auth_header", "open_session", "parse_json", "read_body"]
