"""Configuration settings for get-media-twitter."""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_FILE = ".env"


class Settings(BaseSettings):
    """Runtime settings, overridable with GET_MEDIA_* environment variables."""

    # API endpoints
    token_url: str = "https://api.twitter.com/oauth2/token"
    statuses_show_url: str = "https://api.twitter.com/1.1/statuses/show.json"

    # None means requests never time out
    request_timeout: Optional[float] = None
    user_agent: str = "get-media-twitter/0.1"

    log_level: str = "INFO"

    class Config:
        env_prefix = "GET_MEDIA_"


class Credentials(BaseSettings):
    """Application-only OAuth2 consumer credentials."""

    consumer_key: str  # CONSUMER_KEY in .env
    consumer_secret: str  # CONSUMER_SECRET in .env

    class Config:
        env_file = ENV_FILE
        env_file_encoding = "utf-8"
        env_prefix = ""
        extra = "ignore"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Only the .env file counts, never the process environment.
        return (init_settings, dotenv_settings)


def load_credentials(env_path: Union[str, Path] = ENV_FILE) -> Credentials:
    """Read CONSUMER_KEY and CONSUMER_SECRET from a .env file.

    Raises:
        ConfigurationError: if the file does not exist or a key is missing.
    """
    path = Path(env_path)
    if not path.is_file():
        raise ConfigurationError(f"{path.name} not found in {path.parent.resolve()}.")

    try:
        credentials = Credentials(_env_file=path)
    except ValidationError as e:
        missing = [
            str(error["loc"][0]).upper()
            for error in e.errors()
            if error.get("loc")
        ]
        raise ConfigurationError(
            f"missing {', '.join(missing) or 'credentials'} in {path}"
        ) from e

    logger.info(f"Loaded consumer credentials from {path}")
    return credentials


# Global settings instance
settings = Settings()
