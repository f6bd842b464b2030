"""Highest-bitrate video variant selection."""

import logging
from typing import Any, Dict, List, Optional

from errors import ProtocolError
from selector.models import IVariantSelector, VideoVariant

logger = logging.getLogger(__name__)


def find_variants(tweet: Any) -> Optional[List[Any]]:
    """Walk extended_entities.media[0].video_info.variants.

    Returns None as soon as a segment is missing or is not the expected
    container, so a tweet without any media is simply "no video".
    """
    node = tweet.get("extended_entities") if isinstance(tweet, dict) else None
    media = node.get("media") if isinstance(node, dict) else None
    first = media[0] if isinstance(media, list) and media else None
    video_info = first.get("video_info") if isinstance(first, dict) else None
    if not isinstance(video_info, dict) or "variants" not in video_info:
        return None

    variants = video_info["variants"]
    if not isinstance(variants, list):
        raise ProtocolError(
            f"video_info.variants should be a list, got {type(variants).__name__}"
        )
    return variants


def pick_max_bitrate(variants: List[Any]) -> str:
    """Return the url of the first variant with the strictly highest bitrate."""
    max_bitrate = 0
    max_bitrate_url = ""
    for entry in variants:
        variant = VideoVariant.from_json(entry)
        if not variant.is_selectable:
            continue
        if variant.bitrate > max_bitrate:
            max_bitrate = variant.bitrate
            max_bitrate_url = variant.url
    return max_bitrate_url


class VariantSelector(IVariantSelector):
    """Selects the highest-bitrate video attached to a tweet."""

    def select_video_url(self, tweet: Dict[str, Any]) -> Optional[str]:
        variants = find_variants(tweet)
        if variants is None:
            logger.info("Tweet has no video attachment")
            return None

        url = pick_max_bitrate(variants)
        if url:
            logger.info(f"🎯 Selected variant out of {len(variants)}: {url}")
        else:
            logger.info(f"No usable variant among {len(variants)} entries")
        return url
