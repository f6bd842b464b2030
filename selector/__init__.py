"""Video variant selection module."""

from .variant_selector import VariantSelector, find_variants, pick_max_bitrate
from .models import VideoVariant, IVariantSelector

__all__ = ["VariantSelector", "VideoVariant", "IVariantSelector", "find_variants", "pick_max_bitrate"]
