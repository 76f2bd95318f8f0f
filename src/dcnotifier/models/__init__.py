"""Data models for the notifier driver."""

from .color import MAX_INTENSITY, Color
from .config import (
    DREAM_CHEEKY_VENDOR_ID,
    GENERIC_DESKTOP_PAGE,
    NOTIFIER_PRODUCT_ID,
    NOTIFIER_USAGE,
    DeviceIdentity,
    NotifierConfig,
    UsageFilter,
)
from .request import ColorRequest, parse_activation

__all__ = [
    # Models
    "Color",
    "ColorRequest",
    "DeviceIdentity",
    "NotifierConfig",
    "UsageFilter",
    # Helpers
    "parse_activation",
    # Constants
    "DREAM_CHEEKY_VENDOR_ID",
    "GENERIC_DESKTOP_PAGE",
    "MAX_INTENSITY",
    "NOTIFIER_PRODUCT_ID",
    "NOTIFIER_USAGE",
]
