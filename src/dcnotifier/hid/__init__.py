"""HID transport layer."""

from .hidapi_transport import HidApiTransport, open_transport
from .protocols import PRODUCT_ID_KEY, VENDOR_ID_KEY, HidDevice, HidTransport, ReportType

__all__ = [
    "HidApiTransport",
    "HidDevice",
    "HidTransport",
    "PRODUCT_ID_KEY",
    "ReportType",
    "VENDOR_ID_KEY",
    "open_transport",
]
