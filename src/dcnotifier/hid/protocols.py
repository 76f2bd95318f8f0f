"""HID transport protocol and value types.

The core never talks to hidapi directly. It consumes the small capability
surface below, which keeps the locator and driver testable against an
in-memory transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Protocol

from dcnotifier.models import UsageFilter

VENDOR_ID_KEY = "vendor_id"
PRODUCT_ID_KEY = "product_id"


class ReportType(Enum):
    """HID report types."""

    INPUT = "input"
    OUTPUT = "output"
    FEATURE = "feature"


@dataclass(frozen=True)
class HidDevice:
    """Non-owning handle to a device found by enumeration.

    Valid until the transport that produced it is closed.
    """

    path: bytes
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def name(self) -> str:
        """Printable device path for diagnostics."""
        return self.path.decode("utf-8", errors="replace")


class HidTransport(Protocol):
    """Capabilities the notifier needs from a HID backend."""

    def open(self) -> None:
        """Acquire the backend. Raises DeviceAccessError on failure."""
        ...

    def close(self) -> None:
        """Release the backend and every device handle it opened."""
        ...

    def enumerate_devices(self, filter_hint: UsageFilter) -> list[HidDevice]:
        """
        List attached devices, using the usage filter as a hint.

        The result may still contain devices that do not match the hint.

        Raises:
            DeviceAccessError: If enumeration fails outright
        """
        ...

    def get_integer_property(self, device: HidDevice, key: str) -> Optional[int]:
        """Return an integer device property, or None if missing or not numeric."""
        ...

    def write_report(
        self, device: HidDevice, report_type: ReportType, report_id: int, payload: bytes
    ) -> None:
        """
        Send a report to a device.

        Raises:
            ReportWriteFailure: If the backend rejects or fails the write
        """
        ...

    def __enter__(self) -> "HidTransport":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...
