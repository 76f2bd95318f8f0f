"""HID transport backed by the hidapi package."""

import logging
from typing import Optional

import hid

from dcnotifier.exceptions import DeviceAccessError, ReportWriteFailure, wrap_hid_error
from dcnotifier.models import UsageFilter

from .protocols import HidDevice, ReportType

logger = logging.getLogger(__name__)


class HidApiTransport:
    """
    HID transport on top of hidapi.

    Enumeration goes through ``hid.enumerate()``. Devices are opened by
    path on their first write and stay open until the transport closes,
    so each run opens every target at most once.

    hidapi cannot address input reports on the host side; INPUT and
    OUTPUT reports both go out through ``write()``, FEATURE reports
    through ``send_feature_report()``.
    """

    def __init__(self):
        self._open = False
        self._handles: dict[bytes, "hid.device"] = {}

    @property
    def is_open(self) -> bool:
        """Check if the transport is open."""
        return self._open

    def open(self) -> None:
        """Mark the transport usable."""
        if self._open:
            logger.warning("HID transport is already open")
            return
        self._open = True
        logger.debug("HID transport opened")

    def close(self) -> None:
        """Close every device handle opened by this transport."""
        for path, handle in self._handles.items():
            try:
                handle.close()
            except Exception as e:
                logger.error(f"Error closing HID device {path!r}: {e}")
        self._handles.clear()

        if self._open:
            self._open = False
            logger.debug("HID transport closed")

    def _require_open(self) -> None:
        if not self._open:
            raise DeviceAccessError("use the HID transport before it is opened")

    def enumerate_devices(self, filter_hint: UsageFilter) -> list[HidDevice]:
        """
        List attached HID devices matching the usage hint.

        Devices whose backend reports no usage page (0) are kept as well,
        since not every platform exposes usage information.
        """
        self._require_open()
        try:
            infos = hid.enumerate()
        except OSError as e:
            raise wrap_hid_error(e, "enumerate HID devices") from e

        devices = []
        for info in infos:
            usage_page = info.get("usage_page", 0)
            usage = info.get("usage", 0)
            if usage_page and usage_page != filter_hint.usage_page:
                continue
            if usage_page and usage and filter_hint.usage and usage != filter_hint.usage:
                continue
            devices.append(HidDevice(path=info["path"], properties=dict(info)))

        logger.debug(f"Enumerated {len(devices)} of {len(infos)} HID devices")
        return devices

    def get_integer_property(self, device: HidDevice, key: str) -> Optional[int]:
        """Return an integer property from the enumeration record."""
        value = device.properties.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    def _handle_for(self, device: HidDevice, report_name: str) -> "hid.device":
        handle = self._handles.get(device.path)
        if handle is not None:
            return handle

        handle = hid.device()
        try:
            handle.open_path(device.path)
        except OSError as e:
            raise ReportWriteFailure(device.name, report_name, f"open failed: {e}") from e

        self._handles[device.path] = handle
        logger.debug(f"Opened HID device {device.name}")
        return handle

    def write_report(
        self, device: HidDevice, report_type: ReportType, report_id: int, payload: bytes
    ) -> None:
        """Send ``payload`` prefixed with ``report_id`` to the device."""
        self._require_open()
        report_name = f"{report_type.value} report {report_id}"
        handle = self._handle_for(device, report_name)
        data = bytes([report_id]) + bytes(payload)

        try:
            if report_type is ReportType.FEATURE:
                written = handle.send_feature_report(data)
            else:
                written = handle.write(data)
        except (OSError, ValueError) as e:
            raise ReportWriteFailure(device.name, report_name, str(e)) from e

        if written < 0:
            raise ReportWriteFailure(device.name, report_name, handle.error())

        logger.debug(f"Wrote {report_name} to {device.name}: {bytes(payload).hex(' ')}")

    def __enter__(self):
        if not self._open:
            self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def open_transport() -> HidApiTransport:
    """Create and open the default hidapi transport."""
    transport = HidApiTransport()
    transport.open()
    return transport
