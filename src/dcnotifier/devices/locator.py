"""Find attached notifiers among all HID devices."""

import logging

from dcnotifier.exceptions import PropertyLookupFailure
from dcnotifier.hid import PRODUCT_ID_KEY, VENDOR_ID_KEY, HidDevice, HidTransport
from dcnotifier.models import DeviceIdentity, NotifierConfig

logger = logging.getLogger(__name__)


class DeviceLocator:
    """
    Locate notifier devices on the host.

    Enumeration uses the configured usage page/usage as a hint only; the
    exact vendor/product check below decides which devices are targets.
    The locator only reads device properties, it never writes.
    """

    def __init__(self, transport: HidTransport, config: NotifierConfig | None = None):
        """
        Initialize device locator.

        Args:
            transport: Open HID transport to enumerate through
            config: Target identity and usage hint (defaults to the notifier's)
        """
        self.transport = transport
        self.config = config or NotifierConfig()
        self.skipped: list[HidDevice] = []

    def _read_id(self, device: HidDevice, key: str) -> int:
        value = self.transport.get_integer_property(device, key)
        if value is None or value < 0:
            raise PropertyLookupFailure(device.name, key)
        return value

    def read_identity(self, device: HidDevice) -> DeviceIdentity:
        """
        Read the vendor/product identity of a device.

        Raises:
            PropertyLookupFailure: If either ID is missing, not numeric or negative
        """
        return DeviceIdentity(
            vendor_id=self._read_id(device, VENDOR_ID_KEY),
            product_id=self._read_id(device, PRODUCT_ID_KEY),
        )

    def is_target(self, device: HidDevice) -> bool:
        """Check if a device is a notifier, logging why it is skipped if not."""
        try:
            identity = self.read_identity(device)
        except PropertyLookupFailure as e:
            logger.warning(f"Skipping device {device.name}: {e.user_message}")
            return False

        if identity != self.config.identity:
            logger.info(f"Skipping device {device.name} ({identity})")
            return False

        return True

    def find_devices(self) -> list[HidDevice]:
        """
        Return every attached notifier in enumeration order.

        Devices that were enumerated but rejected are kept in ``skipped``.

        Raises:
            DeviceAccessError: If the transport cannot enumerate devices
        """
        candidates = self.transport.enumerate_devices(self.config.usage_filter)
        targets = []
        self.skipped = []
        for device in candidates:
            if self.is_target(device):
                targets.append(device)
            else:
                self.skipped.append(device)

        logger.info(
            f"Found {len(targets)} notifier(s) with identity {self.config.identity} "
            f"among {len(candidates)} HID device(s)"
        )
        return targets
