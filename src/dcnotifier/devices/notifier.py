"""One run of the notifier tool: locate, then drive."""

import logging
from typing import Callable, Optional

from dcnotifier.exceptions import ErrorContext
from dcnotifier.hid import HidTransport, open_transport
from dcnotifier.models import ColorRequest, NotifierConfig

from .driver import DriveSummary, LedReportDriver
from .locator import DeviceLocator

logger = logging.getLogger(__name__)


def set_notifier_color(
    request: ColorRequest,
    config: NotifierConfig | None = None,
    transport_factory: Optional[Callable[[], HidTransport]] = None,
) -> DriveSummary:
    """
    Set the color of every attached notifier.

    The transport is acquired once and released on every exit path.

    Args:
        request: Validated color and activation choice
        config: Target hardware constants
        transport_factory: Returns an open HID transport (defaults to hidapi)

    Raises:
        DeviceAccessError: If the transport cannot be opened or enumerated
    """
    config = config or NotifierConfig()
    transport_factory = transport_factory or open_transport

    with ErrorContext("open HID transport", logger_instance=logger):
        transport = transport_factory()

    with transport:
        locator = DeviceLocator(transport, config)
        devices = locator.find_devices()
        summary = LedReportDriver(transport, config).drive(
            devices, request.color, activate=request.activate
        )

    summary.skipped = list(locator.skipped)
    return summary
