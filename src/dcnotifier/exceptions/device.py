"""HID device exceptions.

- DeviceAccessError: The HID transport could not be opened or enumerated (fatal)
- DeviceError: Base class for failures isolated to a single device
- PropertyLookupFailure: A device property is missing or not numeric
- ReportWriteFailure: The transport rejected a report write
"""

from typing import Optional

from .base import NotifierError


class DeviceAccessError(NotifierError):
    """HID transport cannot be opened, or enumeration failed outright."""

    def __init__(self, operation: str, original_error: Optional[str] = None):
        """
        Initialize device access error.

        Args:
            operation: What was being attempted (e.g. "enumerate HID devices")
            original_error: The original error message from the HID backend
        """
        user_msg = f"Could not {operation}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        recovery = (
            "Check that the notifier is plugged in and that your user may access "
            "HID devices (on Linux, add a udev rule for /dev/hidraw*)."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=False,
            recovery_hint=recovery,
        )
        self.operation = operation
        self.original_error = original_error


class DeviceError(NotifierError):
    """A single device could not be inspected or written."""

    def __init__(self, user_message: str, device_name: str, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            device_name: Display name of the device involved
        """
        kwargs.setdefault("recoverable", True)
        super().__init__(user_message, **kwargs)
        self.device_name = device_name


class PropertyLookupFailure(DeviceError):
    """A device property is unavailable or not an integer."""

    def __init__(self, device_name: str, key: str):
        """
        Initialize property lookup failure.

        Args:
            device_name: Display name of the device
            key: The property that could not be read
        """
        super().__init__(
            user_message=f"Device {device_name} has no usable '{key}' property",
            device_name=device_name,
            technical_message=f"get_integer_property({device_name}, {key!r}) returned nothing",
        )
        self.key = key


class ReportWriteFailure(DeviceError):
    """The transport failed to deliver a report to a device."""

    def __init__(self, device_name: str, report_name: str, original_error: Optional[str] = None):
        """
        Initialize report write failure.

        Args:
            device_name: Display name of the device
            report_name: Which report was being written (e.g. "input report 0")
            original_error: The error reported by the HID backend
        """
        tech_msg = f"Writing {report_name} to {device_name} failed"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=f"Failed to write {report_name} to device {device_name}",
            device_name=device_name,
            technical_message=tech_msg,
            recovery_hint="The device may have been unplugged. Re-run once it is reconnected.",
        )
        self.report_name = report_name
        self.original_error = original_error
