"""Pytest fixtures for tests."""

import logging
import logging.handlers

import pytest

from dcnotifier.exceptions import DeviceAccessError, ReportWriteFailure
from dcnotifier.hid import HidDevice
from dcnotifier.models import Color, ColorRequest

NOTIFIER = (0x1D34, 0x0004)

CLI_HANDLER_TYPES = (logging.StreamHandler, logging.handlers.RotatingFileHandler)


class FakeTransport:
    """In-memory HID transport that records every call."""

    def __init__(self, devices=(), fail_open=False, fail_enumerate=False, fail_write=None):
        """
        Args:
            devices: HidDevices returned by enumeration
            fail_open: Raise DeviceAccessError from open()
            fail_enumerate: Raise DeviceAccessError from enumerate_devices()
            fail_write: Predicate (device, payload) -> bool selecting writes that fail
        """
        self.devices = list(devices)
        self.fail_open = fail_open
        self.fail_enumerate = fail_enumerate
        self.fail_write = fail_write
        self.calls = []
        self.is_open = False

    def open(self):
        self.calls.append(("open",))
        if self.fail_open:
            raise DeviceAccessError("open the HID transport", "simulated")
        self.is_open = True

    def close(self):
        self.calls.append(("close",))
        self.is_open = False

    def enumerate_devices(self, filter_hint):
        self.calls.append(("enumerate", filter_hint))
        if self.fail_enumerate:
            raise DeviceAccessError("enumerate HID devices", "simulated")
        return list(self.devices)

    def get_integer_property(self, device, key):
        self.calls.append(("get", device.path, key))
        value = device.properties.get(key)
        return value if isinstance(value, int) else None

    def write_report(self, device, report_type, report_id, payload):
        self.calls.append(("write", device.path, report_type, report_id, bytes(payload)))
        if self.fail_write and self.fail_write(device, bytes(payload)):
            raise ReportWriteFailure(device.name, f"{report_type.value} report {report_id}", "simulated")

    @property
    def writes(self):
        """(path, payload) for every attempted write, in order."""
        return [(call[1], call[4]) for call in self.calls if call[0] == "write"]

    def __enter__(self):
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def make_device(path, identity=NOTIFIER, **properties):
    """Build a HidDevice with vendor/product properties."""
    props = {"vendor_id": identity[0], "product_id": identity[1], "path": path.encode()}
    props.update(properties)
    return HidDevice(path=path.encode(), properties=props)


@pytest.fixture
def device_factory():
    """Factory for HidDevice instances."""
    return make_device


@pytest.fixture
def transport_factory():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def three_notifiers():
    """Three attached notifiers."""
    return [make_device(f"notifier-{i}") for i in range(1, 4)]


@pytest.fixture
def red():
    """Full red color."""
    return Color(r=31, g=0, b=0)


@pytest.fixture
def red_request(red):
    """Request for full red with activation."""
    return ColorRequest(color=red, activate=True)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) in CLI_HANDLER_TYPES:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
