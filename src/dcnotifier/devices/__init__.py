"""Notifier discovery and LED control."""

from .driver import DriveSummary, LedReportDriver
from .locator import DeviceLocator
from .notifier import set_notifier_color
from .reports import ACTIVATION_REPORT, REPORT_LENGTH, NotifierReports, ReportKind

__all__ = [
    "ACTIVATION_REPORT",
    "DeviceLocator",
    "DriveSummary",
    "LedReportDriver",
    "NotifierReports",
    "REPORT_LENGTH",
    "ReportKind",
    "set_notifier_color",
]
