"""
Report builder for the Dream Cheeky webmail notifier.

The notifier understands two fixed 8-byte reports, both sent as report
type INPUT with report ID 0.

Activation Report
-----------------

Switches the LED controller into a state where color reports take
effect::

    [0x1F, 0x02, 0x00, 0x5F, 0x00, 0x00, 0x1A, 0x03]
                                          └──┬──┘
                                     command trailer (0x03 = activate)

Color-Set Report
----------------

Sets the LED intensities, each channel 0-31::

    [  r,    g,    b, 0x00, 0x00, 0x00, 0x1A, 0x05]
     └──────┬──────┘                    └──┬──┘
       intensities              command trailer (0x05 = set color)

Reports are built fresh for every send and never retained.
"""

from enum import Enum

from dcnotifier.models import Color

REPORT_LENGTH = 8

ACTIVATION_REPORT = bytes([0x1F, 0x02, 0x00, 0x5F, 0x00, 0x00, 0x1A, 0x03])

COLOR_TRAILER = bytes([0x00, 0x00, 0x00, 0x1A, 0x05])


class ReportKind(Enum):
    """Reports the notifier accepts."""

    ACTIVATION = "activation"
    COLOR = "color"


class NotifierReports:
    """Low-level report builder for the notifier."""

    @staticmethod
    def activation() -> bytes:
        """Build the activation report."""
        return ACTIVATION_REPORT

    @staticmethod
    def color(color: Color) -> bytes:
        """
        Build the color-set report.

        Args:
            color: Validated 5-bit color
        """
        return bytes([color.r, color.g, color.b]) + COLOR_TRAILER
