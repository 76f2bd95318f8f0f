"""Drive the notifier LED with activation and color reports."""

import logging
from dataclasses import dataclass, field

from dcnotifier.exceptions import ReportWriteFailure, collect_errors
from dcnotifier.hid import HidDevice, HidTransport, ReportType
from dcnotifier.models import Color, NotifierConfig

from .reports import NotifierReports, ReportKind

logger = logging.getLogger(__name__)


@dataclass
class DriveSummary:
    """Outcome of one pass over the matched devices."""

    devices: list[HidDevice] = field(default_factory=list)
    skipped: list[HidDevice] = field(default_factory=list)
    activation_writes: int = 0
    color_writes: int = 0
    failures: list[tuple[str, Exception]] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        """Check if any report write failed."""
        return len(self.failures) > 0


class LedReportDriver:
    """
    Send activation and color reports to matched notifiers.

    The activation report is a one-time mode switch for the whole run: it
    goes to the first device only, even when several notifiers are attached.
    Color reports go to every device. Write failures are logged per device
    and never stop the remaining writes.
    """

    def __init__(self, transport: HidTransport, config: NotifierConfig | None = None):
        """
        Initialize report driver.

        Args:
            transport: Open HID transport to write through
            config: Supplies the report ID (defaults to the notifier's)
        """
        self.transport = transport
        self.config = config or NotifierConfig()

    def _write(self, device: HidDevice, kind: ReportKind, payload: bytes) -> None:
        logger.debug(f"Sending {kind.value} report to {device.name}")
        try:
            self.transport.write_report(device, ReportType.INPUT, self.config.report_id, payload)
        except ReportWriteFailure as e:
            logger.info(f"{kind.value.capitalize()} report to {device.name} failed: {e.technical_message}")
            raise

    def drive(self, devices: list[HidDevice], color: Color, activate: bool = True) -> DriveSummary:
        """
        Send reports to every device in order.

        Args:
            devices: Matched notifiers, in enumeration order
            color: Color to set on every device
            activate: Send the activation report before the first color report

        Returns:
            DriveSummary with write counts and collected failures
        """
        collector = collect_errors("set notifier color", ReportWriteFailure)
        summary = DriveSummary(devices=list(devices))
        color_report = NotifierReports.color(color)
        activation_sent = not activate

        for device in devices:
            if not activation_sent:
                # Counts as sent even if the write fails; it is never retried.
                activation_sent = True
                summary.activation_writes += 1
                with collector.try_operation(f"activation report to {device.name}"):
                    self._write(device, ReportKind.ACTIVATION, NotifierReports.activation())

            summary.color_writes += 1
            with collector.try_operation(f"color report to {device.name}"):
                self._write(device, ReportKind.COLOR, color_report)

        summary.failures = list(collector.errors)
        if collector.has_errors:
            logger.info(collector.get_summary())
        else:
            logger.info(f"Set color {color} on {len(devices)} device(s)")

        return summary
