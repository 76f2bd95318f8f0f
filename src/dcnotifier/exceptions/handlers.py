"""
Centralized error handling utilities.

The run has two kinds of failure:

1. **Fatal** - bad input or an unusable HID transport. These raise a
   `NotifierError` that the CLI formats and exits on.
2. **Per device** - a property lookup or report write that fails on one
   device. These are collected with `ErrorCollector` so the remaining
   devices still get their reports.

## Quick Reference

| Scenario | Use This |
|----------|----------|
| hidapi raised while enumerating | `raise wrap_hid_error(e, "enumerate HID devices") from e` |
| Color failed pydantic validation | `raise wrap_validation_error(e) from e` |
| Write to several devices, keep going | `collector = collect_errors("set color", ReportWriteFailure)` |
| Critical section with auto-logging | `with ErrorContext("open HID transport"): ...` |

## Example: Writing to Several Devices

```python
collector = collect_errors("set color", ReportWriteFailure)

for device in devices:
    with collector.try_operation(f"color {device.name}"):
        transport.write_report(device, ReportType.INPUT, 0, payload)

if collector.has_errors:
    logger.info(collector.get_summary())
```

Only the declared exception types are collected; anything else propagates.
"""

import logging
from typing import Optional

from .base import NotifierError
from .device import DeviceAccessError
from .input import InputError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("open HID transport"):
            transport = HidApiTransport()
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
        """
        self.operation = operation
        self.logger = logger_instance or logger

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        if isinstance(exc_val, NotifierError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return False


def wrap_hid_error(error: Exception, operation: str) -> DeviceAccessError:
    """
    Convert low-level hidapi errors to a DeviceAccessError.

    Args:
        error: The original exception raised by the HID backend
        operation: What was being attempted, phrased after "Could not"

    Returns:
        DeviceAccessError carrying the original message
    """
    return DeviceAccessError(operation=operation, original_error=f"{type(error).__name__}: {error}")


def wrap_validation_error(error: Exception, field_names: Optional[dict[str, str]] = None) -> InputError:
    """
    Convert a Pydantic validation error into an InputError.

    Args:
        error: The pydantic ValidationError
        field_names: Maps model field names to the names users know them by

    Returns:
        InputError naming the first failing channel
    """
    from pydantic import ValidationError

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            field = (field_names or {}).get(field, field)
            reason = first_error.get('msg', 'validation failed')
            value = first_error.get('input', None)
            return InputError(field=field, value=value, error_msg=reason)

    return InputError(field="unknown", value=None, error_msg=str(error))


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, NotifierError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str, *catch: type[Exception]) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Args:
        operation: Description of the overall operation
        catch: Exception types to collect (defaults to NotifierError)

    Returns:
        ErrorCollector instance
    """
    return ErrorCollector(operation, catch or (NotifierError,))


class ErrorCollector:
    """
    Collects per-item errors during batch operations.

    Allows operations to continue when some fail, then report all
    failures at once. Exceptions outside `catch` are not collected.
    """

    def __init__(self, operation: str, catch: tuple[type[Exception], ...] = (NotifierError,)):
        """
        Initialize error collector.

        Args:
            operation: Description of the overall operation
            catch: Exception types to collect
        """
        self.operation = operation
        self.catch = catch
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """
        Get a summary of collected errors.

        Returns:
            Multi-line summary string
        """
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        summary = f"Failed to {self.operation}: {self.error_count} of {total} operations failed:\n"
        for sub_op, error in self.errors:
            if isinstance(error, NotifierError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not issubclass(exc_type, self.collector.catch):
                return False

            self.collector.errors.append((self.sub_operation, exc_val))
            return True
