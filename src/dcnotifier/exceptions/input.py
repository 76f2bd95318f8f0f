"""Input validation exceptions."""

from typing import Any, Optional

from .base import NotifierError

USAGE_HINT = (
    "usage: dcnotifier R G B [A]\n"
    "RGB values should be 0-31. A is an optional parameter on whether to skip "
    "the LED activation sequence: 0 (the default) activates, anything else skips."
)


class InputError(NotifierError):
    """Command line input is malformed or out of range.

    Raised before any device I/O takes place.
    """

    def __init__(self, field: str, value: Any, error_msg: str, hint: Optional[str] = USAGE_HINT):
        """
        Initialize input error.

        Args:
            field: Name of the offending input (e.g. "red")
            value: The rejected value as given
            error_msg: Why the value was rejected
            hint: Recovery hint shown to the user
        """
        super().__init__(
            user_message=f"Invalid value for '{field}': {error_msg}",
            technical_message=f"Input validation failed for {field}={value!r}: {error_msg}",
            recoverable=False,
            recovery_hint=hint,
        )
        self.field = field
        self.value = value
