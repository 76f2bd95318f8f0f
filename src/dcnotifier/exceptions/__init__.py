"""
Custom exception hierarchy for dcnotifier.

## Exception Hierarchy

```
NotifierError (base)
├── InputError                 bad R/G/B/A arguments, raised before any I/O
├── DeviceAccessError          HID transport cannot be opened or enumerated
└── DeviceError                isolated to one device, run continues
    ├── PropertyLookupFailure
    └── ReportWriteFailure
```

All custom exceptions inherit from `NotifierError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

### Example

```python
from dcnotifier.exceptions import InputError

raise InputError(field="red", value=32, error_msg="must be between 0 and 31")

# User sees: "Invalid value for 'red': must be between 0 and 31"
```

See `dcnotifier.exceptions.handlers` for utilities to handle these exceptions.
"""

from .base import NotifierError
from .device import DeviceAccessError, DeviceError, PropertyLookupFailure, ReportWriteFailure
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    wrap_hid_error,
    wrap_validation_error,
)
from .input import USAGE_HINT, InputError

__all__ = [
    # Base
    "NotifierError",
    # Input
    "InputError",
    "USAGE_HINT",
    # Device
    "DeviceAccessError",
    "DeviceError",
    "PropertyLookupFailure",
    "ReportWriteFailure",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "wrap_hid_error",
    "wrap_validation_error",
]
