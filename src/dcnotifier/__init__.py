"""dcnotifier: LED control for Dream Cheeky webmail notifiers."""

__version__ = "0.1.0"
