"""Run configuration for the notifier driver.

Nothing here is persisted: the defaults identify the Dream Cheeky webmail
notifier and the CLI may override the USB identity for a single run.
"""

from pydantic import BaseModel, ConfigDict, Field

DREAM_CHEEKY_VENDOR_ID = 0x1D34
NOTIFIER_PRODUCT_ID = 0x0004

# Generic desktop page; the notifier reports usage 0x10 on it.
GENERIC_DESKTOP_PAGE = 0x01
NOTIFIER_USAGE = 0x10


class DeviceIdentity(BaseModel):
    """USB vendor/product pair read from a device.

    Backends may report IDs wider than 16 bits; such devices simply
    never match the configured identity.
    """

    model_config = ConfigDict(frozen=True)

    vendor_id: int = Field(ge=0, description="USB vendor ID")
    product_id: int = Field(ge=0, description="USB product ID")

    def __str__(self) -> str:
        return f"{self.vendor_id:04x}:{self.product_id:04x}"


class UsageFilter(BaseModel):
    """Usage page/usage hint handed to HID enumeration."""

    model_config = ConfigDict(frozen=True)

    usage_page: int = Field(ge=0, le=0xFFFF, description="HID usage page")
    usage: int = Field(ge=0, le=0xFFFF, description="HID usage within the page")


class NotifierConfig(BaseModel):
    """Constants describing the target hardware for one run."""

    model_config = ConfigDict(frozen=True)

    vendor_id: int = Field(
        default=DREAM_CHEEKY_VENDOR_ID, ge=0, le=0xFFFF, description="USB vendor ID to drive"
    )
    product_id: int = Field(
        default=NOTIFIER_PRODUCT_ID, ge=0, le=0xFFFF, description="USB product ID to drive"
    )
    usage_page: int = Field(
        default=GENERIC_DESKTOP_PAGE, ge=0, le=0xFFFF, description="Enumeration usage page hint"
    )
    usage: int = Field(default=NOTIFIER_USAGE, ge=0, le=0xFFFF, description="Enumeration usage hint")
    report_id: int = Field(default=0, ge=0, le=0xFF, description="Report ID for every write")

    @property
    def identity(self) -> DeviceIdentity:
        """Identity a device must report to be driven."""
        return DeviceIdentity(vendor_id=self.vendor_id, product_id=self.product_id)

    @property
    def usage_filter(self) -> UsageFilter:
        """Filter hint for enumeration."""
        return UsageFilter(usage_page=self.usage_page, usage=self.usage)
