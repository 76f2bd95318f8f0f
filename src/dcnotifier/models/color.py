"""Color model for the notifier LED."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dcnotifier.exceptions import InputError, wrap_validation_error

MAX_INTENSITY = 31

CHANNEL_NAMES = {"r": "red", "g": "green", "b": "blue"}


def parse_channel(name: str, text: str) -> int:
    """Parse one base-10 intensity argument.

    Only ASCII digits with an optional leading minus are accepted.

    Raises:
        InputError: If the text is not a base-10 integer
    """
    digits = text[1:] if isinstance(text, str) and text.startswith("-") else text
    if not isinstance(digits, str) or not (digits.isascii() and digits.isdigit()):
        raise InputError(field=name, value=text, error_msg="must be a base-10 integer")
    return int(text, 10)


class Color(BaseModel):
    """5-bit RGB color as understood by the notifier.

    Each channel is an intensity from 0 (off) to 31 (fully on). The model
    is frozen so a parsed color cannot change between reports.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=MAX_INTENSITY, description="Red (0-31)")
    g: int = Field(ge=0, le=MAX_INTENSITY, description="Green (0-31)")
    b: int = Field(ge=0, le=MAX_INTENSITY, description="Blue (0-31)")

    @classmethod
    def from_args(cls, red: str, green: str, blue: str) -> "Color":
        """
        Build a color from command line text.

        Args:
            red: Red intensity as base-10 text
            green: Green intensity as base-10 text
            blue: Blue intensity as base-10 text

        Raises:
            InputError: If a channel is not an integer or lies outside 0-31
        """
        values = {
            "r": parse_channel("red", red),
            "g": parse_channel("green", green),
            "b": parse_channel("blue", blue),
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise wrap_validation_error(e, CHANNEL_NAMES) from e

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b})"
