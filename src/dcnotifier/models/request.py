"""Parsed command line request."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .color import Color, parse_channel


def parse_activation(text: Optional[str]) -> bool:
    """
    Decide whether the activation report should be sent.

    Absent or ``0`` means activate; any other integer, negative ones
    included, means skip.

    Raises:
        InputError: If the text is present but not a base-10 integer
    """
    if text is None:
        return True
    return parse_channel("activation", text) == 0


class ColorRequest(BaseModel):
    """Everything the driver needs from the command line."""

    model_config = ConfigDict(frozen=True)

    color: Color
    activate: bool = True

    @classmethod
    def from_args(
        cls, red: str, green: str, blue: str, activation: Optional[str] = None
    ) -> "ColorRequest":
        """Validate the positional arguments R G B [A]."""
        return cls(
            color=Color.from_args(red, green, blue),
            activate=parse_activation(activation),
        )
