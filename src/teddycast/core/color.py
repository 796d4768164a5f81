"""RGB colors with 8-bit channels.

Colors are immutable value types. The framebuffer stores them packed as
24-bit integers (``r << 16 | g << 8 | b``), which is the layout the preview
window unpacks.

Example:
    >>> from teddycast.core.color import Color
    >>> fur = Color(139, 69, 19)
    >>> hex(fur.to_hex())
    '0x8b4513'
    >>> Color.from_hex(0x8B4513) == fur
    True
"""

from __future__ import annotations

from dataclasses import dataclass


def _saturate(value: float) -> int:
    return int(min(255, max(0, round(value))))


@dataclass(frozen=True)
class Color:
    """An RGB color with integer channels in [0, 255].

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} must be in [0, 255], got {value}")

    @classmethod
    def from_hex(cls, packed: int) -> Color:
        """Create a color from a packed 24-bit integer.

        Args:
            packed: Integer in the form 0xRRGGBB. Bits above 24 are ignored.

        Returns:
            The unpacked color.
        """
        return cls((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)

    def to_hex(self) -> int:
        """Pack the color into a 24-bit integer (0xRRGGBB)."""
        return (self.r << 16) | (self.g << 8) | self.b

    def to_float(self) -> tuple[float, float, float]:
        """Return the channels scaled to [0, 1]."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            _saturate(self.r + other.r),
            _saturate(self.g + other.g),
            _saturate(self.b + other.b),
        )

    def __mul__(self, factor: float) -> Color:
        if isinstance(factor, Color):
            return NotImplemented
        return Color(
            _saturate(self.r * factor),
            _saturate(self.g * factor),
            _saturate(self.b * factor),
        )

    __rmul__ = __mul__


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
