"""RGB colors and palettes built from hex strings."""

from dataclasses import dataclass

from coolctl.exceptions import MalformedColor


@dataclass(frozen=True)
class Color:
    """An RGB triple, passed to the device byte for byte."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a 6-hex-digit string such as ``FF0000``.

        Raises MalformedColor if the string is not hex or not exactly 3 bytes.
        """
        try:
            raw = bytes.fromhex(text)
        except (TypeError, ValueError) as e:
            raise MalformedColor(text) from e
        # fromhex() skips whitespace, so "FF 00 00" would otherwise pass
        if len(raw) != 3 or len(text) != 6:
            raise MalformedColor(text)
        return cls(raw[0], raw[1], raw[2])


BLACK = Color(0, 0, 0)


def build_palette(colors: list[str] | None) -> tuple[Color, ...]:
    """Convert hex strings to colors, keeping their order.

    Fails on the first malformed entry; no partial palette is returned.
    """
    if not colors:
        return ()
    return tuple(Color.from_hex(c) for c in colors)
