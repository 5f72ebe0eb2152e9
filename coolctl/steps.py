"""Expansion of a palette into per-LED animation steps."""

import logging

from coolctl.catalog import TOTAL_LEDS, ColorMode
from coolctl.exceptions import InsufficientColors
from coolctl.palette import BLACK, Color

log = logging.getLogger(__name__)

Step = tuple[Color, ...]


def _fill(colors: tuple[Color, ...]) -> Step:
    """Pad a per-LED palette with black up to TOTAL_LEDS entries."""
    return colors + (BLACK,) * (TOTAL_LEDS - len(colors))


def generate_steps(palette: tuple[Color, ...], mode: ColorMode) -> list[Step]:
    """Build the steps for a mode, one step per frame sent to the device.

    Regular modes get one uniform step per color. Super modes address each
    LED independently: a single step built from the palette, preceded by an
    all-black logo step when the mode only drives the ring.

    Raises InsufficientColors if the palette has fewer than min_colors entries.
    Excess colors are dropped with a warning.
    """
    colors = tuple(palette)

    if len(colors) < mode.min_colors:
        raise InsufficientColors(
            f"Not enough colors for mode '{mode.name}', "
            f"at least {mode.min_colors} required (got {len(colors)})"
        )
    if mode.max_colors == 0:
        if colors:
            log.warning("Too many colors for mode '%s', none needed", mode.name)
            colors = (BLACK,)
    elif len(colors) > mode.max_colors:
        log.warning(
            "Too many colors for mode '%s', dropping to %d", mode.name, mode.max_colors
        )
        colors = colors[:mode.max_colors]

    if not colors:
        colors = (BLACK,)

    if not mode.is_super:
        return [(color,) * TOTAL_LEDS for color in colors]

    if mode.ring_only:
        return [(BLACK,) * TOTAL_LEDS, _fill(colors)]

    return [_fill(colors)]
