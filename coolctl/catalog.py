"""Kraken X lighting and cooling tables.

Channel, mode and speed data is loaded from catalog.yaml once per process and
exposed as read-only mappings of frozen records.

Protocol reverse-engineered by the liquidctl project (Kraken X42/X52/X62/X72).
"""

from dataclasses import dataclass
from functools import cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from coolctl.exceptions import UnknownChannel, UnknownMode

_CATALOG_FILE = Path(__file__).parent / "catalog.yaml"

TOTAL_LEDS = 9  # 1 logo + 8 ring
DEFAULT_ANIMATION_SPEED = "normal"


@dataclass(frozen=True)
class Device:
    """USB identification of the cooler."""

    name: str
    vendor_id: int
    product_id: int


@dataclass(frozen=True)
class ColorMode:
    """Protocol parameters of a lighting mode."""

    name: str
    mode_code: int
    reverse_bit: int
    speed_modifier: int
    min_colors: int
    max_colors: int  # 0: the mode ignores colors
    ring_only: bool

    @property
    def is_super(self) -> bool:
        """Super modes address each LED independently."""
        return "super" in self.name


@dataclass(frozen=True)
class SpeedChannel:
    """Base address and accepted duty range of a cooling channel."""

    name: str
    base_address: int
    min_duty: int
    max_duty: int


@dataclass(frozen=True)
class Catalog:
    device: Device
    color_channels: Mapping[str, int]
    color_modes: Mapping[str, ColorMode]
    speed_channels: Mapping[str, SpeedChannel]
    animation_speeds: Mapping[str, int]


@cache
def load_catalog() -> Catalog:
    """Parse catalog.yaml into read-only tables (memoised)."""
    with open(_CATALOG_FILE) as f:
        raw = yaml.safe_load(f)

    return Catalog(
        device=Device(**raw["device"]),
        color_channels=MappingProxyType(dict(raw["color_channels"])),
        color_modes=MappingProxyType(
            {name: ColorMode(name=name, **params) for name, params in raw["color_modes"].items()}
        ),
        speed_channels=MappingProxyType(
            {name: SpeedChannel(name=name, **params) for name, params in raw["speed_channels"].items()}
        ),
        animation_speeds=MappingProxyType(dict(raw["animation_speeds"])),
    )


def _available(table: Mapping[str, object]) -> str:
    return ", ".join(sorted(table))


def color_channel(name: str) -> int:
    """Return the 2-bit channel code of a lighting channel.

    Raises UnknownChannel if the name is not found.
    """
    channels = load_catalog().color_channels
    if name not in channels:
        raise UnknownChannel(f"Unknown color channel '{name}'. Available: {_available(channels)}")
    return channels[name]


def color_mode(name: str) -> ColorMode:
    """Return the lighting mode record for a name.

    Raises UnknownMode if the name is not found.
    """
    modes = load_catalog().color_modes
    if name not in modes:
        raise UnknownMode(f"Unknown color mode '{name}'. Available: {_available(modes)}")
    return modes[name]


def speed_channel(name: str) -> SpeedChannel:
    """Return the cooling channel record for a name.

    Raises UnknownChannel if the name is not found.
    """
    channels = load_catalog().speed_channels
    if name not in channels:
        raise UnknownChannel(f"Unknown speed channel '{name}'. Available: {_available(channels)}")
    return channels[name]


def animation_speed(name: str) -> int:
    """Return the animation speed bits for a name.

    Raises UnknownMode if the name is not found.
    """
    speeds = load_catalog().animation_speeds
    if name not in speeds:
        raise UnknownMode(f"Unknown animation speed '{name}'. Available: {_available(speeds)}")
    return speeds[name]
