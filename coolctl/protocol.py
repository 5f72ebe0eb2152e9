"""Kraken X command frames.

Every command is a 65-byte HID output report: report id 0x02, an opcode
(0x4c lighting, 0x4d cooling), three parameter bytes and, for lighting, the
color payload. Unused trailing bytes are zero.
"""

from coolctl.catalog import (
    DEFAULT_ANIMATION_SPEED,
    ColorMode,
    animation_speed,
    color_channel,
    color_mode,
    speed_channel,
)
from coolctl.exceptions import UnsupportedMode
from coolctl.palette import Color, build_palette
from coolctl.profile import SpeedProfile
from coolctl.steps import generate_steps

WRITE_LENGTH = 65

REPORT_ID = 0x02
OP_SET_COLOR = 0x4C
OP_SET_SPEED = 0x4D

_NORMAL_SPEED = 0x2


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def pad(data: list[int]) -> bytes:
    """Right-pad a command with zeros to WRITE_LENGTH bytes."""
    if len(data) > WRITE_LENGTH:
        raise ValueError(f"Command too long: {len(data)} bytes, max {WRITE_LENGTH}")
    return bytes(data) + bytes(WRITE_LENGTH - len(data))


def encode_color(
    channel_code: int,
    mode: ColorMode,
    sequence_index: int,
    step: tuple[Color, ...],
    speed: int = _NORMAL_SPEED,
) -> bytes:
    """Build the lighting command for one step.

    The logo color (first entry) is sent green, red, blue; ring LEDs are sent
    red, green, blue. sequence_index must fit in 3 bits and is not checked.
    """
    logo = step[0]
    data = [
        REPORT_ID,
        OP_SET_COLOR,
        mode.reverse_bit | channel_code,
        mode.mode_code,
        speed | sequence_index << 5 | mode.speed_modifier,
        logo.green,
        logo.red,
        logo.blue,
    ]
    for led in step[1:]:
        data += [led.red, led.green, led.blue]
    return pad(data)


def encode_speed_point(
    base_address: int, point_index: int, point: tuple[int, int], duty_min: int, duty_max: int
) -> bytes:
    """Build the command storing one point of a temperature/duty profile."""
    temp, duty = point
    return pad([
        REPORT_ID, OP_SET_SPEED, base_address + point_index, temp, clamp(duty, duty_min, duty_max)
    ])


def encode_instant_speed(base_address: int, duty: int, duty_min: int, duty_max: int) -> bytes:
    """Build the command setting a fixed duty (firmware without profile support)."""
    return pad([
        REPORT_ID, OP_SET_SPEED, base_address & 0x70, 0x00, clamp(duty, duty_min, duty_max)
    ])


def encode_color_sequence(
    channel: str,
    mode_name: str,
    colors: list[str] | None,
    speed: str = DEFAULT_ANIMATION_SPEED,
) -> list[bytes]:
    """Build every lighting command needed to apply a mode to a channel.

    Raises UnknownChannel, UnknownMode, UnsupportedMode, MalformedColor or
    InsufficientColors; nothing is built unless all inputs are valid.
    """
    channel_code = color_channel(channel)
    mode = color_mode(mode_name)
    speed_bits = animation_speed(speed)
    if mode.ring_only and channel != "ring":
        raise UnsupportedMode(f"Mode '{mode_name}' is unsupported with channel '{channel}'")

    steps = generate_steps(build_palette(colors), mode)
    return [
        encode_color(channel_code, mode, seq, step, speed_bits) for seq, step in enumerate(steps)
    ]


def encode_speed_profile(channel: str, profile: SpeedProfile) -> list[bytes]:
    """Build one speed-point command per point of an interpolated profile."""
    ch = speed_channel(channel)
    return [
        encode_speed_point(ch.base_address, i, point, ch.min_duty, ch.max_duty)
        for i, point in enumerate(profile)
    ]
