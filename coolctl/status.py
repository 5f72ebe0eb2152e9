"""Decoding of the 64-byte status report."""

from dataclasses import dataclass

from coolctl.exceptions import ShortPacket

READ_LENGTH = 64

# Last byte offset used by the decoder is 0x0e (firmware patch).
_MIN_STATUS_LENGTH = 0x0F

# Firmware from which the device accepts temperature/duty profiles.
COOLING_PROFILES_FIRMWARE = (3, 0, 0)


@dataclass(frozen=True)
class Status:
    """Liquid temperature, fan/pump speeds and firmware version."""

    temperature: str  # "<integer>.<decimal>", each part its own byte
    fan_rpm: int
    pump_rpm: int
    firmware: tuple[int, int, int]

    @property
    def firmware_version(self) -> str:
        return "%d.%d.%d" % self.firmware

    @property
    def supports_cooling_profiles(self) -> bool:
        return self.firmware >= COOLING_PROFILES_FIRMWARE


def decode_status(packet: bytes) -> Status:
    """Decode a raw status report.

    Raises ShortPacket if the report is too short to hold all fields.
    """
    if len(packet) < _MIN_STATUS_LENGTH:
        raise ShortPacket(
            f"Status report too short: {len(packet)} bytes, need at least {_MIN_STATUS_LENGTH}"
        )

    return Status(
        temperature=f"{packet[1]}.{packet[2]}",
        fan_rpm=int.from_bytes(packet[3:5], "big"),
        pump_rpm=int.from_bytes(packet[5:7], "big"),
        firmware=(packet[0x0B], int.from_bytes(packet[0x0C:0x0E], "big"), packet[0x0E]),
    )
