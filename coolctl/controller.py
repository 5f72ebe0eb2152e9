"""USB HID session with a Kraken X cooler."""

import logging

import hid

from coolctl.catalog import DEFAULT_ANIMATION_SPEED, Device, load_catalog, speed_channel
from coolctl.exceptions import TransportIO, TransportTimeout, UnsupportedOperation
from coolctl.profile import (
    CRITICAL_TEMPERATURE,
    SpeedProfile,
    compute_profile,
    interpolate_profile,
    normalize_profile,
)
from coolctl.protocol import (
    encode_color_sequence,
    encode_instant_speed,
    encode_speed_profile,
    pad,
)
from coolctl.status import COOLING_PROFILES_FIRMWARE, READ_LENGTH, Status, decode_status

log = logging.getLogger(__name__)


class Controller:
    """Manages USB HID communication with one Kraken X.

    Frames are written one at a time and never retried: a failure aborts the
    sequence in progress and may leave the device partially updated.
    """

    def __init__(self, device: Device | None = None, timeout: float = 0.0) -> None:
        self._info = device or load_catalog().device
        self._timeout = timeout
        self._device: hid.device | None = None
        self._firmware: tuple[int, int, int] | None = None

    @property
    def connected(self) -> bool:
        return self._device is not None

    @property
    def firmware(self) -> tuple[int, int, int] | None:
        """Firmware version seen in the last status report, if any."""
        return self._firmware

    def find_and_open(self) -> bool:
        """Find the cooler and open a connection."""
        if self._device is not None:
            return True

        for info in hid.enumerate(self._info.vendor_id, self._info.product_id):
            path = info["path"]
            try:
                dev = hid.device()
                dev.open_path(path)
                self._device = dev
                self._firmware = None
                log.info(
                    "Connected to %s at %s (S/N: %s)",
                    self._info.name,
                    path.decode(errors="replace"),
                    info.get("serial_number", "N/A"),
                )
                return True
            except OSError as e:
                log.warning("Failed to open device at %s: %s", path.decode(errors="replace"), e)

        return False

    def close(self) -> None:
        """Close the connection to the cooler."""
        if self._device is not None:
            try:
                self._device.close()
            except OSError as e:
                log.debug("Ignoring error while closing device: %s", e)
            self._device = None
            self._firmware = None
            log.info("Controller connection closed")

    def write(self, data: bytes | list[int]) -> None:
        """Write one output report, padded to its fixed length.

        Raises TransportIO if the cooler is disconnected or the write fails.
        """
        if self._device is None:
            raise TransportIO("Controller not connected")
        frame = pad(list(data))
        log.debug("Writing %s", frame.hex())
        try:
            self._device.write(frame)
        except OSError as e:
            raise TransportIO(f"Could not write to device: {e}") from e

    def read(self) -> bytes:
        """Read one input report.

        Blocks until a report arrives, or up to the configured timeout.
        Raises TransportTimeout if nothing arrived in time, TransportIO on failure
        or on an empty blocking read.
        """
        if self._device is None:
            raise TransportIO("Controller not connected")
        try:
            if self._timeout > 0:
                data = self._device.read(READ_LENGTH, int(self._timeout * 1000))
            else:
                data = self._device.read(READ_LENGTH)
        except OSError as e:
            raise TransportIO(f"Reading from device failed: {e}") from e

        if not data:
            if self._timeout <= 0:
                raise TransportIO("Empty read from device")
            raise TransportTimeout(f"No status report within {self._timeout:.1f}s")
        msg = bytes(data)
        log.debug("Read %s", msg.hex())
        return msg

    def get_status(self) -> Status:
        """Read and decode the current status report."""
        status = decode_status(self.read())
        self._firmware = status.firmware
        log.debug(
            "Liquid %s°C, fan %d rpm, pump %d rpm, firmware %s",
            status.temperature, status.fan_rpm, status.pump_rpm, status.firmware_version,
        )
        return status

    def supports_cooling_profiles(self) -> bool:
        """Whether the firmware accepts temperature/duty profiles.

        Reads a status report when the firmware version is not known yet.
        """
        if self._firmware is None:
            self.get_status()
        return self._firmware >= COOLING_PROFILES_FIRMWARE

    def set_color(
        self,
        channel: str,
        mode: str,
        colors: list[str] | None,
        speed: str = DEFAULT_ANIMATION_SPEED,
    ) -> None:
        """Apply a lighting mode to a channel."""
        frames = encode_color_sequence(channel, mode, colors, speed)
        log.info("Setting %s to %s (%d frame(s))", channel, mode, len(frames))
        for frame in frames:
            self.write(frame)

    def set_speed_profile(self, channel: str, profile: str | SpeedProfile) -> None:
        """Store a temperature/duty profile for a cooling channel.

        Accepts the profile text format ("20 25  35 25  60 100") or points.
        Raises UnsupportedOperation on firmware older than 3.0.0.
        """
        if isinstance(profile, str):
            points = compute_profile(profile)
        else:
            points = interpolate_profile(normalize_profile(profile, CRITICAL_TEMPERATURE))
        frames = encode_speed_profile(channel, points)

        if not self.supports_cooling_profiles():
            major, minor, patch = self._firmware
            raise UnsupportedOperation(
                f"Cooling profiles require firmware 3.0.0 or later, device has "
                f"{major}.{minor}.{patch}"
            )

        log.info("Setting %s profile: %s", channel, points)
        for frame in frames:
            self.write(frame)

    def set_fixed_speed(self, channel: str, duty: int) -> None:
        """Set a constant duty on a cooling channel."""
        ch = speed_channel(channel)
        if self.supports_cooling_profiles():
            self.set_speed_profile(channel, [(0, duty), (CRITICAL_TEMPERATURE - 1, duty)])
            return

        log.info("Setting %s duty to %d%%", channel, duty)
        self.write(encode_instant_speed(ch.base_address, duty, ch.min_duty, ch.max_duty))
