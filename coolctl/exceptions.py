"""Exception hierarchy for the Kraken X driver.

All exceptions inherit from CoolctlError so callers can catch broadly, while
the builtin bases (ValueError, KeyError, OSError) keep the usual handlers working.
"""


class CoolctlError(Exception):
    """Base exception for all coolctl errors."""


class MalformedColor(CoolctlError, ValueError):
    """Raised when a color is not exactly three bytes of hexadecimal."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Malformed color '{token}': expected 6 hex digits (e.g. FF0000)")
        self.token = token


class UnknownChannel(CoolctlError, KeyError):
    """Raised when a color or speed channel name is not in the catalog."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownMode(CoolctlError, KeyError):
    """Raised when a color mode or animation speed name is not in the catalog."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnsupportedMode(CoolctlError, ValueError):
    """Raised when a ring-only mode is requested on another channel."""


class InsufficientColors(CoolctlError, ValueError):
    """Raised when fewer colors are given than the mode requires."""


class InvalidProfileSyntax(CoolctlError, ValueError):
    """Raised when a speed profile text cannot be parsed."""

    def __init__(self, segment: str, reason: str) -> None:
        super().__init__(f"Invalid profile segment '{segment}': {reason}")
        self.segment = segment


class ShortPacket(CoolctlError, ValueError):
    """Raised when a status report is too short to be decoded."""


class UnsupportedOperation(CoolctlError):
    """Raised when the device firmware does not support the requested operation."""


class TransportError(CoolctlError, OSError):
    """Base class for failures surfaced from the USB transport."""


class TransportIO(TransportError):
    """Raised when the device is unavailable or a read/write fails."""


class TransportTimeout(TransportError):
    """Raised when the device does not answer within the configured timeout."""
