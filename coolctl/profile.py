"""Temperature/duty speed profiles: parsing, normalization and interpolation."""

import math

from coolctl.exceptions import InvalidProfileSyntax

SpeedProfile = list[tuple[int, int]]

# Duty is forced to 100% from this liquid temperature on (°C).
CRITICAL_TEMPERATURE = 60

# Temperatures the device stores one duty value for (°C).
PROFILE_GRID = range(20, CRITICAL_TEMPERATURE + 2, 2)


def parse_profile(text: str) -> SpeedProfile:
    """Parse "temp duty" pairs separated by two spaces.

    Example: "20 25  35 25  50 55  60 100".
    Raises InvalidProfileSyntax on a short pair or a non-integer token.
    """
    profile: SpeedProfile = []
    for segment in text.split("  "):
        tokens = segment.split(" ")
        if len(tokens) < 2:
            raise InvalidProfileSyntax(segment, "expected a temperature and a duty")
        try:
            temp, duty = int(tokens[0]), int(tokens[1])
        except ValueError as e:
            raise InvalidProfileSyntax(segment, "not an integer") from e
        profile.append((temp, duty))
    return profile


def normalize_profile(profile: SpeedProfile, critical_temp: int) -> SpeedProfile:
    """Sort a profile and make it end at (critical_temp, 100).

    Points above critical_temp are discarded and only the last of several
    points at critical_temp is kept. A trailing point that already sits at
    critical_temp or at 100% is replaced, so the result never holds two points
    at its highest temperature.
    """
    if not profile:
        raise ValueError("Speed profile must contain at least one point")

    normalized = sorted(
        (point for point in profile if point[0] <= critical_temp), key=lambda point: point[0]
    )
    if not normalized:
        return [(critical_temp, 100)]

    if normalized[-1][0] == critical_temp:
        normalized = [point for point in normalized if point[0] < critical_temp] + [normalized[-1]]

    last_temp, last_duty = normalized[-1]
    if last_temp < critical_temp or last_duty != 100:
        if last_temp == critical_temp or last_duty == 100:
            normalized.pop()
        normalized.append((critical_temp, 100))
    return normalized


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def interpolate_profile(profile: SpeedProfile) -> SpeedProfile:
    """Resample a normalized profile onto PROFILE_GRID by linear interpolation."""
    interpolated: SpeedProfile = []
    for temp in PROFILE_GRID:
        lower, upper = profile[0], profile[-1]
        for point in profile:
            if point[0] <= temp:
                lower = point
            else:
                upper = point
                break

        if lower[0] == upper[0]:
            duty = lower[1]
        else:
            ratio = (temp - lower[0]) / (upper[0] - lower[0])
            duty = _round_half_away(lower[1] + ratio * (upper[1] - lower[1]))
        interpolated.append((temp, duty))
    return interpolated


def compute_profile(text: str, critical_temp: int = CRITICAL_TEMPERATURE) -> SpeedProfile:
    """Run the full pipeline: parse, normalize and interpolate."""
    return interpolate_profile(normalize_profile(parse_profile(text), critical_temp))
