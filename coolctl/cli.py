"""Command-line entry point: color, speed and status commands."""

import argparse
import logging
import sys

from coolctl.config import Config, build_parser
from coolctl.controller import Controller
from coolctl.exceptions import CoolctlError

log = logging.getLogger(__name__)


def profile_text(values: list[str]) -> str:
    """Join "temp duty temp duty ..." arguments into the profile text format."""
    if len(values) % 2:
        raise ValueError("Speed profile needs temperature/duty pairs")
    pairs = [f"{values[i]} {values[i + 1]}" for i in range(0, len(values), 2)]
    return "  ".join(pairs)


def _color(ctrl: Controller, config: Config, args: argparse.Namespace) -> None:
    ctrl.set_color(args.channel, args.mode, args.colors, config.animation_speed)
    print(f"{args.channel}: {args.mode} {' '.join(args.colors)}".rstrip())


def _speed(ctrl: Controller, config: Config, args: argparse.Namespace) -> None:
    if len(args.values) == 1:
        try:
            duty = int(args.values[0])
        except ValueError:
            raise ValueError(f"Invalid duty '{args.values[0]}'") from None
        ctrl.set_fixed_speed(args.channel, duty)
        print(f"{args.channel}: {duty}%")
    else:
        text = profile_text(args.values)
        ctrl.set_speed_profile(args.channel, text)
        print(f"{args.channel}: {text}")


def _status(ctrl: Controller, config: Config, args: argparse.Namespace) -> None:
    status = ctrl.get_status()
    print(f"  Liquid temperature: {status.temperature} °C")
    print(f"  Fan speed: {status.fan_rpm} rpm")
    print(f"  Pump speed: {status.pump_rpm} rpm")
    print(f"  Firmware version: {status.firmware_version}")


_COMMANDS = {
    "color": _color,
    "speed": _speed,
    "status": _status,
}


def run(config: Config, args: argparse.Namespace) -> int:
    """Open the cooler, run one command and close it. Returns the exit status."""
    ctrl = Controller(timeout=config.timeout)
    if not ctrl.find_and_open():
        print("NZXT Kraken X (X42, X52, X62 or X72) not found", file=sys.stderr)
        return 1

    try:
        _COMMANDS[args.command](ctrl, config, args)
    except (CoolctlError, ValueError) as e:
        log.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        ctrl.close()
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = Config.load(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    sys.exit(run(config, args))


if __name__ == "__main__":
    main()
