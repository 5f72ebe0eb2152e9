"""Configuration from /etc/default/coolctl, the environment and CLI arguments."""

import argparse
import logging
import os
from dataclasses import dataclass

from dotenv import dotenv_values

from coolctl.catalog import DEFAULT_ANIMATION_SPEED, load_catalog

DEFAULT_CONFIG_PATH = "/etc/default/coolctl"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser (global options and subcommands)."""
    catalog = load_catalog()

    parser = argparse.ArgumentParser(
        prog="coolctl",
        description=f"Linux driver for the {catalog.device.name}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Log level (overrides config file)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Timeout for device reads in seconds, 0 waits forever",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    color = sub.add_parser("color", help="set the color of the logo, ring or sync")
    color.add_argument("channel", help="color channel (e.g. logo, ring or sync)")
    color.add_argument("mode", help="color mode (e.g. off, fading, super-breathing)")
    color.add_argument("colors", nargs="*", metavar="COLOR", help="hex colors (e.g. FF0000)")
    color.add_argument(
        "--speed",
        choices=tuple(catalog.animation_speeds),
        help="Animation speed (overrides config file)",
    )

    speed = sub.add_parser("speed", help="set the speed of the pump or fan")
    speed.add_argument("channel", help="speed channel (e.g. pump or fan)")
    speed.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help="a fixed duty, or temperature/duty pairs (e.g. 20 25 35 25 50 55 60 100)",
    )

    sub.add_parser("status", help="display the current status")
    return parser


@dataclass
class Config:
    """Driver configuration."""

    log_level: str = "WARNING"
    debug: bool = False
    timeout: float = 0.0
    animation_speed: str = DEFAULT_ANIMATION_SPEED

    def __post_init__(self) -> None:
        if self.debug:
            self.log_level = "DEBUG"

        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{self.log_level}'. Must be one of: {', '.join(LOG_LEVELS)}"
            )

        if self.timeout < 0:
            raise ValueError(f"Timeout must not be negative, got {self.timeout}")

        speeds = load_catalog().animation_speeds
        if self.animation_speed not in speeds:
            raise ValueError(
                f"Invalid animation speed '{self.animation_speed}'. "
                f"Must be one of: {', '.join(speeds)}"
            )

    @classmethod
    def load(cls, args: argparse.Namespace | None = None) -> "Config":
        """Load configuration from environment file, env vars, and parsed CLI args.

        Priority (highest to lowest):
        1. CLI arguments
        2. Environment variables
        3. /etc/default/coolctl file
        4. Dataclass defaults
        """
        file_env = {k: v for k, v in dotenv_values(DEFAULT_CONFIG_PATH).items() if v is not None}

        def env(key: str) -> str | None:
            if key in os.environ:
                return os.environ[key]
            return file_env.get(key)

        kwargs: dict[str, object] = {}

        if (v := env("LOG_LEVEL")) is not None:
            kwargs["log_level"] = v.upper()

        if (v := env("DEBUG")) is not None:
            kwargs["debug"] = v.lower() in ("true", "1", "yes")

        if (v := env("TIMEOUT")) is not None:
            try:
                kwargs["timeout"] = float(v)
            except ValueError:
                pass

        if (v := env("ANIMATION_SPEED")) is not None:
            kwargs["animation_speed"] = v.lower()

        # CLI arguments override everything
        if args is not None:
            if args.log_level is not None:
                kwargs["log_level"] = args.log_level

            if args.debug is True:
                kwargs["debug"] = True

            if args.timeout is not None:
                kwargs["timeout"] = args.timeout

            if getattr(args, "speed", None) is not None:
                kwargs["animation_speed"] = args.speed

        return cls(**kwargs)

    def setup_logging(self) -> None:
        """Configure logging based on this config."""
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
