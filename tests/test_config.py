"""Tests for configuration loading and validation."""

import pytest

from coolctl.config import Config, build_parser


def _load(argv: list[str]) -> Config:
    return Config.load(build_parser().parse_args(argv))


@pytest.fixture(autouse=True)
def _no_config_file(tmp_path: object, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the config file at an empty location and clear related env vars."""
    import coolctl.config as config_mod

    monkeypatch.setattr(config_mod, "DEFAULT_CONFIG_PATH", str(tmp_path / "missing"))  # type: ignore[operator]
    for key in ("LOG_LEVEL", "DEBUG", "TIMEOUT", "ANIMATION_SPEED"):
        monkeypatch.delenv(key, raising=False)


class TestConfigDefaults:
    def test_defaults(self) -> None:
        cfg = Config()
        assert cfg.log_level == "WARNING"
        assert cfg.debug is False
        assert cfg.timeout == 0.0
        assert cfg.animation_speed == "normal"

    def test_debug_forces_log_level(self) -> None:
        cfg = Config(debug=True)
        assert cfg.log_level == "DEBUG"


class TestConfigValidation:
    def test_negative_timeout_raises(self) -> None:
        with pytest.raises(ValueError, match="Timeout must not be negative"):
            Config(timeout=-1.0)

    def test_invalid_animation_speed_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid animation speed"):
            Config(animation_speed="ludicrous")

    def test_invalid_log_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level 'LOUD'"):
            Config(log_level="LOUD")


class TestParser:
    def test_color_command(self) -> None:
        args = build_parser().parse_args(["color", "ring", "fading", "FF0000", "00FF00"])
        assert args.command == "color"
        assert args.channel == "ring"
        assert args.mode == "fading"
        assert args.colors == ["FF0000", "00FF00"]

    def test_color_without_colors(self) -> None:
        args = build_parser().parse_args(["color", "sync", "spectrum-wave"])
        assert args.colors == []

    def test_speed_command(self) -> None:
        args = build_parser().parse_args(["speed", "fan", "20", "25", "60", "100"])
        assert args.command == "speed"
        assert args.values == ["20", "25", "60", "100"]

    def test_status_command(self) -> None:
        assert build_parser().parse_args(["status"]).command == "status"

    def test_invalid_speed_choice_exits(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["color", "ring", "fading", "--speed", "warp"])


class TestConfigLoadCLI:
    def test_cli_debug(self) -> None:
        cfg = _load(["--debug", "status"])
        assert cfg.debug is True
        assert cfg.log_level == "DEBUG"

    def test_cli_log_level(self) -> None:
        cfg = _load(["--log-level", "INFO", "status"])
        assert cfg.log_level == "INFO"

    def test_cli_timeout(self) -> None:
        cfg = _load(["--timeout", "2.5", "status"])
        assert cfg.timeout == 2.5

    def test_cli_animation_speed(self) -> None:
        cfg = _load(["color", "ring", "fading", "--speed", "fastest"])
        assert cfg.animation_speed == "fastest"

    def test_no_args_uses_defaults(self) -> None:
        cfg = Config.load()
        assert cfg.timeout == 0.0


class TestConfigLoadEnvFile:
    def test_load_from_env_file(self, tmp_path: object, monkeypatch: pytest.MonkeyPatch) -> None:
        import coolctl.config as config_mod

        env_file = tmp_path / "config"  # type: ignore[operator]
        env_file.write_text("LOG_LEVEL=info\nTIMEOUT=3\nANIMATION_SPEED=Slower\n")
        monkeypatch.setattr(config_mod, "DEFAULT_CONFIG_PATH", str(env_file))

        cfg = Config.load()
        assert cfg.log_level == "INFO"
        assert cfg.timeout == 3.0
        assert cfg.animation_speed == "slower"

    def test_invalid_timeout_in_file_ignored(
        self, tmp_path: object, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        import coolctl.config as config_mod

        env_file = tmp_path / "config"  # type: ignore[operator]
        env_file.write_text("TIMEOUT=soon\n")
        monkeypatch.setattr(config_mod, "DEFAULT_CONFIG_PATH", str(env_file))

        assert Config.load().timeout == 0.0

    def test_env_vars_override_file(
        self, tmp_path: object, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        import coolctl.config as config_mod

        env_file = tmp_path / "config"  # type: ignore[operator]
        env_file.write_text("TIMEOUT=1\n")
        monkeypatch.setattr(config_mod, "DEFAULT_CONFIG_PATH", str(env_file))
        monkeypatch.setenv("TIMEOUT", "4")

        assert Config.load().timeout == 4.0

    def test_cli_overrides_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANIMATION_SPEED", "slowest")
        cfg = _load(["color", "ring", "fading", "--speed", "faster"])
        assert cfg.animation_speed == "faster"

    def test_env_debug_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "yes")
        assert Config.load().log_level == "DEBUG"

    def test_invalid_log_level_from_env_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "loud")
        with pytest.raises(ValueError, match="Invalid log level"):
            Config.load()
