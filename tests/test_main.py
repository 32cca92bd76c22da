"""Tests for the command-line front end (no window is opened)."""

import logging
from unittest.mock import MagicMock

import pytest

from gridsnake.config import Config, ConfigError
from gridsnake import main as cli
from gridsnake.main import parse_args, config_from_args, main


class TestCli:

    def test_defaults(self):
        cfg = config_from_args(parse_args([]))
        assert (cfg.cols, cfg.rows) == (32, 24)
        assert cfg.seed is None

    def test_overrides(self):
        args = parse_args([
            "--cols", "10", "--rows", "8", "--cell-size", "30",
            "--interval", "0.2", "--length", "3", "--seed", "7", "--fps", "60",
        ])
        cfg = config_from_args(args)
        assert (cfg.cols, cfg.rows, cfg.cell_size) == (10, 8, 30)
        assert cfg.move_interval == pytest.approx(0.2)
        assert cfg.initial_length == 3
        assert cfg.seed == 7
        assert cfg.fps == 60

    def test_invalid_config_raises(self):
        with pytest.raises(ConfigError):
            config_from_args(parse_args(["--cols", "0"]))

    def test_main_exits_nonzero_on_bad_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        assert main(["--length", "40"]) == 2
        assert calls[0]["level"] == logging.INFO

    def test_display_shut_down_when_a_frame_fails(self, monkeypatch):
        fake = MagicMock()
        fake.event.get.return_value = []
        fake.time.Clock.return_value.get_time.return_value = 0

        def broken_frame(*args):
            raise RuntimeError("draw failed")

        monkeypatch.setattr(cli, "pygame", fake)
        monkeypatch.setattr(cli, "draw_frame", broken_frame)
        with pytest.raises(RuntimeError):
            cli.run(Config(seed=1))
        fake.quit.assert_called_once()
