"""Tests for the battmon command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from battmon import main as battmon_main
from battmon.main import build_parser, load_config


def test_cli_overrides_config() -> None:
    args = build_parser().parse_args(
        ["--refresh-rate", "2.5", "--interval", "0", "--no-color", "--mode", "2"]
    )
    config = load_config(args)

    assert config.refresh_rate == 2.5
    assert config.collection_intervals.battery == 0.0
    assert config.display.show_colors is False
    assert config.display.default_mode == "2"


def test_invalid_override_is_fixed() -> None:
    config = load_config(build_parser().parse_args(["--refresh-rate", "-3"]))
    assert config.refresh_rate == 1.0


def test_defaults_without_flags() -> None:
    config = load_config(build_parser().parse_args([]))

    assert config.display.show_colors is True
    assert config.display.default_mode == "1"


def test_main_rejects_missing_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = battmon_main.main(["--config", str(tmp_path / "missing.yaml")])

    assert code == 2
    assert "invalid configuration" in capsys.readouterr().err


def test_main_runs_scheduler_and_display(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    class FakeScheduler:
        def __init__(self, config: object) -> None:
            calls.append("acquire")

        def start_collection(self) -> None:
            calls.append("start")

        def stop_collection(self) -> None:
            calls.append("stop")

    class FakeDisplay:
        def __init__(self, config: object) -> None:
            pass

        def run_display(self, scheduler: object) -> None:
            calls.append("display")

    monkeypatch.setattr(battmon_main, "RefreshScheduler", FakeScheduler)
    monkeypatch.setattr(battmon_main, "DisplayManager", FakeDisplay)

    assert battmon_main.main([]) == 0
    assert calls == ["acquire", "start", "display", "stop"]
