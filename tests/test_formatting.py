"""Tests for battmon.ui.formatting."""

from __future__ import annotations

import pytest

from battmon.collectors.battery_models import BatterySnapshot, BatteryStatus
from battmon.config.display_config import DisplayConfig
from battmon.config.threshold_config import ThresholdConfig
from battmon.core.errors import AcquisitionIOError
from battmon.ui.formatting import (
    CRITICAL_STYLE,
    SUCCESS_STYLE,
    WARNING_STYLE,
    build_hero,
    detail_rows,
    error_line,
    history_summary,
    status_icon,
    status_style,
)

THRESHOLDS = ThresholdConfig(low_percent=30, critical_percent=15)


@pytest.mark.parametrize(
    ("percent", "expected"),
    [(5, CRITICAL_STYLE), (14, CRITICAL_STYLE), (15, WARNING_STYLE), (29, WARNING_STYLE),
     (30, SUCCESS_STYLE), (100, SUCCESS_STYLE)],
)
def test_status_style_thresholds(percent: int, expected: str) -> None:
    assert status_style(percent, THRESHOLDS, DisplayConfig()) == expected


def test_status_style_without_colors() -> None:
    assert status_style(5, THRESHOLDS, DisplayConfig(show_colors=False)) == "bold"


def test_status_icon() -> None:
    assert status_icon(BatterySnapshot(is_charging=True)) == "⚡"
    assert status_icon(BatterySnapshot(is_charging=False)) == "🔋"


def test_detail_rows_use_placeholders_for_unknown_values() -> None:
    rows = dict(detail_rows(BatterySnapshot()))

    assert rows["Cycle Count"] == "..."
    assert rows["Wattage Input"] == "..."
    assert rows["Health"] == "..."
    assert rows["Serial Number"] == "..."
    assert rows["Temperature"] == "0.0°C"


def test_detail_rows_with_values() -> None:
    snapshot = BatterySnapshot(
        cycle_count=193, wattage=60, health_pct="91%", serial="F8Y2",
        temperature_c=30.4, max_capacity_pct=100,
    )
    rows = dict(detail_rows(snapshot))

    assert rows == {
        "Health": "91%",
        "Cycle Count": "193",
        "Max Capacity": "100%",
        "Temperature": "30.4°C",
        "Wattage Input": "60W",
        "Serial Number": "F8Y2",
    }


def test_history_summary() -> None:
    assert history_summary([]) == "No readings yet"
    assert history_summary([80, 90, 85]) == "3 readings  min 80%  max 90%  avg 85.0%"


def test_error_line() -> None:
    assert error_line(None) == ""
    error = AcquisitionIOError(["ioreg", "-r"], "exit status 1")
    assert error_line(error) == "Error: ioreg -r: exit status 1 (showing last good reading)"


def test_build_hero_text() -> None:
    snapshot = BatterySnapshot(
        percent=87, status=BatteryStatus.DISCHARGING, remaining_label="2:05 remaining"
    )
    hero = build_hero(snapshot, THRESHOLDS, DisplayConfig())

    assert hero.plain == "DISCHARGING\n\n🔋 87%\n\n2:05 remaining"
