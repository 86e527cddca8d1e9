"""Text helpers for the battery display."""
from typing import List, Optional, Tuple

from rich.table import Table
from rich.text import Text

from ..collectors.battery_models import BatterySnapshot
from ..config.display_config import DisplayConfig
from ..config.threshold_config import ThresholdConfig

PLACEHOLDER = "..."

CRITICAL_STYLE = "bold red"
WARNING_STYLE = "bold dark_orange"
SUCCESS_STYLE = "bold green"
LABEL_STYLE = "grey50"


def status_style(percent: int, thresholds: ThresholdConfig, display: DisplayConfig) -> str:
    """Pick the colour for the charge percent."""
    if not display.show_colors:
        return "bold"
    if percent < thresholds.critical_percent:
        return CRITICAL_STYLE
    if percent < thresholds.low_percent:
        return WARNING_STYLE
    return SUCCESS_STYLE


def status_icon(snapshot: BatterySnapshot) -> str:
    return "⚡" if snapshot.is_charging else "🔋"


def format_cycle_count(cycle_count: int) -> str:
    return str(cycle_count) if cycle_count else PLACEHOLDER


def format_wattage(wattage: int) -> str:
    return f"{wattage}W" if wattage else PLACEHOLDER


def format_temperature(temperature_c: float) -> str:
    return f"{temperature_c:.1f}°C"


def detail_rows(snapshot: BatterySnapshot) -> List[Tuple[str, str]]:
    """Label/value pairs shown under the charge percent."""
    return [
        ("Health", snapshot.health_pct or PLACEHOLDER),
        ("Cycle Count", format_cycle_count(snapshot.cycle_count)),
        ("Max Capacity", f"{snapshot.max_capacity_pct}%"),
        ("Temperature", format_temperature(snapshot.temperature_c)),
        ("Wattage Input", format_wattage(snapshot.wattage)),
        ("Serial Number", snapshot.serial or PLACEHOLDER),
    ]


def history_summary(history: List[int]) -> str:
    """Min/max/average of the percent history."""
    if not history:
        return "No readings yet"
    average = sum(history) / len(history)
    return (
        f"{len(history)} readings  min {min(history)}%  "
        f"max {max(history)}%  avg {average:.1f}%"
    )


def error_line(error: Optional[Exception]) -> str:
    if error is None:
        return ""
    return f"Error: {error} (showing last good reading)"


def build_hero(snapshot: BatterySnapshot, thresholds: ThresholdConfig,
               display: DisplayConfig) -> Text:
    """Status, big percent and time remaining, centred."""
    style = status_style(snapshot.percent, thresholds, display)
    hero = Text(justify="center")
    hero.append(snapshot.status.value.upper(), style=LABEL_STYLE)
    hero.append("\n\n")
    hero.append(f"{status_icon(snapshot)} ", style=style)
    hero.append(f"{snapshot.percent}%", style=style)
    hero.append("\n\n")
    hero.append(snapshot.remaining_label, style=LABEL_STYLE)
    return hero


def build_details(snapshot: BatterySnapshot) -> Table:
    """Two-column grid of battery details."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style=LABEL_STYLE, width=25)
    grid.add_column(style="bold")
    for label, value in detail_rows(snapshot):
        grid.add_row(label, value)
    return grid
