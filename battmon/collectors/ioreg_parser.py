"""Parse `ioreg -r -n AppleSmartBattery` output into a BatterySnapshot."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .battery_models import CALCULATING, BatterySnapshot, BatteryStatus

# 16-bit "not yet computed" marker the controller reports for TimeRemaining
TIME_REMAINING_UNKNOWN = 65535


class ValueKind(Enum):
    """How a registry value is written in the dump."""
    INTEGER = r"(\d+)"
    YES_NO = r"(Yes|No)"
    QUOTED = r'"([^"]+)"'


@dataclass(frozen=True)
class RegistryField:
    """A single registry key to pull out of the dump."""
    name: str
    key: str
    kind: ValueKind

    @property
    def pattern(self) -> "re.Pattern[str]":
        # Top-level records use "Key" = Value, nested ones "Key"=Value
        return re.compile(rf'"{re.escape(self.key)}"\s*=\s*{self.kind.value}')


BATTERY_FIELDS: Tuple[RegistryField, ...] = (
    RegistryField("current_capacity", "CurrentCapacity", ValueKind.INTEGER),
    RegistryField("max_capacity", "MaxCapacity", ValueKind.INTEGER),
    RegistryField("is_charging", "IsCharging", ValueKind.YES_NO),
    RegistryField("fully_charged", "FullyCharged", ValueKind.YES_NO),
    RegistryField("time_remaining", "TimeRemaining", ValueKind.INTEGER),
    RegistryField("temperature", "Temperature", ValueKind.INTEGER),
    RegistryField("cycle_count", "CycleCount", ValueKind.INTEGER),
    RegistryField("watts", "Watts", ValueKind.INTEGER),
    RegistryField("serial", "Serial", ValueKind.QUOTED),
    RegistryField("design_capacity", "DesignCapacity", ValueKind.INTEGER),
    RegistryField("raw_max_capacity", "AppleRawMaxCapacity", ValueKind.INTEGER),
)

FieldValue = Union[int, bool, str, None]


def extract_field(text: str, field: RegistryField) -> FieldValue:
    """Return the first value of field in text, or None when it is absent."""
    match = field.pattern.search(text)
    if not match:
        return None
    raw = match.group(1)
    if field.kind is ValueKind.INTEGER:
        return int(raw)
    if field.kind is ValueKind.YES_NO:
        return raw == "Yes"
    return raw


def extract_fields(text: str) -> Dict[str, FieldValue]:
    """Extract every known registry field; missing ones map to None."""
    return {field.name: extract_field(text, field) for field in BATTERY_FIELDS}


def compute_percent(current: int, maximum: int) -> int:
    """Charge percent from raw capacities, floor division, capped at 100."""
    if maximum <= 0:
        return 0
    return min(current * 100 // maximum, 100)


def resolve_status(is_charging: bool, fully_charged: bool) -> BatteryStatus:
    """Charging wins; the full-charge flag only matters when not charging."""
    if is_charging:
        return BatteryStatus.CHARGING
    if fully_charged:
        return BatteryStatus.CHARGED
    return BatteryStatus.DISCHARGING


def format_remaining(minutes: int, status: BatteryStatus) -> str:
    """Format a TimeRemaining minute count as 'H:MM remaining'."""
    if minutes >= TIME_REMAINING_UNKNOWN:
        return "" if status is BatteryStatus.CHARGED else CALCULATING
    hours, mins = divmod(minutes, 60)
    return f"{hours}:{mins:02d} remaining"


def compute_health(raw_max: Optional[int], design: Optional[int]) -> Optional[str]:
    """Wear health as a rounded percent string, None when it cannot be known."""
    if not raw_max or not design:
        return None
    return f"{raw_max / design * 100:.0f}%"


def parse_battery_dump(text: str) -> BatterySnapshot:
    """Build a snapshot from a raw ioreg dump. Never raises on bad fields."""
    values = extract_fields(text)

    current = values["current_capacity"] or 0
    maximum = values["max_capacity"] or 0
    is_charging = bool(values["is_charging"])
    status = resolve_status(is_charging, bool(values["fully_charged"]))
    temperature = values["temperature"] or 0

    return BatterySnapshot(
        percent=compute_percent(current, maximum),
        status=status,
        is_charging=is_charging,
        remaining_label=format_remaining(values["time_remaining"] or 0, status),
        temperature_c=temperature / 100.0,
        cycle_count=values["cycle_count"] or 0,
        max_capacity_pct=maximum,
        health_pct=compute_health(values["raw_max_capacity"], values["design_capacity"]),
        wattage=values["watts"] or 0,
        serial=values["serial"] or "",
    )
