"""Battery data models for the battery collector."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BatteryStatus(Enum):
    """Charging state reported by the battery controller."""
    CHARGING = "Charging"
    DISCHARGING = "Discharging"
    CHARGED = "Charged"
    UNKNOWN = "Unknown"


CALCULATING = "Calculating..."


@dataclass(frozen=True)
class BatterySnapshot:
    """One reading of battery state. Absent fields keep these defaults."""
    percent: int = 0
    status: BatteryStatus = BatteryStatus.UNKNOWN
    is_charging: bool = False
    remaining_label: str = CALCULATING
    temperature_c: float = 0.0
    cycle_count: int = 0
    max_capacity_pct: int = 0
    health_pct: Optional[str] = None  # e.g. "91%", None if design capacity unknown
    wattage: int = 0
    serial: str = ""
