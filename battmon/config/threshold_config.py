"""Threshold configuration data structure."""
from dataclasses import dataclass


@dataclass
class ThresholdConfig:
    """Charge levels at which the display changes colour."""
    low_percent: int = 30
    critical_percent: int = 15

    def __post_init__(self):
        """Fix invalid values."""
        if self.low_percent <= 0 or self.low_percent >= 100:
            self.low_percent = 30
        if self.critical_percent <= 0 or self.critical_percent >= 100:
            self.critical_percent = 15
        if self.critical_percent > self.low_percent:
            self.critical_percent = self.low_percent
