"""Collection intervals configuration."""
from dataclasses import dataclass


@dataclass
class CollectionConfig:
    """Collection timing configuration."""
    battery: float = 1.0  # seconds between scheduled refreshes, 0 = manual only
    query_timeout: float = 5.0

    def __post_init__(self):
        """Fix invalid values."""
        if self.battery < 0:
            self.battery = 1.0
        if self.query_timeout <= 0:
            self.query_timeout = 5.0
