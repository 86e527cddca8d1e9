"""Display configuration data structure."""
from dataclasses import dataclass

DISPLAY_MODES = ("1", "2")


@dataclass(frozen=True)
class DisplayConfig:
    """Display preferences, built once at startup and handed to the UI."""
    show_colors: bool = True
    time_format: str = "%H:%M:%S"
    default_mode: str = "1"

    def __post_init__(self):
        """Validate display mode."""
        if self.default_mode not in DISPLAY_MODES:
            raise ValueError(f"Unknown display mode: {self.default_mode!r}")
