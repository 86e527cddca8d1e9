"""Battery collector that queries the macOS power registry."""
import logging
import subprocess

from ..config.config import Config
from ..core.errors import AcquisitionIOError
from .battery_models import BatterySnapshot
from .ioreg_parser import parse_battery_dump

logger = logging.getLogger(__name__)

IOREG_COMMAND = ["ioreg", "-r", "-n", "AppleSmartBattery"]


class BatteryCollector:
    """Acquires battery snapshots via ioreg. Holds no shared state."""

    def __init__(self, config: Config):
        """Initialize the battery collector."""
        self.config = config
        self.command = list(IOREG_COMMAND)

    def acquire(self) -> BatterySnapshot:
        """Run the registry query once and parse the result."""
        return parse_battery_dump(self._read_registry())

    def _read_registry(self) -> str:
        """Return raw ioreg output, raising AcquisitionIOError on failure."""
        timeout = self.config.collection_intervals.query_timeout
        try:
            result = subprocess.run(
                self.command,
                capture_output=True,
                timeout=timeout,
                text=True,
                encoding="utf-8",
                errors="replace"
            )
        except subprocess.TimeoutExpired as e:
            raise AcquisitionIOError(self.command, f"timed out after {timeout:.1f}s", e) from e
        except OSError as e:
            # Missing binary, permission denied, or broken pipe
            raise AcquisitionIOError(self.command, str(e), e) from e

        if result.returncode != 0:
            reason = f"exit status {result.returncode}"
            stderr = (result.stderr or "").strip()
            if stderr:
                reason = f"{reason}: {stderr}"
            raise AcquisitionIOError(self.command, reason)

        logger.debug("ioreg returned %d bytes", len(result.stdout or ""))
        return result.stdout or ""
