"""Refresh scheduling for battery acquisition."""
import logging
import threading
from typing import Optional

from ..collectors.battery_collector import BatteryCollector
from ..config.config import Config
from .errors import AcquisitionIOError
from .shared_data import RefreshState

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Drives battery acquisition on a fixed interval and on demand.

    All acquisitions run on one background worker, so at most one is in
    flight. Refresh requests that arrive while a cycle is running are
    coalesced into a single follow-up cycle. The worker is the only writer
    of the RefreshState; the display reads it through get_view().
    """

    def __init__(self, config: Config, collector: Optional[BatteryCollector] = None):
        """Initialize the scheduler and take the first reading synchronously."""
        self.config = config
        self.collector = collector or BatteryCollector(config)
        self.state = RefreshState()
        self.running = threading.Event()
        self.thread: Optional[threading.Thread] = None
        self._wake = threading.Event()

        # First frame gets real data
        self.run_cycle()

    def start_collection(self):
        """Start the background refresh thread."""
        if self.running.is_set():
            return
        self.running.set()
        self.thread = threading.Thread(target=self._collect_loop, daemon=True)
        self.thread.start()

    def stop_collection(self):
        """Stop the refresh thread without waiting on a slow query."""
        self.running.clear()
        self._wake.set()
        if self.thread and self.thread.is_alive():
            self.thread.join(timeout=1)

    def trigger_refresh(self):
        """Request an immediate refresh cycle."""
        self._wake.set()

    def get_shared_data(self) -> RefreshState:
        """Get the refresh state for reading."""
        return self.state

    def run_cycle(self) -> bool:
        """Perform one acquisition and apply its result. Returns success."""
        self.state.begin_refresh()
        try:
            snapshot = self.collector.acquire()
        except AcquisitionIOError as e:
            logger.warning("Battery refresh failed: %s", e)
            self.state.record_failure(e)
            return False

        self.state.record_success(snapshot)
        logger.debug("Battery refreshed: %d%% %s", snapshot.percent, snapshot.status.value)
        return True

    def _collect_loop(self):
        """Main collection loop with zero-interval support."""
        interval = self.config.collection_intervals.battery

        while self.running.is_set():
            # Zero interval: only a manual refresh wakes the worker
            self._wake.wait(interval if interval > 0 else None)
            self._wake.clear()
            if not self.running.is_set():
                break
            try:
                self.run_cycle()
            except Exception:
                # Keep the worker alive; the next tick retries
                logger.exception("Unexpected error during battery refresh")
                self.state.end_refresh()
