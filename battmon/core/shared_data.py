"""Shared refresh state for thread-safe data access."""

import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from ..collectors.battery_models import BatterySnapshot
from .errors import AcquisitionIOError

HISTORY_SIZE = 60


class RefreshPhase(Enum):
    IDLE = "idle"
    REFRESHING = "refreshing"


@dataclass(frozen=True)
class StateView:
    """Consistent copy of the refresh state handed to readers."""
    last_good: BatterySnapshot
    last_error: Optional[AcquisitionIOError]
    history: List[int]
    phase: RefreshPhase
    updated_at: Optional[datetime]


class RefreshState:
    """Thread-safe store written by the scheduler and read by the display."""

    def __init__(self):
        """Initialize the refresh state with thread safety."""
        self._lock = threading.Lock()
        self.last_good = BatterySnapshot()
        self.last_error: Optional[AcquisitionIOError] = None
        self.history = deque(maxlen=HISTORY_SIZE)
        self.phase = RefreshPhase.IDLE
        self.updated_at: Optional[datetime] = None

    def begin_refresh(self):
        """Mark an acquisition as in flight."""
        with self._lock:
            self.phase = RefreshPhase.REFRESHING

    def record_success(self, snapshot: BatterySnapshot):
        """Replace the last good snapshot and extend the history."""
        with self._lock:
            self.last_good = snapshot
            self.last_error = None
            self.history.append(snapshot.percent)  # deque evicts the oldest
            self.updated_at = datetime.now()
            self.phase = RefreshPhase.IDLE

    def record_failure(self, error: AcquisitionIOError):
        """Keep the last good snapshot and history, remember the error."""
        with self._lock:
            self.last_error = error
            self.phase = RefreshPhase.IDLE

    def end_refresh(self):
        """Return to idle without touching snapshot, error or history."""
        with self._lock:
            self.phase = RefreshPhase.IDLE

    def get_view(self) -> StateView:
        """Get all refresh data in a thread-safe manner."""
        with self._lock:
            return StateView(
                last_good=self.last_good,
                last_error=self.last_error,
                history=list(self.history),
                phase=self.phase,
                updated_at=self.updated_at,
            )
