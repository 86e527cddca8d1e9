"""Exception types raised by battmon."""
from typing import List, Optional


class BattmonError(Exception):
    """Base class for battmon errors."""


class AcquisitionIOError(BattmonError):
    """The power registry query could not be run or its output not read."""

    def __init__(self, command: List[str], reason: str, cause: Optional[BaseException] = None):
        super().__init__(f"{' '.join(command)}: {reason}")
        self.command = command
        self.reason = reason
        self.cause = cause
