"""
Redraw Scheduling
=================
This module drives the clock's once-per-second refresh.

Why is this file needed?
------------------------
1. Self-sustaining loop: Every completed paint pass asks for the next one.
   There is no free-running periodic timer; if a paint pass fails, the chain
   stops.
2. Lifecycle: The owning widget attaches the scheduler when shown and detaches
   it when hidden. While detached, requests are dropped and any pending
   redraw is cancelled.

Classes:
    RedrawScheduler: Single-shot QTimer wrapper with attach/detach.
"""
import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from analogclock import config

logger = logging.getLogger(__name__)


class RedrawScheduler(QObject):
    # Emitted each time a delayed redraw is actually queued
    redraw_requested = Signal(int)  # delay in ms

    def __init__(
        self,
        callback: Callable[[], None],
        delay_ms: int = config.REDRAW_DELAY_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._attached: bool = False
        self.requests_issued: int = 0

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(callback)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_attached(self) -> bool:
        return self._attached

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def attach(self) -> None:
        self._attached = True
        logger.debug("Redraw scheduler attached.")

    def detach(self) -> None:
        """Stop honouring requests and drop the one in flight, if any."""
        self._attached = False
        self._timer.stop()
        logger.debug("Redraw scheduler detached.")

    def request(self) -> bool:
        """
        Queue one redraw after the fixed delay.

        Returns:
            True if the request was queued, False if it was dropped because the
            scheduler is detached.
        """
        if not self._attached:
            return False

        # a newer request supersedes a pending one
        self._timer.start()
        self.requests_issued += 1
        self.redraw_requested.emit(self._timer.interval())
        return True
