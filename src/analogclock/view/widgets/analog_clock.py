"""
Analog Clock Widget
===================
A custom-painted QWidget showing the current local time.

Why is this file needed?
------------------------
1. Size negotiation: The widget asks for a square and draws into the largest
   centred square of whatever rectangle the host layout commits.
2. Layout: On every resize the whole DialLayout is recomputed and swapped in
   with one assignment, so paintEvent never reads a half-built layout.
3. Animation: Each paint pass requests the next one through RedrawScheduler,
   giving a once-per-second refresh while the widget is visible.
"""
import logging
from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QHideEvent, QPainter, QPaintEvent, QResizeEvent, QShowEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from analogclock import config
from analogclock.controller.scheduler import RedrawScheduler
from analogclock.model.geometry import DialLayout, TextMetrics, compute_layout
from analogclock.model.hands import hand_segments
from analogclock.model.time_sample import TimeSample, TimeSampler
from analogclock.view.widgets.painting import draw_dial, draw_hands
from analogclock.view.widgets.text_metrics import qt_text_metrics

logger = logging.getLogger(__name__)


class AnalogClockWidget(QWidget):
    def __init__(
        self,
        parent: Optional[QWidget] = None,
        sampler: Optional[TimeSampler] = None,
        metrics: TextMetrics = qt_text_metrics,
        delay_ms: int = config.REDRAW_DELAY_MS,
    ) -> None:
        super().__init__(parent=parent)

        self._sampler: TimeSampler = sampler or TimeSampler()
        self._metrics: TextMetrics = metrics
        self._scheduler = RedrawScheduler(self.update, delay_ms=delay_ms, parent=self)

        # only ever replaced as a whole
        self._layout: DialLayout = compute_layout(self.width(), self.height(), self._metrics)
        self._last_sample: Optional[TimeSample] = None

        policy = QSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def dial_layout(self) -> DialLayout:
        return self._layout

    @property
    def scheduler(self) -> RedrawScheduler:
        return self._scheduler

    @property
    def last_sample(self) -> Optional[TimeSample]:
        """Time drawn by the most recent paint pass."""
        return self._last_sample

    def relayout(self, width: int, height: int) -> DialLayout:
        self._layout = compute_layout(width, height, self._metrics)
        return self._layout

    def paint_frame(self, painter: QPainter) -> None:
        """
        One full draw pass: dial, fresh time sample, hands, then queue the next
        pass. The painter is expected to have its origin at the viewport's top
        left corner.
        """
        layout = self._layout
        sample = self._sampler.sample()
        self._last_sample = sample

        if not layout.viewport.is_empty:
            draw_dial(painter, layout)
            draw_hands(painter, layout, hand_segments(sample, layout.viewport))

        self._scheduler.request()

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def sizeHint(self) -> QSize:
        return QSize(config.DEFAULT_SIZE_HINT, config.DEFAULT_SIZE_HINT)

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return width

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.relayout(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        viewport = self._layout.viewport
        painter = QPainter(self)
        try:
            # centre the committed square inside the widget rect
            painter.translate((self.width() - viewport.width) / 2.0, (self.height() - viewport.height) / 2.0)
            self.paint_frame(painter)
        finally:
            painter.end()

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self._scheduler.attach()
        self.update()

    def hideEvent(self, event: QHideEvent) -> None:
        self._scheduler.detach()
        super().hideEvent(event)
