import time

from PySide6.QtCore import QCoreApplication

from analogclock import config
from analogclock.controller.scheduler import RedrawScheduler


def test_defaults(qapp):
    scheduler = RedrawScheduler(lambda: None)
    assert scheduler.delay_ms == config.REDRAW_DELAY_MS == 1000
    assert not scheduler.is_attached
    assert scheduler.requests_issued == 0


def test_requests_dropped_while_detached(qapp):
    scheduler = RedrawScheduler(lambda: None)
    assert scheduler.request() is False
    assert scheduler.requests_issued == 0
    assert not scheduler.is_pending


def test_request_queues_single_shot(qapp):
    delays = []
    scheduler = RedrawScheduler(lambda: None)
    scheduler.redraw_requested.connect(delays.append)
    scheduler.attach()

    assert scheduler.request() is True
    assert scheduler.is_pending
    assert scheduler.requests_issued == 1
    assert delays == [1000]


def test_detach_cancels_pending_redraw(qapp):
    scheduler = RedrawScheduler(lambda: None)
    scheduler.attach()
    scheduler.request()
    scheduler.detach()
    assert not scheduler.is_pending
    assert scheduler.request() is False
    assert scheduler.requests_issued == 1


def test_callback_fires_after_delay(qapp):
    fired = []
    scheduler = RedrawScheduler(lambda: fired.append(True), delay_ms=10)
    scheduler.attach()
    scheduler.request()

    deadline = time.monotonic() + 2.0
    while not fired and time.monotonic() < deadline:
        QCoreApplication.processEvents()
    assert fired == [True]
