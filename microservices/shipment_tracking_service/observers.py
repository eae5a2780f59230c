"""
Shipment Observers

ShipmentTracker projects a shipment into a display-friendly TrackerView each
time the shipment notifies it. QueuedObserver moves delivery to a worker
thread behind a bounded queue so a slow observer does not hold up update
processing; the queue is FIFO, so per-shipment ordering is preserved.
"""

import logging
import queue
import threading
from datetime import tzinfo
from typing import List, Optional

from .models import Shipment, ShippingUpdate, TrackerView
from .protocols import ShipmentObserverProtocol
from .rule_validator import TIMESTAMP_RANGE_ERRORS, format_timestamp

logger = logging.getLogger(__name__)


def display_time(timestamp_ms: int, tz: Optional[tzinfo] = None) -> str:
    """Formatted time, or the raw milliseconds when outside the calendar range"""
    try:
        return format_timestamp(timestamp_ms, tz)
    except TIMESTAMP_RANGE_ERRORS:
        return str(timestamp_ms)


def describe_update(update: ShippingUpdate, tz: Optional[tzinfo] = None) -> str:
    """Render one history entry as a display line"""
    line = f"{display_time(update.timestamp, tz)} {update.update_type}"
    if update.other_info:
        line += f": {update.other_info[0]}"
    return line


class ShipmentTracker:
    """
    Observer holding the latest projected state of one shipment

    Notifications for any other shipment ID are logged and ignored.
    """

    def __init__(self, shipment_id: str, tz: Optional[tzinfo] = None):
        self.shipment_id = shipment_id
        self.tz = tz
        self.update_count = 0
        self.last_status: Optional[str] = None
        self.last_location: Optional[str] = None
        self.last_expected_delivery: Optional[int] = None
        self.last_notes: List[str] = []
        self.last_update_history: List[ShippingUpdate] = []
        self.last_rule_violations: List[str] = []
        self.view = TrackerView(shipment_id=shipment_id)

    def notify(self, shipment: Shipment) -> None:
        if shipment.id != self.shipment_id:
            logger.warning(
                f"Tracker for {self.shipment_id} received update for unexpected shipment ID: {shipment.id}"
            )
            return

        self.update_count += 1
        self.last_status = shipment.status
        self.last_location = shipment.current_location
        self.last_expected_delivery = shipment.expected_delivery_timestamp
        self.last_notes = list(shipment.notes)
        self.last_update_history = list(shipment.update_history)
        self.last_rule_violations = list(shipment.rule_violations)
        self.view = self._project()

        logger.debug(
            f"Tracker for {shipment.id} received update: status={shipment.status}, "
            f"location={shipment.current_location or 'N/A'}, "
            f"notes={len(self.last_notes)}, history={len(self.last_update_history)}"
        )

    def reset(self) -> None:
        """Return to the empty N/A view"""
        self.update_count = 0
        self.last_status = None
        self.last_location = None
        self.last_expected_delivery = None
        self.last_notes = []
        self.last_update_history = []
        self.last_rule_violations = []
        self.view = TrackerView(shipment_id=self.shipment_id)

    def _project(self) -> TrackerView:
        expected = None
        if self.last_expected_delivery is not None:
            expected = display_time(self.last_expected_delivery, self.tz)
        return TrackerView(
            shipment_id=self.shipment_id,
            status=self.last_status or "N/A",
            current_location=self.last_location,
            expected_delivery=expected,
            notes=list(self.last_notes),
            update_history=[describe_update(u, self.tz) for u in self.last_update_history],
            rule_violations=list(self.last_rule_violations),
        )

    def __repr__(self) -> str:
        return f"ShipmentTracker({self.shipment_id!r})"


_STOP = object()


class QueuedObserver:
    """
    Asynchronous wrapper around another observer

    notify() enqueues a snapshot of the shipment and returns; a single worker
    thread hands snapshots to the delegate in arrival order. When the queue
    is full, notify() blocks until the worker catches up.
    """

    def __init__(self, delegate: ShipmentObserverProtocol, maxsize: int = 100):
        self.delegate = delegate
        self._queue: "queue.Queue" = queue.Queue(maxsize=maxsize)
        self._closed = False
        self._worker = threading.Thread(
            target=self._run, name=f"queued-observer-{id(self):x}", daemon=True
        )
        self._worker.start()

    def notify(self, shipment: Shipment) -> None:
        if self._closed:
            raise RuntimeError("QueuedObserver is closed")
        self._queue.put(shipment.snapshot())

    def join(self) -> None:
        """Block until every queued notification has been delivered"""
        self._queue.join()

    def close(self, timeout: Optional[float] = None) -> None:
        """Deliver what is queued, then stop the worker"""
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        self._worker.join(timeout)

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self.delegate.notify(item)
            except Exception as e:
                logger.error(f"Queued observer delegate {self.delegate!r} failed: {e}", exc_info=True)
            finally:
                self._queue.task_done()

    def __repr__(self) -> str:
        return f"QueuedObserver({self.delegate!r})"


__all__ = ["ShipmentTracker", "QueuedObserver", "describe_update", "display_time"]
