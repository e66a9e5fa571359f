"""Frame-scoped notification bus.

Systems publish while a frame runs; subscribers hear about it only when
the signal system flushes at the end of that frame, so every handler sees
the world after all sampling for the frame is done.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[_Handler]] = defaultdict(list)
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers[signal_name].append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver everything queued before this call. Returns handler calls made.

        Signals published by handlers wait for the next flush.
        """
        batch, self._queue = self._queue, []
        calls = 0
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
                calls += 1
        return calls
