"""Pointer/touch input messages and the per-frame input queue."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar

if TYPE_CHECKING:
    from ripple_grid.types import Point, TickContext
    from ripple_grid.world import RippleWorld

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerDown:
    """A contact went down. ``contacts`` lists every contact now down."""

    contacts: tuple[Point, ...]

    needs_contact: ClassVar[bool] = True


@dataclass(frozen=True)
class PointerMove:
    contacts: tuple[Point, ...]

    needs_contact: ClassVar[bool] = True


@dataclass(frozen=True)
class PointerUp:
    """A contact lifted. ``contacts`` lists the contacts still down.

    An empty list is meaningful here: every contact has lifted.
    """

    contacts: tuple[Point, ...] = ()

    needs_contact: ClassVar[bool] = False


InputEvent = PointerDown | PointerMove | PointerUp


def _is_empty_contact(event: Any) -> bool:
    """Down/move messages without a contact carry nothing to act on."""
    return getattr(event, "needs_contact", False) and not event.contacts


class InputQueue:
    """Buffers host input between frames and routes it to typed handlers.

    One handler per message class. Messages are drained in FIFO order at
    the start of the next frame; down/move messages with no contacts are
    dropped there without reaching a handler.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[..., bool]] = {}
        self._pending: deque[Any] = deque()

    def handle(self, event_type: type[Any], handler: Callable[..., bool]) -> None:
        """Register ``handler(event, world, ctx) -> bool``.

        The return value reports whether the event changed any state.
        Later calls for the same type overwrite.
        """
        self._handlers[event_type] = handler

    def push(self, event: Any) -> None:
        self._pending.append(event)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self, world: RippleWorld, ctx: TickContext) -> list[tuple[Any, bool]]:
        """Dispatch everything pending. Returns ``[(event, applied), ...]``.

        Dropped empty-contact messages report ``applied=False``. Raises
        ``TypeError`` for a message class with no handler.
        """
        batch, self._pending = self._pending, deque()
        results: list[tuple[Any, bool]] = []
        for event in batch:
            handler = self._handlers.get(type(event))
            if handler is None:
                raise TypeError(f"No handler registered for {type(event).__qualname__}")
            if _is_empty_contact(event):
                logger.debug("frame %d: dropped %s without contacts",
                             ctx.frame_number, type(event).__name__)
                results.append((event, False))
                continue
            results.append((event, handler(event, world, ctx)))
        return results
