# MIT License (see LICENSE)
"""
Recurring, cancellable tick sources for continuous play.

A cadence calls a callback at a fixed wall-clock interval on a single
thread of control. Starting one returns a CadenceHandle; cancelling the
handle is idempotent and guarantees the callback will not run again.

Implementations:
    - AsyncioCadence: schedules ticks on an asyncio event loop.
    - ManualCadence: virtual clock advanced explicitly, for tests and
      headless batch runs.

Example:
    cadence = AsyncioCadence()
    handle = cadence.start(0.05, session.step)
    ...
    handle.cancel()
"""
from __future__ import annotations
import asyncio
import heapq
import itertools
from typing import Callable, Protocol


TickCallback = Callable[[], None]


class CadenceHandle:
    """
    Handle to a running cadence.

    Subclasses implement _stop() to release whatever is scheduled.
    """

    def __init__(self, interval: float, callback: TickCallback) -> None:
        self.interval = interval
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        """True until cancel() has been called."""
        return self._active

    def cancel(self) -> None:
        """Stop the cadence. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._stop()

    def _fire(self) -> None:
        """
        Run one tick, then schedule the next unless cancelled by it.

        The next tick is armed even when the callback raises; the error
        still propagates to whoever drives the loop.
        """
        if not self._active:
            return
        try:
            self._callback()
        finally:
            if self._active:
                self._schedule_next()

    def _schedule_next(self) -> None:
        raise NotImplementedError

    def _stop(self) -> None:
        raise NotImplementedError


class Cadence(Protocol):
    """Anything that can start a recurring tick."""

    def start(self, interval: float, callback: TickCallback) -> CadenceHandle:
        ...


# =============================================================================
# asyncio
# =============================================================================

class _AsyncioHandle(CadenceHandle):
    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: TickCallback,
    ) -> None:
        super().__init__(interval, callback)
        self._loop = loop
        self._timer: asyncio.TimerHandle | None = None
        self._schedule_next()

    def _schedule_next(self) -> None:
        self._timer = self._loop.call_later(self.interval, self._fire)

    def _stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


class AsyncioCadence:
    """
    Cadence driven by an asyncio event loop.

    Each tick re-arms itself with loop.call_later after the callback
    returns, so ticks never overlap.

    Args:
        loop: Event loop to schedule on. Defaults to the running loop at
              start() time.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def start(self, interval: float, callback: TickCallback) -> CadenceHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioHandle(loop, interval, callback)


# =============================================================================
# Manual (virtual clock)
# =============================================================================

class _ManualHandle(CadenceHandle):
    def __init__(self, owner: "ManualCadence", interval: float, callback: TickCallback) -> None:
        super().__init__(interval, callback)
        self._owner = owner
        self._schedule_next()

    def _schedule_next(self) -> None:
        self._owner._push(self._owner.now + self.interval, self)

    def _stop(self) -> None:
        self._owner._discard(self)


class ManualCadence:
    """
    Deterministic cadence on a virtual clock.

    Nothing happens until advance() is called; ticks then fire in time
    order, ties broken by scheduling order.

    Example:
        cadence = ManualCadence()
        session = Session(cadence=cadence)
        session.play()
        cadence.advance(1.0)   # twenty ticks at 0.05 s
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, _ManualHandle]] = []
        self._counter = itertools.count()

    @property
    def pending(self) -> int:
        """Number of scheduled ticks not yet fired."""
        return len(self._queue)

    def start(self, interval: float, callback: TickCallback) -> CadenceHandle:
        return _ManualHandle(self, interval, callback)

    def advance(self, seconds: float) -> int:
        """
        Move the virtual clock forward, firing every tick that falls due.

        Returns:
            Number of ticks fired.
        """
        deadline = self.now + seconds
        fired = 0
        # Small tolerance so accumulated float error does not skip a tick.
        while self._queue and self._queue[0][0] <= deadline + 1e-12:
            when, _, handle = heapq.heappop(self._queue)
            self.now = max(self.now, when)
            handle._fire()
            fired += 1
        self.now = deadline
        return fired

    def _push(self, when: float, handle: _ManualHandle) -> None:
        heapq.heappush(self._queue, (when, next(self._counter), handle))

    def _discard(self, handle: _ManualHandle) -> None:
        self._queue = [entry for entry in self._queue if entry[2] is not handle]
        heapq.heapify(self._queue)
