"""Single serialisation point for timer ticks and player commands.

Front-ends and timers call :meth:`GameLoop.submit` or :meth:`GameLoop.advance`
from whatever thread they run on.  Only :meth:`GameLoop.pump` touches the
session, one command at a time and in arrival order, publishing a fresh
:class:`~blockfall.game_state.Snapshot` after each transition.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from typing import Callable, List, Optional, Union

from .commands import Command
from .game_state import GameState, Snapshot


LOGGER = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class GameLoop:
    """Funnel ticks and commands into one :class:`GameState`."""

    def __init__(self, state: Optional[GameState] = None, tick_ms: Optional[float] = None) -> None:
        self.state = state or GameState()
        self.tick_ms = float(tick_ms if tick_ms is not None else self.state.config.tick_ms)
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.drop_accum = 0.0
        self._queue: "queue.Queue[Command]" = queue.Queue()
        self._lock = threading.Lock()
        self._listeners: List[Listener] = []
        self._snapshot = self.state.snapshot()

    @property
    def snapshot(self) -> Snapshot:
        """Most recently published snapshot."""

        return self._snapshot

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with every snapshot published by :meth:`pump`."""

        self._listeners.append(listener)

    def submit(self, command: Union[Command, str]) -> None:
        """Queue ``command`` for the next :meth:`pump`.

        Raises:
            ValueError: If ``command`` is not a known command name.
        """

        self._queue.put(Command(command))

    def advance(self, elapsed_ms: float) -> int:
        """Account for ``elapsed_ms`` of wall-clock time and queue due ticks."""

        self.drop_accum += elapsed_ms
        ticks = 0
        while self.drop_accum >= self.tick_ms:
            self.drop_accum -= self.tick_ms
            self._queue.put(Command.TICK)
            ticks += 1
        return ticks

    def pump(self) -> int:
        """Apply every queued command in order and return how many ran."""

        processed = 0
        with self._lock:
            while True:
                try:
                    command = self._queue.get_nowait()
                except queue.Empty:
                    break
                self.state.apply(command)
                if command is Command.RESET:
                    # A new game starts its gravity timer from zero.
                    self.drop_accum = 0.0
                self._publish()
                processed += 1
        return processed

    def _publish(self) -> None:
        self._snapshot = self.state.snapshot()
        for listener in self._listeners:
            listener(self._snapshot)

    def run(
        self,
        stop: threading.Event,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        poll_s: float = 0.01,
    ) -> None:
        """Drive the loop until ``stop`` is set.

        ``clock`` returns seconds; elapsed time between polls is converted to
        ticks via :meth:`advance`.
        """

        LOGGER.info("Game loop started (tick every %.0f ms)", self.tick_ms)
        last = clock()
        while not stop.is_set():
            now = clock()
            self.advance((now - last) * 1000.0)
            last = now
            self.pump()
            sleep(poll_s)
        self.pump()
        LOGGER.info("Game loop stopped")
