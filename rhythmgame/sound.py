"""Background beeper that plays queued tones without blocking the game loop."""

from __future__ import annotations

import queue
import sys
import threading
import time
from collections.abc import Callable

Player = Callable[[int, int], None]


def _terminal_bell(frequency: int, duration: int) -> None:
    """Ring the terminal bell and hold for the tone's duration in milliseconds."""
    sys.stderr.write("\a")
    sys.stderr.flush()
    time.sleep(duration / 1000)


class SoundManager:
    """Plays tones on a worker thread, in the order they were requested."""

    def __init__(self, player: Player | None = None) -> None:
        self._player = player or _terminal_bell
        self._queue: queue.SimpleQueue[tuple[int, int]] = queue.SimpleQueue()
        self._running = threading.Event()
        self._thread: threading.Thread | None = None

    def play(self, frequency: int, duration: int) -> None:
        """Queue a tone of the given frequency (Hz) and duration (ms)."""
        self._queue.put((frequency, duration))

    def start(self) -> None:
        """Start the worker thread; does nothing if it is already running."""
        if self._thread is not None:
            return
        self._running.set()
        self._thread = threading.Thread(target=self._loop, name="sound", daemon=True)
        self._thread.start()

    def close(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        self._running.clear()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> SoundManager:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _loop(self) -> None:
        while self._running.is_set():
            try:
                frequency, duration = self._queue.get(timeout=0.001)
            except queue.Empty:
                continue
            self._player(frequency, duration)