"""Threaded playback of a transmission queue, one token per delay tick."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from config import clamp_level
from errors import PLAYBACK_CALLBACK_FAILED
from interfaces import ErrorCallback
from models import PlaybackState, Signal, Token, TransmissionQueue
from signal_table import lookup

logger = logging.getLogger(__name__)

StateCallback = Callable[[PlaybackState, PlaybackState], None]
TokenCallback = Callable[[int, Token, Signal], None]

MIN_DELAY_MS = 50


def delay_for_level(level: int) -> int:
    """Inter-token delay in ms for a speed level 0 (slowest) to 100."""
    return max(MIN_DELAY_MS, 2000 - clamp_level(level) * 19)


class PlaybackController:
    def __init__(
        self,
        on_token: Optional[TokenCallback] = None,
        on_state_change: Optional[StateCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self._on_token = on_token
        self._on_state_change = on_state_change
        self._on_error = on_error

        self._lock = threading.RLock()
        self._state = PlaybackState.IDLE
        self._queue: TransmissionQueue = []
        self._delay_ms = delay_for_level(50)
        self._current_index = -1
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def current_token(self) -> Token:
        with self._lock:
            if 0 <= self._current_index < len(self._queue):
                return self._queue[self._current_index]
            return Token.rest()

    def start(self, queue: TransmissionQueue, delay_ms: Optional[int] = None) -> None:
        with self._lock:
            if self._state == PlaybackState.PLAYING:
                return
            self._queue = list(queue)
            if delay_ms is not None:
                self._delay_ms = delay_ms
            self._begin()

    def restart(self, delay_ms: Optional[int] = None) -> None:
        self.stop()
        with self._lock:
            if delay_ms is not None:
                self._delay_ms = delay_ms
            self._begin()

    def stop(self) -> None:
        with self._lock:
            self._stop_event.set()
            thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1.0)
        with self._lock:
            # A restart may have begun a new run while we were joining.
            if self._thread is thread:
                self._transition(PlaybackState.IDLE)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the worker; True when playback is no longer running."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout=timeout)
        return not thread.is_alive()

    def _begin(self) -> None:
        self._stop_event = threading.Event()
        self._current_index = -1
        self._transition(PlaybackState.PLAYING)
        self._thread = threading.Thread(
            target=self._worker,
            args=(self._queue, self._delay_ms / 1000.0, self._stop_event),
            daemon=True,
        )
        self._thread.start()

    def _worker(self, queue: TransmissionQueue, delay_s: float, stop_event: threading.Event) -> None:
        for index, token in enumerate(queue):
            if stop_event.wait(timeout=delay_s):
                return
            with self._lock:
                if stop_event.is_set():
                    return
                self._current_index = index
                if not self._emit_token(index, token, stop_event):
                    return
        with self._lock:
            if not stop_event.is_set():
                self._transition(PlaybackState.FINISHED)

    def _emit_token(self, index: int, token: Token, stop_event: threading.Event) -> bool:
        if self._on_token is None:
            return True
        try:
            self._on_token(index, token, lookup(token))
        except Exception as exc:
            logger.exception("token callback failed at index %d", index)
            stop_event.set()
            self._transition(PlaybackState.IDLE)
            if self._on_error:
                self._on_error(PLAYBACK_CALLBACK_FAILED, str(exc))
            return False
        return True

    def _transition(self, to_state: PlaybackState) -> None:
        from_state = self._state
        if from_state == to_state:
            return
        self._state = to_state
        if self._on_state_change:
            self._on_state_change(from_state, to_state)
