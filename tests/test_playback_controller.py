from __future__ import annotations

import threading

from errors import PLAYBACK_CALLBACK_FAILED
from models import PlaybackState, Signal, Token
from playback_controller import PlaybackController, delay_for_level
from transcoder import encode


class TokenRecorder:
    def __init__(self) -> None:
        self.calls: list[tuple[int, Token, Signal]] = []
        self.lock = threading.Lock()

    def __call__(self, index: int, token: Token, signal: Signal) -> None:
        with self.lock:
            self.calls.append((index, token, signal))


def test_delay_for_level() -> None:
    assert delay_for_level(0) == 2000
    assert delay_for_level(50) == 1050
    assert delay_for_level(100) == 100
    assert delay_for_level(250) == 100
    assert delay_for_level(-10) == 2000


def test_plays_every_token_in_order_then_finishes() -> None:
    tokens = TokenRecorder()
    transitions: list[tuple[PlaybackState, PlaybackState]] = []
    controller = PlaybackController(
        on_token=tokens,
        on_state_change=lambda f, t: transitions.append((f, t)),
    )
    queue = encode("A1")

    controller.start(queue, delay_ms=1)
    assert controller.wait(timeout=2.0)

    assert [index for index, _, _ in tokens.calls] == list(range(len(queue)))
    assert [token for _, token, _ in tokens.calls] == queue
    assert tokens.calls[0][2] == Signal(0, 1)
    assert tokens.calls[1][2] == Signal(4, 5)
    assert controller.state == PlaybackState.FINISHED
    assert controller.current_index == len(queue) - 1
    assert transitions == [
        (PlaybackState.IDLE, PlaybackState.PLAYING),
        (PlaybackState.PLAYING, PlaybackState.FINISHED),
    ]


def test_empty_queue_finishes_immediately() -> None:
    tokens = TokenRecorder()
    controller = PlaybackController(on_token=tokens)

    controller.start([], delay_ms=1)
    assert controller.wait(timeout=1.0)

    assert tokens.calls == []
    assert controller.state == PlaybackState.FINISHED
    assert controller.current_token() == Token.rest()


def test_stop_cancels_playback() -> None:
    tokens = TokenRecorder()
    controller = PlaybackController(on_token=tokens)

    controller.start(encode("SURVEILLANCE"), delay_ms=200)
    controller.stop()

    assert controller.wait(timeout=1.0)
    assert controller.state == PlaybackState.IDLE
    assert len(tokens.calls) < len("SURVEILLANCE")


def test_start_while_playing_is_noop() -> None:
    tokens = TokenRecorder()
    controller = PlaybackController(on_token=tokens)

    controller.start(encode("AB"), delay_ms=20)
    controller.start(encode("XYZ"), delay_ms=1)  # should be no-op
    assert controller.wait(timeout=2.0)

    assert [token.char for _, token, _ in tokens.calls] == ["A", "B"]


def test_restart_replays_last_queue() -> None:
    tokens = TokenRecorder()
    controller = PlaybackController(on_token=tokens)

    controller.start(encode("AB"), delay_ms=1)
    assert controller.wait(timeout=1.0)
    controller.restart()
    assert controller.wait(timeout=1.0)

    assert [token.char for _, token, _ in tokens.calls] == ["A", "B", "A", "B"]
    assert controller.state == PlaybackState.FINISHED


def test_callback_error_stops_and_reports() -> None:
    errors: list[tuple[str, str]] = []

    def boom(index: int, token: Token, signal: Signal) -> None:
        raise RuntimeError("render failed")

    controller = PlaybackController(on_token=boom, on_error=lambda c, m: errors.append((c, m)))
    controller.start(encode("ABC"), delay_ms=1)
    assert controller.wait(timeout=1.0)

    assert controller.state == PlaybackState.IDLE
    assert errors == [(PLAYBACK_CALLBACK_FAILED, "render failed")]


def test_stop_from_token_callback() -> None:
    seen: list[int] = []

    def on_token(index: int, token: Token, signal: Signal) -> None:
        seen.append(index)
        controller.stop()

    controller = PlaybackController(on_token=on_token)
    controller.start(encode("ABC"), delay_ms=1)
    assert controller.wait(timeout=1.0)

    assert seen == [0]
    assert controller.state == PlaybackState.IDLE


def test_stop_when_idle_is_noop() -> None:
    transitions: list[tuple[PlaybackState, PlaybackState]] = []
    controller = PlaybackController(on_state_change=lambda f, t: transitions.append((f, t)))
    controller.stop()
    assert controller.state == PlaybackState.IDLE
    assert transitions == []
    assert controller.wait(timeout=0.1)


def test_restart_uses_new_delay() -> None:
    tokens = TokenRecorder()
    controller = PlaybackController(on_token=tokens)

    controller.start(encode("AB"), delay_ms=1)
    assert controller.wait(timeout=1.0)
    controller.restart(delay_ms=5)
    assert controller.wait(timeout=1.0)

    assert controller.delay_ms == 5
    assert [token.char for _, token, _ in tokens.calls] == ["A", "B", "A", "B"]


def test_stop_after_restart_cancels_new_run() -> None:
    tokens = TokenRecorder()
    transitions: list[tuple[PlaybackState, PlaybackState]] = []
    controller = PlaybackController(
        on_token=tokens,
        on_state_change=lambda f, t: transitions.append((f, t)),
    )

    controller.start(encode("SURVEILLANCE"), delay_ms=200)
    controller.restart()
    controller.stop()

    assert controller.wait(timeout=1.0)
    assert controller.state == PlaybackState.IDLE
    assert tokens.calls == []
    assert transitions[-1] == (PlaybackState.PLAYING, PlaybackState.IDLE)
