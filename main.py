"""Desktop tray entrypoint for semaphore practice."""

from __future__ import annotations

import logging
import sys

from config import JsonPreferencesStore
from errors import ERROR_MESSAGES
from history import JsonHistoryStore
from interfaces import PreferencesStore
from models import PlaybackState, PracticeKind, Signal, Token, TokenKind
from overlay import SignalOverlay, dictionary_line
from phrases import pick_phrase
from playback_controller import PlaybackController, delay_for_level
from session_recorder import SessionRecorder
from signal_table import SPECIAL_SYMBOL_DICTIONARY, lookup, search
from stats import rank, summarize
from transcoder import encode, transmitted_text
from transcript import process_transcript

try:
    from PySide6.QtCore import QObject, Signal as QtSignal
    from PySide6.QtGui import QAction
    from PySide6.QtWidgets import QApplication, QInputDialog, QMenu, QMessageBox, QSystemTrayIcon
    from PySide6.QtWidgets import QStyle
except Exception as exc:  # pragma: no cover
    raise SystemExit(f"PySide6 is required to run the desktop app: {exc}")

logger = logging.getLogger(__name__)


class UIBridge(QObject):
    token_signal = QtSignal(str, str)  # token kind, token char
    state_signal = QtSignal(str, str)  # from_state, to_state
    error_signal = QtSignal(str)


class App:
    def __init__(self) -> None:
        self.app = QApplication(sys.argv)
        self.app.setQuitOnLastWindowClosed(False)
        self.preferences: PreferencesStore = JsonPreferencesStore()
        self.overlay = SignalOverlay()
        self.ui = UIBridge()
        self.ui.token_signal.connect(self._on_token_ui)
        self.ui.state_signal.connect(self._on_state_change_ui)
        self.ui.error_signal.connect(self._on_error_ui)

        self.recorder = SessionRecorder(JsonHistoryStore(on_error=self._on_error))
        self.player = PlaybackController(
            on_token=self._on_token,
            on_state_change=self._on_state_change,
            on_error=self._on_error,
        )
        self.phrase = ""
        self.queue_text = ""

        self.tray = QSystemTrayIcon()
        self.tray.setIcon(self.app.style().standardIcon(QStyle.SP_ArrowUp))
        self.tray.setToolTip("Semaphore Trainer — Ready")
        self._setup_menu()
        self.tray.show()

    def _setup_menu(self) -> None:
        menu = QMenu()

        for label, kind in (
            ("Short Phrase", PracticeKind.SHORT),
            ("Long Phrase", PracticeKind.LONG),
            ("Extensive Drill", PracticeKind.DRILL),
        ):
            action = QAction(label, menu)
            action.triggered.connect(lambda _checked=False, k=kind: self.start_practice(k))
            menu.addAction(action)

        replay_action = QAction("Replay", menu)
        replay_action.triggered.connect(self.replay)
        menu.addAction(replay_action)

        answer_action = QAction("Submit Answer", menu)
        answer_action.triggered.connect(self.submit_answer)
        menu.addAction(answer_action)

        dictated_action = QAction("Submit Dictated Answer", menu)
        dictated_action.triggered.connect(lambda: self.submit_answer(dictated=True))
        menu.addAction(dictated_action)

        menu.addSeparator()
        speed_action = QAction("Set Speed", menu)
        speed_action.triggered.connect(self._set_speed)
        menu.addAction(speed_action)

        stats_action = QAction("Stats", menu)
        stats_action.triggered.connect(self._show_stats)
        menu.addAction(stats_action)

        dictionary_action = QAction("Dictionary", menu)
        dictionary_action.triggered.connect(self._show_dictionary)
        menu.addAction(dictionary_action)

        menu.addSeparator()
        quit_action = QAction("Quit", menu)
        quit_action.triggered.connect(self.quit)
        menu.addAction(quit_action)

        self.tray.setContextMenu(menu)

    # ------------------------------------------------------------------
    # Practice flow
    # ------------------------------------------------------------------

    def start_practice(self, kind: PracticeKind) -> None:
        self.player.stop()
        self.phrase = pick_phrase(kind)
        queue = encode(self.phrase)
        self.queue_text = transmitted_text(queue)
        logger.info("practice %s: %d tokens", kind.value, len(queue))
        self.player.start(queue, delay_for_level(self.preferences.get_speed_level()))

    def replay(self) -> None:
        if self.phrase:
            self.player.restart(delay_for_level(self.preferences.get_speed_level()))

    def submit_answer(self, dictated: bool = False) -> None:
        if not self.phrase:
            return
        if not self.preferences.get_guide_seen():
            self._show_symbol_guide()
            self.preferences.set_guide_seen(True)
        prompt = "Dictated transcript" if dictated else "Decoded message"
        value, ok = QInputDialog.getText(None, "Answer", prompt)
        if not ok:
            return
        if dictated:
            value = process_transcript(value)
        self.player.stop()
        session = self.recorder.record(
            self.phrase, self.queue_text, value, self.player.delay_ms
        )
        QMessageBox.information(
            None,
            "Result",
            f"{session.accuracy}% accuracy\n\nSent: {self.phrase}\nYou: {session.user_phrase}",
        )
        self.phrase = ""

    def _show_symbol_guide(self) -> None:
        lines = [f"{s.group} → {s.symbol}  ({s.name})" for s in SPECIAL_SYMBOL_DICTIONARY]
        QMessageBox.information(None, "Special Symbols", "\n".join(lines))

    def _show_dictionary(self) -> None:
        query, ok = QInputDialog.getText(None, "Dictionary", "Letter, digit, # or \"number\"")
        if not ok:
            return
        matches = search(query)
        if not matches:
            QMessageBox.information(None, "Dictionary", "No signals match your search.")
            return
        QMessageBox.information(None, "Dictionary", "\n".join(dictionary_line(m) for m in matches))

    def _set_speed(self) -> None:
        value, ok = QInputDialog.getInt(
            None, "Speed", "Speed level (0-100)", self.preferences.get_speed_level(), 0, 100
        )
        if ok:
            self.preferences.set_speed_level(value)

    def _show_stats(self) -> None:
        history = self.recorder.sink.sessions()
        summary = summarize(history)
        QMessageBox.information(
            None,
            "Stats",
            f"Rank: {rank(history)}\n"
            f"Sessions: {summary.count}\n"
            f"Average accuracy: {summary.average_accuracy:.0f}%\n"
            f"Characters sent: {summary.total_characters}\n"
            f"Average delay: {summary.average_speed_ms:.0f}ms",
        )

    # ------------------------------------------------------------------
    # Callbacks (called from the playback thread → emit signals for UI thread)
    # ------------------------------------------------------------------

    def _on_token(self, index: int, token: Token, signal: Signal) -> None:
        self.ui.token_signal.emit(token.kind.value, token.char)

    def _on_state_change(self, from_state: PlaybackState, to_state: PlaybackState) -> None:
        self.ui.state_signal.emit(from_state.value, to_state.value)

    def _on_error(self, code: str, message: str) -> None:
        self.ui.error_signal.emit(f"{ERROR_MESSAGES.get(code, code)} {message}")

    # ------------------------------------------------------------------
    # UI thread handlers (safe for Qt)
    # ------------------------------------------------------------------

    def _on_token_ui(self, kind: str, char: str) -> None:
        token = Token(TokenKind(kind), char)
        self.overlay.show_signal(token, lookup(token))

    def _on_state_change_ui(self, from_state: str, to_state: str) -> None:
        if to_state == PlaybackState.PLAYING.value:
            self.tray.setToolTip("Semaphore Trainer — Transmitting...")
        elif to_state == PlaybackState.FINISHED.value:
            self.tray.setToolTip("Semaphore Trainer — Awaiting answer")
            self.overlay.hide_with_delay(800)
        elif to_state == PlaybackState.IDLE.value:
            self.tray.setToolTip("Semaphore Trainer — Ready")
            self.overlay.hide_with_delay(400)

    def _on_error_ui(self, msg: str) -> None:
        self.tray.showMessage("Semaphore Trainer", msg)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self) -> int:
        return self.app.exec()

    def quit(self) -> None:
        self.player.stop()
        self.app.quit()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    app = App()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
