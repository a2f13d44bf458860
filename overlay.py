"""Overlay window showing the signal currently being transmitted."""

from __future__ import annotations

from models import NUMERIC_INDICATOR_CHAR, Signal, SignalMapping, Token, TokenKind

try:
    from PySide6.QtCore import Qt, QTimer
    from PySide6.QtWidgets import QApplication, QLabel, QWidget, QVBoxLayout
except Exception:  # pragma: no cover
    Qt = None  # type: ignore
    QTimer = None  # type: ignore
    QApplication = None  # type: ignore
    QLabel = object  # type: ignore
    QWidget = object  # type: ignore
    QVBoxLayout = object  # type: ignore

ARROWS = ("↓", "↙", "←", "↖", "↑", "↗", "→", "↘")

_LABEL_STYLE = (
    "color: white; font-size: 28px; padding: 16px;"
    "background: rgba(0,0,0,190); border-radius: 12px;"
)


def describe(token: Token, signal: Signal) -> str:
    """One-line text rendering of a token and its arm positions."""
    if token.kind == TokenKind.REST:
        name = "REST"
    elif token.kind == TokenKind.NUMERIC_INDICATOR:
        name = "NUM"
    else:
        name = token.char
    return f"{ARROWS[signal.left]} {name} {ARROWS[signal.right]}   (L{signal.left} R{signal.right})"


def dictionary_line(mapping: SignalMapping) -> str:
    name = "NUM" if mapping.character == NUMERIC_INDICATOR_CHAR else mapping.character
    return f"{name}:  {ARROWS[mapping.left]} {ARROWS[mapping.right]}  (L{mapping.left} R{mapping.right})"


class SignalOverlay(QWidget):
    def __init__(self) -> None:
        if Qt is None:
            raise RuntimeError("PySide6 is not installed")
        super().__init__()
        self.setWindowFlags(
            Qt.WindowStaysOnTopHint | Qt.FramelessWindowHint | Qt.Tool
        )
        self.setAttribute(Qt.WA_TranslucentBackground, True)
        self.setFixedWidth(420)

        self._label = QLabel("")
        self._label.setAlignment(Qt.AlignCenter)
        self._label.setStyleSheet(_LABEL_STYLE)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._label)
        self.setLayout(layout)

        self._hide_timer: QTimer | None = None

    def _center_top(self) -> None:
        if QApplication is None:
            return
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geom = screen.availableGeometry()
        self.adjustSize()
        x = geom.x() + (geom.width() - self.width()) // 2
        y = geom.y() + 40
        self.move(x, y)

    def show_signal(self, token: Token, signal: Signal) -> None:
        self.set_text(describe(token, signal))

    def set_text(self, text: str) -> None:
        self._cancel_hide_timer()
        self._label.setText(text)
        self._center_top()
        self.show()

    def hide_with_delay(self, delay_ms: int = 400) -> None:
        self._cancel_hide_timer()
        if QTimer is not None:
            self._hide_timer = QTimer()
            self._hide_timer.setSingleShot(True)
            self._hide_timer.timeout.connect(self.hide)
            self._hide_timer.start(delay_ms)

    def _cancel_hide_timer(self) -> None:
        if self._hide_timer is not None:
            self._hide_timer.stop()
            self._hide_timer = None
