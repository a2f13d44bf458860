"""Shared error codes and user-facing messages."""

from __future__ import annotations

HISTORY_CORRUPT = "HISTORY_CORRUPT"
HISTORY_WRITE_FAILED = "HISTORY_WRITE_FAILED"
PLAYBACK_CALLBACK_FAILED = "PLAYBACK_CALLBACK_FAILED"

ERROR_MESSAGES = {
    HISTORY_CORRUPT: "Saved history could not be read and was reset.",
    HISTORY_WRITE_FAILED: "Training history could not be saved.",
    PLAYBACK_CALLBACK_FAILED: "Transmission display failed, playback stopped.",
}
