"""Protocol interfaces for the collaborators the trainer core talks to."""

from __future__ import annotations

from typing import Callable, List, Protocol

from models import TrainingSession

Clock = Callable[[], int]
IdFactory = Callable[[], str]
ErrorCallback = Callable[[str, str], None]


class HistorySink(Protocol):
    def prepend(self, session: TrainingSession) -> None: ...

    def sessions(self) -> List[TrainingSession]: ...

    def clear(self) -> None: ...


class PreferencesStore(Protocol):
    def get_guide_seen(self) -> bool: ...

    def set_guide_seen(self, seen: bool) -> None: ...

    def get_speed_level(self) -> int: ...

    def set_speed_level(self, level: int) -> None: ...
