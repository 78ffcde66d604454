"""Log of MIDI messages for display."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from xmidictrl.midi_message import MidiMessage


class MidiLogger:
    """Collects MIDI messages while enabled."""

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled
        self._lock = threading.Lock()
        self._messages: list[MidiMessage] = []

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[MidiMessage]:
        with self._lock:
            return iter(list(self._messages))

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._messages)

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def message(self, index: int) -> MidiMessage:
        """Return the message at the given index; raises IndexError if absent."""
        with self._lock:
            if not 0 <= index < len(self._messages):
                raise IndexError(f"message index {index} out of range")
            return self._messages[index]

    def add(self, msg: MidiMessage) -> None:
        """Record a message, unless logging is disabled."""
        with self._lock:
            if self.enabled:
                self._messages.append(msg)