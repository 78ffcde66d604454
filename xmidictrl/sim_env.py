"""In-memory stand-ins for simulator commands and datarefs."""

from __future__ import annotations

from collections.abc import Mapping

from xmidictrl.text_logger import TextLogger


class CommandRecorder:
    """Records the simulator commands that are started and finished."""

    def __init__(self) -> None:
        self.current_command = ""
        self.last_command = ""

    def begin(self, log: TextLogger, cmd: str) -> None:
        """Start a command; it stays current until it is ended."""
        self.current_command = cmd

    def end(self, log: TextLogger, cmd: str) -> None:
        """Finish a command and remember it as the last one."""
        self.current_command = ""
        self.last_command = cmd

    def execute(self, log: TextLogger, cmd: str) -> None:
        """Run a command at once: begin and end it."""
        self.begin(log, cmd)
        self.end(log, cmd)


class InMemoryData:
    """Datarefs held in memory, as string and numeric values."""

    def __init__(
        self,
        strings: Mapping[str, str] | None = None,
        floats: Mapping[str, float] | None = None,
    ) -> None:
        self.strings: dict[str, str] = dict(strings or {})
        self.floats: dict[str, float] = dict(floats or {})

    def check(self, name: str) -> bool:
        """Return whether a dataref of that name exists."""
        return name in self.strings or name in self.floats

    def read_string(self, log: TextLogger, name: str) -> str:
        """Return a string dataref; raises KeyError if it does not exist."""
        return self.strings[name]

    def read_float(self, log: TextLogger, name: str) -> float:
        """Return a numeric dataref; raises KeyError if it does not exist."""
        return self.floats[name]

    def read_floats(self, log: TextLogger, name: str) -> list[float]:
        """Return a float array dataref; arrays are always empty here."""
        return []

    def read_ints(self, log: TextLogger, name: str) -> list[int]:
        """Return an integer array dataref; arrays are always empty here."""
        return []

    def write(self, log: TextLogger, name: str, value: str | float) -> None:
        """Store a string or numeric value."""
        if isinstance(value, str):
            self.strings[name] = value
        else:
            self.floats[name] = float(value)

    def toggle(self, log: TextLogger, name: str, value_on: str, value_off: str) -> str:
        """Switch a string dataref between two values and return the new one."""
        new_value = value_off if self.strings.get(name) == value_on else value_on
        self.strings[name] = new_value
        return new_value