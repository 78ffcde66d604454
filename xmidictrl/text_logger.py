"""Text logger collecting leveled messages, optionally mirrored to a file."""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass
from typing import IO, Iterator

from xmidictrl.types import LOGFILE_SUFFIX, XMIDICTRL_NAME, LogLevel
from xmidictrl.utils import trim

_LEVEL_TEXT = {
    LogLevel.ERROR: "Error",
    LogLevel.WARN: "Warning",
    LogLevel.INFO: "Information",
    LogLevel.DEBUG: "Debug",
}

_FILE_TAG = {
    LogLevel.ERROR: "   [ERROR]   ",
    LogLevel.WARN: "   [WARN]    ",
    LogLevel.INFO: "   [INFO]    ",
    LogLevel.DEBUG: "   [DEBUG]   ",
}


@dataclass
class TextLogMsg:
    """A single logged message."""

    time: str
    level: LogLevel
    text: str

    def level_text(self) -> str:
        """Return the message level as readable text."""
        return _LEVEL_TEXT.get(self.level, "<unknown>")


class TextLogger:
    """Collects text messages; messages are also forwarded to a parent logger."""

    def __init__(self, parent: TextLogger | None = None) -> None:
        self.parent = parent
        self.debug_mode = parent.debug_mode if parent is not None else False
        self.log_info = True

        self._lock = threading.Lock()
        self._messages: list[TextLogMsg] = []
        self._error_count = 0
        self._warn_count = 0
        self._file: IO[str] | None = None

    def __enter__(self) -> TextLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[TextLogMsg]:
        with self._lock:
            return iter(list(self._messages))

    def enable_file_logging(self, path: str | os.PathLike[str]) -> None:
        """Write messages to '<path>XMidiCtrl_Log.txt', truncating it."""
        prefix = os.fspath(path)
        if not prefix:
            self.error("Cannot open log file as the give file path is empty")
            return

        filename = prefix + XMIDICTRL_NAME + LOGFILE_SUFFIX
        self.close()
        try:
            self._file = open(filename, "w", encoding="utf-8")
        except OSError:
            self._file = None
            self.error(f"Failed to open log file '{filename}'")

    def close(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def clear(self) -> None:
        """Remove all messages and reset the error and warning counts."""
        with self._lock:
            self._error_count = 0
            self._warn_count = 0
            self._messages.clear()

    def count(self) -> int:
        """Return the number of messages."""
        with self._lock:
            return len(self._messages)

    def message(self, index: int) -> TextLogMsg:
        """Return the message at the given index; raises IndexError if absent."""
        with self._lock:
            if not 0 <= index < len(self._messages):
                raise IndexError(f"message index {index} out of range")
            return self._messages[index]

    def messages_as_text(self) -> str:
        """Return all message texts joined by newlines."""
        with self._lock:
            return "\n".join(msg.text for msg in self._messages)

    def has_errors(self) -> bool:
        with self._lock:
            return self._error_count > 0

    def has_warnings(self) -> bool:
        with self._lock:
            return self._warn_count > 0

    def debug(self, text: str) -> None:
        self._post(LogLevel.DEBUG, text)

    def debug_line(self, line: int, text: str) -> None:
        self.debug(f" --> Line {line} :: {trim(text)}")

    def debug_param(self, line: int, param: str, value: str) -> None:
        self.debug_line(line, f"Parameter '{param}' = '{value}'")

    def info(self, text: str) -> None:
        self._post(LogLevel.INFO, text)

    def warn(self, text: str) -> None:
        self._post(LogLevel.WARN, text)

    def warn_line(self, line: int, text: str) -> None:
        self.warn(f" --> Line {line} :: {trim(text)}")

    def error(self, text: str) -> None:
        self._post(LogLevel.ERROR, text)

    def error_line(self, line: int, text: str) -> None:
        self.error(f" --> Line {line} :: {trim(text)}")

    def _post(self, level: LogLevel, text: str) -> None:
        self._create_message(level, text)
        if self.parent is not None:
            self.parent._create_message(level, text)

    def _accepts(self, level: LogLevel) -> bool:
        if level in (LogLevel.ERROR, LogLevel.WARN):
            return True
        if level is LogLevel.INFO:
            return self.log_info or self.debug_mode
        return self.debug_mode

    def _create_message(self, level: LogLevel, text: str) -> None:
        if self._accepts(level):
            self._add_message(level, text)

    def _add_message(self, level: LogLevel, text: str) -> None:
        with self._lock:
            if level is LogLevel.WARN:
                self._warn_count += 1
            elif level is LogLevel.ERROR:
                self._error_count += 1

            msg = TextLogMsg(time.strftime("%Y-%m-%d %H:%M:%S", time.localtime()), level, str(text))
            self._messages.append(msg)

            if self._file is not None:
                self._file.write(f"{msg.time}{_FILE_TAG[level]}{msg.text}\n")
                self._file.flush()