"""Helpers for reading typed values out of parsed TOML configuration tables.

Reading functions never raise on bad configuration: problems are written to
the given logger and the fallback value is returned instead.
"""

from __future__ import annotations

import errno
import os
import tomllib
from collections.abc import Mapping
from typing import Any

from xmidictrl.text_logger import TextLogger
from xmidictrl.types import MIDI_DATA_2_MAX, MIDI_DATA_2_MIN, MIDI_NONE


def load_file(log: TextLogger, filename: str | os.PathLike[str]) -> dict[str, Any]:
    """Parse a TOML file and return its top-level table.

    Raises ValueError for an empty filename, FileNotFoundError for a missing
    file, tomllib.TOMLDecodeError for invalid content and OSError when the
    file cannot be read. Every failure is logged before it is raised.
    """
    name = os.fspath(filename)
    if not name:
        text = "Cannot load file, because the given filename is empty"
        log.error(text)
        raise ValueError(text)

    if not os.path.exists(name):
        log.error(f"File '{name}' not found!")
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), name)

    try:
        with open(name, "rb") as handle:
            config = tomllib.load(handle)
    except tomllib.TOMLDecodeError as error:
        log.error(f"Error parsing file '{name}'")
        log.error(str(error))
        raise
    except OSError as error:
        log.error(f"Error opening file '{name}'")
        log.error(str(error))
        raise

    log.debug(f"File '{name}' loaded successfully")
    return config


def contains(log: TextLogger, data: Any, name: str) -> bool:
    """Return whether the table holds the given key."""
    if not _valid_name(log, "contains", name):
        return False

    if not isinstance(data, Mapping):
        _report_type_error(log, data)
        return False

    return name in data


def is_array(log: TextLogger, data: Any, name: str) -> bool:
    """Return whether the table holds the given key with an array value."""
    if not _valid_name(log, "is_array", name):
        return False

    return contains(log, data, name) and isinstance(data[name], list)


def read_bool(log: TextLogger, data: Any, name: str, fallback: bool = False) -> bool:
    """Return a boolean parameter, or the fallback if absent or invalid."""
    if not _valid_name(log, "read_bool", name):
        return fallback

    if not contains(log, data, name):
        return fallback

    value = data[name]
    if not isinstance(value, bool):
        log.error(f" --> Parameter '{name}' is not a boolean")
        return fallback

    _debug_param(log, name, str(int(value)))
    return value


def read_string(log: TextLogger, data: Any, name: str) -> str:
    """Return a string parameter, or an empty string if absent or invalid."""
    if not _valid_name(log, "read_string", name):
        return ""

    if not contains(log, data, name):
        return ""

    value = data[name]
    if not isinstance(value, str):
        _report_type_error(log, value)
        return ""

    _debug_param(log, name, value)
    return value


def read_str_set_array(log: TextLogger, data: Any, name: str) -> set[str]:
    """Return the non-empty strings of an array parameter as a set."""
    if not _valid_name(log, "read_str_set_array", name):
        return set()

    return set(_read_strings(log, data, name))


def read_str_vector_array(log: TextLogger, data: Any, name: str) -> list[str]:
    """Return the non-empty strings of an array parameter in order."""
    if not _valid_name(log, "read_str_vector_array", name):
        return []

    return list(_read_strings(log, data, name))


def read_str_map_array(
    log: TextLogger, data: Any, name: str, key_name: str, value_name: str
) -> dict[str, str]:
    """Build a mapping from an array of tables holding a key and a value each.

    Entries with an empty value are skipped; for repeated keys the first
    entry wins.
    """
    if not _valid_name(log, "read_str_map_array", name):
        return {}

    result: dict[str, str] = {}
    if not (contains(log, data, name) and isinstance(data[name], list)):
        return result

    for entry in data[name]:
        key = read_string(log, entry, key_name)
        value = read_string(log, entry, value_name)
        if value:
            result.setdefault(key, value)

    return result


def read_midi_value(log: TextLogger, data: Any, name: str, fallback: int = MIDI_NONE) -> int:
    """Return a MIDI data value (0..127), or the fallback if absent or invalid."""
    if not _valid_name(log, "read_midi_value", name):
        return fallback

    if not contains(log, data, name):
        return fallback

    value = data[name]
    if not _is_integer(value):
        log.error(f" --> Parameter '{name}' is not numeric")
        return fallback

    _debug_param(log, name, str(value))
    if not MIDI_DATA_2_MIN <= value <= MIDI_DATA_2_MAX:
        log.error(
            f" --> Parameter '{name}' is not between {MIDI_DATA_2_MIN} and {MIDI_DATA_2_MAX}"
        )
        return fallback

    return value


def read_int(log: TextLogger, data: Any, name: str, fallback: int = 0) -> int:
    """Return an integer parameter, or the fallback if absent or invalid."""
    if not _valid_name(log, "read_int", name):
        return fallback

    if not contains(log, data, name):
        return fallback

    value = data[name]
    if not _is_integer(value):
        log.error(f" --> Parameter '{name}' is not numeric")
        return fallback

    _debug_param(log, name, str(value))
    return value


def read_float(log: TextLogger, data: Any, name: str, fallback: float = 0.0) -> float:
    """Return a float parameter (integers accepted), or the fallback."""
    if not _valid_name(log, "read_float", name):
        return fallback

    if not contains(log, data, name):
        return fallback

    value = data[name]
    if not (isinstance(value, float) or _is_integer(value)):
        log.error(f" --> Parameter '{name}' is not numeric")
        return fallback

    result = float(value)
    _debug_param(log, name, f"{result:.2f}")
    return result


def _read_strings(log: TextLogger, data: Any, name: str):
    """Yield the non-empty strings of an array, stopping at a non-string."""
    if not (contains(log, data, name) and isinstance(data[name], list)):
        return

    for value in data[name]:
        if not isinstance(value, str):
            _report_type_error(log, value)
            return
        _debug_param(log, name, value)
        if value:
            yield value


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _valid_name(log: TextLogger, function: str, name: str) -> bool:
    if name:
        return True
    log.error(f"Internal error ({function} --> name is empty)")
    return False


def _debug_param(log: TextLogger, name: str, value: str) -> None:
    log.debug(f" --> Parameter '{name}' = '{value}'")


def _report_type_error(log: TextLogger, value: Any) -> None:
    log.error(" --> Error reading mapping")
    log.error(f"Unexpected value of type '{type(value).__name__}'")