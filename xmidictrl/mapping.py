"""Base class of all MIDI mappings, and the outbound task built from one."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping as _TableMapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from xmidictrl.device_settings import MidiDeviceSettings
from xmidictrl.map_param import MapParam, MapResult
from xmidictrl.midi_message import MidiMsgType
from xmidictrl.text_logger import TextLogger
from xmidictrl.types import (
    KEY_CONTROL_CHANGE,
    KEY_NOTE,
    KEY_PITCH_BEND,
    KEY_PROGRAM_CHANGE,
    MIDI_NONE,
)
from xmidictrl.utils import trim

_CFG_CH = "ch"
_CFG_CC = "cc"
_CFG_NOTE = "note"
_CFG_PITCH = "pitch"
_CFG_PROGRAM_CHANGE = "prg"
_CFG_SL = "sl"

_DEFAULT_CHANNEL = 11


class MapData1Type(Enum):
    """Kind of MIDI data a mapping reacts to."""

    NONE = auto()
    CONTROL_CHANGE = auto()
    NOTE = auto()
    PITCH_BEND = auto()
    PROGRAM_CHANGE = auto()


_DATA_1_TYPE_CODE = {
    MapData1Type.NONE: "",
    MapData1Type.CONTROL_CHANGE: KEY_CONTROL_CHANGE,
    MapData1Type.NOTE: KEY_NOTE,
    MapData1Type.PITCH_BEND: KEY_PITCH_BEND,
    MapData1Type.PROGRAM_CHANGE: KEY_PROGRAM_CHANGE,
}


class _ConfigTypeError(TypeError):
    """A configuration value has the wrong type."""


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "[" + ", ".join(_render_value(item) for item in value) + "]"
    if isinstance(value, _TableMapping):
        return "{ " + _render_table(value) + " }"
    return str(value)


def _render_table(table: _TableMapping) -> str:
    return ", ".join(f"{key} = {_render_value(value)}" for key, value in table.items())


def _as_integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _ConfigTypeError(f"Expected an integer, got '{type(value).__name__}'")
    return value


class Mapping(ABC):
    """A mapping between a MIDI channel/data pair and a simulator action."""

    def __init__(self) -> None:
        self.no = 0
        self.include_name = ""

        self._channel = MIDI_NONE
        self._data_1_type = MapData1Type.NONE
        self._data_1 = MIDI_NONE
        self._sl = ""
        self._source_line = ""

        self._map_text_long = ""
        self._map_text_short = ""

    @property
    def channel(self) -> int:
        return self._channel

    @property
    def data_1_type(self) -> MapData1Type:
        return self._data_1_type

    @property
    def data_1(self) -> int:
        return self._data_1

    @property
    def sl(self) -> str:
        """Sublayer the mapping is defined for; empty for all sublayers."""
        return self._sl

    @property
    def source_line(self) -> str:
        """The configuration the mapping was read from."""
        return self._source_line

    def data_1_as_string(self) -> str:
        """Return the data type code and data 1, e.g. 'CC 20'."""
        return f"{_DATA_1_TYPE_CODE[self._data_1_type]} {self._data_1}"

    def map_text(self, short: bool = False) -> str:
        """Return the mapping as text, building it once per form."""
        if short:
            if not self._map_text_short:
                self._map_text_short = self.build_mapping_text(True)
            return self._map_text_short

        if not self._map_text_long:
            self._map_text_long = self.build_mapping_text(False)
        return self._map_text_long

    def get_key(self) -> str:
        """Return a key made of channel, type code and data 1."""
        return self.build_map_key(self._channel, _DATA_1_TYPE_CODE[self._data_1_type], self._data_1)

    def check(self, log: TextLogger, dev_settings: MidiDeviceSettings) -> bool:
        """Return whether the mapping is complete and usable on the device."""
        if self._sl and not dev_settings.sl_dataref:
            log.error(self.source_line)
            log.error(" --> Sublayer is defined for mapping, but no sublayer dataref was defined in the device")
            return False

        return (
            self._channel != MIDI_NONE
            and self._data_1 != MIDI_NONE
            and self._data_1_type is not MapData1Type.NONE
        )

    @staticmethod
    def build_map_key(channel: int, type_code: str, data: int) -> str:
        """Build a unique key for a mapping."""
        return f"{int(channel)}{type_code}{int(data)}"

    @abstractmethod
    def execute(self, param: MapParam) -> MapResult:
        """Run the mapping."""

    def read_common_config(self, log: TextLogger, data: Any, read_sl: bool = True) -> None:
        """Read channel, MIDI type and data, and optionally the sublayer."""
        if isinstance(data, _TableMapping):
            self._source_line = trim(_render_table(data))
        else:
            self._source_line = trim(str(data))

        self._read_channel(log, data)
        self._read_data_1(log, data)

        if read_sl:
            self._read_sublayer(log, data)

    def check_sublayer(self, sl_value: str) -> bool:
        """Return whether the mapping applies to the given sublayer value."""
        return not self._sl or sl_value == self._sl

    @abstractmethod
    def build_mapping_text(self, short: bool) -> str:
        """Return a description of the mapping."""

    def _read_channel(self, log: TextLogger, data: Any) -> None:
        self._channel = _DEFAULT_CHANNEL
        try:
            table = self._table(data)
            if _CFG_CH in table:
                self._channel = _as_integer(table[_CFG_CH])
                self._debug_param(log, _CFG_CH, str(self._channel))
            else:
                log.info(
                    f" --> Parameter '{_CFG_CH}' is missing, will use default channel '{_DEFAULT_CHANNEL}'"
                )
                log.debug(f" --> Parameter '{_CFG_CH}' = '{self._channel}' (Default Value)")
        except _ConfigTypeError as error:
            self._report_error(log, error)

    def _read_data_1(self, log: TextLogger, data: Any) -> None:
        self._data_1 = MIDI_NONE
        self._data_1_type = MapData1Type.NONE
        try:
            table = self._table(data)
            if _CFG_CC in table:
                self._data_1 = _as_integer(table[_CFG_CC])
                self._data_1_type = MapData1Type.CONTROL_CHANGE
                self._debug_param(log, _CFG_CC, str(self._data_1))
            elif _CFG_NOTE in table:
                self._data_1 = _as_integer(table[_CFG_NOTE])
                self._data_1_type = MapData1Type.NOTE
                self._debug_param(log, _CFG_NOTE, str(self._data_1))
            elif _CFG_PITCH in table:
                # pitch bend messages always carry data 1 = 0
                self._data_1 = 0
                self._data_1_type = MapData1Type.PITCH_BEND
                log.debug(
                    f" --> Parameter '{_CFG_PITCH}' = '{self._data_1}' (fixed value for pitch bend)"
                )
            elif _CFG_PROGRAM_CHANGE in table:
                self._data_1 = _as_integer(table[_CFG_PROGRAM_CHANGE])
                self._data_1_type = MapData1Type.PROGRAM_CHANGE
                self._debug_param(log, _CFG_PROGRAM_CHANGE, str(self._data_1))
            else:
                log.error(" --> Parameter for MIDI type is missing")
        except _ConfigTypeError as error:
            self._report_error(log, error)

    def _read_sublayer(self, log: TextLogger, data: Any) -> None:
        self._sl = ""
        try:
            table = self._table(data)
            if _CFG_SL in table:
                value = table[_CFG_SL]
                if not isinstance(value, str):
                    raise _ConfigTypeError(f"Expected a string, got '{type(value).__name__}'")
                self._sl = value
                self._debug_param(log, _CFG_SL, self._sl)
        except _ConfigTypeError as error:
            self._report_error(log, error)

    @staticmethod
    def _table(data: Any) -> _TableMapping:
        if not isinstance(data, _TableMapping):
            raise _ConfigTypeError(f"Expected a table, got '{type(data).__name__}'")
        return data

    @staticmethod
    def _debug_param(log: TextLogger, name: str, value: str) -> None:
        log.debug(f" --> Parameter '{name}' = '{value}'")

    @staticmethod
    def _report_error(log: TextLogger, error: Exception) -> None:
        log.error(" --> Error reading mapping")
        log.error(str(error))


@dataclass
class OutboundTask:
    """A MIDI message to be sent for an outbound mapping."""

    data_changed: bool = False
    type: MidiMsgType = MidiMsgType.NONE
    channel: int = MIDI_NONE
    data_1: int = MIDI_NONE
    data_2: int = MIDI_NONE
    mapping: Mapping | None = None