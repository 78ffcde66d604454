"""Parameters handed to mappings when they run, and the results they return."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto

from xmidictrl.device_settings import OutboundSendMode
from xmidictrl.midi_message import MidiMessage, MidiMsgType
from xmidictrl.text_logger import TextLogger
from xmidictrl.types import MIDI_NONE


class MapParamType(Enum):
    """Whether the parameters are for an inbound or an outbound mapping."""

    IN = auto()
    OUT = auto()


class MapParam(ABC):
    """Common parameters of a mapping run: the current sublayer value."""

    def __init__(self, sl_value: str) -> None:
        self._sl_value = str(sl_value)

    @property
    def sl_value(self) -> str:
        """Current value of the sublayer dataref."""
        return self._sl_value

    @abstractmethod
    def type(self) -> MapParamType:
        """Return whether these are inbound or outbound parameters."""


class MapParamIn(MapParam):
    """Parameters for an inbound mapping: the MIDI message received."""

    def __init__(self, sl_value: str, msg: MidiMessage) -> None:
        super().__init__(sl_value)
        self._msg = msg

    @property
    def msg(self) -> MidiMessage:
        """MIDI message received from the device."""
        return self._msg

    def type(self) -> MapParamType:
        return MapParamType.IN


class MapParamOut(MapParam):
    """Parameters for an outbound mapping: a logger and the send mode."""

    def __init__(
        self,
        sl_value: str,
        log: TextLogger,
        send_mode: OutboundSendMode = OutboundSendMode.PERMANENT,
    ) -> None:
        super().__init__(sl_value)
        self._log = log
        self._send_mode = send_mode

    @property
    def log(self) -> TextLogger:
        """Logger for text messages."""
        return self._log

    @property
    def send_mode(self) -> OutboundSendMode:
        """Send mode of the outbound message."""
        return self._send_mode

    def type(self) -> MapParamType:
        return MapParamType.OUT


@dataclass
class MapResult:
    """Outcome of executing a mapping."""

    # result for inbound messages
    completed: bool = False

    # result for outbound messages
    data_changed: bool = False
    type: MidiMsgType = MidiMsgType.NONE
    channel: int = MIDI_NONE
    data_1: int = MIDI_NONE
    data_2: int = MIDI_NONE