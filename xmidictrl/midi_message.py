"""MIDI messages received from or sent to a device."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from enum import Enum, auto

from xmidictrl.text_logger import TextLogger
from xmidictrl.types import (
    KEY_CONTROL_CHANGE,
    KEY_NOTE,
    KEY_PITCH_BEND,
    KEY_PROGRAM_CHANGE,
    MIDI_NONE,
    NoteNameType,
)
from xmidictrl.utils import time_to_string

SHARP_NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NOTE_NAMES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")


class MidiDirection(Enum):
    """Whether a message came from a device or goes to one."""

    IN = auto()
    OUT = auto()


class MidiMsgType(Enum):
    """Kind of MIDI channel message."""

    AFTERTOUCH = auto()
    CHANNEL_PRESSURE = auto()
    CONTROL_CHANGE = auto()
    NOTE_OFF = auto()
    NOTE_ON = auto()
    PITCH_BEND = auto()
    PROGRAM_CHANGE = auto()
    NONE = auto()


_STATUS_TYPES = {
    0xB0: MidiMsgType.CONTROL_CHANGE,
    0x90: MidiMsgType.NOTE_ON,
    0x80: MidiMsgType.NOTE_OFF,
    0xC0: MidiMsgType.PROGRAM_CHANGE,
    0xA0: MidiMsgType.AFTERTOUCH,
    0xD0: MidiMsgType.CHANNEL_PRESSURE,
    0xE0: MidiMsgType.PITCH_BEND,
}

_TYPE_TEXT = {
    MidiMsgType.CONTROL_CHANGE: "Control Change",
    MidiMsgType.NOTE_ON: "Note On",
    MidiMsgType.NOTE_OFF: "Note Off",
    MidiMsgType.PROGRAM_CHANGE: "Program Change",
    MidiMsgType.AFTERTOUCH: "Aftertouch",
    MidiMsgType.CHANNEL_PRESSURE: "Channel Pressure",
    MidiMsgType.PITCH_BEND: "Pitch Bend",
}

_TYPE_CODE = {
    MidiMsgType.CONTROL_CHANGE: KEY_CONTROL_CHANGE,
    MidiMsgType.NOTE_ON: KEY_NOTE,
    MidiMsgType.NOTE_OFF: KEY_NOTE,
    MidiMsgType.PROGRAM_CHANGE: KEY_PROGRAM_CHANGE,
    MidiMsgType.PITCH_BEND: KEY_PITCH_BEND,
}

_UNSUPPORTED = {
    MidiMsgType.AFTERTOUCH: "Invalid MIDI type, 'Aftertouch' messages are not supported",
    MidiMsgType.CHANNEL_PRESSURE: "Invalid MIDI type, 'Channel Pressure' messages are not supported",
}


class MidiMessage:
    """A MIDI message with its own log, forwarding to the given logger."""

    def __init__(self, log: TextLogger, direction: MidiDirection) -> None:
        self.log = TextLogger(log)
        self.log.debug_mode = log.debug_mode
        self.direction = direction

        self.time = ""
        self.port = 0

        self.status = MIDI_NONE
        self.data_1 = MIDI_NONE
        self.data_2 = MIDI_NONE

        self.mapping_count = 0
        self.mapping_text = ""

    def clear(self) -> None:
        """Reset log, time, port, status and data."""
        self.log.clear()
        self.time = ""
        self.port = 0
        self.status = MIDI_NONE
        self.data_1 = MIDI_NONE
        self.data_2 = MIDI_NONE

    def parse_message(self, msg: Sequence[int]) -> None:
        """Fill the message from raw bytes; raises ValueError if too short."""
        self.clear()

        if len(msg) <= 1:
            text = "Invalid MIDI message (size <= 1)"
            self.log.error(text)
            raise ValueError(text)

        self.status = msg[0] & 0xFF

        # pitch bend messages always carry data 1 = 0
        if self.type() is MidiMsgType.PITCH_BEND:
            self.data_1 = 0
        else:
            self.data_1 = msg[1] & 0xFF

        if len(msg) > 2:
            self.data_2 = msg[2] & 0xFF

    def create_cc_message(self, channel: int, data: int, value: int) -> None:
        """Make this a control change message stamped with the current time."""
        self.clear()
        self.status = (0xB0 | (channel - 1)) & 0xFF
        self.data_1 = data & 0xFF
        self.data_2 = value & 0xFF
        self.set_time(datetime.now())

    def check(self) -> bool:
        """Return whether the message type is supported, logging why not."""
        msg_type = self.type()
        if msg_type in _UNSUPPORTED:
            self.log.error(_UNSUPPORTED[msg_type])
            return False
        if msg_type is MidiMsgType.NONE:
            self.log.error(f"Could not determine MIDI type from Status '{self.status}'")
            return False
        return True

    def add_mapping_text(self, map_text: str) -> None:
        """Append the text of a mapping that handled this message."""
        self.mapping_text += map_text
        self.mapping_count += 1

    def set_time(self, when: datetime) -> None:
        self.time = time_to_string(when)

    def data_1_as_text(self, note_type: NoteNameType) -> str:
        """Return data 1 as text, with the note name for note messages."""
        text = str(self.data_1)
        if self.type() in (MidiMsgType.NOTE_OFF, MidiMsgType.NOTE_ON):
            names = SHARP_NOTE_NAMES if note_type is NoteNameType.SHARP else FLAT_NOTE_NAMES
            text += f" ({names[self.data_1 % 12]})"
        return text

    def channel(self) -> int:
        """Return the channel (1-16), or MIDI_NONE for system messages."""
        if (self.status & 0xF0) != 0xF0:
            return (self.status & 0x0F) + 1
        return MIDI_NONE

    def type(self) -> MidiMsgType:
        return _STATUS_TYPES.get(self.status & 0xF0, MidiMsgType.NONE)

    def type_as_text(self) -> str:
        return _TYPE_TEXT.get(self.type(), "<unknown")

    def type_as_code(self) -> str:
        return _TYPE_CODE.get(self.type(), "")