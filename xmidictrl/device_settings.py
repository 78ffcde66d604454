"""Settings of a MIDI device."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class EncoderMode(Enum):
    RELATIVE = auto()
    RANGE = auto()
    FIXED = auto()


class OutboundNoteMode(Enum):
    """Whether outbound notes are sent as on/off or on only."""

    ON_OFF = auto()
    ON = auto()


class OutboundSendMode(Enum):
    """Whether outbound messages are sent on change or permanently."""

    ON_CHANGE = auto()
    PERMANENT = auto()


@dataclass
class MidiDeviceSettings:
    """All settings of a MIDI device."""

    name: str = ""
    device_no: int = -1
    port_in: int = -1
    port_out: int = -1
    include: set[str] = field(default_factory=set)
    note_mode: OutboundNoteMode = OutboundNoteMode.ON_OFF
    send_mode: OutboundSendMode = OutboundSendMode.PERMANENT
    outbound_delay: float = 0.5
    sl_dataref: str = ""
    default_enc_mode: EncoderMode = EncoderMode.RELATIVE

    @staticmethod
    def note_mode_from_code(mode: str) -> OutboundNoteMode:
        """Return ON for 'on', ON_OFF for anything else."""
        return OutboundNoteMode.ON if mode == "on" else OutboundNoteMode.ON_OFF

    @staticmethod
    def send_mode_from_code(mode: str) -> OutboundSendMode:
        """Return ON_CHANGE for 'on_change', PERMANENT for anything else."""
        return OutboundSendMode.ON_CHANGE if mode == "on_change" else OutboundSendMode.PERMANENT