"""Shared constants and enumerations."""

from enum import Enum, auto

# MIDI value meaning "not set"
MIDI_NONE = -1

MIDI_DATA_2_MIN = 0
MIDI_DATA_2_MAX = 127

# Interval of the flight loop
FLIGHTLOOP_INTERVAL = -1.0

# Application name, used as prefix of generated files
XMIDICTRL_NAME = "XMidiCtrl"

# Name of the aircraft profile file
FILENAME_PROFILE = "XMidiCtrl.toml"

# File name suffixes
LOGFILE_SUFFIX = "_Log.txt"
SETTINGS_FILE_SUFFIX = "_Settings.toml"
INCLUDE_FILE_SUFFIX = ".toml"

# Directory names
PROFILES_DIRECTORY_NAME = "Profiles"
INCLUDES_DIRECTORY_NAME = "Includes"

# Keys for mappings and MIDI message types
KEY_CONTROL_CHANGE = "CC"
KEY_NOTE = "NOTE"
KEY_PITCH_BEND = "PITCH"
KEY_PROGRAM_CHANGE = "PRG"

# Custom commands
COMMAND_LOG_VIEWER = "LOG_VIEWER"
COMMAND_MIDI_WATCHER = "MIDI_WATCHER"
COMMAND_PROFILE_WINDOW = "PROFILE_WINDOW"
COMMAND_RELOAD_PROFILE = "RELOAD_PROFILE"
COMMAND_TOGGLE_SUBLAYER = "TOGGLE_SUBLAYER"

# Keys for the config files
CFG_KEY_COMMON_PROFILE = "common_profile"
CFG_KEY_DEBUG_MODE = "debug_mode"
CFG_KEY_DEFAULT_MIDI_SORT = "default_midi_sort"
CFG_KEY_DEFAULT_TEXT_SORT = "default_text_sort"
CFG_KEY_LOG_MIDI = "log_midi"
CFG_KEY_NOTE_NAME = "note"
CFG_KEY_SHOW_ERRORS = "show_message_dialog"
CFG_KEY_VIRTUAL_CHANNEL = "virtual_channel"
CFG_KEY_INFO_DISABLED = "info_disabled"
CFG_KEY_INFO_OFFSET_X = "info_offset_x"
CFG_KEY_INFO_OFFSET_Y = "info_offset_y"
CFG_KEY_INFO_POSITION = "info_position"
CFG_KEY_INFO_SECONDS = "info_seconds"

# Mapping types as strings
CFG_MAPTYPE_COMMAND = "cmd"
CFG_MAPTYPE_COMMAND_BY_VALUE = "cbv"
CFG_MAPTYPE_CONSTANT = "con"
CFG_MAPTYPE_DATAREF = "drf"
CFG_MAPTYPE_ENCODER = "enc"
CFG_MAPTYPE_PUSH_PULL = "pnp"
CFG_MAPTYPE_SHORT_AND_LONG = "snl"
CFG_MAPTYPE_SLIDER = "sld"


class LogLevel(Enum):
    """Severity of a text log message."""

    ERROR = auto()
    WARN = auto()
    INFO = auto()
    DEBUG = auto()


class NoteNameType(Enum):
    """How note names are spelled."""

    SHARP = 0
    FLAT = 1


class DataRefMode(Enum):
    """How a dataref mapping behaves."""

    TOGGLE = auto()
    MOMENTARY = auto()


class SendMode(Enum):
    """Whether all or one value is sent."""

    ALL = auto()
    ONE = auto()


class SortMode(Enum):
    """Sort direction."""

    ASCENDING = 0
    DESCENDING = 1


class WindowPosition(Enum):
    """Screen position of a window."""

    TOP_LEFT = 0
    BOTTOM_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_RIGHT = 3
    CENTER = 4
    TOP_CENTER = 5
    BOTTOM_CENTER = 6


class WindowType(Enum):
    """Kinds of windows."""

    ABOUT_WINDOW = auto()
    DEVICES_WINDOW = auto()
    LOG_VIEWER = auto()
    INFO_WINDOW = auto()
    MIDI_WATCHER = auto()
    PROFILE_WINDOW = auto()
    SETTINGS_WINDOW = auto()