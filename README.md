# xmidictrl

Building blocks for tools that map MIDI controller input to simulator
commands and datarefs. The package is pure Python and needs nothing beyond
the standard library. It reads TOML with `tomllib`, so it needs Python 3.11
or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `xmidictrl.types` holds shared constants such as `MIDI_NONE`, the
  `KEY_*` type codes and the `CFG_*` configuration keys. It also holds the
  enumerations `LogLevel`, `NoteNameType`, `DataRefMode`, `SendMode`,
  `SortMode`, `WindowPosition` and `WindowType`.
- `xmidictrl.utils` provides `ltrim`, `rtrim` and `trim`. It also provides
  `time_to_string`, which formats a `datetime` as local
  `YYYY-MM-DD HH:MM:SS`. Its `create_directory` creates a missing directory,
  logs what it did, and raises `OSError` if it cannot.
- `xmidictrl.text_logger` has `TextLogger` and `TextLogMsg`.
  - A logger keeps its messages in memory with a time stamp and a level, and
    counts errors and warnings (`has_errors`, `has_warnings`).
  - Debug messages are kept only when `debug_mode` is set. Info messages are
    kept when `log_info` is set (the default) or when `debug_mode` is set.
  - Every message is also passed on to the parent logger, if there is one.
  - `enable_file_logging(path)` also writes each message to
    `<path>XMidiCtrl_Log.txt`.
  - A logger can be used as a context manager, which closes that file when
    the block ends.
- `xmidictrl.midi_message` has `MidiMessage`, `MidiMsgType` and
  `MidiDirection`.
  - `parse_message` reads raw bytes and raises `ValueError` for messages
    shorter than two bytes.
  - `create_cc_message` builds a control change message.
  - `channel()`, `type()`, `type_as_text()`, `type_as_code()` and
    `data_1_as_text()` describe a message; `data_1_as_text()` adds the note
    name for note messages.
  - `check()` rejects aftertouch, channel pressure and unknown types.
- `xmidictrl.midi_logger` has `MidiLogger`, a history of `MidiMessage`
  objects. It records messages only while it is enabled, and it is disabled
  by default.
- `xmidictrl.device_settings` has the `MidiDeviceSettings` dataclass and the
  enumerations `EncoderMode`, `OutboundNoteMode` and `OutboundSendMode`.
  `note_mode_from_code` and `send_mode_from_code` turn the configuration
  codes into these enumerations.
- `xmidictrl.conversions` has `int_to_string(number, length)`, which pads a
  number on the left with zeros.
- `xmidictrl.toml_utils` loads and reads TOML profiles.
  - `load_file` logs every failure and then raises one of `ValueError`,
    `FileNotFoundError`, `tomllib.TOMLDecodeError` or `OSError`.
  - The readers are `contains`, `is_array`, `read_bool`, `read_string`,
    `read_int`, `read_float`, `read_midi_value`, `read_str_set_array`,
    `read_str_vector_array` and `read_str_map_array`.
  - The readers do not raise. They log any problem to the given
    `TextLogger` and return the fallback value.
- `xmidictrl.sim_env` holds in-memory stand-ins for a simulator.
  - `CommandRecorder` keeps `current_command` and `last_command`.
  - `InMemoryData` holds string and numeric datarefs. Reading a dataref that
    does not exist raises `KeyError`. Array reads always return an empty
    list.
- `xmidictrl.map_param` has `MapParamType`, the abstract `MapParam` and its
  subclasses `MapParamIn` and `MapParamOut`, and the `MapResult` dataclass.
  These are the values passed to and returned by mappings.
- `xmidictrl.mapping` has `MapData1Type`, the abstract `Mapping` base class
  and the `OutboundTask` dataclass.
  - `read_common_config` reads `ch` from a configuration table; the default
    channel is 11.
  - It reads one of `cc`, `note`, `pitch` or `prg` for the MIDI type and
    data.
  - It can also read `sl` for the sublayer.
  - `get_key`, `check` and `check_sublayer` build on these values.

## Example

```python
from xmidictrl.midi_message import MidiDirection, MidiMessage
from xmidictrl.text_logger import TextLogger
from xmidictrl.types import NoteNameType

log = TextLogger(None)
msg = MidiMessage(log, MidiDirection.IN)
msg.parse_message(bytes([0x90, 60, 100]))

print(msg.channel())                            # 1
print(msg.type_as_text())                       # Note On
print(msg.data_1_as_text(NoteNameType.SHARP))   # 60 (C)
```

## What the package does not do

- It does not open MIDI ports or talk to devices.
- It does not connect to a running simulator. The only command and dataref
  backends are the in-memory ones in `xmidictrl.sim_env`.
- It has no concrete mapping types. `Mapping` is abstract: a subclass must
  provide `execute` and `build_mapping_text`.
- There is no command-line program, no user interface and no profile
  discovery.