import pytest

from xmidictrl.device_settings import MidiDeviceSettings
from xmidictrl.map_param import MapParam, MapParamOut, MapResult
from xmidictrl.mapping import MapData1Type, Mapping, OutboundTask
from xmidictrl.midi_message import MidiMsgType
from xmidictrl.text_logger import TextLogger
from xmidictrl.types import KEY_CONTROL_CHANGE, KEY_NOTE, MIDI_NONE


class _DummyMapping(Mapping):
    def __init__(self):
        super().__init__()
        self.build_calls = 0

    def execute(self, param: MapParam) -> MapResult:
        return MapResult(completed=self.check_sublayer(param.sl_value))

    def build_mapping_text(self, short: bool) -> str:
        self.build_calls += 1
        return "short" if short else "long"


def _read(data, read_sl=True, debug=False):
    log = TextLogger()
    log.debug_mode = debug
    mapping = _DummyMapping()
    mapping.read_common_config(log, data, read_sl)
    return mapping, log


def test_abstract_base_cannot_be_created():
    with pytest.raises(TypeError):
        Mapping()


def test_control_change_with_default_channel():
    mapping, log = _read({"cc": 20})
    assert mapping.channel == 11
    assert mapping.data_1_type is MapData1Type.CONTROL_CHANGE
    assert mapping.data_1 == 20
    assert "default channel '11'" in log.messages_as_text()
    assert not log.has_errors()


def test_note_with_channel():
    mapping, log = _read({"ch": 3, "note": 60})
    assert mapping.channel == 3
    assert mapping.data_1_type is MapData1Type.NOTE
    assert mapping.data_1 == 60
    assert log.count() == 0


def test_pitch_bend_has_fixed_data_1():
    mapping, _ = _read({"ch": 2, "pitch": 5})
    assert mapping.data_1_type is MapData1Type.PITCH_BEND
    assert mapping.data_1 == 0


def test_program_change():
    mapping, _ = _read({"ch": 1, "prg": 7})
    assert mapping.data_1_type is MapData1Type.PROGRAM_CHANGE
    assert mapping.data_1 == 7


def test_control_change_has_priority_over_note():
    mapping, _ = _read({"ch": 1, "note": 60, "cc": 4})
    assert mapping.data_1_type is MapData1Type.CONTROL_CHANGE
    assert mapping.data_1 == 4


def test_missing_midi_type_is_an_error():
    mapping, log = _read({"ch": 1})
    assert mapping.data_1_type is MapData1Type.NONE
    assert mapping.data_1 == MIDI_NONE
    assert log.has_errors()
    assert "Parameter for MIDI type is missing" in log.messages_as_text()
    assert mapping.check(log, MidiDeviceSettings()) is False


def test_wrong_channel_type_keeps_default():
    mapping, log = _read({"ch": "x", "cc": 1})
    assert mapping.channel == 11
    assert log.has_errors()


def test_wrong_data_type_leaves_type_none():
    mapping, log = _read({"ch": 1, "cc": "abc"})
    assert mapping.data_1_type is MapData1Type.NONE
    assert mapping.data_1 == MIDI_NONE
    assert log.has_errors()


def test_non_table_data_is_reported():
    mapping, log = _read(["not", "a", "table"])
    assert log.has_errors()
    assert mapping.data_1_type is MapData1Type.NONE


def test_debug_messages_name_parameters():
    _, log = _read({"ch": 5, "cc": 9}, debug=True)
    text = log.messages_as_text()
    assert "Parameter 'ch' = '5'" in text
    assert "Parameter 'cc' = '9'" in text


def test_source_line_holds_config():
    mapping, _ = _read({"ch": 4, "cc": 20, "sl": "A"})
    assert "cc = 20" in mapping.source_line
    assert '"A"' in mapping.source_line


def test_sublayer_read_and_skipped():
    mapping, _ = _read({"ch": 1, "cc": 1, "sl": "B"})
    assert mapping.sl == "B"
    skipped, _ = _read({"ch": 1, "cc": 1, "sl": "B"}, read_sl=False)
    assert skipped.sl == ""


def test_sublayer_wrong_type_is_error():
    mapping, log = _read({"ch": 1, "cc": 1, "sl": 3})
    assert mapping.sl == ""
    assert log.has_errors()


def test_check_sublayer():
    mapping, _ = _read({"ch": 1, "cc": 1, "sl": "B"})
    assert mapping.check_sublayer("B") is True
    assert mapping.check_sublayer("A") is False
    plain, _ = _read({"ch": 1, "cc": 1})
    assert plain.check_sublayer("anything") is True


def test_check_requires_sublayer_dataref():
    mapping, _ = _read({"ch": 1, "cc": 1, "sl": "B"})
    log = TextLogger()
    assert mapping.check(log, MidiDeviceSettings()) is False
    assert log.has_errors()
    settings = MidiDeviceSettings(sl_dataref="sim/sublayer")
    assert mapping.check(TextLogger(), settings) is True


def test_check_valid_mapping():
    mapping, _ = _read({"ch": 1, "note": 60})
    assert mapping.check(TextLogger(), MidiDeviceSettings()) is True


def test_unconfigured_mapping_fails_check():
    assert _DummyMapping().check(TextLogger(), MidiDeviceSettings()) is False


def test_build_map_key():
    assert Mapping.build_map_key(1, KEY_NOTE, 60) == "1" + KEY_NOTE + "60"


def test_get_key_matches_build_map_key():
    mapping, _ = _read({"ch": 3, "cc": 20})
    assert mapping.get_key() == Mapping.build_map_key(3, KEY_CONTROL_CHANGE, 20)


def test_data_1_as_string():
    mapping, _ = _read({"ch": 3, "cc": 20})
    assert mapping.data_1_as_string() == KEY_CONTROL_CHANGE + " 20"


def test_map_text_is_cached():
    mapping, _ = _read({"ch": 1, "cc": 1})
    assert mapping.map_text() == "long"
    assert mapping.map_text(True) == "short"
    assert mapping.map_text() == "long"
    assert mapping.map_text(True) == "short"
    assert mapping.build_calls == 2


def test_number_and_include_name():
    mapping, _ = _read({"ch": 2, "note": 40})
    mapping.no = 4
    mapping.include_name = "inc"
    assert (mapping.no, mapping.include_name) == (4, "inc")
    assert mapping.get_key() == "2" + KEY_NOTE + "40"


def test_execute_uses_param_sublayer():
    mapping, _ = _read({"ch": 1, "cc": 1, "sl": "B"})
    assert mapping.execute(MapParamOut("B", TextLogger())).completed is True
    assert mapping.execute(MapParamOut("C", TextLogger())).completed is False


def test_outbound_task_defaults():
    task = OutboundTask()
    assert task.data_changed is False
    assert task.type is MidiMsgType.NONE
    assert (task.channel, task.data_1, task.data_2) == (MIDI_NONE, MIDI_NONE, MIDI_NONE)
    assert task.mapping is None


def test_outbound_task_holds_mapping():
    mapping = _DummyMapping()
    task = OutboundTask(data_changed=True, type=MidiMsgType.NOTE_ON, channel=1, data_1=60, data_2=127, mapping=mapping)
    assert task.mapping is mapping
    assert task.data_2 == 127