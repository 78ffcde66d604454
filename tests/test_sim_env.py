import pytest

from xmidictrl.sim_env import CommandRecorder, InMemoryData
from xmidictrl.text_logger import TextLogger


@pytest.fixture
def log():
    return TextLogger()


def test_begin_sets_current_command(log):
    cmd = CommandRecorder()
    cmd.begin(log, "sim/test/cmd")
    assert cmd.current_command == "sim/test/cmd"
    assert cmd.last_command == ""


def test_end_clears_current_and_sets_last(log):
    cmd = CommandRecorder()
    cmd.begin(log, "sim/test/cmd")
    cmd.end(log, "sim/test/cmd")
    assert cmd.current_command == ""
    assert cmd.last_command == "sim/test/cmd"


def test_execute_records_last_command(log):
    cmd = CommandRecorder()
    cmd.execute(log, "sim/test/once")
    assert cmd.current_command == ""
    assert cmd.last_command == "sim/test/once"


def test_check(log):
    data = InMemoryData({"sim/text": "a"}, {"sim/number": 1.0})
    assert data.check("sim/text") is True
    assert data.check("sim/number") is True
    assert data.check("sim/missing") is False


def test_read_string(log):
    data = InMemoryData({"sim/text": "abc"})
    assert data.read_string(log, "sim/text") == "abc"
    with pytest.raises(KeyError):
        data.read_string(log, "sim/missing")


def test_read_float(log):
    data = InMemoryData(floats={"sim/number": 2.5})
    assert data.read_float(log, "sim/number") == 2.5
    with pytest.raises(KeyError):
        data.read_float(log, "sim/missing")


def test_read_arrays_are_empty(log):
    data = InMemoryData()
    assert data.read_floats(log, "sim/array") == []
    assert data.read_ints(log, "sim/array") == []


def test_write_round_trip(log):
    data = InMemoryData()
    data.write(log, "sim/text", "on")
    data.write(log, "sim/number", 3)
    assert data.read_string(log, "sim/text") == "on"
    assert data.read_float(log, "sim/number") == 3.0
    assert data.check("sim/text")


def test_toggle_switches_between_values(log):
    data = InMemoryData({"sim/switch": "off"})
    assert data.toggle(log, "sim/switch", "on", "off") == "on"
    assert data.toggle(log, "sim/switch", "on", "off") == "off"
    assert data.read_string(log, "sim/switch") == "off"


def test_constructor_copies_input(log):
    strings = {"sim/text": "a"}
    data = InMemoryData(strings)
    data.write(log, "sim/text", "b")
    assert strings["sim/text"] == "a"
    assert data.read_string(log, "sim/text") == "b"