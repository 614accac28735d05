import pytest

from scorpsim.json_serialiser import (
    BadPayload,
    NoSuchFile,
    read_from_file,
    read_from_string,
    write_to_file,
    write_to_string,
)
from scorpsim.json_value import array, boolean, number, object_, string


def _sample_object():
    value = object_()
    value.set("id", string("a string"))
    value.set("another id", boolean(True))
    value.set("3rd", number(4.2))
    toto = object_()
    titi = array()
    titi.add(number(1))
    titi.add(number(2))
    titi.add(number(3))
    toto.set("titi", titi)
    value.set("toto", toto)
    value.set("titi", titi)
    return value


def test_read_string():
    assert read_from_string('"a string"') == string("a string")


def test_read_integer():
    assert read_from_string("58") == number(58)


def test_read_real():
    assert read_from_string("5.99") == number(5.99)


def test_read_true():
    assert read_from_string("true") == boolean(True)


def test_read_false():
    assert read_from_string("false") == boolean(False)


def test_read_empty_object():
    assert read_from_string("{ }") == object_()


def test_read_empty_array():
    assert read_from_string("[ ]") == array()


def test_read_non_empty_array():
    expected = array()
    expected.add(number(1))
    expected.add(string("str"))
    expected.add(boolean(False))
    expected.add(array())
    assert read_from_string('[ 1, "str", false, [] ])'[:-1]) == expected


def test_read_non_empty_object():
    payload = """{
        "id": "a string",
        "another id": true,
        "3rd": 4.2,
        "toto": { "titi": [ 1, 2, 3 ] },
        "titi": [ 1, 2, 3 ]
    }"""
    assert read_from_string(payload) == _sample_object()


@pytest.mark.parametrize(
    "payload",
    ["{", "", ",", ":", "noquote", "[", "[[]", "{ [] }", ' "id" : "I am not in an object" '],
)
def test_invalid_payloads(payload):
    with pytest.raises(BadPayload):
        read_from_string(payload)


def test_write_then_read_round_trip():
    value = _sample_object()
    assert read_from_string(write_to_string(value)) == value


def test_write_scalars():
    assert write_to_string(string("a string")) == '"a string"'
    assert write_to_string(number(4.2)) == "4.2"
    assert write_to_string(boolean(True)) == "true"
    assert write_to_string(boolean(False)) == "false"


def test_write_object_layout_sorts_keys():
    value = object_()
    value.set("b", number(2))
    value.set("a", number(1))
    assert write_to_string(value) == '{\n    "a" : 1,\n    "b" : 2\n}'


def test_write_array_layout():
    value = array()
    value.add(number(1))
    value.add(string("x"))
    assert write_to_string(value) == '[ 1, "x"]'


def test_file_round_trip(tmp_path):
    path = tmp_path / "value.json"
    value = _sample_object()
    write_to_file(value, path)
    assert read_from_file(path) == value


def test_missing_file_raises(tmp_path):
    with pytest.raises(NoSuchFile):
        read_from_file(tmp_path / "missing.json")


def test_bad_file_content_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, ", encoding="utf-8")
    with pytest.raises(BadPayload):
        read_from_file(path)