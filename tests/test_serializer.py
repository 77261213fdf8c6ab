"""Tests for JSON rendering."""
import json
import pytest
from cfgtrans.serializer import to_json
from cfgtrans.values import cfg_number, cfg_str, cfg_bool, cfg_array, cfg_object


class TestScalars:
    def test_number(self):
        assert to_json(cfg_number(26)) == "26"

    def test_negative_number(self):
        assert to_json(cfg_number(-1)) == "-1"

    def test_string(self):
        assert to_json(cfg_str("localhost")) == '"localhost"'

    def test_bool(self):
        assert to_json(cfg_bool(True)) == "true"
        assert to_json(cfg_bool(False)) == "false"


class TestStrings:
    def test_quote_left_unescaped_by_default(self):
        assert to_json(cfg_str('say "hi"')) == '"say "hi""'

    def test_backslash_left_unescaped_by_default(self):
        assert to_json(cfg_str("C:\\tmp")) == '"C:\\tmp"'

    def test_escaping_on_request(self):
        rendered = to_json(cfg_str('say "hi"\\\n'), escape_strings=True)
        assert json.loads(rendered) == 'say "hi"\\\n'

    def test_escaping_keeps_non_ascii(self):
        assert to_json(cfg_str("héllo"), escape_strings=True) == '"héllo"'


class TestArrays:
    def test_empty(self):
        assert to_json(cfg_array()) == "[]"

    def test_single_line(self):
        v = cfg_array([cfg_number(1), cfg_str("a"), cfg_bool(True)])
        assert to_json(v) == '[1, "a", true]'

    def test_nested_arrays_stay_single_line(self):
        v = cfg_array([cfg_array([cfg_number(1)]), cfg_array()])
        assert to_json(v, 6) == "[[1], []]"

    def test_object_inside_array_restarts_at_depth_zero(self):
        v = cfg_array([cfg_object({"a": cfg_number(1)})])
        assert to_json(v, 4) == '[{\n  "a": 1\n}]'


class TestObjects:
    def test_empty(self):
        assert to_json(cfg_object()) == "{}"
        assert to_json(cfg_object(), 4) == "{}"

    def test_single_entry(self):
        assert to_json(cfg_object({"port": cfg_number(26)})) == '{\n  "port": 26\n}'

    def test_keys_sorted(self):
        v = cfg_object({"timeout": cfg_number(30), "enabled": cfg_bool(True)})
        assert to_json(v) == '{\n  "enabled": true,\n  "timeout": 30\n}'

    def test_sort_is_by_code_point(self):
        v = cfg_object({"b": cfg_number(1), "B": cfg_number(2), "a_": cfg_number(3)})
        assert to_json(v) == '{\n  "B": 2,\n  "a_": 3,\n  "b": 1\n}'

    def test_nested_indentation(self):
        v = cfg_object({"app": cfg_object({"db": cfg_object({"port": cfg_number(8822)})})})
        assert to_json(v) == (
            '{\n'
            '  "app": {\n'
            '    "db": {\n'
            '      "port": 8822\n'
            '    }\n'
            '  }\n'
            '}'
        )

    def test_starting_depth(self):
        v = cfg_object({"a": cfg_number(1)})
        assert to_json(v, 2) == '{\n    "a": 1\n  }'

    def test_valid_json(self):
        v = cfg_object({
            "list": cfg_array([cfg_number(1), cfg_object({"k": cfg_str("v")})]),
            "flag": cfg_bool(False),
        })
        assert json.loads(to_json(v)) == {"list": [1, {"k": "v"}], "flag": False}


class TestPurity:
    def test_repeated_rendering_is_identical(self):
        v = cfg_object({"x": cfg_array([cfg_number(1), cfg_object({"y": cfg_str("z")})])})
        first = to_json(v)
        assert all(to_json(v) == first for _ in range(3))


class TestUnknownType:
    def test_rejects_foreign_type(self):
        from cfgtrans.values import CfgValue
        with pytest.raises(TypeError):
            to_json(CfgValue(1.5, "Float"))
