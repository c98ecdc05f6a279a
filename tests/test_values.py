"""
Tests for argument conversion: text -> typed value.
"""

import numpy as np
import pytest

from pyargs.exceptions import ArgumentIncorrectType
from pyargs.values import (
    Boolean, Character, Incremental, Int8, Int32, Int64, Integer, String,
    UInt8, UInt32, Unit, value_type,
)


class TestBoolean:

    @pytest.mark.parametrize("text", ["true", "yes", "on", "1"])
    def test_true_words(self, text):
        assert Boolean().convert(text) is True

    @pytest.mark.parametrize("text", ["false", "no", "off", "0"])
    def test_false_words(self, text):
        assert Boolean().convert(text) is False

    @pytest.mark.parametrize("text", ["truew", "falsew", "offf", "5", "True", "YES", "", " on"])
    def test_rejects_everything_else(self, text):
        with pytest.raises(ArgumentIncorrectType):
            Boolean().convert(text)


class TestInteger:

    def test_signed(self):
        assert Int32.convert("53") == 53
        assert Int32.convert("-53") == -53

    def test_result_has_declared_width(self):
        assert Int32.convert("7").dtype == np.int32
        assert UInt8.convert("7").dtype == np.uint8

    def test_unsigned_rejects_minus(self):
        assert UInt32.convert("53") == 53
        with pytest.raises(ArgumentIncorrectType):
            UInt32.convert("-53")

    @pytest.mark.parametrize("value", [Int32, UInt32])
    def test_plus_is_always_rejected(self, value):
        with pytest.raises(ArgumentIncorrectType):
            value.convert("+53")

    @pytest.mark.parametrize("text", ["", "-", "12a", "a12", " 12", "12 ", "1.5", "0x10", "١٢"])
    def test_rejects_malformed(self, text):
        with pytest.raises(ArgumentIncorrectType):
            Int64.convert(text)

    def test_bounds(self):
        assert Int8.convert("127") == 127
        assert Int8.convert("-128") == -128
        assert UInt8.convert("255") == 255
        for value, text in [(Int8, "128"), (Int8, "-129"), (UInt8, "256")]:
            with pytest.raises(ArgumentIncorrectType):
                value.convert(text)

    def test_uint64_max(self):
        value = Integer(np.uint64)
        assert value.convert("18446744073709551615") == 2 ** 64 - 1
        with pytest.raises(ArgumentIncorrectType):
            value.convert("18446744073709551616")

    def test_digit_run_past_int_conversion_limit(self):
        with pytest.raises(ArgumentIncorrectType):
            Int64.convert("1" * 5000)
        with pytest.raises(ArgumentIncorrectType):
            Int64.convert("-" + "9" * 5000)

    def test_non_integer_dtype(self):
        with pytest.raises(TypeError):
            Integer(np.float64)


class TestStringAndCharacter:

    def test_string_is_unchanged(self):
        assert String().convert("") == ""
        assert String().convert("-x y") == "-x y"

    def test_character(self):
        assert Character().convert("q") == "q"
        for text in ["", "qq"]:
            with pytest.raises(ArgumentIncorrectType):
                Character().convert(text)


class TestUnit:

    def test_ignores_input(self):
        assert Unit().convert("") is True
        assert Unit().convert("anything") is True
        assert Unit.is_flag


class TestIncremental:

    def test_delegates(self):
        value = Incremental(int)
        assert value.is_container
        assert not value.is_flag
        assert value.convert("4") == 4
        with pytest.raises(ArgumentIncorrectType):
            value.convert("four")

    def test_of_unit_is_a_flag(self):
        assert Incremental(Unit).is_flag
        assert Incremental().is_flag

    def test_cannot_nest(self):
        with pytest.raises(TypeError):
            Incremental(Incremental(int))


class TestValueType:

    def test_builtins(self):
        assert value_type(int) is Int64
        assert isinstance(value_type(str), String)
        assert isinstance(value_type(bool), Boolean)
        assert isinstance(value_type(None), Unit)

    def test_numpy_types(self):
        value = value_type(np.int16)
        assert isinstance(value, Integer)
        assert value.dtype == np.int16

    def test_value_classes_and_instances(self):
        assert isinstance(value_type(Character), Character)
        string = String()
        assert value_type(string) is string

    @pytest.mark.parametrize("spec", [float, list, "int", 3])
    def test_unsupported(self, spec):
        with pytest.raises(TypeError):
            value_type(spec)
