"""
Tests for DynamicValue and read-option resolution.
"""

import os

import pytest
from py_frame import DynamicValue, Kind, ReadCsvOptions, ReadOption
from py_frame.errors import PyFrameKeyError, PyFrameTypeError
from py_frame.options import DEFAULT_NEW_LINE, resolve


class TestConstruction:

    def test_kind_follows_payload(self):
        assert DynamicValue(True).kind is Kind.BOOLEAN
        assert DynamicValue(2.5).kind is Kind.NUMBER
        assert DynamicValue(";").kind is Kind.TEXT

    def test_int_is_stored_as_number(self):
        v = DynamicValue(3)
        assert v.kind is Kind.NUMBER
        assert v.value == 3.0
        assert isinstance(v.value, float)

    def test_bool_is_not_a_number(self):
        assert DynamicValue(False).kind is Kind.BOOLEAN
        assert DynamicValue(False) != DynamicValue(0.0)

    @pytest.mark.parametrize("payload", [None, [1], b"x"])
    def test_other_payloads_rejected(self, payload):
        with pytest.raises(PyFrameTypeError):
            DynamicValue(payload)

    def test_read_only(self):
        v = DynamicValue(",")
        with pytest.raises(AttributeError):
            v.value = ";"

    def test_copy(self):
        v = DynamicValue("\t")
        c = v.copy()
        assert c == v
        assert c.kind is Kind.TEXT


class TestExtract:

    def test_text_as_text(self):
        assert DynamicValue(",").extract(str) == ","

    def test_boolean_round_trips_through_text(self):
        assert DynamicValue(True).extract(bool) is True
        assert DynamicValue(True).extract(int) == 1
        assert DynamicValue(True).extract(float) == 1.0
        assert DynamicValue(False).extract(int) == 0

    def test_number_round_trips_through_text(self):
        assert DynamicValue(2.0).extract(int) == 2
        assert DynamicValue(0.5).extract(float) == 0.5
        assert DynamicValue(0.5).extract(int) == 0
        assert DynamicValue(0.0).extract(bool) is False
        assert DynamicValue(3.0).extract(bool) is True

    def test_number_keeps_six_significant_digits(self):
        assert DynamicValue(1234567.0).extract(float) == 1234570.0

    def test_boolean_as_text_rejected(self):
        with pytest.raises(PyFrameTypeError, match="as text"):
            DynamicValue(True).extract(str)

    def test_number_as_text_rejected(self):
        with pytest.raises(PyFrameTypeError):
            DynamicValue(1.0).extract(str)

    def test_text_as_number_rejected(self):
        with pytest.raises(PyFrameTypeError, match="Cannot extract text value"):
            DynamicValue("1").extract(int)


class TestResolve:

    def test_defaults(self):
        opts = resolve(None)
        assert opts == ReadCsvOptions()
        assert opts.header is True
        assert opts.separator == ","
        assert opts.auto_trim is True
        assert opts.new_line == DEFAULT_NEW_LINE

    def test_platform_new_line(self):
        assert DEFAULT_NEW_LINE == ("\r\n" if os.name == "nt" else "\n")

    def test_dynamic_values(self):
        opts = resolve({
            ReadOption.HEADER_PRESENT: DynamicValue(False),
            ReadOption.SEPARATOR: DynamicValue(";"),
            ReadOption.NEW_LINE: DynamicValue("\r\n"),
            ReadOption.AUTO_TRIM: DynamicValue(False),
        })
        assert opts == ReadCsvOptions(header=False, separator=";", new_line="\r\n", auto_trim=False)

    def test_plain_values_are_wrapped(self):
        opts = resolve({ReadOption.SEPARATOR: "|", ReadOption.HEADER_PRESENT: 0.0})
        assert opts.separator == "|"
        assert opts.header is False

    def test_missing_keys_keep_base(self):
        base = ReadCsvOptions(separator="\t", auto_trim=False)
        opts = resolve({ReadOption.HEADER_PRESENT: False}, base)
        assert opts.separator == "\t"
        assert opts.auto_trim is False
        assert opts.header is False

    def test_unknown_key_rejected(self):
        with pytest.raises(PyFrameKeyError, match="Unknown read option"):
            resolve({"separator": ";"})

    def test_wrong_kind_rejected(self):
        with pytest.raises(PyFrameTypeError):
            resolve({ReadOption.SEPARATOR: DynamicValue(1.0)})
