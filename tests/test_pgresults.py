import math

import pytest

from sqtkit.odbctypes import ValueKind
from sqtkit.pgresults import ResultColumn, ResultTable, convert_value
from sqtkit.pgtypes import PgType


@pytest.mark.parametrize("oid", [PgType.INT2, PgType.INT4, PgType.INT8])
def test_integers(oid):
    assert convert_value(oid, "42") == 42
    assert convert_value(oid, "-7") == -7
    assert convert_value(oid, "  12abc") == 12
    assert convert_value(oid, "abc") == 0


def test_big_integer_kept_whole():
    assert convert_value(PgType.INT8, "9223372036854775807") == 9223372036854775807


@pytest.mark.parametrize("oid", [PgType.FLOAT4, PgType.FLOAT8])
def test_floats(oid):
    assert convert_value(oid, "1.5") == 1.5
    assert convert_value(oid, "-2e3") == -2000.0
    assert convert_value(oid, "x") == 0.0
    assert math.isnan(convert_value(oid, "NaN"))
    assert convert_value(oid, "-Infinity") == -math.inf


def test_bool():
    assert convert_value(PgType.BOOL, "t") is True
    assert convert_value(PgType.BOOL, "f") is False


def test_char():
    assert convert_value(PgType.CHAR, "abc") == "a"
    assert convert_value(PgType.CHAR, "") == "\0"


def test_text_types_keep_text():
    assert convert_value(PgType.TEXT, "hello") == "hello"
    assert convert_value(PgType.TIMESTAMP, "2020-01-02 03:04:05.123456") == "2020-01-02 03:04:05.123456"
    assert convert_value(PgType.NUMERIC, "1.50") == "1.50"


def test_null_stays_none():
    assert convert_value(PgType.INT4, None) is None
    assert convert_value(PgType.TEXT, None) is None


def test_column_properties():
    number = ResultColumn("n", PgType.INT4)
    text = ResultColumn("t", PgType.TEXT)
    assert number.kind is ValueKind.INT
    assert number.right_aligned is True
    assert text.kind is ValueKind.STRING
    assert text.right_aligned is False
    assert number.nullable is True


def test_append_defines_columns_and_converts():
    table = ResultTable()
    added = table.append(
        [("id", PgType.INT4, -1), ("name", PgType.VARCHAR, 14), ("ok", PgType.BOOL, -1)],
        [["1", "one", "t"], ["2", None, "f"]],
    )
    assert added == 2
    assert [c.name for c in table.columns] == ["id", "name", "ok"]
    assert table.columns[1].modifier == 14
    assert table.rows == [[1, "one", True], [2, None, False]]
    assert table.row_count == 2
    assert table.column_count == 3


def test_append_accumulates_rows():
    table = ResultTable()
    fields = [("x", PgType.INT8, -1)]
    table.append(fields, [["1"]])
    assert table.append(fields, [["2"], ["3"]]) == 2
    assert [row[0] for row in table.rows] == [1, 2, 3]


def test_append_without_rows():
    table = ResultTable()
    assert table.append([("x", PgType.TEXT, -1)], []) == 0
    assert table.column_count == 1
    assert table.rows == []


def test_mismatched_fields_raise():
    table = ResultTable()
    table.append([("x", PgType.TEXT, -1)], [["a"]])
    with pytest.raises(ValueError):
        table.append([("x", PgType.TEXT, -1), ("y", PgType.TEXT, -1)], [["a", "b"]])
    assert table.rows == [["a"]]


def test_mismatched_row_width_raises():
    table = ResultTable()
    with pytest.raises(ValueError):
        table.append([("x", PgType.TEXT, -1)], [["a", "b"]])
    assert table.rows == []