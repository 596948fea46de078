import pytest

from sqtkit.odbctypes import (
    SqlType,
    ValueKind,
    column_type_name,
    dbms_info,
    final_connection_string,
    format_context,
    is_numeric_type,
    is_unquoted_type,
    sql_type_to_variant,
)

NUMERIC = [
    SqlType.DECIMAL,
    SqlType.NUMERIC,
    SqlType.TINYINT,
    SqlType.SMALLINT,
    SqlType.INTEGER,
    SqlType.BIGINT,
    SqlType.FLOAT,
    SqlType.DOUBLE,
    SqlType.REAL,
]


def test_raw_odbc_type_codes_are_recognised():
    assert sql_type_to_variant(4) is ValueKind.INT
    assert is_numeric_type(4) is True
    assert is_numeric_type(-9) is False
    assert sql_type_to_variant(-9) is ValueKind.STRING
    assert sql_type_to_variant(-150) is ValueKind.STRING
    assert sql_type_to_variant(-154) is ValueKind.TIME


@pytest.mark.parametrize("sql_type", NUMERIC)
def test_numeric_types(sql_type):
    assert is_numeric_type(sql_type) is True
    assert is_unquoted_type(sql_type) is True


@pytest.mark.parametrize("sql_type", [SqlType.CHAR, SqlType.WVARCHAR, SqlType.TYPE_DATE, SqlType.BIT])
def test_non_numeric_types(sql_type):
    assert is_numeric_type(sql_type) is False


def test_bit_is_unquoted_but_text_is_not():
    assert is_unquoted_type(SqlType.BIT) is True
    assert is_unquoted_type(SqlType.VARCHAR) is False
    assert is_unquoted_type(int(SqlType.BIT)) is True


@pytest.mark.parametrize(
    "sql_type, kind",
    [
        (SqlType.SMALLINT, ValueKind.INT),
        (SqlType.INTEGER, ValueKind.INT),
        (SqlType.BIGINT, ValueKind.LONG_LONG),
        (SqlType.REAL, ValueKind.DOUBLE),
        (SqlType.FLOAT, ValueKind.DOUBLE),
        (SqlType.DOUBLE, ValueKind.DOUBLE),
        (SqlType.BIT, ValueKind.BOOL),
        (SqlType.TINYINT, ValueKind.UCHAR),
        (SqlType.TYPE_DATE, ValueKind.DATE),
        (SqlType.SS_TIME2, ValueKind.TIME),
        (SqlType.TYPE_TIME, ValueKind.TIME),
        (SqlType.TYPE_TIMESTAMP, ValueKind.DATETIME),
        (SqlType.DECIMAL, ValueKind.STRING),
        (SqlType.WVARCHAR, ValueKind.STRING),
        (12345, ValueKind.STRING),
    ],
)
def test_sql_type_to_variant(sql_type, kind):
    assert sql_type_to_variant(sql_type) is kind


def test_decimal_with_scale():
    assert column_type_name("decimal", SqlType.DECIMAL, 10, 2) == "decimal(10,2)"


def test_numeric_without_scale_has_no_comma():
    name = column_type_name("numeric", SqlType.NUMERIC, 18, 0)
    assert name.startswith("numeric(18")
    assert "," not in name


@pytest.mark.parametrize("data_type", [SqlType.FLOAT, SqlType.REAL, SqlType.DOUBLE])
def test_float_sizes_named(data_type):
    assert column_type_name("float", data_type, 24, 0) == "real"
    assert column_type_name("float", data_type, 53, 0) == "double precision"


def test_max_size_varchar():
    assert column_type_name("nvarchar", SqlType.WVARCHAR, 1073741823, 0) == "nvarchar(max)"
    assert column_type_name("varbinary", SqlType.VARBINARY, 536870911, 0).endswith("max)")


def test_sized_text_contains_size():
    name = column_type_name("varchar", SqlType.VARCHAR, 50, 0)
    assert name == "varchar(" + str(50) + ")"


@pytest.mark.parametrize("data_type", [SqlType.VARCHAR, SqlType.FLOAT])
def test_zero_size_leaves_name(data_type):
    assert column_type_name("text", data_type, 0, 0) == "text"


@pytest.mark.parametrize("data_type", [SqlType.INTEGER, SqlType.TYPE_DATE, SqlType.BIT])
def test_other_types_unchanged(data_type):
    assert column_type_name("int", data_type, 10, 0) == "int"


def test_connection_string_without_database():
    assert final_connection_string("DSN=x", "") == "APP=sqt;" + "DSN=x"
    assert final_connection_string("DSN=x") == "APP=sqt;" + "DSN=x"


def test_connection_string_with_database():
    assert final_connection_string("DSN=x", "db") == "APP=sqt;DSN=x;Database={db};"


def test_dbms_info():
    assert dbms_info("SQL", "9") == "SQL" + " v." + "9"


def test_context_full():
    assert format_context("srv", "sa", "master") == "sa" + "@" + "srv" + "/" + "master"


def test_context_without_server_uses_database():
    assert format_context("", "sa", "master") == "sa" + "@" + "master"


def test_context_without_user_or_database():
    assert format_context("srv", "", "") == "srv"
    assert format_context(None, None, None) == ""