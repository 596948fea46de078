# sqtkit

sqtkit provides building blocks for an SQL query tool that works with ODBC
data sources and PostgreSQL servers. It contains the logic that surrounds a
connection: parsing options embedded in queries, packing parameters,
describing types, decoding result rows and formatting messages. It does not
talk to a server itself.

## Modules

- `sqtkit.queryoptions`
  - `extract_query_options(query)` collects the JSON options written in
    `/*sqt ... */` comments of a query.
  - The first `interval` found is kept.
  - `copy_src`, `copy_dst` and `charts` values from all blocks are gathered
    into lists.
  - Other keys are ignored.
  - Scanning stops at the first comment whose JSON cannot be parsed.
- `sqtkit.odbctypes`
  - `SqlType` holds the ODBC type codes, and `ValueKind` the kinds of
    fetched values.
  - `is_numeric_type` and `is_unquoted_type` classify type codes.
  - `sql_type_to_variant` gives the `ValueKind` for a type code.
  - `column_type_name` builds names such as `decimal(10,2)`,
    `varchar(max)` or `double precision`.
  - `final_connection_string`, `dbms_info` and `format_context` build the
    connection string, the server description and the `user@server/database`
    line.
- `sqtkit.odbcresults`
  - `split_batches` splits a script on lines that hold only `go`.
  - `to_crlf` turns bare `\n` line ends into `\r\n`.
  - `interpret_diagnostics` turns `DiagnosticRecord` values into
    `Diagnostic` messages with a `Severity`.
  - `connection_broken` detects SQL state `08S01`.
  - `rows_message` gives the "rows fetched" or "rows affected" summary.
- `sqtkit.pgparams`
  - `PgParams` is an ordered list of query parameters in text form.
  - Strings are encoded as UTF-8, bytes are kept as they are, booleans
    become `true`/`false`, and `None` stands for NULL.
  - `values()` and `lengths()` return the parameters and their byte lengths,
    and `len()` gives their count.
- `sqtkit.pgtypes`
  - `PgType` holds the OIDs of built-in PostgreSQL types, and
    `TransactionStatus` the transaction states.
  - Type helpers:
    - `is_numeric_type`, `is_unquoted_type` and `sql_type_to_variant`
      classify types.
    - `decode_modifier` reads length and scale from a type modifier.
    - `describe_type` writes a type as it appears in DDL, arrays as `[]`.
  - `final_connection_string` builds the connection string and escapes the
    database name.
  - `transaction_status_text` gives the short text of a transaction status.
- `sqtkit.pgresults`
  - `convert_value` turns a text field into a Python value according to
    its type OID.
  - `ResultTable.append(fields, rows)` gathers rows, fetched in one part or
    in several.
    - The first call defines the columns as `ResultColumn` values.
    - A later call whose column count differs raises `ValueError`.
- `sqtkit.pgsession`
  - `AsyncStage` lists the stages of an asynchronous exchange.
  - `TypeCatalog` caches type names and array element types, using a loader
    function you provide; `lookup(oid)` returns `("unknown", -1)` for types
    it cannot find.
  - `format_context`, `format_dbms_info` (using `DBMS_INFO_PARAMETERS`),
    `format_notification` and `command_result_message` produce
    user-facing text.
  - `classify_notice` turns a `script` or `html` notice into a one-cell
    `ResultTable`, and any other notice into its message text.

## Installation

```
pip install .
```

## Examples

```python
from sqtkit.queryoptions import extract_query_options

query = """
/*sqt { "interval": 1000, "charts": {"name": "tps"} } */
select 1;
"""
options = extract_query_options(query)
# {'interval': 1000, 'charts': [{'name': 'tps'}]}
```

```python
from sqtkit.pgparams import PgParams

params = PgParams().add("alpha").add(None)
params.values()   # [b'alpha', None]
params.lengths()  # [5, 0]
```

```python
from sqtkit.pgresults import ResultTable
from sqtkit.pgtypes import PgType

table = ResultTable()
table.append([("id", PgType.INT4, -1), ("ok", PgType.BOOL, -1)],
             [["1", "t"], ["2", None]])
table.rows  # [[1, True], [2, None]]
```

## What it does not do

- sqtkit opens no ODBC or PostgreSQL connections, sends no queries and reads
  no sockets. You supply the data returned by your own driver.
- It has no graphical interface and no command-line program.

## Tests

```
pip install .[test]
pytest
```