# tinysql

tinysql is a small in-memory table with SQL-style column types. It has these parts:

- `tinysql.values` has two string types with a length limit, `Varchar` and `SQLChar`. `SQLChar` pads its value with spaces up to its length and ignores that padding when compared. The module also has comparison helpers with SQL-like rules: `compare` with a `Comparison` member, and `sql_equal`, `sql_not_equal`, `sql_less`, `sql_greater`, `sql_less_equal` and `sql_greater_equal`. Its `format_value` function renders a cell as text.
- `tinysql.dates` has `Date`. It stores a year, a month, a day and an `epoch` day count, where 0001-01-01 is day 1. It converts in both directions.
- `tinysql.table` has `Table`, which holds named columns typed by `DataType` and renders them as a text grid.
- `tinysql.cli` has a command that prints a demonstration table.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install .[test]
```

## Values and comparison

```python
from tinysql.values import Varchar, SQLChar, Comparison, compare, sql_equal, sql_less

Varchar("apple", 10) == "apple"           # True
SQLChar("apple", 10).value                 # "apple     "
SQLChar("apple", 10).unpadded()            # "apple"
SQLChar("abc", 10) == Varchar("abc")       # True: padding is ignored

sql_equal(10, 10.0)                        # True: numbers compare by value
sql_less(10, 50)                           # True
sql_equal("abc", SQLChar("abc"))           # True: string-like values compare as text
sql_equal(None, 10)                        # False: NULL equals no other value
sql_equal(None, None)                      # True
sql_equal(10, "10")                        # False: kinds that cannot be compared
compare(10, "10", Comparison.NOT_EQUAL)    # True
```

If you give no length, a `Varchar` takes the length of its value. An empty value gets a length of 100. A value longer than its length raises `DataTypeError`.

`format_value` renders cells as follows:

- `None` becomes `NULL`.
- Floats get four decimal places.
- Integers and strings are shown as they are.
- Any other type raises `DataTypeError`.

## Dates

```python
from tinysql.dates import Date

Date(2024, 2, 29).epoch          # 738945
str(Date.from_epoch(738945))     # "2024-02-29"
Date.parse("2000-02-29").epoch   # 730179
int(Date(1, 1, 1))               # 1
```

These inputs raise `DateError`:

- an out-of-range year, month or day
- a string that is not in `YYYY-MM-DD` form
- an epoch outside 1 to 3652059

Dates compare by year, then month, then day.

## Tables

```python
from tinysql.table import Table
from tinysql.values import Varchar

table = Table()
table.insert_column("id", "INTEGER")
table.insert_column("name", "VARCHAR", 10)
table.insert_row({"id": 1, "name": Varchar.for_column(table, "name", "alice")})
table.insert_row({"id": 2})          # missing columns become NULL
print(table.render())
table.show()                         # writes the same text to standard output
```

The supported column types are:

- `INTEGER`
- `SMALLINT`
- `BIGINT`
- `FLOAT`
- `TEXT`
- `CHAR`
- `VARCHAR`
- `NULL`

Only `CHAR` and `VARCHAR` columns take a length. `char_type_length` returns that length. A `TableError` is raised for any of these:

- an unknown type
- a length given to another type
- a duplicate column name
- a request for the length of an unknown column, or of a column with no length

A new column fills the existing rows with NULL. Keys in a row that match no column are ignored.

Each column in the rendered grid is as wide as its name. A value that does not fit is cut to that width, and a warning line follows the grid.

## Command line

```
tinysql
```

This builds a demonstration table and prints it.

## What it does not do

- tinysql does not parse SQL statements or queries.
- Tables live only in memory and are never saved.
- `Table.insert_row` does not check cells against their column's type.
- `Date` is not a cell type that `format_value` can render.

## Tests

```
pytest
```