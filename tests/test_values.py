import pytest

from tinysql.values import (
    Comparison,
    DataTypeError,
    SQLChar,
    Varchar,
    compare,
    format_value,
    sql_equal,
    sql_greater,
    sql_greater_equal,
    sql_less,
    sql_less_equal,
    sql_not_equal,
)


class _FakeTable:
    def __init__(self, lengths):
        self.lengths = lengths

    def char_type_length(self, name):
        return self.lengths[name]


def test_varchar_vs_varchar():
    a = Varchar("apple", 10)
    b = Varchar("banana", 20)
    assert a == Varchar("apple", 10)
    assert a != b
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a


def test_string_vs_varchar_both_ways():
    a = Varchar("apple", 10)
    b = Varchar("banana", 20)
    s1, s2 = "apple", "banana"
    assert s1 == a
    assert s1 != b
    assert s1 < b
    assert s1 <= b
    assert s2 > a
    assert s2 >= a
    assert a == s1
    assert a != s2
    assert a < s2
    assert a <= s2
    assert b > s1
    assert b >= s1


def test_char_vs_char_and_string():
    a = SQLChar("apple", 10)
    b = SQLChar("banana", 20)
    s1, s2 = "apple", "banana"
    assert a == SQLChar("apple", 10)
    assert a != b
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert s1 == a
    assert s1 != b
    assert s1 < b
    assert s2 > a
    assert s2 >= a
    assert a == s1
    assert a != s2
    assert a < s2
    assert b > s1
    assert b >= s1


def test_varchar_vs_char_both_ways():
    a = SQLChar("apple", 10)
    b = SQLChar("banana", 20)
    c = Varchar("apple", 10)
    d = Varchar("banana", 20)
    assert c == SQLChar("apple", 10)
    assert c != b
    assert c < b
    assert c <= b
    assert d > a
    assert d >= a
    assert a == Varchar("apple", 10)
    assert a != d
    assert a < d
    assert a <= d
    assert b > c
    assert b >= c


def test_sqlchar_pads_to_length():
    c = SQLChar("lesser", 10)
    assert len(c.value) == 10
    assert c.value.startswith("lesser")
    assert c.unpadded() == "lesser"
    assert str(c) == c.value


def test_sqlchar_without_length_has_no_padding():
    c = SQLChar("xyz")
    assert c.length == 3
    assert c.value == "xyz"


def test_default_lengths():
    assert Varchar().length == 100
    assert SQLChar().length == 100
    assert SQLChar().unpadded() == ""


def test_varchar_exact_length_allowed():
    v = Varchar("exactlyTen", 10)
    assert v.value == "exactlyTen"
    assert str(v) == "exactlyTen"


@pytest.mark.parametrize("cls", [Varchar, SQLChar])
def test_too_long_value_raises(cls):
    with pytest.raises(DataTypeError):
        cls("exactlyTen!", 10)


def test_for_column_uses_table_length():
    table = _FakeTable({"variableCharacter": 10, "setchar": 10})
    v = Varchar.for_column(table, "variableCharacter", "exactlyTen")
    assert v.length == 10
    c = SQLChar.for_column(table, "setchar", "abc")
    assert isinstance(c, SQLChar)
    assert c.length == 10
    assert c.unpadded() == "abc"
    with pytest.raises(DataTypeError):
        Varchar.for_column(table, "variableCharacter", "exactlyTen!")


def test_equal_values_hash_equal():
    assert hash(Varchar("abc")) == hash(SQLChar("abc", 10))
    assert len({Varchar("abc"), Varchar("abc")}) == 1


def test_types_vs_types():
    assert sql_equal(10, 10)
    assert sql_equal(123456789, 123456789)
    assert sql_equal(3.14, 3.14)
    assert sql_equal("hello", "hello")
    assert sql_equal(Varchar("abc"), Varchar("abc"))
    assert sql_equal(SQLChar("xyz"), SQLChar("xyz"))
    assert sql_equal(10, 10.0)
    assert sql_equal(Varchar("abc"), SQLChar("abc"))
    assert sql_equal(Varchar("abc"), "abc")
    assert sql_equal(SQLChar("abc"), "abc")
    assert not sql_equal(10, 20)
    assert not sql_equal(Varchar("abc"), Varchar("xyz"))
    assert not sql_equal(SQLChar("abc"), Varchar("xyz"))
    assert not sql_equal("abc", SQLChar("xyz"))


def test_numeric_ordering():
    assert sql_less(10, 50)
    assert sql_greater(50, 10)
    assert sql_less_equal(50, 50)
    assert sql_greater_equal(50, 50)
    assert sql_greater(100, 75.0)
    assert sql_less(75.0, 100)
    assert not sql_less(42, 42.0)
    assert not sql_not_equal(42, 42.0)


def test_mismatched_kinds():
    assert not sql_equal(10, "10")
    assert sql_not_equal(10, "10")
    assert not sql_less(10, "10")
    assert not sql_greater_equal("abc", 1)


def test_null_comparisons():
    assert sql_not_equal(None, 10)
    assert sql_not_equal(None, "abc")
    assert not sql_equal(None, 10)
    assert not sql_less(None, 10)
    assert not sql_greater(10, None)
    assert sql_equal(None, None)
    assert not sql_not_equal(None, None)
    assert sql_less_equal(None, None)
    assert not sql_less(None, None)


@pytest.mark.parametrize("op", list(Comparison))
def test_compare_matches_wrappers(op):
    wrappers = {
        Comparison.EQUAL: sql_equal,
        Comparison.NOT_EQUAL: sql_not_equal,
        Comparison.LESS: sql_less,
        Comparison.GREATER: sql_greater,
        Comparison.LESS_EQUAL: sql_less_equal,
        Comparison.GREATER_EQUAL: sql_greater_equal,
    }
    for lhs, rhs in [(1, 2), ("b", Varchar("a")), (None, 3), (5, 5.0)]:
        assert compare(lhs, rhs, op) == wrappers[op](lhs, rhs)


def test_format_value():
    assert format_value(None) == "NULL"
    assert format_value("heh") == "heh"
    assert format_value(1) == "1"
    assert format_value(Varchar("lesser", 10)) == "lesser"
    assert format_value(SQLChar("lesser", 10)) == SQLChar("lesser", 10).value
    assert format_value(3.14159) == "3.1416"


def test_format_value_unsupported():
    with pytest.raises(DataTypeError):
        format_value(object())