import pytest

from deskcalc.session import Session
from deskcalc.symbols import BUILTIN_CONSTANTS, SymbolTable, with_builtins


def test_lookup_creates_missing_entry_with_zero() -> None:
    table = SymbolTable()
    entry = table.lookup_or_create("q")
    assert entry.name == "q"
    assert entry.value == 0.0
    assert "q" in table
    assert len(table) == 1


def test_lookup_returns_the_same_mutable_entry() -> None:
    table = SymbolTable()
    table.lookup_or_create("x").value = 5.0
    assert table.lookup_or_create("x").value == 5.0
    assert table["x"] == 5.0
    assert len(table) == 1


def test_names_are_case_sensitive() -> None:
    table = SymbolTable({"x": 1.0})
    assert table.lookup_or_create("X").value == 0.0
    assert table.as_dict() == {"x": 1.0, "X": 0.0}


def test_getitem_does_not_create() -> None:
    table = SymbolTable()
    with pytest.raises(KeyError):
        table["missing"]
    assert "missing" not in table


def test_builtins_are_ordinary_entries() -> None:
    table = with_builtins()
    assert table.as_dict() == {"pi": 3.14159265359, "ee": 2.71828182846}

    table.lookup_or_create("pi").value = 3.0
    assert table["pi"] == 3.0
    assert BUILTIN_CONSTANTS["pi"] == 3.14159265359
    assert with_builtins()["pi"] == 3.14159265359


def test_session_starts_from_builtins() -> None:
    assert Session().symbols.as_dict() == with_builtins().as_dict()
