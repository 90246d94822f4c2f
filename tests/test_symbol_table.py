import pytest

from minicsem.symbol_table import ScopeTable, SymbolTable, sdbm_hash
from minicsem.symbols import Array, Function, SymbolInfo, Variable


def test_sdbm_hash_of_empty_and_single_char():
    assert sdbm_hash("") == 0
    assert sdbm_hash("a") == ord("a")


def test_sdbm_hash_stays_within_64_bits():
    value = sdbm_hash("a_rather_long_identifier_name_" * 10)
    assert 0 <= value < 2**64


def test_scope_table_rejects_zero_buckets():
    with pytest.raises(ValueError):
        ScopeTable(0)


def test_insert_and_find():
    scope = ScopeTable(7)
    x = Variable("x", "INT")
    assert scope.insert(x) is True
    assert scope.find("x") is x
    assert scope.find("y") is None


def test_duplicate_insert_is_refused():
    scope = ScopeTable(7)
    first = Variable("x", "INT")
    assert scope.insert(first)
    assert scope.insert(Variable("x", "FLOAT")) is False
    assert scope.find("x") is first
    assert len(scope) == 1


def test_erase():
    scope = ScopeTable(7)
    scope.insert(SymbolInfo("a", "ID"))
    assert scope.erase("a") is True
    assert scope.find("a") is None
    assert scope.erase("a") is False


def test_location_in_single_bucket_chain():
    scope = ScopeTable(1)
    scope.insert(SymbolInfo("a", "ID"))
    scope.insert(SymbolInfo("b", "ID"))
    assert scope.location_of("a") == (1, 1)
    assert scope.location_of("b") == (1, 2)
    assert scope.location_of("c") is None


def test_erase_middle_of_chain_keeps_rest():
    scope = ScopeTable(1)
    for name in "abc":
        scope.insert(SymbolInfo(name, "ID"))
    assert scope.erase("b")
    assert scope.location_of("c") == (1, 2)
    assert [s.name for s in scope] == ["a", "c"]


def test_format_empty_scope():
    assert ScopeTable(5).format() == "\tScopeTable# 1\n"


def test_format_primitive_variable():
    scope = ScopeTable(1)
    scope.insert(Variable("x", "INT"))
    assert scope.format() == "\tScopeTable# 1\n\t1--> <x, INT> \n"


def test_format_array_function_and_plain_symbol():
    scope = ScopeTable(1)
    scope.insert(Array("arr", "INT", "5"))
    scope.insert(Function("main", "INT"))
    scope.insert(SymbolInfo("plain", "ID"))
    listing = scope.format()
    assert "<arr, ARRAY, INT> " in listing
    assert "<main, FUNCTION, INT> " in listing
    assert "plain" not in listing


def test_symbol_table_nested_lookup_and_shadowing():
    table = SymbolTable(11)
    outer = Variable("x", "INT")
    table.insert(outer)
    assert table.enter_scope() is True
    inner = Variable("x", "FLOAT")
    assert table.insert(inner)
    assert table.find("x") is inner
    assert table.scope_id_of("x") == 2
    table.exit_scope()
    assert table.find("x") is outer
    assert table.scope_id_of("x") == 1


def test_scope_ids_keep_increasing():
    table = SymbolTable(11)
    table.enter_scope()
    table.exit_scope()
    table.enter_scope()
    assert table.current_scope.id == 3


def test_find_reaches_outer_scopes():
    table = SymbolTable(11)
    g = Variable("g", "INT")
    table.insert(g)
    table.enter_scope()
    table.enter_scope()
    assert table.find("g") is g
    assert table.location_of("g") == table.current_scope.parent.parent.location_of("g")


def test_erase_only_affects_current_scope():
    table = SymbolTable(11)
    table.insert(Variable("g", "INT"))
    table.enter_scope()
    assert table.erase("g") is False
    table.exit_scope()
    assert table.erase("g") is True
    assert table.find("g") is None


def test_exit_all_scopes_then_recover():
    table = SymbolTable(11)
    assert table.exit_scope() is True
    assert table.exit_scope() is False
    assert table.current_scope is None
    assert table.find("x") is None
    assert table.erase("x") is False
    assert table.format_current_scope() == ""
    assert table.format_all_scopes() == ""
    assert table.insert(Variable("x", "INT")) is True
    assert table.current_scope.id == 1


def test_enter_scope_without_parent_returns_false():
    table = SymbolTable(11)
    table.exit_scope()
    assert table.enter_scope() is False
    assert table.current_scope.id == 1


def test_missing_names_report_none():
    table = SymbolTable(11)
    assert table.scope_id_of("nothing") is None
    assert table.location_of("nothing") is None


def test_format_all_scopes_innermost_first():
    table = SymbolTable(11)
    table.enter_scope()
    listing = table.format_all_scopes()
    assert listing.index("ScopeTable# 2") < listing.index("ScopeTable# 1")
    assert table.format_current_scope() == table.current_scope.format()