import pytest

from minicsem.logger import (
    LogType,
    log_data,
    message,
    rule,
    rule_and_line,
    terminal_rule_and_line,
)
from minicsem.symbols import NonTerminal, SymbolInfo, Terminal


def _terminal(name, kind, line):
    t = Terminal(name, kind)
    t.start_line = line
    t.end_line = line
    return t


def _nonterminal(kind, start, end):
    n = NonTerminal("code", kind)
    n.start_line = start
    n.end_line = end
    return n


def test_message_format():
    assert message("ID", "x", 4) == "Line# 4: Token <ID> Lexeme x found"


def test_keyword_log_uses_upper_case_token():
    assert log_data(LogType.KEYWORD, 1, "while") == message("WHILE", "while", 1)


@pytest.mark.parametrize(
    "kind,lexeme,token",
    [
        (LogType.INTEGER, "12", "CONST_INT"),
        (LogType.FLOAT, "1.5", "CONST_FLOAT"),
        (LogType.IDENTIFIER, "abc", "ID"),
        (LogType.SINGLE_COMMENT, "// hi", "SINGLE LINE COMMENT"),
        (LogType.MULTI_COMMENT, "/* hi */", "MULTI LINE COMMENT"),
        (LogType.OPERATOR, "<=", "RELOP"),
        (LogType.OPERATOR, "--", "DECOP"),
    ],
)
def test_log_tokens(kind, lexeme, token):
    assert log_data(kind, 2, lexeme) == message(token, lexeme, 2)


def test_character_log_shows_actual_char():
    assert log_data(LogType.CHARACTER, 1, "'\\t'") == message("CONST_CHAR", "\t", 1)


def test_string_log_keeps_raw_lexeme():
    raw = '"ab\\\ncd"'
    assert log_data(LogType.STRING, 5, raw) == message("MULTI LINE STRING", raw, 5)
    assert log_data(LogType.STRING, 5, '"ab"') == message(
        "SINGLE LINE STRING", '"ab"', 5
    )


def test_rule_lists_children():
    parent = _nonterminal("variable", 1, 1)
    children = [_terminal("x", "ID", 1)]
    assert rule(parent, children) == "variable : ID "


def test_rule_mixes_terminals_and_nonterminals():
    parent = _nonterminal("expression", 1, 2)
    children = [
        _nonterminal("variable", 1, 1),
        _terminal("=", "ASSIGNOP", 1),
        _nonterminal("logic_expression", 2, 2),
    ]
    assert rule(parent, children) == "expression : variable ASSIGNOP logic_expression "


def test_rule_with_error_child():
    parent = _nonterminal("parameter_list", 3, 3)
    assert rule(parent, [SymbolInfo("error", "error")]) == "parameter_list : error"


def test_rule_and_line_shows_span():
    parent = _nonterminal("statement", 2, 6)
    children = [_nonterminal("expression_statement", 2, 6)]
    assert rule_and_line(parent, children) == (
        "statement : expression_statement \t<Line: 2-6>"
    )


def test_rule_and_line_for_lone_error_shows_start_only():
    parent = _nonterminal("declaration_list", 4, 4)
    result = rule_and_line(parent, [SymbolInfo("error", "error")])
    assert result == "declaration_list : error\t<Line: 4>"


def test_terminal_rule_and_line():
    assert terminal_rule_and_line(_terminal("main", "ID", 7)) == "ID : main\t<Line: 7>"


def test_rule_with_no_children():
    parent = _nonterminal("arguments", 1, 1)
    assert rule(parent, []) == "arguments : "
    assert rule_and_line(parent, []).endswith("<Line: 1-1>")