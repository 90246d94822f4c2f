"""Log lines for found tokens and for applied grammar rules."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from minicsem import util
from minicsem.symbols import NonTerminal, SymbolInfo, Terminal
from minicsem.tokenizer import OPERATOR_TYPES


class LogType(IntEnum):
    """Kinds of lexemes that are logged when found."""

    KEYWORD = 0
    INTEGER = 1
    FLOAT = 2
    CHARACTER = 3
    STRING = 4
    OPERATOR = 5
    IDENTIFIER = 6
    SINGLE_COMMENT = 7
    MULTI_COMMENT = 8


def message(token: str, lexeme: str, line: int) -> str:
    """Log line announcing ``token`` with ``lexeme`` on ``line``."""
    return f"Line# {line}: Token <{token}> Lexeme {lexeme} found"


def log_data(kind: LogType, line: int, lexeme: str) -> str:
    """Log line for a lexeme of class ``kind`` found on ``line``."""
    if kind == LogType.KEYWORD:
        return message(util.to_upper(lexeme), lexeme, line)
    if kind == LogType.INTEGER:
        return message("CONST_INT", lexeme, line)
    if kind == LogType.FLOAT:
        return message("CONST_FLOAT", lexeme, line)
    if kind == LogType.CHARACTER:
        return message("CONST_CHAR", util.actual_char(lexeme), line)
    if kind == LogType.STRING:
        prefix = "MULTI" if util.string_line_count(lexeme) > 1 else "SINGLE"
        return message(f"{prefix} LINE STRING", lexeme, line)
    if kind == LogType.OPERATOR:
        return message(OPERATOR_TYPES.get(lexeme, ""), lexeme, line)
    if kind == LogType.IDENTIFIER:
        return message("ID", lexeme, line)
    if kind == LogType.SINGLE_COMMENT:
        return message("SINGLE LINE COMMENT", lexeme, line)
    if kind == LogType.MULTI_COMMENT:
        return message("MULTI LINE COMMENT", lexeme, line)
    return message("UNKNOWN", lexeme, line)


def _symbol_label(symbol: SymbolInfo) -> str:
    if symbol.type == "error":
        return "error"
    if symbol.type == "TERMINAL" and isinstance(symbol, Terminal):
        return symbol.terminal_type + " "
    if isinstance(symbol, NonTerminal):
        return symbol.nt_type + " "
    return " "


def rule(parent: NonTerminal, children: Sequence[SymbolInfo]) -> str:
    """The grammar rule that built ``parent`` from ``children``."""
    right = "".join(_symbol_label(child) for child in children)
    return f"{parent.nt_type} : {right}"


def terminal_rule_and_line(terminal: Terminal) -> str:
    """A terminal as a parse-tree line, with the line it is on."""
    return f"{terminal.terminal_type} : {terminal.name}\t<Line: {terminal.start_line}>"


def rule_and_line(parent: NonTerminal, children: Sequence[SymbolInfo]) -> str:
    """A rule as a parse-tree line, with the lines its nonterminal spans."""
    text = rule(parent, children)
    if len(children) == 1 and children[0].type == "error":
        return f"{text}\t<Line: {parent.start_line}>"
    return f"{text}\t<Line: {parent.start_line}-{parent.end_line}>"