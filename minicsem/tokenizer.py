"""Classification of lexemes into tokens for the parser."""

from __future__ import annotations

from enum import IntEnum

from minicsem import util
from minicsem.symbols import Terminal


class TokenType(IntEnum):
    """Broad classes of lexemes produced by the scanner."""

    KEYWORD = 0
    INTEGER = 1
    FLOAT = 2
    CHARACTER = 3
    STRING = 4
    OPERATOR = 5
    IDENTIFIER = 6


OPERATOR_TYPES = {
    "+": "ADDOP",
    "-": "ADDOP",
    "*": "MULOP",
    "/": "MULOP",
    "%": "MULOP",
    "++": "INCOP",
    "--": "DECOP",
    "<": "RELOP",
    "<=": "RELOP",
    ">": "RELOP",
    ">=": "RELOP",
    "==": "RELOP",
    "!=": "RELOP",
    "=": "ASSIGNOP",
    "||": "LOGICOP",
    "&&": "LOGICOP",
    "&": "BITOP",
    "|": "BITOP",
    "^": "BITOP",
    "<<": "BITOP",
    ">>": "BITOP",
    "!": "NOT",
    "(": "LPAREN",
    ")": "RPAREN",
    "{": "LCURL",
    "}": "RCURL",
    "[": "LSQUARE",
    "]": "RSQUARE",
    ",": "COMMA",
    ";": "SEMICOLON",
}

# The parser folds decrement into the increment token.
OPERATOR_TOKENS = {**OPERATOR_TYPES, "--": "INCOP"}

KEYWORD_TOKENS = {
    keyword: keyword.upper()
    for keyword in (
        "if",
        "else",
        "switch",
        "case",
        "for",
        "do",
        "while",
        "int",
        "float",
        "char",
        "double",
        "void",
        "default",
        "break",
        "return",
        "continue",
        "println",
    )
}

_FIXED_TOKENS = {
    TokenType.INTEGER: "CONST_INT",
    TokenType.FLOAT: "CONST_FLOAT",
    TokenType.CHARACTER: "CONST_CHAR",
    TokenType.STRING: "STRING",
    TokenType.IDENTIFIER: "ID",
}


def token_type_name(kind: TokenType, lexeme: str) -> str:
    """Name of the parser token for ``lexeme`` of class ``kind``."""
    if kind == TokenType.KEYWORD:
        table = KEYWORD_TOKENS
    elif kind == TokenType.OPERATOR:
        table = OPERATOR_TOKENS
    else:
        return _FIXED_TOKENS[kind]
    try:
        return table[lexeme]
    except KeyError:
        raise ValueError(f"no parser token for {kind.name.lower()} {lexeme!r}") from None


def _string_token(lexeme: str) -> tuple[str, str]:
    lines = util.string_line_count(lexeme)
    prefix = "MULTI" if lines > 1 else "SINGLE"
    return f"{prefix} LINE STRING", util.actual_string(lexeme)


def generate_token(kind: TokenType, lexeme: str, line: int) -> tuple[str, Terminal]:
    """Return the token listing text and the terminal for ``lexeme`` on ``line``."""
    if kind == TokenType.KEYWORD:
        token, symbol = util.to_upper(lexeme), lexeme
    elif kind == TokenType.CHARACTER:
        token, symbol = "CONST_CHAR", util.actual_char(lexeme)
    elif kind == TokenType.STRING:
        token, symbol = _string_token(lexeme)
    elif kind == TokenType.OPERATOR:
        token, symbol = OPERATOR_TYPES.get(lexeme, ""), lexeme
    else:
        token, symbol = _FIXED_TOKENS[kind], lexeme
    terminal = Terminal(symbol, token)
    terminal.start_line = line
    terminal.end_line = line
    return f"<{token}, {symbol}>", terminal