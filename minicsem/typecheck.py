"""Type rules for operands and assignments.

"NULL" marks an expression whose error was already reported; it suppresses
further errors. "ERROR" marks an incompatible combination.
"""

from __future__ import annotations

from minicsem.util import data_size


def implicit_typecast(left: str, right: str) -> str:
    """Result type of combining operands of types ``left`` and ``right``."""
    if left == "NULL" or right == "NULL":
        return "NULL"
    if {left, right} == {"FLOAT", "INT"}:
        return "FLOAT"
    if data_size(left) < 1 or data_size(right) < 1:
        return "ERROR"
    if left == right:
        return left
    return "ERROR"


def check_assignment(left: str, right: str) -> bool:
    """Whether a value of type ``right`` may be assigned to type ``left``."""
    if left == "NULL" or right == "NULL":
        return True
    if left == "VOID" or right == "VOID":
        return False
    if left == "" or right == "":
        return False
    if data_size(left) < 1 or data_size(right) < 1:
        return False
    return data_size(left) >= data_size(right)