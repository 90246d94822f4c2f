# minicsem

`minicsem` provides building blocks for a compiler front end for a small
subset of C. The subset has `int`, `float`, `void`, arrays, functions,
`if`/`else`, `for`, `while` and `println`. The package has no third-party
dependencies.

## Modules

- **`minicsem.util`**: helpers for lexemes.
  - `actual_char` and `actual_string` resolve escape sequences in quoted
    literals.
  - `string_line_count`, `single_comment_line_count` and
    `multi_comment_line_count` count the source lines a literal or comment
    spans.
  - `format_code` joins token names back into a code fragment.
  - `data_size` gives the size of a type name. `"INT"` is 4, `"VOID"` is 0,
    and an unknown name is -1.
  - `to_upper`, `to_lower` and `special_char` are also available.
- **`minicsem.symbols`**: the symbol classes.
  - The classes are `SymbolInfo`, `Terminal`, `Identifier`, `Variable`,
    `Array` and `Function`.
  - The parse-tree node classes are `NonTerminal`, `Expression`, `ArrayCall`,
    and the list nodes `ParameterList`, `ArgumentList` and `DeclarationList`,
    which are built on `SymbolList`.
  - `Function` compares itself with another function through
    `match_return_type`, `match_params_num` and `match_params_type`. It
    records its own state through `declare` and `define`.
- **`minicsem.symbol_table`**: scoped symbol tables.
  - `ScopeTable` is a fixed number of chained buckets, hashed with
    `sdbm_hash`.
  - `SymbolTable` is a stack of nested scopes. `find` searches from the
    innermost scope outward.
  - `location_of` returns a one-based `(bucket, position)` pair, and
    `scope_id_of` returns the id of the scope that holds a name. Both return
    `None` when the name is absent.
  - `format_current_scope` and `format_all_scopes` render text listings.
- **`minicsem.line_tracker`**: `LineTracker` holds the current line number. It
  moves past newlines and past the extra lines that strings and comments
  span.
- **`minicsem.tokenizer`**: the token classes, in the `TokenType` enumeration.
  - `token_type_name` gives the parser token name for a lexeme. It raises
    `ValueError` for an unknown keyword or operator.
  - `generate_token` returns the token listing text together with a
    `Terminal` that is stamped with its line.
- **`minicsem.logger`**: log lines.
  - `log_data` writes the line for a found lexeme. Its kinds are in the
    `LogType` enumeration.
  - `rule`, `rule_and_line` and `terminal_rule_and_line` render grammar
    productions and parse-tree lines with their line spans.
- **`minicsem.typecheck`**: the type rules. `implicit_typecast` covers binary
  operators and `check_assignment` covers assignment.

## Examples

```python
from minicsem.symbol_table import SymbolTable
from minicsem.symbols import Variable

table = SymbolTable(11)
table.insert(Variable("a", "INT"))
table.enter_scope()
table.insert(Variable("a", "FLOAT"))
table.find("a").data_type        # "FLOAT": the innermost scope wins
table.scope_id_of("a")           # 2
table.exit_scope()
table.find("a").data_type        # "INT"
table.find("b")                  # None
```

```python
from minicsem.tokenizer import TokenType, generate_token, token_type_name
from minicsem.logger import LogType, log_data

text, terminal = generate_token(TokenType.KEYWORD, "int", 3)
text                             # "<INT, int>"
terminal.start_line              # 3
token_type_name(TokenType.OPERATOR, "--")   # "INCOP"
log_data(LogType.OPERATOR, 5, "+")
# "Line# 5: Token <ADDOP> Lexeme + found"
```

```python
from minicsem.typecheck import implicit_typecast, check_assignment

implicit_typecast("INT", "FLOAT")   # "FLOAT"
implicit_typecast("INT", "VOID")    # "ERROR"
implicit_typecast("NULL", "INT")    # "NULL"
check_assignment("FLOAT", "INT")    # True
check_assignment("INT", "VOID")     # False
```

In the type rules, `"NULL"` marks an expression whose error has already been
reported. It propagates quietly, so one mistake does not set off a cascade of
further complaints.

## What it does not do

`minicsem` is a set of parts, not a compiler. It contains:

- no scanner or parser that reads a source file;
- no formatting or counting of error messages;
- no checker that walks declarations, calls and returns;
- no renderer for a complete parse tree;
- no command-line program.

A caller drives the pieces above and decides what to do with the results.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.