"""Symbols: grammar terminals and nonterminals, and the identifiers they describe."""

from __future__ import annotations

from collections.abc import Iterable


class SymbolInfo:
    """A named symbol of some type, with the source lines it spans."""

    def __init__(self, name: str = "", type: str = "") -> None:
        self.name = name
        self.type = type
        self.start_line = 0
        self.end_line = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, type={self.type!r})"


class Terminal(SymbolInfo):
    """A token of the grammar."""

    def __init__(self, name: str = "blank", terminal_type: str = "") -> None:
        super().__init__(name, "TERMINAL")
        self.terminal_type = terminal_type


class Identifier(Terminal):
    """A named entity: a variable or a function."""

    def __init__(self, name: str, identity: str) -> None:
        super().__init__(name, "ID")
        self.identity = identity


class Variable(Identifier):
    """A variable with a data type; primitive unless told otherwise."""

    def __init__(self, name: str, data_type: str = "", var_type: str = "PRIMITIVE") -> None:
        super().__init__(name, "VARIABLE")
        self.data_type = data_type
        self.var_type = var_type


class Array(Variable):
    """An array variable; its size is kept as written in the source."""

    def __init__(self, name: str, data_type: str = "", size: str = "") -> None:
        super().__init__(name, data_type, "ARRAY")
        self.size = size


class NonTerminal(SymbolInfo):
    """A node of the parse tree built from a grammar rule."""

    def __init__(self, name: str = "", nt_type: str = "") -> None:
        super().__init__(name, "NON_TERMINAL")
        self.nt_type = nt_type
        self.children: list[SymbolInfo] = []


class Expression(NonTerminal):
    """An expression node carrying the data type it evaluates to."""

    def __init__(
        self,
        name: str = "",
        nt_type: str = "",
        data_type: str = "",
        exp_type: str = "",
    ) -> None:
        super().__init__(name, nt_type)
        self.data_type = data_type
        self.exp_type = exp_type

    @property
    def expression(self) -> str:
        return self.name

    @expression.setter
    def expression(self, value: str) -> None:
        self.name = value

    def copy(self) -> Expression:
        """Return a detached copy holding the name, kind and data type only."""
        return Expression(self.name, self.type, self.data_type)


class SymbolList(NonTerminal):
    """A nonterminal that gathers a list of items."""


class ParameterList(SymbolList):
    """The parameters of a function header."""

    def __init__(self, name: str = "", nt_type: str = "") -> None:
        super().__init__(name, nt_type)
        self.params: list[Variable] = []

    def add_param(self, data_type: str, name: str = "blank") -> None:
        self.params.append(Variable(name, data_type))

    def add_params(self, other: ParameterList) -> None:
        for param in other.params:
            self.add_param(param.data_type, param.name)


class ArgumentList(SymbolList):
    """The arguments of a function call."""

    def __init__(self, name: str = "", nt_type: str = "") -> None:
        super().__init__(name, nt_type)
        self.args: list[Expression] = []

    def add_arg(self, arg: Expression) -> None:
        self.args.append(arg.copy())

    def add_args(self, other: ArgumentList) -> None:
        for arg in other.args:
            self.add_arg(arg)


class DeclarationList(SymbolList):
    """The names declared by one declaration statement."""

    def __init__(self, name: str = "", nt_type: str = "") -> None:
        super().__init__(name, nt_type)
        self.declarations: list[Variable] = []

    def add_variable(self, var: Variable | str) -> None:
        """Add a primitive variable, given by name or copied from ``var``."""
        if isinstance(var, str):
            self.declarations.append(Variable(var, ""))
        else:
            self.declarations.append(Variable(var.name, var.data_type))

    def add_array(self, arr: Array) -> None:
        """Add a copy of an array holding its name and size."""
        self.declarations.append(Array(arr.name, size=arr.size))

    def add_variables(self, other: DeclarationList) -> None:
        for var in other.declarations:
            if var.var_type == "ARRAY" and isinstance(var, Array):
                self.add_array(var)
            else:
                self.add_variable(var)


class ArrayCall(Expression):
    """An indexing expression on an array."""

    def __init__(self, name: str = "", nt_type: str = "", index: str = "") -> None:
        super().__init__(name, nt_type, exp_type="ARRAY_CALL")
        self.index = index


class Function(Identifier):
    """A function with its return type, parameters and declaration state."""

    def __init__(self, name: str, return_type: str = "") -> None:
        super().__init__(name, "FUNCTION")
        self.return_type = return_type
        self.params: list[Variable] = []
        self.is_declaration = False
        self.is_definition = False

    @property
    def number_of_params(self) -> int:
        return len(self.params)

    @property
    def is_declared_and_defined(self) -> bool:
        return self.is_definition

    @property
    def is_declared_not_defined(self) -> bool:
        return self.is_declaration and not self.is_definition

    def add_param(self, param: Variable) -> None:
        self.params.append(param)

    def add_params(self, params: Iterable[Variable]) -> None:
        for param in params:
            self.add_param(param)

    def match_params_num(self, other: Function) -> bool:
        return len(other.params) == len(self.params)

    def match_params_type(self, other: Function) -> bool:
        return all(
            mine.data_type == theirs.data_type
            for mine, theirs in zip(self.params, other.params)
        )

    def match_return_type(self, other: Function) -> bool:
        return other.return_type == self.return_type

    def declare(self) -> None:
        self.is_declaration = True

    def define(self) -> None:
        self.is_definition = True