"""Scoped symbol tables: chained hash buckets per scope, scopes nested by parent."""

from __future__ import annotations

from collections.abc import Iterator

from minicsem.symbols import Function, Identifier, SymbolInfo, Variable

_MASK64 = (1 << 64) - 1


def sdbm_hash(text: str) -> int:
    """Unsigned 64-bit sdbm hash of ``text``, taken over its bytes as signed chars."""
    value = 0
    for byte in text.encode("utf-8"):
        c = byte - 256 if byte >= 128 else byte
        value = (c + (value << 6) + (value << 16) - value) & _MASK64
    return value


def _describe(symbol: SymbolInfo) -> str:
    """Render one symbol as it appears in a scope listing."""
    if not isinstance(symbol, Identifier) or symbol.terminal_type != "ID":
        return ""
    if symbol.identity == "FUNCTION" and isinstance(symbol, Function):
        return f"<{symbol.name}, {symbol.identity}, {symbol.return_type}> "
    if symbol.identity == "VARIABLE" and isinstance(symbol, Variable):
        if symbol.var_type == "ARRAY":
            return f"<{symbol.name}, {symbol.var_type}, {symbol.data_type}> "
        if symbol.var_type == "PRIMITIVE":
            return f"<{symbol.name}, {symbol.data_type}> "
    return ""


class ScopeTable:
    """One scope: a fixed number of buckets, each a chain of symbols."""

    def __init__(self, num_buckets: int, parent: ScopeTable | None = None) -> None:
        if num_buckets < 1:
            raise ValueError("a scope table needs at least one bucket")
        self.id = 1
        self.parent = parent
        self.num_buckets = num_buckets
        self._buckets: list[list[SymbolInfo]] = [[] for _ in range(num_buckets)]

    def _index(self, name: str) -> int:
        return sdbm_hash(name) % self.num_buckets

    def insert(self, symbol: SymbolInfo) -> bool:
        """Add ``symbol``; return False if its name is already in this scope."""
        bucket = self._buckets[self._index(symbol.name)]
        if any(existing.name == symbol.name for existing in bucket):
            return False
        bucket.append(symbol)
        return True

    def find(self, name: str) -> SymbolInfo | None:
        """Return the symbol called ``name`` in this scope, or None."""
        return next(
            (s for s in self._buckets[self._index(name)] if s.name == name), None
        )

    def erase(self, name: str) -> bool:
        """Remove the symbol called ``name``; return whether one was removed."""
        bucket = self._buckets[self._index(name)]
        for position, symbol in enumerate(bucket):
            if symbol.name == name:
                del bucket[position]
                return True
        return False

    def location_of(self, name: str) -> tuple[int, int] | None:
        """One-based (bucket, position in chain) of ``name``, or None if absent."""
        index = self._index(name)
        for position, symbol in enumerate(self._buckets[index]):
            if symbol.name == name:
                return index + 1, position + 1
        return None

    def __iter__(self) -> Iterator[SymbolInfo]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def format(self) -> str:
        """Listing of the non-empty buckets of this scope."""
        lines = [f"\tScopeTable# {self.id}\n"]
        for index, bucket in enumerate(self._buckets):
            if not bucket:
                continue
            entries = "".join(_describe(symbol) for symbol in bucket)
            lines.append(f"\t{index + 1}--> {entries}\n")
        return "".join(lines)


class SymbolTable:
    """A stack of nested scopes, searched from the innermost outward."""

    def __init__(self, num_buckets: int) -> None:
        self.num_buckets = num_buckets
        self._scope_count = 1
        self.current_scope: ScopeTable | None = ScopeTable(num_buckets)

    def _scopes(self) -> Iterator[ScopeTable]:
        scope = self.current_scope
        while scope is not None:
            yield scope
            scope = scope.parent

    def enter_scope(self) -> bool:
        """Open a new innermost scope; False if there was no enclosing scope."""
        scope = ScopeTable(self.num_buckets, parent=self.current_scope)
        self.current_scope = scope
        if scope.parent is not None:
            self._scope_count += 1
            scope.id = self._scope_count
            return True
        return False

    def exit_scope(self) -> bool:
        """Drop the innermost scope; False if there was none."""
        if self.current_scope is None:
            return False
        self.current_scope = self.current_scope.parent
        return True

    def insert(self, symbol: SymbolInfo) -> bool:
        """Add ``symbol`` to the innermost scope, creating one if needed."""
        if self.current_scope is None:
            self.current_scope = ScopeTable(self.num_buckets)
        return self.current_scope.insert(symbol)

    def erase(self, name: str) -> bool:
        """Remove ``name`` from the innermost scope."""
        if self.current_scope is None:
            return False
        return self.current_scope.erase(name)

    def find(self, name: str) -> SymbolInfo | None:
        """Return the nearest visible symbol called ``name``, or None."""
        for scope in self._scopes():
            symbol = scope.find(name)
            if symbol is not None:
                return symbol
        return None

    def scope_id_of(self, name: str) -> int | None:
        """Id of the nearest scope holding ``name``, or None."""
        for scope in self._scopes():
            if scope.find(name) is not None:
                return scope.id
        return None

    def location_of(self, name: str) -> tuple[int, int] | None:
        """Location of ``name`` in the nearest scope holding it, or None."""
        for scope in self._scopes():
            location = scope.location_of(name)
            if location is not None:
                return location
        return None

    def format_current_scope(self) -> str:
        """Listing of the innermost scope, or an empty string."""
        if self.current_scope is None:
            return ""
        return self.current_scope.format()

    def format_all_scopes(self) -> str:
        """Listings of every scope, innermost first."""
        return "".join(scope.format() for scope in self._scopes())