"""Building blocks for a small C subset: symbols, scoped symbol tables, tokens, log lines and type rules."""

__version__ = "0.1.0"