"""Symbol table for assigned variables.

This module defines `SymbolTable`, the mapping from identifier name to the
last integer value assigned to it. Entries only appear through `assign`;
looking up a name that was never assigned is an error rather than a
default of zero. Values are signed 32-bit integers, bounded by `INT_MIN`
and `INT_MAX`; callers range-check with `in_int_range` before assigning.
"""

from __future__ import annotations
from typing import Dict, List, Tuple

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


class SymbolTable:
    def __init__(self):
        self.symbols: Dict[str, int] = {}

    def assign(self, name: str, value: int) -> None:
        """Insert or overwrite the value bound to `name`."""
        self.symbols[name] = value

    def lookup(self, name: str) -> int:
        """Return the value of an assigned variable."""
        if name in self.symbols:
            return self.symbols[name]
        raise NameError(f"Undefined variable '{name}'")

    def exists(self, name: str) -> bool:
        return name in self.symbols

    def items(self) -> List[Tuple[str, int]]:
        """Entries in sorted key order."""
        return sorted(self.symbols.items())

    def as_dict(self) -> Dict[str, int]:
        return dict(self.items())

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({self.as_dict()})"
