"""Caller-owned variable storage.

The expression core only ever calls ``lookup``; assignment, deletion and
listing are used by the command layer after a successful evaluation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple


class VariableLookup(ABC):
    """Read-only view of variables, as seen by the expression core."""

    @abstractmethod
    def lookup(self, name: str) -> Optional[int]:
        """Return the value bound to name, or None if it is not defined."""
        pass


class Environment(VariableLookup):
    """Dict-backed variable table for one calculator session."""

    def __init__(self, initial: Optional[Mapping[str, int]] = None):
        self._vars: Dict[str, int] = dict(initial or {})

    def lookup(self, name: str) -> Optional[int]:
        return self._vars.get(name)

    def assign(self, name: str, value: int) -> None:
        self._vars[name] = value

    def delete(self, names: Iterable[str]) -> None:
        """Remove the names that exist; unknown names are ignored."""
        for name in names:
            self._vars.pop(name, None)

    def clear(self) -> None:
        self._vars.clear()

    def items(self) -> List[Tuple[str, int]]:
        """Bindings sorted by name."""
        return sorted(self._vars.items())

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._vars))

    def __repr__(self) -> str:
        return f"Environment({self._vars!r})"
