"""Document — the final output of a program run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .environment import Environment
from .values import Null, Value


@dataclass
class Document:
    """Holds the global frame and final value of an evaluated program."""

    environment: Environment = field(default_factory=Environment)
    result: Value = Null

    # -- Convenience accessors ------------------------------------------

    @property
    def globals_(self) -> dict[str, Value]:
        return self.environment.bindings

    def lookup(self, name: str) -> Value:
        """Resolve *name* in the global frame (``Undefined`` if unbound)."""
        return self.environment.resolve_var(name)
