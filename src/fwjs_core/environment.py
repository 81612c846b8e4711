"""Scope frames and name resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import IO

from .errors import DuplicateDeclaration
from .values import Undefined, Value

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Environment:
    """One scope frame; frames form a parent-linked chain ending at the global frame."""

    bindings: dict[str, Value] = field(default_factory=dict)
    parent: Environment | None = None
    out: IO[str] | None = None   # print sink, read from the global frame only

    # -- Chain ----------------------------------------------------------

    def child(self) -> Environment:
        return Environment(parent=self)

    @property
    def global_frame(self) -> Environment:
        frame = self
        while frame.parent is not None:
            frame = frame.parent
        return frame

    @property
    def depth(self) -> int:
        n = 0
        frame = self.parent
        while frame is not None:
            n += 1
            frame = frame.parent
        return n

    def defines(self, name: str) -> bool:
        return name in self.bindings

    def lookup_frame(self, name: str) -> Environment | None:
        """Return the nearest frame that binds *name*, or ``None``."""
        frame: Environment | None = self
        while frame is not None:
            if name in frame.bindings:
                return frame
            frame = frame.parent
        return None

    # -- Variables ------------------------------------------------------

    def resolve_var(self, name: str) -> Value:
        frame = self.lookup_frame(name)
        if frame is None:
            return Undefined
        return frame.bindings[name]

    def update_var(self, name: str, value: Value) -> None:
        """Overwrite the nearest binding of *name*.

        An assignment to a name no frame binds creates it in the global
        frame, as loose-mode JavaScript does.
        """
        frame = self.lookup_frame(name)
        if frame is None:
            frame = self.global_frame
            logger.debug("implicit global %r created by assignment", name)
        frame.bindings[name] = value

    def create_var(self, name: str, value: Value) -> None:
        if name in self.bindings:
            raise DuplicateDeclaration(name)
        self.bindings[name] = value
