"""Booleano de tres estados.

Por qué no `bool | None`:
- "No filtrar" y "filtrar por False" son cosas distintas; un `None` se
  confunde fácilmente con `False` en un `if`.
"""

from __future__ import annotations

from enum import Enum


class TriState(Enum):
    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_bool(cls, value: bool) -> "TriState":
        return cls.TRUE if value else cls.FALSE

    @property
    def is_set(self) -> bool:
        return self is not TriState.UNSET

    def as_bool(self) -> bool:
        if self is TriState.UNSET:
            raise ValueError("TriState.UNSET has no boolean value")
        return self is TriState.TRUE
