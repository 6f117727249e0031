from __future__ import annotations

from dataclasses import dataclass, field

from objcreate.creation.parameters import ParameterType
from objcreate.creation.thunks import Thunk


@dataclass(frozen=True)
class ConstructorDescriptor:
    """One constructor of a type: its parameter signature and compiled thunk."""

    name: str
    parameters: tuple[ParameterType, ...]
    invoke: Thunk = field(compare=False, repr=False)

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def signature(self) -> str:
        return f"{self.name}({', '.join(str(p) for p in self.parameters)})"

    def __str__(self) -> str:
        return self.signature
