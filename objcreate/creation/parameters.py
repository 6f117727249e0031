"""Classification of declared constructor parameters.

Each positional parameter of a constructor is reduced to the set of runtime
classes it accepts and whether ``None`` may bind to it:

    int                 -> accepts (int,), not nullable
    str | None          -> accepts (str,), nullable
    Union[int, str]     -> accepts (int, str), not nullable
    list[int]           -> accepts (list,), not nullable
    Literal["a", 1]     -> accepts (str, int), not nullable
    Any / object / bare -> wildcard (accepts anything, including None)

Typing forms without a runtime class (TypeVar, NewType, ...) are wildcards.
``float`` also admits ``int`` and ``complex`` admits both, as in PEP 484.
"""

from __future__ import annotations

import inspect
import types
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Union, get_args, get_origin

_NONE_TYPE = type(None)
_PROMOTIONS: dict[type, tuple[type, ...]] = {float: (int,), complex: (int, float)}


@dataclass(frozen=True)
class ParameterType:
    name: str
    accepts: tuple[type, ...] = ()
    nullable: bool = False
    wildcard: bool = False
    narrows: tuple[type, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        promoted = [t for a in self.accepts for t in _PROMOTIONS.get(a, ())]
        object.__setattr__(self, "narrows", (*self.accepts, *promoted))

    @classmethod
    def from_annotation(cls, name: str, annotation: Any) -> ParameterType:
        if annotation is inspect.Parameter.empty or annotation is Any or annotation is object:
            return cls(name, nullable=True, wildcard=True)
        if annotation is None or annotation is _NONE_TYPE:
            return cls(name, nullable=True)

        origin = get_origin(annotation)
        if origin is Union or origin is types.UnionType:
            accepts: list[type] = []
            nullable = False
            for member in get_args(annotation):
                if member is _NONE_TYPE:
                    nullable = True
                    continue
                part = cls.from_annotation(name, member)
                if part.wildcard:
                    return cls(name, nullable=True, wildcard=True)
                accepts.extend(part.accepts)
                nullable = nullable or part.nullable
            return cls(name, tuple(dict.fromkeys(accepts)), nullable)
        if origin is Annotated:
            return cls.from_annotation(name, get_args(annotation)[0])
        if origin is Literal:
            values = get_args(annotation)
            found = tuple(dict.fromkeys(type(v) for v in values if v is not None))
            return cls(name, found, None in values)
        if isinstance(origin, type) and _checkable(origin):
            return cls(name, (origin,))
        if isinstance(annotation, type) and _checkable(annotation):
            return cls(name, (annotation,))
        return cls(name, nullable=True, wildcard=True)

    def admits(self, value: Any) -> bool:
        """Cast semantics: would *value* narrow to this parameter's type?"""
        if self.wildcard:
            return True
        if value is None:
            return self.nullable
        return isinstance(value, self.narrows)

    def describe(self) -> str:
        if self.wildcard:
            return "any"
        names = [t.__name__ for t in self.accepts]
        if self.nullable:
            names.append("None")
        return " | ".join(names) or "nothing"

    def __str__(self) -> str:
        return f"{self.name}: {self.describe()}"


def _checkable(cls: type) -> bool:
    # non-runtime Protocol classes refuse isinstance
    try:
        isinstance(None, cls)
    except TypeError:
        return False
    return True
