"""Overload resolution over the constructors of one arity.

Each argument position is classified against the declared parameter:

    EXACT  - argument is not None and its runtime class is one the parameter
             accepts (identity, subclasses do not count)
    FUZZY  - argument is None and the parameter is nullable, the parameter is
             a wildcard, or the argument only narrows to the parameter type
             (subclass, ABC registration, int for float)
    NONE   - anything else; the candidate is dropped

A candidate that is EXACT in every position wins outright. Otherwise the
single candidate with no NONE position wins; several such candidates are
ambiguous and none at all means no constructor fits.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

from objcreate.creation.descriptor import ConstructorDescriptor
from objcreate.creation.errors import (
    AmbiguousMatchError,
    ConstructorNotFoundError,
    describe_arguments,
)
from objcreate.creation.parameters import ParameterType


class MatchKind(Enum):
    NONE = 0
    EXACT = 1
    FUZZY = 2


def classify(parameter: ParameterType, value: Any) -> MatchKind:
    if parameter.wildcard:
        return MatchKind.FUZZY
    if value is None:
        return MatchKind.FUZZY if parameter.nullable else MatchKind.NONE
    if type(value) in parameter.accepts:
        return MatchKind.EXACT
    if parameter.admits(value):
        return MatchKind.FUZZY
    return MatchKind.NONE


def match(descriptor: ConstructorDescriptor, args: Sequence[Any]) -> MatchKind:
    """Classify a whole candidate; the first NONE position short-circuits."""
    kind = MatchKind.EXACT
    for parameter, value in zip(descriptor.parameters, args):
        position = classify(parameter, value)
        if position is MatchKind.NONE:
            return MatchKind.NONE
        if position is MatchKind.FUZZY:
            kind = MatchKind.FUZZY
    return kind


def select_constructor(
    type_: type,
    candidates: Sequence[ConstructorDescriptor],
    args: Sequence[Any],
) -> ConstructorDescriptor:
    """Pick the one candidate that *args* bind to, or raise."""
    fuzzy: list[ConstructorDescriptor] = []
    for candidate in candidates:
        if candidate.arity != len(args):
            continue
        kind = match(candidate, args)
        if kind is MatchKind.EXACT:
            # distinct overloads cannot share an identical non-null signature
            return candidate
        if kind is MatchKind.FUZZY:
            fuzzy.append(candidate)

    if len(fuzzy) == 1:
        return fuzzy[0]
    if fuzzy:
        raise AmbiguousMatchError(type_, fuzzy)
    raise ConstructorNotFoundError(type_, describe_arguments(args))
