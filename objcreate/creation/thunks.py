"""Invocation thunks: one precompiled callable per constructor signature.

A thunk takes the untyped argument sequence handed to the creator, narrows
each position to its declared parameter type and calls the constructor. All
the per-signature work (which positions need checking, keyword names) is done
once here, so a call through a thunk is a short loop plus the direct call.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from objcreate.creation.errors import (
    ArgumentConversionError,
    ConstructorNotFoundError,
    describe_arguments,
)
from objcreate.creation.parameters import ParameterType

Thunk = Callable[[Sequence[Any]], Any]


def compile_thunk(
    owner: type,
    factory: Callable[..., Any],
    parameters: tuple[ParameterType, ...],
    keywords: tuple[str, ...] | None = None,
) -> Thunk:
    """Build ``invoke(args) -> instance`` for one constructor of *owner*.

    *keywords*, when given, binds the arguments by name instead of position.
    Wildcard positions are passed through unchecked.
    """
    arity = len(parameters)
    checks = tuple((i, p) for i, p in enumerate(parameters) if not p.wildcard)

    if keywords is None:

        def call(args: Sequence[Any]) -> Any:
            return factory(*args)

    else:
        names = keywords

        def call(args: Sequence[Any]) -> Any:
            return factory(**dict(zip(names, args)))

    def invoke(args: Sequence[Any]) -> Any:
        if len(args) != arity:
            raise ConstructorNotFoundError(owner, describe_arguments(args))
        for index, parameter in checks:
            if not parameter.admits(args[index]):
                raise ArgumentConversionError(owner, args, index, parameter.describe())
        return call(args)

    return invoke
