from __future__ import annotations

from typing import Any, Sequence


def describe_arguments(args: Sequence[Any]) -> tuple[str, ...]:
    """Runtime type names of *args*, with ``None`` spelled out."""
    return tuple("None" if a is None else type(a).__name__ for a in args)


def type_name(type_: Any) -> str:
    return getattr(type_, "__qualname__", None) or repr(type_)


class ObjectCreationError(Exception):
    """Base class for every failure raised while creating an instance."""


class ConstructorNotFoundError(ObjectCreationError, TypeError):
    """No constructor of the type matches the supplied argument count/types."""

    def __init__(
        self, type_: Any, argument_types: tuple[str, ...], message: str | None = None
    ) -> None:
        self.type_ = type_
        self.argument_types = argument_types
        if message is None:
            shown = ", ".join(argument_types) if argument_types else "no arguments"
            message = f"No constructor of {type_name(type_)} matches the given arguments ({shown})"
        super().__init__(message)


class AmbiguousMatchError(ObjectCreationError, TypeError):
    """Null arguments could bind to more than one constructor of the same arity."""

    def __init__(self, type_: Any, candidates: Sequence[Any]) -> None:
        self.type_ = type_
        self.candidates = tuple(candidates)
        names = ", ".join(str(c) for c in self.candidates)
        super().__init__(f"Ambiguous constructor match for {type_name(type_)}: {names}")


class ArgumentConversionError(ConstructorNotFoundError):
    """An argument could not be narrowed to its declared parameter type.

    Resolution filters impossible conversions before a thunk runs, so this only
    surfaces when a descriptor is invoked directly with a mismatched argument.
    """

    def __init__(self, type_: Any, args: Sequence[Any], position: int, expected: str) -> None:
        argument_types = describe_arguments(args)
        self.position = position
        self.expected = expected
        super().__init__(
            type_,
            argument_types,
            f"Argument {position} of {type_name(type_)} must be {expected}, "
            f"got {argument_types[position]}",
        )


class ConstructorIntrospectionError(ObjectCreationError, TypeError):
    """The constructor metadata of a type could not be read."""

    def __init__(self, type_: Any, reason: str) -> None:
        self.type_ = type_
        self.reason = reason
        super().__init__(f"Cannot read constructors of {type_name(type_)}: {reason}")
