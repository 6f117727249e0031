"""Per-type constructor tables.

The constructors of a class are the ones declared on it directly:

- the ``typing.overload`` variants of ``__init__`` when the class body declares
  any, otherwise the effective ``__init__`` / ``__new__`` signature;
- every classmethod or staticmethod in the class ``__dict__`` marked with
  :func:`constructor`, public or underscore-prefixed.

Only positional parameters count toward arity, and trailing defaulted
parameters may be omitted. A signature that requires a keyword-only
argument cannot be called positionally and is skipped.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, TypeVar, get_overloads, get_type_hints

from objcreate.creation.descriptor import ConstructorDescriptor
from objcreate.creation.errors import ConstructorIntrospectionError
from objcreate.creation.parameters import ParameterType
from objcreate.creation.thunks import compile_thunk

F = TypeVar("F")

_MARKER = "__objcreate_constructor__"
_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def constructor(func: F) -> F:
    """Mark a classmethod or staticmethod as an alternate constructor.

    Works on either side of ``@classmethod`` / ``@staticmethod``::

        class Account:
            def __init__(self, *, _token: object) -> None: ...

            @constructor
            @classmethod
            def _open(cls, owner: str) -> "Account": ...
    """
    target = func.__func__ if isinstance(func, (classmethod, staticmethod)) else func
    setattr(target, _MARKER, True)
    return func


@dataclass(frozen=True)
class ConstructorTable:
    """All constructors of one type, grouped by parameter count."""

    type_: type
    by_arity: Mapping[int, tuple[ConstructorDescriptor, ...]]

    @classmethod
    def build(cls, type_: type) -> ConstructorTable:
        grouped: dict[int, list[ConstructorDescriptor]] = {}
        for descriptor in (*_primary_constructors(type_), *_declared_factories(type_)):
            grouped.setdefault(descriptor.arity, []).append(descriptor)
        return cls(type_, MappingProxyType({n: tuple(ds) for n, ds in grouped.items()}))

    def get(self, arity: int) -> tuple[ConstructorDescriptor, ...] | None:
        return self.by_arity.get(arity)

    @property
    def arities(self) -> tuple[int, ...]:
        return tuple(sorted(self.by_arity))

    def __iter__(self) -> Iterator[ConstructorDescriptor]:
        for arity in self.arities:
            yield from self.by_arity[arity]

    def __len__(self) -> int:
        return sum(len(ds) for ds in self.by_arity.values())


def _primary_constructors(type_: type) -> list[ConstructorDescriptor]:
    init = vars(type_).get("__init__")
    if init is not None:
        overloads = get_overloads(init)
        if overloads:
            implementation = inspect.signature(init)
            name = f"{type_.__qualname__}.__init__"
            found = []
            for func in overloads:
                params = list(inspect.signature(func).parameters.values())[1:]
                found.extend(_describe(type_, name, type_, func, params, implementation))
            return found

    func = _effective_initializer(type_)
    if func is None:
        return [_default_constructor(type_)]
    try:
        params = list(inspect.signature(func).parameters.values())[1:]
    except (TypeError, ValueError):
        # C builtins without signature metadata
        return [_default_constructor(type_)]
    return _describe(type_, f"{type_.__qualname__}.{func.__name__}", type_, func, params)


def _declared_factories(type_: type) -> list[ConstructorDescriptor]:
    found = []
    for attr_name, member in vars(type_).items():
        if not isinstance(member, (classmethod, staticmethod)):
            continue
        func = member.__func__
        if not getattr(func, _MARKER, False):
            continue
        params = list(inspect.signature(func).parameters.values())
        if isinstance(member, classmethod):
            params = params[1:]
        factory = getattr(type_, attr_name)
        found.extend(
            _describe(type_, f"{type_.__qualname__}.{attr_name}", factory, func, params)
        )
    return found


def _effective_initializer(type_: type) -> Callable[..., Any] | None:
    if type_.__init__ is not object.__init__:
        return type_.__init__
    if type_.__new__ is not object.__new__:
        return type_.__new__
    return None


def _default_constructor(type_: type) -> ConstructorDescriptor:
    return ConstructorDescriptor(f"{type_.__qualname__}", (), compile_thunk(type_, type_, ()))


def _describe(
    type_: type,
    name: str,
    factory: Callable[..., Any],
    func: Callable[..., Any],
    params: list[inspect.Parameter],
    implementation: inspect.Signature | None = None,
) -> list[ConstructorDescriptor]:
    """One descriptor per callable arity of a signature.

    Trailing defaulted parameters may be omitted, so ``(a, b=1)`` yields
    arities 1 and 2. For an overload, *implementation* is the signature that
    actually runs; arguments go by the overload's names when it accepts them.
    """
    positional: list[inspect.Parameter] = []
    for p in params:
        if p.kind in _POSITIONAL:
            positional.append(p)
        elif p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty:
            return []

    hints = _type_hints(type_, func)
    parameters = tuple(
        ParameterType.from_annotation(p.name, hints.get(p.name, inspect.Parameter.empty))
        for p in positional
    )
    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)
    described = []
    for arity in range(required, len(positional) + 1):
        described.append(
            ConstructorDescriptor(
                name,
                parameters[:arity],
                compile_thunk(
                    type_,
                    factory,
                    parameters[:arity],
                    _keywords(implementation, positional[:arity]),
                ),
            )
        )
    return described


def _keywords(
    implementation: inspect.Signature | None, positional: list[inspect.Parameter]
) -> tuple[str, ...] | None:
    if implementation is None:
        return None
    if any(p.kind is not inspect.Parameter.POSITIONAL_OR_KEYWORD for p in positional):
        return None
    names = tuple(p.name for p in positional)
    try:
        implementation.bind(None, **dict.fromkeys(names))
    except TypeError:
        return None
    return names


def _type_hints(type_: type, func: Callable[..., Any]) -> dict[str, Any]:
    if not inspect.isfunction(func):
        return {}
    try:
        hints = get_type_hints(func)
    except Exception as exc:
        raise ConstructorIntrospectionError(type_, str(exc)) from exc
    hints.pop("return", None)
    return hints
