"""Cached constructor resolution and instantiation.

Lookups go through three process-lifetime maps, all owned by one
:class:`ObjectCreator`:

    _resolved    (type, arg0 class, ..., argN class) -> descriptor
    _candidates  (type, arity)                       -> descriptors of that arity
    _tables      type                                -> full constructor table

A type's table is built once, on the first miss for any arity, and every
arity is filed at once. ``_tables`` doubles as the "built" marker: a type
with no entry for some arity is only rebuilt if it was never scanned.

Publication is compute-if-absent through ``dict.setdefault``: arity entries
first, the marker last. Threads racing on a first lookup may each build a
table, but builds depend only on the class definition, and no reader can see
the marker before the entries it covers.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar, get_origin

from objcreate.creation.descriptor import ConstructorDescriptor
from objcreate.creation.errors import ObjectCreationError, describe_arguments, type_name
from objcreate.creation.resolution import select_constructor
from objcreate.creation.table import ConstructorTable
from objcreate.services.logger.interface import LoggingInterface
from objcreate.services.logger.pretty_logger import PrettyLogger
from objcreate.services.metrics.interface import MetricsInterface
from objcreate.services.metrics.noop_metrics import NoopMetrics

T = TypeVar("T")


def type_key_of(type_: Any) -> type:
    """Normalize *type_* to the class used as cache key (``Foo[int]`` -> ``Foo``)."""
    origin = get_origin(type_)
    if isinstance(origin, type):
        return origin
    if isinstance(type_, type):
        return type_
    raise TypeError(f"Cannot create instances of {type_!r}: not a class")


class ObjectCreator:
    """Creates instances by matching runtime arguments to declared constructors."""

    def __init__(
        self,
        logger: LoggingInterface | None = None,
        metrics: MetricsInterface | None = None,
    ) -> None:
        self._logger = logger if logger is not None else PrettyLogger()
        self._metrics = metrics if metrics is not None else NoopMetrics()
        self._resolved: dict[tuple[type, ...], ConstructorDescriptor] = {}
        self._candidates: dict[tuple[type, int], tuple[ConstructorDescriptor, ...]] = {}
        self._tables: dict[type, ConstructorTable] = {}

    def create_instance(self, cls: type[T], *args: Any) -> T:
        """Create an instance of *cls* from positional *args*."""
        return self.create(cls, args)

    def create(self, type_: Any, args: Sequence[Any] = ()) -> Any:
        """Create an instance of *type_* from an argument sequence.

        Raises ConstructorNotFoundError when no constructor fits and
        AmbiguousMatchError when None arguments fit several.
        """
        if isinstance(args, (str, bytes)):
            raise TypeError(f"Arguments must be a sequence of values, not {type(args).__name__}")
        if not isinstance(args, (tuple, list)):
            args = tuple(args)
        key = type_ if type(type_) is type else type_key_of(type_)
        shape = (key, *map(type, args))
        descriptor = self._resolved.get(shape)
        if descriptor is None:
            descriptor = self._resolve(key, args)
            self._resolved[shape] = descriptor
        return descriptor.invoke(args)

    def has_constructor(self, type_: Any, arity: int) -> bool:
        """Whether *type_* declares any constructor taking *arity* arguments."""
        return bool(self._lookup(type_key_of(type_), arity))

    def constructors(self, type_: Any) -> ConstructorTable:
        """The constructor table of *type_*, building it if needed."""
        key = type_key_of(type_)
        table = self._tables.get(key)
        return table if table is not None else self._build(key)

    def is_built(self, type_: Any) -> bool:
        return type_key_of(type_) in self._tables

    # ── Internal helpers ──────────────────────────────────────────────────

    def _resolve(self, key: type, args: Sequence[Any]) -> ConstructorDescriptor:
        try:
            return select_constructor(key, self._lookup(key, len(args)), args)
        except ObjectCreationError as exc:
            self._logger.debug(
                "Constructor resolution failed",
                type=type_name(key),
                args=describe_arguments(args),
                error=str(exc),
            )
            self._metrics.counter(
                "object_creator.resolution_failures", tags={"reason": type(exc).__name__}
            )
            raise

    def _lookup(self, key: type, arity: int) -> tuple[ConstructorDescriptor, ...]:
        candidates = self._candidates.get((key, arity))
        if candidates is None and key not in self._tables:
            self._build(key)
            candidates = self._candidates.get((key, arity))
        return candidates or ()

    def _build(self, key: type) -> ConstructorTable:
        with self._metrics.timed("object_creator.table_build_seconds"):
            table = ConstructorTable.build(key)
        for arity, descriptors in table.by_arity.items():
            self._candidates.setdefault((key, arity), descriptors)
        winner = self._tables.setdefault(key, table)
        if winner is table:
            self._metrics.counter("object_creator.table_builds")
            self._metrics.gauge("object_creator.cached_types", len(self._tables))
            self._logger.debug(
                "Built constructor table",
                type=type_name(key),
                arities=list(table.arities),
                constructors=len(table),
            )
        return winner
