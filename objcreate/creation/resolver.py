from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

from objcreate.creation.creator import ObjectCreator
from objcreate.creation.errors import ObjectCreationError, type_name

T = TypeVar("T")

ResolveFunction = Callable[[Any, Sequence[Any]], Any]


class ObjectResolver:
    """Hook in front of an ObjectCreator for swapping in concrete types.

    Record-mapping layers ask the resolver, not the creator, for every object
    they materialize. When ``can_resolve(type_)`` holds, ``resolve_function``
    builds the object (e.g. returning a concrete class for an abstract one);
    otherwise the creator does, unless ``use_fallback`` is off.
    """

    def __init__(
        self,
        creator: ObjectCreator | None = None,
        can_resolve: Callable[[Any], bool] | None = None,
        resolve_function: ResolveFunction | None = None,
        use_fallback: bool = True,
    ) -> None:
        self.creator = creator if creator is not None else ObjectCreator()
        self.can_resolve = can_resolve if can_resolve is not None else _never
        self.resolve_function = (
            resolve_function if resolve_function is not None else self.creator.create
        )
        self.use_fallback = use_fallback

    def resolve(self, type_: Any, *args: Any) -> Any:
        if self.can_resolve(type_):
            return self.resolve_function(type_, args)
        if self.use_fallback:
            return self.creator.create(type_, args)
        raise ObjectCreationError(
            f"{type_name(type_)} cannot be resolved and fallback creation is disabled"
        )

    def resolve_instance(self, cls: type[T], *args: Any) -> T:
        return self.resolve(cls, *args)


def _never(type_: Any) -> bool:
    return False
