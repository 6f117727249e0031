from abc import ABC, abstractmethod

import pytest

from objcreate.creation.errors import ConstructorNotFoundError, ObjectCreationError
from objcreate.creation.resolver import ObjectResolver


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Square(Shape):
    def __init__(self, side: float = 1.0) -> None:
        self.side = side

    def area(self) -> float:
        return self.side * self.side


class Label:
    def __init__(self, text: str) -> None:
        self.text = text


def _shape_resolver(creator, use_fallback: bool = True) -> ObjectResolver:
    concrete = {Shape: Square}
    return ObjectResolver(
        creator=creator,
        can_resolve=lambda t: t in concrete,
        resolve_function=lambda t, args: creator.create(concrete[t], args),
        use_fallback=use_fallback,
    )


def test_default_resolver_falls_back_to_creator():
    r = ObjectResolver()
    assert r.resolve(Label, "x").text == "x"


def test_resolve_function_substitutes_concrete_type(creator):
    r = _shape_resolver(creator)
    shape = r.resolve(Shape, 2.0)
    assert isinstance(shape, Square)
    assert shape.area() == 4.0
    assert r.resolve_instance(Shape).area() == 1.0


def test_unresolved_types_use_the_same_creator(creator):
    r = _shape_resolver(creator)
    r.resolve(Label, "a")
    assert creator.is_built(Label)


def test_fallback_disabled_raises(creator):
    r = _shape_resolver(creator, use_fallback=False)
    assert isinstance(r.resolve(Shape), Square)
    with pytest.raises(ObjectCreationError, match="Label cannot be resolved"):
        r.resolve(Label, "a")


def test_creator_errors_propagate_through_resolver(creator):
    r = ObjectResolver(creator=creator)
    with pytest.raises(ConstructorNotFoundError):
        r.resolve(Label, 1)


def test_resolve_function_defaults_to_creator(creator):
    r = ObjectResolver(creator=creator, can_resolve=lambda t: t is Label)
    assert r.resolve(Label, "y").text == "y"
