from typing import Any

import pytest

from objcreate.creation.errors import ArgumentConversionError, ConstructorNotFoundError
from objcreate.creation.parameters import ParameterType
from objcreate.creation.thunks import compile_thunk


class Point:
    def __init__(self, x: int, label: str | None = None) -> None:
        self.x = x
        self.label = label


INT_X = ParameterType("x", (int,))
OPT_LABEL = ParameterType("label", (str,), nullable=True)
ANY = ParameterType("anything", nullable=True, wildcard=True)


def test_positional_call():
    invoke = compile_thunk(Point, Point, (INT_X, OPT_LABEL))
    p = invoke([3, "a"])
    assert isinstance(p, Point)
    assert (p.x, p.label) == (3, "a")


def test_keyword_call_uses_given_names():
    invoke = compile_thunk(Point, Point, (OPT_LABEL, INT_X), keywords=("label", "x"))
    p = invoke(("b", 7))
    assert (p.x, p.label) == (7, "b")


def test_none_binds_to_nullable_position():
    invoke = compile_thunk(Point, Point, (INT_X, OPT_LABEL))
    assert invoke([1, None]).label is None


def test_subclass_instance_narrows():
    class MyInt(int):
        pass

    invoke = compile_thunk(Point, Point, (INT_X,))
    assert invoke([MyInt(5)]).x == 5


def test_wrong_type_raises_conversion_error():
    invoke = compile_thunk(Point, Point, (INT_X, OPT_LABEL))
    with pytest.raises(ArgumentConversionError, match="Argument 0 of Point must be int, got str") as exc:
        invoke(["nope", None])
    assert exc.value.position == 0
    assert isinstance(exc.value, ConstructorNotFoundError)


def test_none_for_non_nullable_raises_conversion_error():
    invoke = compile_thunk(Point, Point, (INT_X,))
    with pytest.raises(ArgumentConversionError):
        invoke([None])


def test_wrong_argument_count_raises_not_found():
    invoke = compile_thunk(Point, Point, (INT_X,))
    with pytest.raises(ConstructorNotFoundError):
        invoke([1, 2])


def test_wildcard_positions_are_not_checked():
    seen: list[Any] = []

    def factory(value: Any) -> list[Any]:
        seen.append(value)
        return seen

    invoke = compile_thunk(list, factory, (ANY,))
    invoke([None])
    invoke([object])
    assert seen == [None, object]


def test_constructor_errors_propagate_unchanged():
    class Boom:
        def __init__(self, x: int) -> None:
            raise RuntimeError("boom")

    invoke = compile_thunk(Boom, Boom, (INT_X,))
    with pytest.raises(RuntimeError, match="boom"):
        invoke([1])
