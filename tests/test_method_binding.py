import pytest

from kappa.errors import KappaAttributeError
from kappa.objspace import get_attribute, set_attribute
from kappa.types import Code, Function, Method


def _scale_body(frame):
    return frame.load_fast("self").factor * frame.load_fast("x") + frame.load_fast("offset")


SCALE = Code(
    "scale",
    consts=("scale x by the instance factor",),
    varnames=("self", "x", "offset"),
    argcount=3,
    body=_scale_body,
)


class Vector:
    factor = 3
    scale = Function(SCALE, {"__name__": "geometry"}, "Vector.scale")


def make_scale():
    f = Function(SCALE, {"__name__": "geometry"}, "Vector.scale")
    f.fset_defaults((0,))
    return f


def test_bind_without_instance_returns_function_itself():
    f = make_scale()
    assert f.bind(None, Vector) is f
    assert f.bind(None) is f


def test_bind_with_instance_returns_method():
    f = make_scale()
    v = Vector()
    m = f.bind(v, Vector)
    assert isinstance(m, Method)
    assert m.function is f
    assert m.instance is v


def test_method_prepends_instance(recorder):
    f = make_scale()
    v = Vector()
    f.bind(v, Vector)(2, 5, offset=1)
    _, _, _, args, kwargs, _, _, _ = recorder.calls[0]
    assert args == (v, 2, 5)
    assert kwargs == {"offset": 1}


def test_method_call_matches_direct_call():
    f = make_scale()
    v = Vector()
    assert f.bind(v, Vector)(2) == f(v, 2) == 6
    assert f.bind(v, Vector).call((2,), {"offset": 1}) == 7


def test_function_on_host_class_binds_like_a_method():
    v = Vector()
    assert Vector.scale is Vector.__dict__["scale"]
    assert isinstance(v.scale, Method)
    assert v.scale(2, 0) == 6
    assert Vector.scale(v, 2, 1) == 7


def test_method_bind_returns_same_method():
    m = make_scale().bind(Vector(), Vector)
    assert m.bind(object()) is m
    assert m.bind(None) is m


def test_methods_compare_by_function_and_instance():
    f = make_scale()
    v = Vector()
    assert f.bind(v) == f.bind(v)
    assert hash(f.bind(v)) == hash(f.bind(v))
    assert f.bind(v) != f.bind(Vector())
    assert f.bind(v) != make_scale().bind(v)


def test_method_repr():
    m = make_scale().bind("v")
    assert repr(m) == "<bound method Vector.scale of 'v'>"


def test_method_attributes_forward_to_function():
    f = make_scale()
    v = Vector()
    m = f.bind(v)
    assert get_attribute(m, "__func__") is f
    assert get_attribute(m, "__self__") is v
    assert get_attribute(m, "__name__") == "scale"
    assert get_attribute(m, "__qualname__") == "Vector.scale"
    assert get_attribute(m, "__doc__") == "scale x by the instance factor"
    f.fset_name("stretch")
    assert get_attribute(m, "__name__") == "stretch"


def test_method_attributes_are_readonly():
    m = make_scale().bind(Vector())
    with pytest.raises(KappaAttributeError):
        set_attribute(m, "__name__", "other")
    with pytest.raises(KappaAttributeError) as exc:
        set_attribute(m, "tag", 1)
    assert "'method' object has no attribute 'tag'" in str(exc.value)


def test_method_over_host_callable():
    def pair(self, x):
        return (self, x)

    m = Method(pair, "obj")
    assert m("x") == ("obj", "x")
    assert get_attribute(m, "__name__") == "pair"
