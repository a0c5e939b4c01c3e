import weakref

import pytest

from kappa.errors import KappaValueError
from kappa.types import Cell, Code, Function


def _add_body(frame):
    return frame.load_fast("a") + frame.load_fast("b")


ADD = Code("add", consts=("adds two numbers", 1), varnames=("a", "b"), argcount=2, body=_add_body)


def test_construct_add_in_mathmod():
    g = {"__name__": "mathmod"}
    f = Function(ADD, g, "")
    assert f.name == "add"
    assert f.qualname == "add"
    assert f.doc == "adds two numbers"
    assert f.module == "mathmod"
    assert f.closure == ()
    assert f.defaults is None
    assert f.kwdefaults is None
    assert f.annotations is None
    assert f.w_dict is None
    assert f.code is ADD
    assert f.globals is g


def test_qualname_given_overrides_name():
    f = Function(ADD, {}, "Calc.add")
    assert f.name == "add"
    assert f.qualname == "Calc.add"


def test_qualname_defaults_to_code_name():
    f = Function(ADD, {})
    assert f.qualname == "add"


def test_doc_absent_when_first_const_not_text():
    code = Code("f", consts=(42, "not a docstring"))
    assert Function(code, {}).doc is None


def test_doc_absent_without_consts():
    assert Function(Code("f"), {}).doc is None


def test_doc_taken_from_any_leading_string_const():
    # The first textual constant is used as-is, even if it was not written as a docstring
    code = Code("f", consts=("just a string", None))
    assert Function(code, {}).doc == "just a string"


def test_module_absent_without_name_in_globals():
    assert Function(ADD, {"x": 1}).module is None


def test_globals_are_shared_not_copied():
    g = {"__name__": "mathmod"}
    f = Function(ADD, g)
    g["late"] = 99
    assert f.globals["late"] == 99


def test_construction_does_not_write_globals():
    g = {"__name__": "mathmod"}
    Function(ADD, g)
    assert g == {"__name__": "mathmod"}


def test_one_code_backs_many_functions():
    f1 = Function(ADD, {"__name__": "a"})
    f2 = Function(ADD, {"__name__": "b"})
    assert f1 is not f2
    assert f1.code is f2.code
    assert (f1.module, f2.module) == ("a", "b")


def test_name_mutation_is_independent_of_code():
    f = Function(ADD, {})
    f.fset_name("plus")
    assert f.name == "plus"
    assert f.code.name == "add"
    assert f.qualname == "add"


def test_construct_with_matching_closure():
    code = Code("inner", freevars=("x",))
    cell = Cell(1)
    f = Function(code, {}, "outer.<locals>.inner", closure=(cell,))
    assert f.closure == (cell,)


def test_construct_with_mismatched_closure_is_a_contract_violation():
    code = Code("inner", freevars=("x",))
    with pytest.raises(AssertionError):
        Function(code, {}, closure=(Cell(1), Cell(2)))


def test_functions_support_weak_references():
    f = Function(ADD, {})
    ref = weakref.ref(f)
    assert ref() is f


def test_repr_uses_qualname():
    f = Function(ADD, {}, "Calc.add")
    assert repr(f).startswith("<function Calc.add at 0x")


def test_code_rejects_too_few_varnames():
    with pytest.raises(KappaValueError):
        Code("f", varnames=("a",), argcount=2)


def test_code_parameter_layout():
    code = Code(
        "f",
        varnames=("a", "b", "k", "args", "kw", "tmp"),
        argcount=2,
        kwonlyargcount=1,
        varargs=True,
        varkeywords=True,
    )
    assert code.positional_names == ("a", "b")
    assert code.kwonly_names == ("k",)
    assert code.varargs_name == "args"
    assert code.varkeywords_name == "kw"


def test_code_sequences_are_frozen_to_tuples():
    code = Code("f", consts=["doc"], freevars=["x"])
    assert code.consts == ("doc",)
    assert code.freevars == ("x",)
    with pytest.raises(AttributeError):
        code.name = "g"
