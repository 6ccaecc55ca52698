from io import StringIO

import pytest

from lispy.errors import LispyInternalError
from lispy.printer import print_value, to_str
from lispy.types.closure import Closure
from lispy.types.cons import Cons, make_list
from lispy.types.environment import Environment
from lispy.types.native import Native
from lispy.types.sentinel import Dot, Nil, RightParen, TRUE


def test_atoms(symbols):
    assert to_str(12) == "12"
    assert to_str(-3) == "-3"
    assert to_str(symbols.intern("abc")) == "abc"
    assert to_str(Nil) == "()"
    assert to_str(TRUE) == "t"


def test_lists_and_dotted_tails(symbols):
    a = symbols.intern("a")
    assert to_str(make_list([1, 2, 3])) == "(1 2 3)"
    assert to_str(Cons(1, 2)) == "(1 . 2)"
    assert to_str(make_list([1, 2], tail=3)) == "(1 2 . 3)"
    assert to_str(make_list([a, make_list([1, Nil]), TRUE])) == "(a (1 ()) t)"


def test_opaque_placeholders():
    assert to_str(Native("car", lambda tail, env, runtime: Nil)) == "<primitive>"
    assert to_str(Closure([], [1], Environment())) == "<function>"


@pytest.mark.parametrize("value", [Dot, RightParen, object(), True, make_list([1, Dot])])
def test_unprintable_values_are_internal_errors(value):
    with pytest.raises(LispyInternalError):
        to_str(value)


def test_print_value_writes_to_stream():
    out = StringIO()
    print_value(make_list([1, 2]), out)
    assert out.getvalue() == "(1 2)"


def test_println_outputs_and_returns_nil(interp):
    result = interp.eval("(println (list 1 (quote a) (= 1 1)))")
    assert result is Nil
    assert interp.out.getvalue() == "(1 a t)\n"


def test_println_requires_one_argument(interp):
    from lispy.errors import LispyArityError

    with pytest.raises(LispyArityError, match="malformed println"):
        interp.eval("(println 1 2)")
