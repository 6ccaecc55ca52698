import pytest

from lispy.errors import (
    LispyArityError,
    LispyTypeError,
    LispyUnboundSymbol,
    LispyUnboundVariable,
)
from lispy.types.closure import Closure
from lispy.types.sentinel import Nil


# ------------------ define ------------------

def test_define_returns_value_and_binds(run):
    assert run("(define x 5)") == "5"
    assert run("x") == "5"


def test_define_requires_symbol(run):
    with pytest.raises(LispyTypeError, match="malformed define"):
        run("(define 1 2)")
    with pytest.raises(LispyArityError, match="malformed define"):
        run("(define x)")


def test_define_inside_closure_shadows_outer(run):
    run("(define x 1)")
    run("(define f (lambda () (define x 2) x))")
    assert run("(f)") == "2"
    assert run("x") == "1"


# ------------------ setvalue ------------------

def test_setvalue_unbound_fails(run):
    with pytest.raises(LispyUnboundVariable, match="unbound variable: x"):
        run("(setvalue x 5)")


def test_setvalue_after_define(run):
    run("(define x 5)")
    assert run("(setvalue x 6)") == "6"
    assert run("x") == "6"


def test_setvalue_mutates_outer_binding_from_closure(run):
    run("(define x 1)")
    run("(define f (lambda () (setvalue x 5)))")
    run("(f)")
    assert run("x") == "5"


def test_setvalue_checks_binding_before_evaluating(interp):
    with pytest.raises(LispyUnboundVariable):
        interp.eval("(setvalue nothing (println 1))")
    assert interp.out.getvalue() == ""


@pytest.mark.parametrize(
    "source, error",
    [
        ("(setvalue 1 2)", LispyTypeError),
        ("(setvalue x)", LispyArityError),
        ("(setvalue x 1 2)", LispyArityError),
    ],
)
def test_setvalue_malformed(run, source, error):
    run("(define x 0)")
    with pytest.raises(error, match="malformed setvalue"):
        run(source)


def test_counter_closure_keeps_private_state(run):
    run("(define make-counter (lambda () (define n 0) (lambda () (setvalue n (+ n 1)))))")
    run("(define c (make-counter))")
    run("(define d (make-counter))")
    run("(c)")
    assert run("(c)") == "2"
    assert run("(d)") == "1"


# ------------------ lambda ------------------

def test_lambda_returns_closure(interp, run):
    result = interp.eval("(lambda (a b) a)")
    assert isinstance(result, Closure)
    assert [p.name for p in result.params] == ["a", "b"]
    assert result.env is interp.env
    assert run("(lambda () 1)") == "<function>"
    assert run("+") == "<primitive>"


def test_lexical_scoping(run):
    run("(define x 1)")
    run("(define f (lambda (x) x))")
    assert run("(f 2)") == "2"
    assert run("x") == "1"


def test_closure_sees_defining_env_not_callers(run):
    run("(define y 1)")
    run("(define get-y (lambda () y))")
    run("(define call (lambda (y) (get-y)))")
    assert run("(call 2)") == "1"


def test_closure_captures_environment(run):
    run("(define make (lambda (x) (lambda () x)))")
    run("(define g (make 1))")
    run("(define x 99)")
    assert run("(g)") == "1"


def test_body_is_implicit_progn(run):
    assert run("((lambda (x) (define y x) (+ x y)) 3)") == "6"


def test_arguments_are_evaluated_in_caller_env(run):
    run("(define a 10)")
    assert run("((lambda (b) (+ b 1)) (+ a 1))") == "12"


@pytest.mark.parametrize("call", ["(f)", "(f 1 2)"])
def test_arity_enforced(run, call):
    run("(define f (lambda (x) x))")
    with pytest.raises(LispyArityError, match="argument count mismatch: expected 1"):
        run(call)


@pytest.mark.parametrize(
    "source, error, message",
    [
        ("(lambda (1) 1)", LispyTypeError, "parameter must be a symbol"),
        ("(lambda (a . b) a)", LispyTypeError, "parameter list is not a flat list"),
        ("(lambda (a))", LispyArityError, "malformed lambda"),
        ("(lambda x x)", LispyArityError, "malformed lambda"),
        ("(lambda)", LispyArityError, "malformed lambda"),
    ],
)
def test_lambda_malformed(run, source, error, message):
    with pytest.raises(error, match=message):
        run(source)


def test_recursion_through_root_binding(run):
    run("(define sum (lambda (n) (if (= n 0) 0 (+ n (sum (+ n -1))))))")
    assert run("(sum 10)") == "55"


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(if (= 1 1) 10 20)", "10"),
        ("(if (= 1 2) 10 20)", "20"),
        ("(if t 10)", "10"),
        ("(if () 10)", "()"),
        ("(if () 1 2 3)", "3"),
        ("(if 0 1 2)", "1"),
        ("(if (quote a) 1 2)", "1"),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_skips_untaken_branch(run):
    assert run("(if t 1 undefined-symbol)") == "1"
    assert run("(if () undefined-symbol 2)") == "2"


@pytest.mark.parametrize("source", ["(if)", "(if t)"])
def test_if_malformed(run, source):
    with pytest.raises(LispyArityError, match="malformed if"):
        run(source)


# ------------------ list ------------------

def test_list(run):
    assert run("(list)") == "()"
    assert run("(list 1 (+ 1 1) 'a)") == "(1 2 a)"


def test_list_evaluates_arguments(run):
    with pytest.raises(LispyUnboundSymbol):
        run("(list a)")


def test_empty_input_evaluates_to_nil(interp):
    assert interp.eval("") is Nil
    assert interp.eval("; nothing here") is Nil
