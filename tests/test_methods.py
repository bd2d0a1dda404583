import pytest

from kineticsim.methods import (
    Method,
    is_explicit,
    is_variable_step,
    method_from_key,
    method_name,
    order,
)


@pytest.mark.parametrize(
    "method, name",
    [
        (Method.EULER, "Euler"),
        (Method.ADAMS_BASHFORTH_2, "2nd order Adams-Bashforth"),
        (Method.ADAMS_BASHFORTH_3, "3rd order Adams-Bashforth"),
        (Method.ADAMS_BASHFORTH_4, "4th order Adams-Bashforth"),
        (Method.RUNGE_KUTTA, "4th order Runge-Kutta"),
        (Method.RUNGE_KUTTA_FEHLBERG_5, "5th order Runge-Kutta-Fehlberg"),
        (Method.CASH_KARP, "5th order Cash-Karp"),
        (Method.BACKWARD_EULER, "Backward-Euler"),
        (Method.CRANK_NICOLSON, "Crank-Nicolson"),
        (Method.ADAMS_MOULTON_3, "3rd order Adams-Moulton"),
        (Method.ADAMS_MOULTON_4, "4th order Adams-Moulton"),
        (Method.BACKWARD_DIFFERENCE_2, "2nd order Backward Difference"),
        (Method.BACKWARD_DIFFERENCE_3, "3rd order Backward Difference"),
        (Method.BACKWARD_DIFFERENCE_4, "4th order Backward Difference"),
    ],
)
def test_method_names(method, name):
    assert method_name(method) == name
    assert method.display_name == name


def test_aliases_share_codes():
    assert method_name(Method.ADAMS_BASHFORTH_1) == "Euler"
    assert method_name(Method.ADAMS_MOULTON_2) == "Crank-Nicolson"
    assert order(Method.ADAMS_BASHFORTH_1) == order(Method.EULER)


def test_documented_codes():
    assert method_from_key(1) == 41
    assert method_from_key(2) == 0
    assert method_from_key(14) == 61


@pytest.mark.parametrize(
    "method",
    [
        Method.EULER,
        Method.ADAMS_BASHFORTH_2,
        Method.ADAMS_BASHFORTH_3,
        Method.ADAMS_BASHFORTH_4,
        Method.RUNGE_KUTTA,
        Method.RUNGE_KUTTA_FEHLBERG_5,
        Method.CASH_KARP,
    ],
)
def test_explicit_methods(method):
    assert is_explicit(method) is True


@pytest.mark.parametrize(
    "method",
    [
        Method.BACKWARD_EULER,
        Method.CRANK_NICOLSON,
        Method.ADAMS_MOULTON_3,
        Method.ADAMS_MOULTON_4,
        Method.BACKWARD_DIFFERENCE_2,
        Method.BACKWARD_DIFFERENCE_3,
        Method.BACKWARD_DIFFERENCE_4,
    ],
)
def test_implicit_methods(method):
    assert is_explicit(method) is False


def test_order_increases_within_families():
    bashforth = [
        Method.EULER,
        Method.ADAMS_BASHFORTH_2,
        Method.ADAMS_BASHFORTH_3,
        Method.ADAMS_BASHFORTH_4,
    ]
    orders = [order(m) for m in bashforth]
    assert orders == sorted(orders)
    assert len(set(orders)) == len(orders)


def test_explicit_and_implicit_pairs_share_order():
    assert order(Method.EULER) == order(Method.BACKWARD_EULER)
    assert order(Method.ADAMS_BASHFORTH_2) == order(Method.CRANK_NICOLSON)
    assert order(Method.RUNGE_KUTTA) == order(Method.BACKWARD_DIFFERENCE_2)


def test_variable_step_methods():
    variable = [m for m in Method if is_variable_step(m)]
    assert set(variable) == {Method.RUNGE_KUTTA_FEHLBERG_5, Method.CASH_KARP}


def test_unknown_code_falls_back_to_runge_kutta():
    assert method_name(999) == method_name(Method.RUNGE_KUTTA)
    assert order(999) == order(Method.RUNGE_KUTTA)
    assert is_explicit(999) is True
    assert is_variable_step(999) is False


@pytest.mark.parametrize(
    "key, method",
    [
        (1, Method.RUNGE_KUTTA),
        (2, Method.BACKWARD_EULER),
        (3, Method.CRANK_NICOLSON),
        (4, Method.ADAMS_MOULTON_3),
        (5, Method.ADAMS_MOULTON_4),
        (6, Method.BACKWARD_DIFFERENCE_2),
        (7, Method.BACKWARD_DIFFERENCE_3),
        (8, Method.BACKWARD_DIFFERENCE_4),
        (9, Method.EULER),
        (10, Method.ADAMS_BASHFORTH_2),
        (11, Method.ADAMS_BASHFORTH_3),
        (12, Method.ADAMS_BASHFORTH_4),
        (13, Method.RUNGE_KUTTA_FEHLBERG_5),
        (14, Method.CASH_KARP),
    ],
)
def test_method_from_key(key, method):
    assert method_from_key(key) is method


@pytest.mark.parametrize("key", [-1, 0, 15, 100])
def test_method_from_key_default(key):
    assert method_from_key(key) is Method.RUNGE_KUTTA


def test_keys_cover_every_distinct_method():
    chosen = {method_from_key(k) for k in range(1, 15)}
    assert chosen == set(Method)