"""Numerical integration methods and their properties.

A method's integer code encodes two facts: the tens digit is its order
and the units digit is 1 for explicit methods and 0 for implicit ones.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "Method",
    "method_name",
    "is_explicit",
    "order",
    "is_variable_step",
    "method_from_key",
]


class Method(IntEnum):
    """Integration methods, identified by their numeric codes."""

    # Explicit methods
    EULER = 1
    ADAMS_BASHFORTH_1 = 1
    ADAMS_BASHFORTH_2 = 11
    ADAMS_BASHFORTH_3 = 21
    ADAMS_BASHFORTH_4 = 31
    RUNGE_KUTTA = 41
    RUNGE_KUTTA_FEHLBERG_5 = 51
    CASH_KARP = 61

    # Implicit methods
    BACKWARD_EULER = 0
    CRANK_NICOLSON = 10
    ADAMS_MOULTON_2 = 10
    ADAMS_MOULTON_3 = 20
    ADAMS_MOULTON_4 = 30
    BACKWARD_DIFFERENCE_2 = 40
    BACKWARD_DIFFERENCE_3 = 50
    BACKWARD_DIFFERENCE_4 = 60

    @property
    def display_name(self) -> str:
        """Human-readable name of the method."""
        return _NAMES[self]


_NAMES: dict[Method, str] = {
    Method.EULER: "Euler",
    Method.ADAMS_BASHFORTH_2: "2nd order Adams-Bashforth",
    Method.ADAMS_BASHFORTH_3: "3rd order Adams-Bashforth",
    Method.ADAMS_BASHFORTH_4: "4th order Adams-Bashforth",
    Method.RUNGE_KUTTA: "4th order Runge-Kutta",
    Method.RUNGE_KUTTA_FEHLBERG_5: "5th order Runge-Kutta-Fehlberg",
    Method.CASH_KARP: "5th order Cash-Karp",
    Method.BACKWARD_EULER: "Backward-Euler",
    Method.CRANK_NICOLSON: "Crank-Nicolson",
    Method.ADAMS_MOULTON_3: "3rd order Adams-Moulton",
    Method.ADAMS_MOULTON_4: "4th order Adams-Moulton",
    Method.BACKWARD_DIFFERENCE_2: "2nd order Backward Difference",
    Method.BACKWARD_DIFFERENCE_3: "3rd order Backward Difference",
    Method.BACKWARD_DIFFERENCE_4: "4th order Backward Difference",
}

_VARIABLE_STEP = frozenset({Method.RUNGE_KUTTA_FEHLBERG_5, Method.CASH_KARP})

# Menu keys offered to the user, in the order they are listed.
_KEYS: dict[int, Method] = {
    1: Method.RUNGE_KUTTA,
    2: Method.BACKWARD_EULER,
    3: Method.CRANK_NICOLSON,
    4: Method.ADAMS_MOULTON_3,
    5: Method.ADAMS_MOULTON_4,
    6: Method.BACKWARD_DIFFERENCE_2,
    7: Method.BACKWARD_DIFFERENCE_3,
    8: Method.BACKWARD_DIFFERENCE_4,
    9: Method.EULER,
    10: Method.ADAMS_BASHFORTH_2,
    11: Method.ADAMS_BASHFORTH_3,
    12: Method.ADAMS_BASHFORTH_4,
    13: Method.RUNGE_KUTTA_FEHLBERG_5,
    14: Method.CASH_KARP,
}


def _resolve(method: int) -> Method:
    """Return the method for a code; unknown codes fall back to Runge-Kutta."""
    try:
        return Method(method)
    except ValueError:
        return Method.RUNGE_KUTTA


def method_name(method: int) -> str:
    """Return the display name of a method code."""
    return _resolve(method).display_name


def is_explicit(method: int) -> bool:
    """Return True for explicit methods, False for implicit ones."""
    return _resolve(method) % 10 == 1


def order(method: int) -> int:
    """Return the order digit encoded in the method code."""
    return _resolve(method) // 10


def is_variable_step(method: int) -> bool:
    """Return True if the method adapts its step size."""
    return _resolve(method) in _VARIABLE_STEP


def method_from_key(key: int) -> Method:
    """Map a menu key (1 to 14) to a method; other keys give Runge-Kutta."""
    return _KEYS.get(key, Method.RUNGE_KUTTA)