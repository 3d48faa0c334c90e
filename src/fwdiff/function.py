"""
###############################################
Mathematical functions (:mod:`fwdiff.function`)
###############################################

.. currentmodule:: fwdiff.function

This module provides elementary functions. Each function accepts real scalars as
well as instances of :class:`fwdiff.DualNumber`; in the latter case, the derivative
is propagated by the chain rule.

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    sin
    cos
    tan
    cot

Exponents and logarithmic functions
===================================

.. autosummary::
    :toctree: generated/

    exp
    log
    sqrt

"""

import fractions
import math
from typing import Any, overload

import mpmath
import mpmath.ctx_mp_python
import numpy as np


@overload
def sin[T: np.floating](x: T, /) -> T: ...


@overload
def sin(x: float | int, /) -> float: ...


@overload
def sin(x: Any, /) -> Any: ...


def sin(x, /):
    """Sine.

    Examples
    --------
    >>> from fwdiff import variable
    >>> print(format(sin(1.0), ".6f"))
    0.841471
    >>> print(sin(variable(0.0)))
    (0.0, 1.0)
    """
    if fun := getattr(type(x), "_fwdiff_overload_", None):
        if (res := fun(x, sin, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sin(x)

        case np.floating() | np.integer():
            return np.sin(x)

        case float() | int() | fractions.Fraction():
            return math.sin(x)

        case _:
            raise TypeError


@overload
def cos[T: np.floating](x: T, /) -> T: ...


@overload
def cos(x: float | int, /) -> float: ...


@overload
def cos(x: Any, /) -> Any: ...


def cos(x, /):
    """Cosine.

    Examples
    --------
    >>> from fwdiff import variable
    >>> print(format(cos(1.0), ".6f"))
    0.540302
    >>> print(cos(variable(3.0)).derivative == -sin(3.0))
    True
    """
    if fun := getattr(type(x), "_fwdiff_overload_", None):
        if (res := fun(x, cos, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.cos(x)

        case np.floating() | np.integer():
            return np.cos(x)

        case float() | int() | fractions.Fraction():
            return math.cos(x)

        case _:
            raise TypeError


@overload
def tan[T: np.floating](x: T, /) -> T: ...


@overload
def tan(x: float | int, /) -> float: ...


@overload
def tan(x: Any, /) -> Any: ...


def tan(x, /):
    """Tangent.

    Poles are not treated specially; the result near an odd multiple of
    :math:`\\pi/2` is whatever the underlying implementation returns.

    Examples
    --------
    >>> from fwdiff import variable
    >>> print(format(tan(1.0), ".6f"))
    1.557408
    >>> print(tan(variable(0.0)))
    (0.0, 1.0)
    """
    if fun := getattr(type(x), "_fwdiff_overload_", None):
        if (res := fun(x, tan, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.tan(x)

        case np.floating() | np.integer():
            return np.tan(x)

        case float() | int() | fractions.Fraction():
            return math.tan(x)

        case _:
            raise TypeError


@overload
def cot[T: np.floating](x: T, /) -> T: ...


@overload
def cot(x: float | int, /) -> float: ...


@overload
def cot(x: Any, /) -> Any: ...


def cot(x, /):
    """Cotangent.

    This is evaluated as ``1 / tan(x)``. Hence, for built-in floats,
    :class:`ZeroDivisionError` is raised at multiples of :math:`\\pi` where
    :func:`math.tan` returns zero.

    Examples
    --------
    >>> print(format(cot(1.0), ".6f"))
    0.642093
    """
    if fun := getattr(type(x), "_fwdiff_overload_", None):
        if (res := fun(x, cot, x)) is not NotImplemented:
            return res

        raise TypeError

    mpnumeric = mpmath.ctx_mp_python.mpnumeric
    Fraction = fractions.Fraction

    match x:
        case mpnumeric() | np.floating() | np.integer() | float() | int() | Fraction():
            return 1 / tan(x)

        case _:
            raise TypeError


@overload
def exp[T: np.floating](x: T, /) -> T: ...


@overload
def exp(x: float | int, /) -> float: ...


@overload
def exp(x: Any, /) -> Any: ...


def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> from fwdiff import variable
    >>> print(format(exp(2), ".6f"))
    7.389056
    >>> print(exp(variable(0.0)))
    (1.0, 1.0)
    """
    if fun := getattr(type(x), "_fwdiff_overload_", None):
        if (res := fun(x, exp, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.exp(x)

        case np.floating() | np.integer():
            return np.exp(x)

        case float() | int() | fractions.Fraction():
            return math.exp(x)

        case _:
            raise TypeError


@overload
def log[T: np.floating](x: T, /) -> T: ...


@overload
def log(x: float | int, /) -> float: ...


@overload
def log(x: Any, /) -> Any: ...


def log(x, /):
    """Natural logarithm.

    Examples
    --------
    >>> from fwdiff import variable
    >>> print(format(log(5), ".6f"))
    1.609438
    >>> print(log(variable(1.0)))
    (0.0, 1.0)
    """
    if fun := getattr(type(x), "_fwdiff_overload_", None):
        if (res := fun(x, log, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.log(x)

        case np.floating() | np.integer():
            return np.log(x)

        case float() | int() | fractions.Fraction():
            return math.log(x)

        case _:
            raise TypeError


@overload
def sqrt[T: np.floating](x: T, /) -> T: ...


@overload
def sqrt(x: float | int, /) -> float: ...


@overload
def sqrt(x: Any, /) -> Any: ...


def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> from fwdiff import variable
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    >>> print(sqrt(variable(4.0)))
    (2.0, 0.25)
    """
    if fun := getattr(type(x), "_fwdiff_overload_", None):
        if (res := fun(x, sqrt, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sqrt(x)

        case np.floating() | np.integer():
            return np.sqrt(x)

        case float() | int() | fractions.Fraction():
            return math.sqrt(x)

        case _:
            raise TypeError
