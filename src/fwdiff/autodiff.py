"""
#################################################
Automatic differentiation (:mod:`fwdiff.autodiff`)
#################################################

.. currentmodule:: fwdiff.autodiff

This module provides differential operators based on :class:`fwdiff.DualNumber`.

.. autosummary::
    :toctree: generated/

    deriv
    value_and_deriv

"""

from collections.abc import Callable
from typing import Any

from fwdiff.dual import DualNumber


def deriv[T, **P](fun: Callable[P, T], *, argnum: int = 0) -> Callable[P, T]:
    """Return a function that evaluates the partial derivative of the scalar-valued
    function with respect to one argument.

    Parameters
    ----------
    fun : Callable
        Differentiated function.
    argnum : int, default=0
        Index of the positional argument the derivative is taken with respect to.
        The other arguments are passed to `fun` unchanged and thus treated as
        constants.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Warnings
    --------
    `fun` must not contain conditional branches that depend on the value of its
    arguments, since only the branch taken at the evaluation point is
    differentiated.

    Examples
    --------
    >>> from fwdiff import function as fdf
    >>> df = deriv(lambda x: x * fdf.exp(x))
    >>> print(df(0.0))
    1.0

    >>> dfdy = deriv(lambda x, y: x * y + y, argnum=1)
    >>> print(dfdy(3.0, 2.0))
    4.0
    """

    def result(*args, **kwargs):
        return _evaluate(fun, argnum, args, kwargs)[1]

    return result


def value_and_deriv[T, **P](
    fun: Callable[P, T], *, argnum: int = 0
) -> Callable[P, tuple[T, T]]:
    """Return a function that evaluates both the scalar-valued function and its
    partial derivative.

    See :func:`deriv` for the meaning of the parameters.

    Examples
    --------
    >>> f = value_and_deriv(lambda x: x * x - 1)
    >>> f(3.0)
    (8.0, 6.0)
    """

    def result(*args, **kwargs):
        return _evaluate(fun, argnum, args, kwargs)

    return result


def _evaluate(
    fun: Callable, argnum: int, args: tuple, kwargs: dict[str, Any]
) -> tuple[Any, Any]:
    seeded = list(args)
    x = seeded[argnum]
    seeded[argnum] = DualNumber.variable(x)
    tmp = fun(*seeded, **kwargs)

    if not isinstance(tmp, DualNumber):
        # fun does not depend on the argument
        return tmp, type(x)(0)

    return tmp.value, tmp.derivative
