import numbers
from typing import Any, Self

import mpmath

from fwdiff import function as fdf
from fwdiff.typing import Scalar


def _is_real(value: object) -> bool:
    return isinstance(value, numbers.Real | mpmath.mpf)


class DualNumber[T: Scalar]:
    r"""Dual number for first-order forward-mode automatic differentiation.

    Parameters
    ----------
    value : T, default=0
        Value of the expression at the evaluation point.
    derivative : T | None, default=None
        Derivative of the expression with respect to the tracked variable. If
        `derivative` is ``None``, the dual number is treated as a constant, i.e. the
        derivative is zero.
    dtype : type[T] | None, default=None
        Scalar type of both components. If `dtype` is ``None``, the type of `value`
        is used, and `derivative` is converted to it.

    Attributes
    ----------
    value : T
    derivative : T
    dtype : type[T]

    Raises
    ------
    TypeError
        If the components are not real numbers or are dual numbers themselves.

    See Also
    --------
    variable, constant

    Notes
    -----
    Instances of this class behave like elements of the ring :math:`T[\varepsilon]/
    (\varepsilon^2)`, where :math:`\varepsilon` is the infinitesimal part. A dual
    number whose scalar type differs from ``self.dtype`` is converted to
    ``self.dtype`` before the operation. So is a scalar operand, unless ``self.dtype``
    is integral and the scalar is not; then the arithmetic promotes the result, e.g.
    ``variable(3) * 0.5`` has the value ``1.5``.

    Binary operators return a new instance, whereas augmented assignments such as
    ``+=`` update the left operand in place. Division by zero is not intercepted, so
    the behavior of the scalar type is retained.

    Examples
    --------
    >>> x = DualNumber.variable(3.0)
    >>> y = x * x + 2 * x
    >>> print(y)
    (15.0, 8.0)

    >>> a = DualNumber(3.0, 2.0)
    >>> a /= DualNumber(-4.0, 1.0)
    >>> print(a)
    (-0.75, -0.6875)
    """

    __slots__ = ("_value", "_derivative")
    __array_ufunc__ = None
    _value: T
    _derivative: T

    def __init__(
        self,
        value: T = 0,  # type: ignore
        derivative: T | None = None,
        *,
        dtype: type[T] | None = None,
    ):
        if isinstance(value, DualNumber) or isinstance(derivative, DualNumber):
            raise TypeError("nesting DualNumber is forbidden")

        if not _is_real(value) or not (derivative is None or _is_real(derivative)):
            raise TypeError("arguments are not real numbers")

        if dtype is not None:
            value = dtype(value)  # type: ignore

            if not _is_real(value):
                raise TypeError(f"{dtype.__name__} is not a real scalar type")

        if derivative is None:
            derivative = type(value)(0)
        elif type(derivative) is not type(value):
            derivative = type(value)(derivative)

        self._value = value
        self._derivative = derivative  # type: ignore

    @classmethod
    def variable(cls, value: T) -> Self:
        """Return the dual number representing the variable of differentiation.

        The derivative of the result is one.
        """
        return cls(value, type(value)(1))

    @classmethod
    def constant(cls, value: T) -> Self:
        """Return the dual number representing a constant.

        The derivative of the result is zero.
        """
        return cls(value, type(value)(0))

    @property
    def value(self) -> T:
        return self._value

    @property
    def derivative(self) -> T:
        return self._derivative

    @property
    def dtype(self) -> type[T]:
        return type(self._value)

    def astype[U: Scalar](self, dtype: type[U]) -> "DualNumber[U]":
        """Return a copy whose components are converted to `dtype`.

        Examples
        --------
        >>> x = DualNumber(2.5, 1.5)
        >>> print(x.astype(int))
        (2, 1)
        """
        return DualNumber(dtype(self._value), dtype(self._derivative))  # type: ignore

    def copy(self) -> Self:
        return self.__class__(self._value, self._derivative)

    def _is_acceptable(self, value: object) -> bool:
        return isinstance(value, DualNumber) or _is_real(value)

    def _convert(self, value: Any) -> Any:
        dtype = type(self._value)

        if isinstance(value, DualNumber):
            return value if value.dtype is dtype else value.astype(dtype)

        if type(value) is dtype:
            return value

        integral = numbers.Integral

        if issubclass(dtype, integral) and not isinstance(value, integral):
            # left for the arithmetic to promote, e.g. int * float -> float
            return value

        return dtype(value)

    def _assign(self, result: Self) -> Self:
        self._value = result._value
        self._derivative = result._derivative
        return self

    def _fwdiff_overload_(self, fun, *args, **kwargs):
        match fun:
            case fdf.sin:
                return self.__sin()

            case fdf.cos:
                return self.__cos()

            case fdf.tan:
                return self.__tan()

            case fdf.cot:
                return self.__cot()

            case fdf.exp:
                return self.__exp()

            case fdf.log:
                return self.__log()

            case fdf.sqrt:
                return self.__sqrt()

        return NotImplemented

    def __sin(self) -> Self:
        value = self._value
        return self.__class__(fdf.sin(value), self._derivative * fdf.cos(value))

    def __cos(self) -> Self:
        value = self._value
        return self.__class__(fdf.cos(value), -self._derivative * fdf.sin(value))

    def __tan(self) -> Self:
        c = fdf.cos(self._value)
        return self.__class__(fdf.tan(self._value), self._derivative / (c * c))

    def __cot(self) -> Self:
        s = fdf.sin(self._value)
        return self.__class__(fdf.cot(self._value), -self._derivative / (s * s))

    def __exp(self) -> Self:
        e = fdf.exp(self._value)
        return self.__class__(e, self._derivative * e)

    def __log(self) -> Self:
        value = self._value
        return self.__class__(fdf.log(value), self._derivative / value)

    def __sqrt(self) -> Self:
        r = fdf.sqrt(self._value)
        return self.__class__(r, self._derivative / (2 * r))

    def __repr__(self) -> str:
        value = self._value
        return f"{type(self).__name__}(value={value!r}, derivative={self._derivative!r})"

    def __str__(self) -> str:
        return f"({self._value}, {self._derivative})"

    def __copy__(self) -> Self:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DualNumber):
            return NotImplemented

        return bool(
            other._value == self._value and other._derivative == self._derivative
        )

    def __add__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        rhs = self._convert(rhs)

        if not isinstance(rhs, DualNumber):
            return self.__class__(self._value + rhs, self._derivative)

        derivative = self._derivative + rhs._derivative
        return self.__class__(self._value + rhs._value, derivative)

    def __sub__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        rhs = self._convert(rhs)

        if not isinstance(rhs, DualNumber):
            return self.__class__(self._value - rhs, self._derivative)

        derivative = self._derivative - rhs._derivative
        return self.__class__(self._value - rhs._value, derivative)

    def __mul__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        rhs = self._convert(rhs)

        if not isinstance(rhs, DualNumber):
            return self.__class__(self._value * rhs, self._derivative * rhs)

        derivative = self._derivative * rhs._value + self._value * rhs._derivative
        return self.__class__(self._value * rhs._value, derivative)

    def __truediv__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        rhs = self._convert(rhs)

        if not isinstance(rhs, DualNumber):
            return self.__class__(self._value / rhs, self._derivative / rhs)

        s = rhs._value * rhs._value
        derivative = (self._derivative * rhs._value - self._value * rhs._derivative) / s
        return self.__class__(self._value / rhs._value, derivative)

    def __pow__(self, rhs: int) -> Self:
        if not isinstance(rhs, int):
            return NotImplemented

        if rhs == 0:
            return self.__class__(self._value**0, type(self._value)(0))

        derivative = rhs * self._value ** (rhs - 1) * self._derivative
        return self.__class__(self._value**rhs, derivative)

    def __neg__(self) -> Self:
        return self.__class__(-self._value, -self._derivative)

    def __pos__(self) -> Self:
        return self.__class__(self._value, self._derivative)

    def __radd__(self, lhs: T | int | float) -> Self:
        if not _is_real(lhs):
            return NotImplemented

        lhs = self._convert(lhs)
        return self.__class__(self._value + lhs, self._derivative)

    def __rsub__(self, lhs: T | int | float) -> Self:
        if not _is_real(lhs):
            return NotImplemented

        lhs = self._convert(lhs)
        return self.__class__(lhs - self._value, -self._derivative)

    def __rmul__(self, lhs: T | int | float) -> Self:
        if not _is_real(lhs):
            return NotImplemented

        lhs = self._convert(lhs)
        return self.__class__(self._value * lhs, self._derivative * lhs)

    def __rtruediv__(self, lhs: T | int | float) -> Self:
        if not _is_real(lhs):
            return NotImplemented

        lhs = self._convert(lhs)
        s = self._value * self._value
        return self.__class__(lhs / self._value, -lhs * self._derivative / s)

    def __iadd__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if (result := self.__add__(rhs)) is NotImplemented:
            return NotImplemented

        return self._assign(result)

    def __isub__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if (result := self.__sub__(rhs)) is NotImplemented:
            return NotImplemented

        return self._assign(result)

    def __imul__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if (result := self.__mul__(rhs)) is NotImplemented:
            return NotImplemented

        return self._assign(result)

    def __itruediv__(self, rhs: "Self | DualNumber | T | int | float") -> Self:
        if (result := self.__truediv__(rhs)) is NotImplemented:
            return NotImplemented

        return self._assign(result)


def variable[T: Scalar](value: T) -> DualNumber[T]:
    """Return the dual number representing the variable of differentiation.

    This is a shorthand for :meth:`DualNumber.variable`.

    Examples
    --------
    >>> print(variable(5.0))
    (5.0, 1.0)
    """
    return DualNumber.variable(value)


def constant[T: Scalar](value: T) -> DualNumber[T]:
    """Return the dual number representing a constant.

    This is a shorthand for :meth:`DualNumber.constant`.

    Examples
    --------
    >>> print(constant(5.0))
    (5.0, 0.0)
    """
    return DualNumber.constant(value)
