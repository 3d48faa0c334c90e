"""
#############################
Typing (:mod:`fwdiff.typing`)
#############################

This module provides type definitions commonly used between modules.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol, Self


class Scalar(Protocol):
    """Protocol for the components of :class:`fwdiff.DualNumber`.

    The product, quotient, and chain rules only need the four arithmetic operations,
    negation, and integer power, which must also accept a plain integer on either
    side (as in ``2 * r`` for the derivative of the square root). Equality is
    needed for comparing dual numbers component-wise.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __pow__(self, rhs: int) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rtruediv__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...
