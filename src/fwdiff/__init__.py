from . import function
from .autodiff import deriv, value_and_deriv
from .dual import DualNumber, constant, variable

__all__ = [
    "function",
    "deriv",
    "value_and_deriv",
    "DualNumber",
    "constant",
    "variable",
]
