import math

import mpmath
import numpy as np
import pytest

from fwdiff import function as fdf
from fwdiff.dual import DualNumber, constant, variable

SQRT2 = math.sqrt(2)
SQRT3 = math.sqrt(3)


def approx_dual(result: DualNumber, value: float, derivative: float) -> None:
    assert pytest.approx(result.value, abs=1e-12) == value
    assert pytest.approx(result.derivative, abs=1e-12) == derivative


@pytest.mark.parametrize(
    "x, value, derivative",
    [
        (0.0, 0.0, 1.0),
        (math.pi / 6, 0.5, SQRT3 / 2),
        (math.pi / 4, SQRT2 / 2, SQRT2 / 2),
        (math.pi / 3, SQRT3 / 2, 0.5),
        (math.pi / 2, 1.0, 0.0),
        (math.pi, 0.0, -1.0),
        (3 * math.pi / 2, -1.0, 0.0),
        (2 * math.pi, 0.0, 1.0),
    ],
)
def test_sin(x, value, derivative):
    approx_dual(fdf.sin(variable(x)), value, derivative)


@pytest.mark.parametrize(
    "x, value, derivative",
    [
        (0.0, 1.0, 0.0),
        (math.pi / 6, SQRT3 / 2, -0.5),
        (math.pi / 4, SQRT2 / 2, -SQRT2 / 2),
        (math.pi / 3, 0.5, -SQRT3 / 2),
        (math.pi / 2, 0.0, -1.0),
        (math.pi, -1.0, 0.0),
        (3 * math.pi / 2, 0.0, 1.0),
        (2 * math.pi, 1.0, 0.0),
    ],
)
def test_cos(x, value, derivative):
    approx_dual(fdf.cos(variable(x)), value, derivative)


@pytest.mark.parametrize(
    "x, value, derivative",
    [
        (0.0, 0.0, 1.0),
        (math.pi / 6, SQRT3 / 3, 4 / 3),
        (math.pi / 4, 1.0, 2.0),
        (math.pi / 3, SQRT3, 4.0),
        (math.pi, 0.0, 1.0),
        (2 * math.pi, 0.0, 1.0),
    ],
)
def test_tan(x, value, derivative):
    approx_dual(fdf.tan(variable(x)), value, derivative)


@pytest.mark.parametrize(
    "x, value, derivative",
    [
        (math.pi / 6, SQRT3, -4.0),
        (math.pi / 4, 1.0, -2.0),
        (math.pi / 3, SQRT3 / 3, -4 / 3),
        (math.pi / 2, 0.0, -1.0),
    ],
)
def test_cot(x, value, derivative):
    approx_dual(fdf.cot(variable(x)), value, derivative)


@pytest.mark.parametrize("x", [0.0, 1.0, 2.0, -1.0])
def test_exp(x):
    result = fdf.exp(variable(x))
    assert result == DualNumber(math.exp(x), math.exp(x))


def test_exp_at_zero():
    assert fdf.exp(variable(0.0)) == DualNumber(1.0, 1.0)


def test_log_and_sqrt():
    approx_dual(fdf.log(variable(2.0)), math.log(2.0), 0.5)
    assert fdf.sqrt(variable(4.0)) == DualNumber(2.0, 0.25)


def test_chain_rule_formula():
    x = 0.7
    d = 2.5
    y = DualNumber(x, d)
    assert fdf.sin(y) == DualNumber(math.sin(x), d * math.cos(x))
    assert fdf.cos(y) == DualNumber(math.cos(x), -d * math.sin(x))
    assert fdf.tan(y) == DualNumber(math.tan(x), d / (math.cos(x) * math.cos(x)))
    assert fdf.cot(y) == DualNumber(1 / math.tan(x), -d / (math.sin(x) * math.sin(x)))


def test_constant_argument():
    assert fdf.sin(constant(1.2)).derivative == 0.0
    assert fdf.exp(constant(1.2)).derivative == 0.0


def test_composite():
    x = variable(0.4)
    y = fdf.sin(x) * fdf.exp(x) / (1 + x * x)
    f = math.sin(0.4) * math.exp(0.4)
    df = (math.cos(0.4) + math.sin(0.4)) * math.exp(0.4)
    expected = (df * 1.16 - f * 0.8) / 1.16**2
    assert pytest.approx(y.derivative, 1e-12) == expected


def test_scalar():
    assert fdf.sin(1.0) == math.sin(1.0)
    assert fdf.cos(2) == math.cos(2)
    assert fdf.cot(1.0) == 1 / math.tan(1.0)
    assert fdf.exp(1.5) == math.exp(1.5)

    with pytest.raises(TypeError):
        fdf.sin("1.0")

    with pytest.raises(TypeError):
        fdf.exp([1.0])


def test_numpy_precision():
    x = variable(np.float32(0.5))
    assert fdf.sin(x).dtype is np.float32
    assert fdf.tan(x).dtype is np.float32
    assert fdf.exp(x).dtype is np.float32
    assert fdf.exp(variable(np.float64(0.5))).dtype is np.float64


def test_mpmath():
    with mpmath.workdps(40):
        result = fdf.exp(variable(mpmath.mpf(1)))
        assert isinstance(result.value, mpmath.mpf)
        assert result.value == result.derivative
        assert mpmath.almosteq(result.value, mpmath.e, rel_eps=mpmath.mpf(10) ** -35)


def test_singularity():
    with pytest.raises(ZeroDivisionError):
        fdf.cot(variable(0.0))

    with pytest.raises(ValueError):
        fdf.log(variable(0.0))

    with np.errstate(divide="ignore"):
        result = fdf.cot(variable(np.float64(0.0)))

    assert result.value == math.inf
    assert result.derivative == -math.inf
