"""Elementary functions over numbers and dual numbers.

Every function accepts plain numbers as well as ``Dual`` instances of any
order.  For a dual argument the value is computed recursively and the
gradient follows the chain rule.
"""

from __future__ import annotations

import cmath
import math
from numbers import Complex, Real

from .dual import Dual

__all__ = [
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "hypot",
    "sinh",
    "cosh",
    "tanh",
    "exp",
    "log",
    "log10",
    "sqrt",
    "pow",
    "fabs",
    "abs2",
    "conj",
    "real",
    "imag",
    "erf",
    "minimum",
    "maximum",
]

_LN10 = 2.3025850929940456840179914546843
_SQRT_PI = 1.7724538509055160272981674833411451872554456638435


def _plain(x, real_fn, complex_fn=None):
    """Apply ``real_fn`` to a real number or ``complex_fn`` to a complex one."""
    if isinstance(x, Real):
        return real_fn(x)
    if isinstance(x, Complex):
        if complex_fn is None:
            raise TypeError(f"{real_fn.__name__} is not defined for complex numbers")
        return complex_fn(x)
    raise TypeError(f"expected a number or dual number, got {type(x).__name__}")


def _check_numeric(x) -> None:
    if not isinstance(x, (Dual, Complex)):
        raise TypeError(f"expected a number or dual number, got {type(x).__name__}")


def _check_same_order(duals) -> None:
    orders = {d.order() for d in duals}
    if len(orders) > 1:
        raise TypeError(f"cannot combine dual numbers of orders {sorted(orders)}")


# Trigonometric functions


def sin(x):
    """Sine."""
    if isinstance(x, Dual):
        return Dual(sin(x.val), x.grad * cos(x.val))
    return _plain(x, math.sin, cmath.sin)


def cos(x):
    """Cosine."""
    if isinstance(x, Dual):
        return Dual(cos(x.val), x.grad * (-sin(x.val)))
    return _plain(x, math.cos, cmath.cos)


def tan(x):
    """Tangent."""
    if isinstance(x, Dual):
        aux = 1.0 / cos(x.val)
        return Dual(tan(x.val), x.grad * (aux * aux))
    return _plain(x, math.tan, cmath.tan)


def asin(x):
    """Arc sine."""
    if isinstance(x, Dual):
        aux = 1.0 / sqrt(1.0 - x.val * x.val)
        return Dual(asin(x.val), x.grad * aux)
    return _plain(x, math.asin, cmath.asin)


def acos(x):
    """Arc cosine."""
    if isinstance(x, Dual):
        aux = -1.0 / sqrt(1.0 - x.val * x.val)
        return Dual(acos(x.val), x.grad * aux)
    return _plain(x, math.acos, cmath.acos)


def atan(x):
    """Arc tangent."""
    if isinstance(x, Dual):
        aux = 1.0 / (1.0 + x.val * x.val)
        return Dual(atan(x.val), x.grad * aux)
    return _plain(x, math.atan, cmath.atan)


def atan2(y, x):
    """Two-argument arc tangent of ``y / x``."""
    y_dual = isinstance(y, Dual)
    x_dual = isinstance(x, Dual)
    if not (y_dual or x_dual):
        if isinstance(y, Real) and isinstance(x, Real):
            return math.atan2(y, x)
        raise TypeError("atan2 is defined only for real numbers and dual numbers")
    _check_numeric(y)
    _check_numeric(x)
    yv = y.val if y_dual else y
    xv = x.val if x_dual else x
    if y_dual and x_dual:
        _check_same_order((y, x))
        g = (xv * y.grad - yv * x.grad) / (yv * yv + xv * xv)
    elif y_dual:
        g = x / (yv * yv + x * x) * y.grad
    else:
        g = -y / (y * y + xv * xv) * x.grad
    return Dual(atan2(yv, xv), g)


def hypot(x, y, z=None):
    """Euclidean norm of two or three arguments."""
    args = (x, y) if z is None else (x, y, z)
    duals = [a for a in args if isinstance(a, Dual)]
    if not duals:
        if all(isinstance(a, Real) for a in args):
            return math.hypot(*args)
        raise TypeError("hypot is defined only for real numbers and dual numbers")
    for a in args:
        _check_numeric(a)
    _check_same_order(duals)
    vals = [a.val if isinstance(a, Dual) else a for a in args]
    value = hypot(*vals)
    numerator = duals[0].grad * duals[0].val
    for d in duals[1:]:
        numerator = numerator + d.grad * d.val
    return Dual(value, numerator / value)


# Hyperbolic functions


def sinh(x):
    """Hyperbolic sine."""
    if isinstance(x, Dual):
        return Dual(sinh(x.val), x.grad * cosh(x.val))
    return _plain(x, math.sinh, cmath.sinh)


def cosh(x):
    """Hyperbolic cosine."""
    if isinstance(x, Dual):
        return Dual(cosh(x.val), x.grad * sinh(x.val))
    return _plain(x, math.cosh, cmath.cosh)


def tanh(x):
    """Hyperbolic tangent."""
    if isinstance(x, Dual):
        aux = 1.0 / cosh(x.val)
        return Dual(tanh(x.val), x.grad * (aux * aux))
    return _plain(x, math.tanh, cmath.tanh)


# Exponential and logarithmic functions


def exp(x):
    """Exponential."""
    if isinstance(x, Dual):
        value = exp(x.val)
        return Dual(value, x.grad * value)
    return _plain(x, math.exp, cmath.exp)


def log(x):
    """Natural logarithm."""
    if isinstance(x, Dual):
        return Dual(log(x.val), x.grad * (1.0 / x.val))
    return _plain(x, math.log, cmath.log)


def log10(x):
    """Base-10 logarithm."""
    if isinstance(x, Dual):
        return Dual(log10(x.val), x.grad * (1.0 / (_LN10 * x.val)))
    return _plain(x, math.log10, cmath.log10)


# Power functions


def sqrt(x):
    """Square root."""
    if isinstance(x, Dual):
        value = sqrt(x.val)
        return Dual(value, x.grad * (0.5 / value))
    return _plain(x, math.sqrt, cmath.sqrt)


def pow(base, exponent):
    """Raise ``base`` to the power ``exponent``."""
    if isinstance(base, Dual) or isinstance(exponent, Dual):
        _check_numeric(base)
        _check_numeric(exponent)
        return base ** exponent
    if isinstance(base, Real) and isinstance(exponent, Real):
        return math.pow(base, exponent)
    if isinstance(base, Complex) and isinstance(exponent, Complex):
        return base ** exponent
    raise TypeError("pow is defined only for numbers and dual numbers")


# Other functions


def fabs(x):
    """Absolute value; the derivative at zero is taken as zero."""
    if isinstance(x, Dual):
        sign = -1.0 if x.val < 0 else (1.0 if x.val > 0 else 0.0)
        return Dual(fabs(x.val), x.grad * sign)
    return _plain(x, math.fabs, abs)


def abs2(x):
    """Squared magnitude."""
    if isinstance(x, Dual):
        return x * x
    return _plain(x, lambda r: r * r, lambda c: abs(c) ** 2)


def conj(x):
    """Complex conjugate; a dual number is returned unchanged."""
    if isinstance(x, Dual):
        return x.copy()
    _check_numeric(x)
    return x.conjugate()


def real(x):
    """Real part; a dual number is returned unchanged."""
    if isinstance(x, Dual):
        return x.copy()
    _check_numeric(x)
    return x.real


def imag(x):
    """Imaginary part; zero for a dual number."""
    if isinstance(x, Dual):
        return 0.0
    _check_numeric(x)
    return x.imag


def erf(x):
    """Gauss error function."""
    if isinstance(x, Dual):
        aux = x.val
        factor = 2.0 * exp(-aux * aux) / _SQRT_PI
        return Dual(erf(aux), x.grad * factor)
    return _plain(x, math.erf)


def _choose(x):
    return x.copy() if isinstance(x, Dual) else x


def minimum(x, y):
    """Return the smaller of ``x`` and ``y`` (``x`` on ties)."""
    _check_numeric(x)
    _check_numeric(y)
    return _choose(x) if x <= y else _choose(y)


def maximum(x, y):
    """Return the larger of ``x`` and ``y`` (``x`` on ties)."""
    _check_numeric(x)
    _check_numeric(y)
    return _choose(x) if x >= y else _choose(y)