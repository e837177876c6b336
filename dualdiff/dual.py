"""Dual numbers for forward-mode automatic differentiation.

A ``Dual`` carries a value and a gradient.  Either part may itself be a
``Dual``, which gives dual numbers of higher order.
"""

from __future__ import annotations

import cmath
import math
from numbers import Number, Real

__all__ = ["Dual", "val", "grad"]


def _is_number(x) -> bool:
    return isinstance(x, Number) and not isinstance(x, Dual)


def _copy(x):
    return x.copy() if isinstance(x, Dual) else x


def _log(x):
    if isinstance(x, Dual):
        return Dual._make(_log(x.val), x.grad / x.val)
    if isinstance(x, Real):
        return math.log(x)
    return cmath.log(x)


def _pow(base, exponent):
    if isinstance(base, Dual) or isinstance(exponent, Dual):
        return base ** exponent
    if isinstance(base, Real) and isinstance(exponent, Real):
        return math.pow(base, exponent)
    return base ** exponent


def _format_number(x) -> str:
    if isinstance(x, Real):
        return format(float(x), "g")
    return str(x)


def _repr_aux(x) -> str:
    if isinstance(x, Dual):
        return f"({_repr_aux(x.val)}, {_repr_aux(x.grad)})"
    return _format_number(x)


class Dual:
    """A dual number ``val + grad·ε`` with ``ε² = 0``."""

    __slots__ = ("val", "grad")

    def __init__(self, val=0.0, grad=0.0):
        for part in (val, grad):
            if not (isinstance(part, Dual) or _is_number(part)):
                raise TypeError(f"cannot build a dual number from {type(part).__name__}")
        self.val = _copy(val)
        self.grad = _copy(grad)

    @classmethod
    def _make(cls, val, grad) -> "Dual":
        obj = object.__new__(cls)
        obj.val = val
        obj.grad = grad
        return obj

    def order(self) -> int:
        """Return the order of this dual number (1 for a plain dual)."""
        n = 1
        inner = self.val
        while isinstance(inner, Dual):
            n += 1
            inner = inner.val
        return n

    def copy(self) -> "Dual":
        """Return a deep copy of this dual number."""
        return Dual._make(_copy(self.val), _copy(self.grad))

    def _check_order(self, other: "Dual") -> None:
        if self.order() != other.order():
            raise TypeError(
                f"cannot combine dual numbers of order {self.order()} and {other.order()}"
            )

    # Unary operators

    def __pos__(self):
        return self.copy()

    def __neg__(self):
        return Dual._make(-self.val, -self.grad)

    # Arithmetic

    def __add__(self, other):
        if isinstance(other, Dual):
            self._check_order(other)
            return Dual._make(self.val + other.val, self.grad + other.grad)
        if _is_number(other):
            return Dual._make(self.val + other, _copy(self.grad))
        return NotImplemented

    def __radd__(self, other):
        if _is_number(other):
            return Dual._make(other + self.val, _copy(self.grad))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Dual):
            self._check_order(other)
            return Dual._make(self.val - other.val, self.grad - other.grad)
        if _is_number(other):
            return Dual._make(self.val - other, _copy(self.grad))
        return NotImplemented

    def __rsub__(self, other):
        if _is_number(other):
            return Dual._make(other - self.val, -self.grad)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Dual):
            self._check_order(other)
            return Dual._make(
                self.val * other.val,
                self.grad * other.val + self.val * other.grad,
            )
        if _is_number(other):
            return Dual._make(self.val * other, self.grad * other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_number(other):
            return Dual._make(other * self.val, other * self.grad)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Dual):
            self._check_order(other)
            quotient = self.val / other.val
            return Dual._make(quotient, (self.grad - quotient * other.grad) / other.val)
        if _is_number(other):
            return Dual._make(self.val / other, self.grad / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_number(other):
            inv = 1 / self.val
            return Dual._make(other * inv, (-other) * self.grad * inv * inv)
        return NotImplemented

    def __pow__(self, other):
        if isinstance(other, Dual):
            self._check_order(other)
            aux1 = _pow(self.val, other.val)
            aux2 = _log(self.val)
            g = (self.grad * (other.val / self.val) + aux2 * other.grad) * aux1
            return Dual._make(aux1, g)
        if _is_number(other):
            aux = _pow(self.val, other - 1)
            return Dual._make(aux * self.val, self.grad * (other * aux))
        return NotImplemented

    def __rpow__(self, other):
        if _is_number(other):
            aux1 = _pow(other, self.val)
            return Dual._make(aux1, _log(other) * self.grad * aux1)
        return NotImplemented

    # In-place arithmetic: updates this object.

    def _assign(self, result):
        if result is NotImplemented:
            return NotImplemented
        self.val, self.grad = result.val, result.grad
        return self

    def __iadd__(self, other):
        return self._assign(self.__add__(other))

    def __isub__(self, other):
        return self._assign(self.__sub__(other))

    def __imul__(self, other):
        return self._assign(self.__mul__(other))

    def __itruediv__(self, other):
        return self._assign(self.__truediv__(other))

    # Comparisons use the innermost value only.

    @staticmethod
    def _plain(other):
        if isinstance(other, Dual):
            return val(other)
        if _is_number(other):
            return other
        return NotImplemented

    def __eq__(self, other):
        o = self._plain(other)
        return NotImplemented if o is NotImplemented else val(self) == o

    def __ne__(self, other):
        o = self._plain(other)
        return NotImplemented if o is NotImplemented else val(self) != o

    def __lt__(self, other):
        o = self._plain(other)
        return NotImplemented if o is NotImplemented else val(self) < o

    def __le__(self, other):
        o = self._plain(other)
        return NotImplemented if o is NotImplemented else val(self) <= o

    def __gt__(self, other):
        o = self._plain(other)
        return NotImplemented if o is NotImplemented else val(self) > o

    def __ge__(self, other):
        o = self._plain(other)
        return NotImplemented if o is NotImplemented else val(self) >= o

    def __hash__(self):
        return hash(val(self))

    # Conversions

    def __float__(self):
        return float(val(self))

    def __int__(self):
        return int(val(self))

    def __str__(self):
        return _format_number(val(self))

    def __repr__(self):
        return "Dual" + _repr_aux(self)


def val(x):
    """Return the innermost value of a dual number, or a number unchanged."""
    while isinstance(x, Dual):
        x = x.val
    if not _is_number(x):
        raise TypeError(f"expected a number or dual number, got {type(x).__name__}")
    return x


def grad(x):
    """Return the innermost value of the first-order gradient of ``x``."""
    if isinstance(x, Dual):
        return val(x.grad)
    if _is_number(x):
        return 0.0
    raise TypeError(f"expected a number or dual number, got {type(x).__name__}")