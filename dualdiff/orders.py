"""Higher-order dual numbers: construction, seeding and derivative extraction.

A dual number of order ``n`` has a value and a gradient that are both dual
numbers of order ``n - 1``.  An order-0 dual number is a plain number.
"""

from __future__ import annotations

from numbers import Number

from .dual import Dual, val

__all__ = ["higher_order_dual", "derivative", "gradnode", "seed"]


def _order_of(x) -> int:
    return x.order() if isinstance(x, Dual) else 0


def _require_dual(x) -> Dual:
    if not isinstance(x, Dual):
        raise TypeError(f"expected a dual number, got {type(x).__name__}")
    return x


def _require_order(order) -> int:
    if isinstance(order, bool) or not isinstance(order, int):
        raise TypeError(f"order must be an integer, got {type(order).__name__}")
    if order < 0:
        raise ValueError(f"order must not be negative, got {order}")
    return order


def higher_order_dual(order, value=0.0):
    """Return a dual number of the given order holding ``value`` with zero gradients.

    Order 0 gives ``value`` itself.  A dual number of the same order is copied.
    """
    order = _require_order(order)
    if isinstance(value, Dual):
        if value.order() != order:
            raise TypeError(
                f"cannot build a dual number of order {order} "
                f"from one of order {value.order()}"
            )
        return value.copy()
    if not isinstance(value, Number):
        raise TypeError(f"cannot build a dual number from {type(value).__name__}")
    if order == 0:
        return value
    zero = value * 0
    return Dual(higher_order_dual(order - 1, value), higher_order_dual(order - 1, zero))


def derivative(x, order=1):
    """Return the derivative of the given order stored in dual number ``x``.

    Order 0 is the value; order ``k`` follows the gradient branch ``k`` times.
    """
    x = _require_dual(x)
    order = _require_order(order)
    if order > x.order():
        raise ValueError(
            f"a dual number of order {x.order()} holds no derivative of order {order}"
        )
    if order == 0:
        return val(x.val)
    if order == 1:
        return val(x.grad)
    return derivative(x.grad, order - 1)


def gradnode(x, order):
    """Walk down the value branch of ``x`` and return the node at depth ``order``.

    Depth 0 is ``x.val``; depth ``k >= 1`` is the gradient of the value node
    reached after ``k - 1`` steps.
    """
    x = _require_dual(x)
    order = _require_order(order)
    if order > x.order():
        raise ValueError(
            f"a dual number of order {x.order()} has no gradient node at depth {order}"
        )
    if order == 0:
        return x.val
    if order == 1:
        return x.grad
    return gradnode(x.val, order - 1)


def seed(x, order, value):
    """Set the node of ``x`` at depth ``order`` (see ``gradnode``) to ``value``.

    The node keeps its order: its value becomes ``value`` and all its
    gradients become zero.
    """
    x = _require_dual(x)
    order = _require_order(order)
    if isinstance(value, Dual) or not isinstance(value, Number):
        raise TypeError(f"seed value must be a plain number, got {type(value).__name__}")
    if order > x.order():
        raise ValueError(
            f"a dual number of order {x.order()} has no gradient node at depth {order}"
        )
    if order == 0:
        x.val = higher_order_dual(_order_of(x.val), value)
    elif order == 1:
        x.grad = higher_order_dual(_order_of(x.grad), value)
    else:
        seed(x.val, order - 1, value)