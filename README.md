# dualdiff

Forward-mode automatic differentiation in pure Python, built on dual numbers.

A `Dual` holds a value and a gradient. Arithmetic and the mathematical functions
in `dualdiff.functions` carry the gradient along through every operation, so
evaluating a function on a seeded dual number gives you its derivative as well
as its value. Duals can be nested to get derivatives of any order, including
cross derivatives.

## Installation

```
pip install dualdiff
```

The package has no runtime dependencies. To run the test suite:

```
pip install "dualdiff[test]"
pytest
```

## First derivatives

```python
from dualdiff.dual import Dual, val, grad
from dualdiff.functions import log

def f(x):
    return 1 + x + x * x + 1 / x + log(x)

x = Dual(2.0, 1.0)      # value 2, seeded with dx/dx = 1
u = f(x)
print(val(u))           # f(2)
print(grad(u))          # f'(2)
```

For a function of several variables, seed the one you differentiate with
respect to and leave the others with a zero gradient:

```python
from dualdiff.functions import exp

def f(x, y, z):
    return 1 + x + y + z + x * y + y * z + x * z + x * y * z + exp(x / y + y / z)

dudy = grad(f(Dual(1.0, 0.0), Dual(2.0, 1.0), Dual(3.0, 0.0)))
```

`val(x)` returns the innermost value of a dual (or a plain number unchanged);
`grad(x)` returns the innermost value of its first-order gradient, and `0.0`
for a plain number.

Duals compare by their innermost value, so `Dual(6.0, 0.0) == 6` holds, and
`float(d)` and `int(d)` convert that value. `str(d)` prints the value alone;
`repr(d)` shows the whole nested structure, e.g. `Dual(2, 1)`. In-place
operators (`+=`, `-=`, `*=`, `/=`) update a dual and its gradient together.
Combining duals of different orders raises `TypeError`.

## Available functions

`dualdiff.functions` provides `sin`, `cos`, `tan`, `asin`, `acos`, `atan`,
`atan2`, `hypot` (two or three arguments), `sinh`, `cosh`, `tanh`, `exp`, `log`,
`log10`, `sqrt`, `pow`, `fabs`, `abs2`, `conj`, `real`, `imag`, `erf`,
`minimum` and `maximum`. Each accepts plain numbers as well as duals.

A few conventions worth knowing:

- `fabs` takes the derivative at zero to be zero.
- `conj` and `real` return a dual unchanged; `imag` of a dual is `0.0`.
- `minimum` and `maximum` return the first argument on ties.

## Higher orders

`dualdiff.orders` builds and inspects nested duals:

```python
from dualdiff.orders import higher_order_dual, seed, derivative
from dualdiff.functions import sin

x = higher_order_dual(3, 0.5)   # a third-order dual with value 0.5
seed(x, 1, 1.0)                 # seed the first direction
seed(x, 2, 1.0)                 # seed the second
seed(x, 3, 1.0)                 # seed the third

u = sin(x)
print(derivative(u, 0))         # sin(0.5)
print(derivative(u, 1))         # cos(0.5)
print(derivative(u, 2))         # -sin(0.5)
print(derivative(u, 3))         # -cos(0.5)
```

Seeding different variables at different levels gives mixed partial
derivatives: seed `x` at level 1 and `y` at level 2 of two second-order duals,
and `derivative(u, 2)` is d²u/dxdy. `gradnode(x, order)` returns the node that
`seed` writes to, and `Dual.order()` reports how deeply a dual is nested.
Asking for a derivative or node deeper than the dual's order raises
`ValueError`.

## What this package does not do

dualdiff works on scalars only. It has no helpers that take a function and
return a gradient vector, Jacobian or Hessian over arrays, no Taylor-series
helpers, and no reverse (adjoint) mode: to differentiate with respect to
several variables, seed and evaluate once per variable as shown above.