# hephaestus

Small vector types for games and simulations: two- and three-dimensional
vectors whose components are `int` or `float` values.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from hephaestus.vector import Vector2, Vector3

a = Vector2(1.0, 5.0)
b = Vector2(2.0, 1.0)

a + b            # Vector2(x=3.0, y=6.0)
a - b            # Vector2(x=-1.0, y=4.0)
a * 2.0          # Vector2(x=2.0, y=10.0)
a / 2.0          # Vector2(x=0.5, y=2.5)

Vector2(-4.0, -9.0).dot(Vector2(-1.0, 2.0))   # -14.0
Vector3(3.0, 4.0, 12.0).magnitude()           # 13.0

v = Vector2(3.0, 4.0)
v.normalized()   # Vector2(x=0.6, y=0.8), v is unchanged
v.normalize()    # v is now Vector2(x=0.6, y=0.8)
```

Vectors are dataclasses, so they compare equal component by component and
print as shown above.

Addition, subtraction and `dot` need two vectors of the same type; mixing
types raises `TypeError`. Multiplication and division take an `int` or
`float` scalar on the right-hand side.

The in-place operators `+=`, `-=`, `*=` and `/=` update the vector itself.

Normalising a vector whose magnitude is zero or NaN leaves it unchanged.

### Integer and float components

- With integer components, `magnitude()` uses the integer square root and
  division truncates towards zero, so `Vector2(7, -7) / 2` is
  `Vector2(x=3, y=-3)`. Integer division by zero raises `ZeroDivisionError`.
- With float components, division by zero does not raise: it gives a signed
  infinity, or NaN for `0.0 / 0.0`.

### Cross product

`Vector3` supports the cross product, either as a method or through `*`
when the right-hand side is another `Vector3`:

```python
u = Vector3(3.0, -3.0, 1.0)
w = Vector3(4.0, 9.0, 2.0)

u.cross(w)       # Vector3(x=-15.0, y=-2.0, z=39.0)
u * w            # same result
u.apply_cross(w) # u is updated in place
u *= w           # also in place
```

Multiplying a `Vector3` by a number still scales it.

### Generic access

Every vector type derives from `hephaestus.base.VectorBase`, which offers
`fields()`, `from_fields()`, `dimension_count()`, iteration and `len()`:

```python
list(Vector3(1, 2, 3))          # [1, 2, 3]
Vector2.from_fields([4, 5])     # Vector2(x=4, y=5)
Vector3.dimension_count()       # 3
```

`from_fields()` raises `ValueError` when given the wrong number of values.

### Defining your own vector types

Any dataclass that derives from `VectorBase` becomes a vector. Every field
is a dimension, in declaration order, unless some fields are marked with
`metadata={"dim": True}`; then only the marked fields are dimensions.

```python
from dataclasses import dataclass, field
from hephaestus.base import VectorBase

@dataclass
class Vector4(VectorBase):
    x: float
    y: float
    z: float
    w: float

Vector4(1.0, 2.0, 2.0, 4.0).magnitude()   # 5.0
```

The module also exposes the helpers `is_nan`, `field_abs` and `field_sqrt`
used for these computations.

### Naming helper

`hephaestus.naming.camel_to_snake_case` converts `UpperCamelCase` or
`lowerCamelCase` names to `snake_case`:

```python
from hephaestus.naming import camel_to_snake_case

camel_to_snake_case("UpperCamelCase")   # 'upper_camel_case'
```

## What this package does not do

It is a vector library only. It has no command-line program, no game loop,
no rendering and no other vector or matrix types beyond those above.