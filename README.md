# cgl

A small, dependency-free toolkit of building blocks for computer-graphics
code, written in pure Python.

## Modules

- `cgl.misc`: the constants `PI`, `EPS_D`, `EPS_F`, `INF_D` and `INF_F`,
  angle conversion (`radians`, `degrees`), `clamp`, `resolve_path`, and the
  input enums `MouseButton`, `Key`, `EventType` and `Modifier`.
  `resolve_path` returns an absolute path. On POSIX it also resolves
  symbolic links and raises `FileNotFoundError` for a missing file.
- `cgl.codec`: `base64_encode(data)` returns padded base64 text.
  `base64_decode(encoded)` returns bytes and is lenient. It stops quietly at
  the first `=` or at any character outside the base64 alphabet.
- `cgl.color`: `Color`, a frozen RGB colour.
  - Supports addition, multiplication by another colour (per channel) or by
    a scalar, and indexing.
  - Provides the constants `Color.WHITE` and `Color.BLACK`.
  - `Color.from_bytes` builds a colour from 8-bit channel values.
  - `Color.from_hex` parses `rrggbb`, with or without a leading `#`.
  - `Color.to_hex` writes each clamped channel as unpadded hex digits.
- `cgl.vector2d`: `Vector2D`, with arithmetic, `norm`, `norm2` and `unit`,
  plus the functions `dot` and `cross`.
- `cgl.vector4d`: `Vector4D`, with arithmetic and item access, plus:
  - `filled`, `rcp`, `norm`, `norm2` and `normalize`;
  - `unit`, which scales x, y and z by the reciprocal 4D length and sets w
    to zero;
  - the function `dot`.
- `cgl.matrix3x3`: `Matrix3x3`, stored column-major and indexed as
  `A[i, j]` (row, column). `A[j]` gives column j.
  - Methods: `identity`, `cross_product`, `zero`, `det`, `norm`, `column`,
    `transpose` and `inv`.
  - Operators: unary minus, `+`, `-`, `*` (scalar, matrix or 3-vector) and
    `/` (scalar).
  - The function `outer` gives an outer product.
  - The no-argument constructor gives the identity matrix.
- `cgl.matrix4x4`: `Matrix4x4`, with the same interface except
  `cross_product`.
  - Columns are `Vector4D` values.
  - The no-argument constructor gives the zero matrix.
  - `outer` takes two `Vector4D` values.
- `cgl.quaternion`: `Quaternion`, a `Vector4D` whose default is the identity
  `(0, 0, 0, 1)`.
  - Constructors: `from_axis_angle`, `from_scaled_axis` and `from_euler`.
  - Operations: `conjugate`, `inverse`, `product` / `*`, `matrix`,
    `right_matrix`, `rotation_matrix`, `scaled_axis`, `rotated_vector`,
    `euler`, `decouple_z` and `slerp`.
  - There is also a module-level `slerp(q0, q1, t)`.
  - 3-vector arguments may be any object with `x`, `y` and `z` attributes,
    or any 3-element sequence.
  - 3-vector results are tuples.
- `cgl.osdtext`: `OSDText` keeps track of lines of on-screen text
  (`OSDLine`) in GL screen space, where both axes run over [-1, 1].
  - `add_line` returns a new id. Sizes are doubled when `use_hdpi` is true.
  - `set_anchor`, `set_text`, `set_size`, `set_color` and `del_line` do
    nothing for an unknown id.
  - `line(id)` raises `KeyError` for an unknown id.
  - `clear` removes every line.
  - `resize(w, h)` updates the scale factors `sx` and `sy`.
  - The object can be iterated and supports `len`.

## Install

```
pip install .
```

Install the test tools with `pip install ".[test]"`, then run `pytest`.

## Examples

```python
from cgl.color import Color

c = Color.from_hex("#ff8000")
print(c.to_hex())                        # ff800 (channels are not zero-padded)
print(c * 0.5 + Color(0.1, 0.1, 0.1))
```

```python
from cgl.matrix3x3 import Matrix3x3

m = Matrix3x3(2, 0, 0,
              0, 3, 0,
              0, 0, 4)
print(m.det())       # 24.0
print(m.inv())
```

```python
import math
from cgl.quaternion import Quaternion

q = Quaternion.from_axis_angle((0, 0, 1), math.pi / 2)
print(q.rotation_matrix())
print(q.rotated_vector((1, 0, 0)))       # approximately (0, 1, 0)
```

```python
from cgl.codec import base64_decode, base64_encode

text = base64_encode(b"hello")
assert base64_decode(text) == b"hello"
```

```python
from cgl.color import Color
from cgl.osdtext import OSDText

osd = OSDText(use_hdpi=False)
osd.resize(640, 480)
line = osd.add_line(-0.95, 0.85, "The Quick Brown Fox", 26, Color(1, 1, 1))
osd.set_text(line, "Hello")
print(osd.line(line).text, len(osd))
```

## What it does not do

The package does no drawing or display of any kind. It has no window,
viewer or renderer, no event loop and no font loading. It has no 3D vector
type of its own. `OSDText` only records the lines and their properties; it
does not put them on a screen.