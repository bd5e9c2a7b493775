# linalg

Small, dependency-free linear algebra helpers for Python. Vectors are plain
sequences of numbers, and every function that builds a vector returns a new
`list` of `float`. Matrices are `Matrix` objects built from lists of rows.
Integer and float inputs can be mixed freely.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Vectors

`linalg.vectors.vector` covers construction, predicates and elementwise
arithmetic:

```python
from linalg.vectors.vector import add, dot, magnitude, normalize, is_parallel

add([1, 2, 3], [4, 5, 6])        # [5.0, 7.0, 9.0]
dot([1, 2, 3], [4, -5, 6])       # 12.0
magnitude([3, 4])                # 5.0
normalize([3, 4])                # [0.6, 0.8]
is_parallel([1, 0, 0], [-3, 0, 0])  # True
```

It also has `subtract`, `negate`, `scale`, `new_vector`, `zeros`,
`standard_basis`, `standard_basis_vector`, `is_zero`, `is_unit`,
`is_orthogonal` and `almost_equal` (componentwise, within 1e-6), and the
constants `ORIGIN_3D`, `UNIT_X`, `UNIT_Y` and `UNIT_Z`.

`linalg.vectors.geometry` holds products, angles, projection and rotation:

```python
from linalg.vectors.geometry import cross, angle_deg, project, rotate_2d

cross([1, 0, 0], [0, 1, 0])      # [0.0, 0.0, 1.0]
angle_deg([1, 0, 0], [0, 1, 0])  # 90.0
project([3, 3, 0], [1, 0, 0])    # [3.0, 0.0, 0.0]
```

along with `angle` (radians), `scalar_product`, `vector_product`, `reflect`,
`rotate_3d` (about a unit axis) and `direction_cosines`.

`linalg.vectors.distance` provides `euclidean_distance`,
`manhattan_distance` and `chebyshev_distance`:

```python
from linalg.vectors.distance import euclidean_distance, manhattan_distance

euclidean_distance([1, 2, 3], [4, 6, 3])   # 5.0
manhattan_distance([1, 2, 3], [4, 6, 3])   # 7.0
```

`linalg.vectors.coordinates` converts between Cartesian and polar,
spherical and cylindrical coordinates:

```python
from linalg.vectors.coordinates import cartesian_to_polar, polar_to_cartesian

cartesian_to_polar([3, 4])       # (5.0, 0.9272952180016122)
```

Angles are in radians; `cartesian_to_spherical` returns `(rho, theta, phi)`
with `phi` measured from the positive z axis.

## Matrices

`linalg.matrix.base.Matrix` is a rectangular matrix of floats. Ragged rows
raise `ValueError`.

```python
from linalg.matrix.base import Matrix, is_square, validate
from linalg.matrix.rank import rank

m = Matrix([[1, 2], [3, 4]])
m.rows, m.cols        # (2, 2)
m[1, 0]               # 3.0
m[0]                  # (1.0, 2.0)
m[1, 0] = 5           # bounds-checked; IndexError when out of range
m == [[1, 2], [5, 4]] # True
m.tolist()            # [[1.0, 2.0], [5.0, 4.0]]
Matrix.zeros(3, 2)    # a 3x2 zero matrix

print(m)
# {
#   [1, 2],
#   [5, 4]
# }
print(f"{m:.2f}")     # fixed-point cells with two decimals

is_square([[1, 2], [3, 4]])             # True
rank([[1, 2, 3], [2, 4, 6], [3, 6, 9]]) # 1
```

`validate` raises `ValueError` naming the first row whose length differs.
`rank` accepts a `Matrix` or any list of rows and returns 0 for an empty
matrix.

## What this package does not do

Matrix work here stops at the `Matrix` type, shape checks and `rank`. There
is no matrix addition, multiplication, transpose, trace or identity
constructor, no determinant, inverse or matrix power, no LU or QR
decomposition and no eigenvalue computation. There is no command-line tool.