"""Matrix rank by Gaussian elimination with partial pivoting."""

from collections.abc import Iterable, Sequence

from linalg.matrix.base import Matrix, Number, validate

MatrixLike = Matrix | Iterable[Sequence[Number]]

_EPSILON = 1e-10


def rank(m: MatrixLike) -> int:
    """Return the number of linearly independent rows of ``m``; 0 for an empty matrix."""
    mat = [[float(x) for x in row] for row in m]
    validate(mat)
    if not mat:
        return 0

    n_rows, n_cols = len(mat), len(mat[0])
    row = 0
    for col in range(n_cols):
        if row >= n_rows:
            break
        pivot_row = max(range(row, n_rows), key=lambda i: abs(mat[i][col]))
        if abs(mat[pivot_row][col]) < _EPSILON:
            continue
        mat[row], mat[pivot_row] = mat[pivot_row], mat[row]
        pivot = mat[row]
        for i in range(row + 1, n_rows):
            factor = mat[i][col] / pivot[col]
            mat[i] = [
                x - factor * p if j >= col else x
                for j, (x, p) in enumerate(zip(mat[i], pivot))
            ]
        row += 1

    return sum(1 for r in mat if any(abs(x) > _EPSILON for x in r))