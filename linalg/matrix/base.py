"""The dense float matrix type and shape checks shared by matrix operations."""

import math
import re
from collections.abc import Iterable, Iterator, Sequence
from decimal import Decimal

Number = int | float

_SPEC = re.compile(r"(?:\.(\d+))?([vsf]?)")
_DEFAULT_PRECISION = 4


def validate(m: Iterable[Sequence[Number]]) -> None:
    """Raise ValueError if the rows of ``m`` do not all have the same length."""
    lengths = [len(row) for row in m]
    if not lengths:
        return
    expected = lengths[0]
    for i, length in enumerate(lengths):
        if length != expected:
            raise ValueError(
                f"inconsistent row length at row {i}: expected {expected}, got {length}"
            )


def is_square(m: Iterable[Sequence[Number]]) -> bool:
    """Return True if ``m`` is non-empty and has as many rows as columns in its first row."""
    rows = list(m)
    return bool(rows) and len(rows) == len(rows[0])


def _plain(x: float) -> str:
    """Render a float in the shortest form, switching to exponent notation when needed."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    sign, digits, exponent = Decimal(repr(x)).as_tuple()
    prefix = "-" if sign else ""
    text = "".join(str(d) for d in digits).rstrip("0")
    if not text:
        return prefix + "0"
    point = len(digits) + exponent
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= len(text):
        return prefix + text + "0" * (point - len(text))
    return f"{prefix}{text[:point]}.{text[point:]}"


class Matrix:
    """A rectangular matrix of floats stored row by row."""

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Iterable[Iterable[Number]] = ()) -> None:
        rows = [list(row) for row in data]
        validate(rows)
        self._data: list[list[float]] = [[float(x) for x in row] for row in rows]

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """Return a ``rows`` x ``cols`` zero matrix; empty if either dimension is zero."""
        if rows < 0 or cols < 0:
            raise ValueError(
                f"matrix dimensions cannot be negative: got {rows}×{cols}"
            )
        if rows == 0 or cols == 0:
            return cls()
        return cls([0.0] * cols for _ in range(rows))

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._data)

    @property
    def cols(self) -> int:
        """Number of columns, 0 for an empty matrix."""
        return len(self._data[0]) if self._data else 0

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._data):
            raise IndexError(
                f"row index {row} out of bounds for matrix with {len(self._data)} rows"
            )

    def _check_cell(self, row: int, col: int) -> None:
        self._check_row(row)
        width = len(self._data[row])
        if not 0 <= col < width:
            raise IndexError(
                f"column index {col} out of bounds for row {row} with {width} columns"
            )

    def __getitem__(self, index: int | tuple[int, int]) -> float | tuple[float, ...]:
        if isinstance(index, tuple):
            row, col = index
            self._check_cell(row, col)
            return self._data[row][col]
        self._check_row(index)
        return tuple(self._data[index])

    def __setitem__(self, index: tuple[int, int], value: Number) -> None:
        if not isinstance(index, tuple):
            raise TypeError("matrix elements are set with a (row, column) index")
        row, col = index
        self._check_cell(row, col)
        self._data[row][col] = float(value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self._data == other._data
        if not isinstance(other, Iterable) or isinstance(other, (str, bytes)):
            return NotImplemented
        try:
            other_rows = [[float(x) for x in row] for row in other]
        except (TypeError, ValueError):
            return NotImplemented
        return self._data == other_rows

    def __format__(self, spec: str) -> str:
        if not self._data:
            return "[]"
        match = _SPEC.fullmatch(spec)
        if match is None:
            raise ValueError(f"unsupported format specification {spec!r} for Matrix")
        precision = (
            int(match.group(1)) if match.group(1) is not None else _DEFAULT_PRECISION
        )
        fixed = match.group(2) == "f"

        max_cols = max(len(row) for row in self._data)
        widths = [0] * max_cols
        for row in self._data:
            for j, value in enumerate(row):
                widths[j] = max(widths[j], len(_plain(value)))

        def cell(value: float, width: int) -> str:
            if fixed and math.isfinite(value):
                return f"{value:{width}.{precision}f}"
            return _plain(value).rjust(width)

        lines = [
            "  [" + ", ".join(cell(v, w) for v, w in zip(row, widths)) + "]"
            for row in self._data
        ]
        return "{\n" + ",\n".join(lines) + "\n}"

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"

    def tolist(self) -> list[list[float]]:
        """Return the elements as a new list of row lists."""
        return [list(row) for row in self._data]