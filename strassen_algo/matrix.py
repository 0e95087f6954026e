import numbers

import numpy as np

from strassen_algo.utils import is_power_of_two

RANDOM_LOW = -9
RANDOM_HIGH = 9


class Matrix:
    """Square integer matrix with a power-of-two side.

    Elements live in one flat row-major ``int64`` buffer; element ``(r, c)``
    sits at offset ``r * size + c``. Arithmetic and ``partition`` return new
    matrices, ``combine`` is the only method that writes into ``self``.
    """

    __slots__ = ("_size", "_data")

    def __init__(self, size, randomize=False, rng=None):
        if not is_power_of_two(size):
            raise ValueError(f"Matrix size must be a power of 2, got {size!r}")
        self._size = int(size)
        self._data = np.zeros(self._size * self._size, dtype=np.int64)
        if randomize:
            self.randomize(rng)

    # ---------- construction helpers ----------
    @classmethod
    def from_rows(cls, rows):
        n = len(rows)
        m = cls(n)
        for r, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"Row {r} has {len(row)} entries, expected {n}")
            for v in row:
                if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                    raise ValueError(f"Row {r} holds a non-integer entry {v!r}")
        try:
            m._data[:] = np.asarray(rows, dtype=np.int64).reshape(-1)
        except OverflowError as e:
            raise ValueError(f"Matrix entries must fit in int64: {e}") from e
        return m

    @classmethod
    def identity(cls, size):
        m = cls(size)
        m._grid()[np.arange(size), np.arange(size)] = 1
        return m

    def randomize(self, rng=None):
        if rng is None:
            rng = np.random.default_rng()
        self._data[:] = rng.integers(RANDOM_LOW, RANDOM_HIGH, size=self._data.size,
                                     endpoint=True, dtype=np.int64)
        return self

    # ---------- storage & indexing ----------
    @property
    def size(self) -> int:
        return self._size

    @property
    def data(self) -> tuple:
        return tuple(int(v) for v in self._data)

    def __len__(self):
        return self._data.size

    def index(self, r: int, c: int) -> int:
        if r < 0 or c < 0 or r >= self._size or c >= self._size:
            raise IndexError(f"Matrix.index({r}, {c}): index out of range for size {self._size}")
        return r * self._size + c

    def at(self, r: int, c: int) -> int:
        return int(self._data[self.index(r, c)])

    def set(self, r: int, c: int, value: int):
        self._data[self.index(r, c)] = value

    def __getitem__(self, key):
        r, c = key
        return self.at(r, c)

    def __setitem__(self, key, value):
        r, c = key
        self.set(r, c, value)

    def _grid(self) -> np.ndarray:
        # 2-D view over the flat buffer, never handed out
        return self._data.reshape(self._size, self._size)

    # ---------- partition / combine ----------
    def partition(self, row_start: int, col_start: int) -> "Matrix":
        if self._size == 1:
            raise ValueError("Cannot partition a 1x1 matrix")
        s = self._size // 2
        if (row_start < 0 or col_start < 0
                or row_start + s > self._size or col_start + s > self._size):
            raise IndexError(
                f"Matrix.partition({row_start}, {col_start}): block of size {s} "
                f"falls outside a {self._size}x{self._size} matrix")
        sub = Matrix(s)
        sub._grid()[:, :] = self._grid()[row_start:row_start + s, col_start:col_start + s]
        return sub

    def combine(self, r11: "Matrix", r12: "Matrix", r21: "Matrix", r22: "Matrix") -> "Matrix":
        k = self._size // 2
        for q in (r11, r12, r21, r22):
            if k == 0 or q.size != k:
                raise ValueError(
                    f"Cannot combine quadrants of size {q.size} into a matrix of size {self._size}")
        g = self._grid()
        g[:k, :k] = r11._grid();  g[:k, k:] = r12._grid()
        g[k:, :k] = r21._grid();  g[k:, k:] = r22._grid()
        return self

    # ---------- elementwise ops ----------
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._size != other._size:
            raise ValueError("Cannot add matrices of different size")
        result = Matrix(self._size)
        result._data[:] = self._data + other._data
        return result

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._size != other._size:
            raise ValueError("Cannot subtract matrices of different size")
        result = Matrix(self._size)
        result._data[:] = self._data - other._data
        return result

    # ---------- multiplication ----------
    def multiply(self, other: "Matrix") -> "Matrix":
        from strassen_algo.strassen_module import multiply
        return multiply(self, other)

    def strassen(self, other: "Matrix", threshold: int = 1) -> "Matrix":
        from strassen_algo.strassen_module import strassen
        return strassen(self, other, threshold=threshold)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._size != other._size:
            raise ValueError("Cannot multiply matrices of different size")
        return self.strassen(other)

    # ---------- comparison / conversion ----------
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._size == other._size and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def to_rows(self) -> list:
        return self._grid().tolist()

    def to_numpy(self) -> np.ndarray:
        return self._grid().copy()

    # ---------- display ----------
    def format(self) -> str:
        lines = ["".join(f"{v:>4} " for v in row) for row in self.to_rows()]
        return "\n".join(lines) + "\n\n"

    def print(self):
        print(self.format(), end="")

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"Matrix(size={self._size}, rows={self.to_rows()!r})"
