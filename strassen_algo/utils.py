import logging
import os
import numbers

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_logger(name: str) -> logging.Logger:
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
        lg.addHandler(h)
        lg.setLevel(LOG_LEVEL)
    return lg


def is_power_of_two(n) -> bool:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        return False
    return n > 0 and n & (n - 1) == 0


def _check_square(name: str, matrix) -> int:
    if not isinstance(matrix, list) or not matrix:
        raise ValueError(f"{name} must be a non-empty list of rows.")
    n = len(matrix)
    for r, row in enumerate(matrix):
        if not isinstance(row, list) or len(row) != n:
            raise ValueError(f"{name} must be square: row {r} does not have {n} entries.")
        for v in row:
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise ValueError(f"{name} row {r} holds a non-integer entry {v!r}.")
    if not is_power_of_two(n):
        raise ValueError(f"{name} size {n} is not a power of 2.")
    return n


def validate_matrices(matrix_a, matrix_b, max_dim=None):
    """Check two row lists before they are turned into Matrix objects.

    Both must be non-empty, square, integer-valued, of the same power-of-two
    size and, when ``max_dim`` is given, no larger than it. Returns the size.
    """
    if not matrix_a or not matrix_b:
        raise ValueError("Input matrices cannot be empty.")
    n = _check_square("matrix_a", matrix_a)
    m = _check_square("matrix_b", matrix_b)
    if n != m:
        raise ValueError(f"Matrix sizes differ: {n}x{n} vs {m}x{m}.")
    if max_dim is not None and n > max_dim:
        raise ValueError(f"Matrix size {n} exceeds the limit of {max_dim}.")
    return n
