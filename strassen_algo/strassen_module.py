import logging

import numpy as np

from strassen_algo.matrix import Matrix
from strassen_algo.split import join_quadrants, split_quadrants

logger = logging.getLogger("strassen_algo")


def _check_operands(A, B, what):
    if not isinstance(A, Matrix) or not isinstance(B, Matrix):
        raise TypeError(f"Cannot {what} non-Matrix operands")
    if A.size != B.size:
        raise ValueError(f"Cannot {what} matrices of different size ({A.size} vs {B.size})")


def add(A, B):
    return A + B


def subtract(A, B):
    return A - B


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """Recursive block multiply: eight half-size products per level."""
    _check_operands(A, B, "multiply")
    return _multiply_recursive(A, B, 0)


def _multiply_recursive(A: Matrix, B: Matrix, depth: int) -> Matrix:
    n = A.size
    if n == 1:
        result = Matrix(1)
        np.multiply(A._data, B._data, out=result._data)
        return result

    logger.debug(f"[depth={depth}] multiply split n={n} -> {n // 2}")
    A11, A12, A21, A22 = split_quadrants(A)
    B11, B12, B21, B22 = split_quadrants(B)

    C11 = add(_multiply_recursive(A11, B11, depth+1), _multiply_recursive(A12, B21, depth+1))
    C12 = add(_multiply_recursive(A11, B12, depth+1), _multiply_recursive(A12, B22, depth+1))
    C21 = add(_multiply_recursive(A21, B11, depth+1), _multiply_recursive(A22, B21, depth+1))
    C22 = add(_multiply_recursive(A21, B12, depth+1), _multiply_recursive(A22, B22, depth+1))

    return join_quadrants(C11, C12, C21, C22)


def strassen(A: Matrix, B: Matrix, threshold: int = 1) -> Matrix:
    """Strassen's seven-product multiply.

    Sub-problems of size ``threshold`` or smaller are handed to the recursive
    block multiply; with the default of 1 only the scalar base case is.
    """
    _check_operands(A, B, "multiply")
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 1:
        raise ValueError(f"threshold must be a positive integer, got {threshold!r}")
    return _strassen_recursive(A, B, threshold, 0)


def _strassen_recursive(A: Matrix, B: Matrix, threshold: int, depth: int) -> Matrix:
    n = A.size
    if n <= threshold:
        logger.debug(f"[depth={depth}] base n={n}")
        return _multiply_recursive(A, B, depth)

    logger.debug(f"[depth={depth}] split n={n} -> {n // 2}")
    A11, A12, A21, A22 = split_quadrants(A)
    B11, B12, B21, B22 = split_quadrants(B)

    P1 = _strassen_recursive(A11,                subtract(B12, B22), threshold, depth+1)
    P2 = _strassen_recursive(add(A11, A12),      B22,                threshold, depth+1)
    P3 = _strassen_recursive(add(A21, A22),      B11,                threshold, depth+1)
    P4 = _strassen_recursive(A22,                subtract(B21, B11), threshold, depth+1)
    P5 = _strassen_recursive(add(A11, A22),      add(B11, B22),      threshold, depth+1)
    P6 = _strassen_recursive(subtract(A12, A22), add(B21, B22),      threshold, depth+1)
    P7 = _strassen_recursive(subtract(A11, A21), add(B11, B12),      threshold, depth+1)

    C11 = add(subtract(add(P5, P4), P2), P6)
    C12 = add(P1, P2)
    C21 = add(P3, P4)
    C22 = subtract(subtract(add(P5, P1), P3), P7)

    return join_quadrants(C11, C12, C21, C22)
