"""
Pytest configuration and fixtures for the matrix multiplication tests.

Provides a seeded random generator, a few fixed matrices and an independent
triple-loop reference product to check the recursive algorithms against.
"""

import numpy as np
import pytest

from strassen_algo import Matrix


@pytest.fixture
def rng():
    """Seeded generator so random matrices are reproducible per test."""
    return np.random.default_rng(1234)


@pytest.fixture
def small_pair():
    """The 2x2 example pair whose product is [[19, 22], [43, 50]]."""
    A = Matrix.from_rows([[1, 2], [3, 4]])
    B = Matrix.from_rows([[5, 6], [7, 8]])
    return A, B


def reference_product(A, B):
    """Plain sum-of-products, independent of partition/combine."""
    n = A.size
    rows = []
    for i in range(n):
        row = []
        for j in range(n):
            total = 0
            for k in range(n):
                total += A.at(i, k) * B.at(k, j)
            row.append(total)
        rows.append(row)
    return Matrix.from_rows(rows)


def assert_matrix_equal(actual, expected):
    assert actual.size == expected.size, f"size {actual.size} != {expected.size}"
    assert actual == expected, f"Expected:\n{expected}Got:\n{actual}"
