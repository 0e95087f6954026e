from strassen_algo.matrix import Matrix, RANDOM_HIGH, RANDOM_LOW
from strassen_algo.split import join_quadrants, split_quadrants
from strassen_algo.strassen_module import add, multiply, strassen, subtract
from strassen_algo.utils import get_logger, is_power_of_two, validate_matrices

__all__ = [
    "Matrix",
    "RANDOM_LOW",
    "RANDOM_HIGH",
    "add",
    "subtract",
    "multiply",
    "strassen",
    "split_quadrants",
    "join_quadrants",
    "get_logger",
    "is_power_of_two",
    "validate_matrices",
]
