import csv
import json
import os

import numpy as np

from strassen_algo import Matrix


def generate_matrix_pair(size, rng=None):
    if rng is None:
        rng = np.random.default_rng()
    matrix_a = Matrix(size, randomize=True, rng=rng)
    matrix_b = Matrix(size, randomize=True, rng=rng)
    return matrix_a, matrix_b


def save_matrix_pairs_to_csv(file_path, experiments, pairs_per_size=10, seed=None):
    """Write ``pairs_per_size`` random pairs per experiment size as CSV rows.

    Each row is ``size, matrix_a, matrix_b`` with the matrices JSON-encoded as
    lists of rows. Returns the number of rows written.
    """
    rng = np.random.default_rng(seed)
    written = 0
    with open(file_path, mode='w', newline='') as file:
        writer = csv.writer(file)
        writer.writerow(['size', 'matrix_a', 'matrix_b'])
        for exp in experiments:
            size = exp['size']
            for _ in range(pairs_per_size):
                matrix_a, matrix_b = generate_matrix_pair(size, rng)
                writer.writerow([size, json.dumps(matrix_a.to_rows()), json.dumps(matrix_b.to_rows())])
                written += 1
    return written


if __name__ == "__main__":
    seed = os.getenv("DATASET_SEED")
    experiments = [
        {"size": 2},
        {"size": 4},
        {"size": 8},
        {"size": 16},
    ]
    save_matrix_pairs_to_csv("matrix_dataset.csv", experiments,
                             seed=int(seed) if seed is not None else None)
