import json
import os

import numpy as np
import requests

from strassen_algo import Matrix

# Configuration
API_URL = os.getenv("API_URL", "http://localhost:7071/api/MultiUnitMultiplication")
matrix_size = int(os.getenv("MATRIX_SIZE", "4"))  # must be a power of 2
algorithm = os.getenv("ALGORITHM", "strassen")


def main():
    matrix_a = Matrix(matrix_size, randomize=True)
    matrix_b = Matrix(matrix_size, randomize=True)

    print("Matrix A:")
    matrix_a.print()
    print("Matrix B:")
    matrix_b.print()

    payload = {
        "matrix_a": matrix_a.to_rows(),
        "matrix_b": matrix_b.to_rows(),
        "algorithm": algorithm,
    }

    response = requests.post(API_URL, json=payload)

    if response.status_code == 200:
        result = response.json()["result"]
        print("Result Matrix:")
        print(json.dumps(result, indent=2))
        expected = matrix_a.to_numpy() @ matrix_b.to_numpy()
        print("Matches numpy:", bool(np.array_equal(np.asarray(result), expected)))
    else:
        print(f"Request failed with status {response.status_code}: {response.text}")


if __name__ == "__main__":
    main()
