from strassen_algo.matrix import Matrix


def split_quadrants(matrix):
    """Return the (top-left, top-right, bottom-left, bottom-right) quadrants."""
    mid = matrix.size // 2
    return (
        matrix.partition(0, 0),
        matrix.partition(0, mid),
        matrix.partition(mid, 0),
        matrix.partition(mid, mid),
    )


def join_quadrants(C11, C12, C21, C22):
    merged = Matrix(C11.size * 2)
    return merged.combine(C11, C12, C21, C22)


if __name__ == "__main__":
    matrix = Matrix.from_rows([[i + j * 4 for i in range(4)] for j in range(4)])
    blocks = split_quadrants(matrix)
    merged = join_quadrants(*blocks)
    print("Original Matrix:")
    matrix.print()
    for name, block in zip(("M11", "M12", "M21", "M22"), blocks):
        print(f"{name}:")
        block.print()
    print("Merged Matrix:")
    merged.print()
