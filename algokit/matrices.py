"""Operations on matrices given as lists of rows."""

from typing import List, Sequence, Tuple

Matrix = Sequence[Sequence[int]]


class MatrixShapeError(ValueError):
    """Raised when a matrix is ragged or the shapes of operands do not fit."""


def _shape(matrix: Matrix) -> Tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise MatrixShapeError("rows of the matrix differ in length")
    return rows, cols


def spiral_order(matrix: Matrix) -> List[int]:
    """Return the elements read clockwise in a spiral from the top-left corner."""
    rows, cols = _shape(matrix)
    result: List[int] = []
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def transpose(matrix: Matrix) -> List[List[int]]:
    """Return the transpose of ``matrix``."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def multiply(a: Matrix, b: Matrix) -> List[List[int]]:
    """Return the matrix product ``a`` times ``b``."""
    _, inner_a = _shape(a)
    inner_b, _ = _shape(b)
    if inner_a != inner_b:
        raise MatrixShapeError(
            f"cannot multiply: {inner_a} columns against {inner_b} rows"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def search_sorted_matrix(matrix: Matrix, key: int) -> bool:
    """Return whether ``key`` is in a matrix whose rows and columns are sorted."""
    rows, cols = _shape(matrix)
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == key:
            return True
        if value > key:
            col -= 1
        else:
            row += 1
    return False