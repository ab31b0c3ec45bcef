"""矩陣轉換模組"""

from mtxconv.core.loader import Matrix


def transpose(matrix: Matrix) -> Matrix:
    """轉置矩陣

    輸入必須是矩形（由 validate_matrix 保證）。
    零列或零欄的矩陣轉置後為空矩陣。
    """
    if not matrix or not matrix[0]:
        return []

    n_cols = len(matrix[0])
    assert all(len(row) == n_cols for row in matrix), "轉置前矩陣必須為矩形"

    transposed: Matrix = [[] for _ in range(n_cols)]
    for row in matrix:
        for value, target in zip(row, transposed):
            target.append(value)
    return transposed


def apply_transform(matrix: Matrix, shall_transpose: bool) -> Matrix:
    """依選項轉換矩陣（未要求轉置時原樣返回）"""
    if shall_transpose:
        return transpose(matrix)
    return matrix
