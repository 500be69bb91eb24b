import math


class SudokuJudge:
    """
    Judge Sudoku board state.

    - Works on any perfect-square board size (4x4, 9x9, 16x16, ...)
    - Allows incomplete boards (zeros are treated as empty cells)
    - Checks:
        * Row validity
        * Column validity
        * Box validity (2x2 for 4x4, 3x3 for 9x9)
    """

    @staticmethod
    def _has_duplicates(values):
        nums = [v for v in values if v != 0]
        return len(nums) != len(set(nums))

    @staticmethod
    def is_valid(board):
        size = len(board)
        block = math.isqrt(size)

        for row in board:
            if SudokuJudge._has_duplicates(row):
                return False

        for c in range(size):
            if SudokuJudge._has_duplicates(board[r][c] for r in range(size)):
                return False

        for br in range(0, size, block):
            for bc in range(0, size, block):
                box = [
                    board[r][c] for r in range(br, br + block) for c in range(bc, bc + block)
                ]
                if SudokuJudge._has_duplicates(box):
                    return False

        return True

    @staticmethod
    def is_complete(board):
        size = len(board)
        filled = all(1 <= v <= size for row in board for v in row)
        return filled and SudokuJudge.is_valid(board)
