"""Validation of partially filled 9x9 sudoku boards."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_SIZE = 9
_DIGITS = frozenset("123456789")


def _no_repeats(cells: Iterable[str]) -> bool:
    seen: set[str] = set()
    for cell in cells:
        if cell == ".":
            continue
        if cell in seen:
            return False
        seen.add(cell)
    return True


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return True if no row, column or 3x3 box repeats a digit.

    Cells hold a digit "1"-"9" or "." for empty.
    """
    if len(board) != _SIZE or any(len(row) != _SIZE for row in board):
        raise ValueError("board must be 9x9")
    for row in board:
        for cell in row:
            if cell != "." and cell not in _DIGITS:
                raise ValueError(f"invalid cell {cell!r}")

    if not all(_no_repeats(row) for row in board):
        return False
    if not all(_no_repeats(column) for column in zip(*board)):
        return False
    for top in range(0, _SIZE, 3):
        for left in range(0, _SIZE, 3):
            box = (board[r][c] for r in range(top, top + 3) for c in range(left, left + 3))
            if not _no_repeats(box):
                return False
    return True