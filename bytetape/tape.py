"""
Byte tape

A growable run of uint8 cells with a single pointer. The cells live in a
numpy buffer that doubles when the pointer walks past its end, so growth is
amortized O(1) per move. Logically the tape holds exactly the cells the
pointer has visited: it starts as one zero cell and gains one zero cell each
time the pointer moves past the last one.
"""

from typing import Optional

import numpy as np

from .errors import TapeOverflow, TapeUnderflow


class Tape:
    def __init__(self, capacity: int = 1, max_cells: Optional[int] = None):
        if max_cells is not None and max_cells < 1:
            raise ValueError("max_cells must be at least 1")
        capacity = max(1, capacity)
        if max_cells is not None:
            capacity = min(capacity, max_cells)
        self._cells = np.zeros(capacity, dtype=np.uint8)
        self._size = 1
        self.pointer = 0
        self.max_cells = max_cells

    def __len__(self):
        return self._size

    def __getitem__(self, index):
        if not 0 <= index < self._size:
            raise IndexError(f"cell {index} is outside the tape (0..{self._size - 1})")
        return int(self._cells[index])

    @property
    def capacity(self) -> int:
        return len(self._cells)

    def move_right(self):
        new_pointer = self.pointer + 1
        if new_pointer >= self._size:
            if self.max_cells is not None and new_pointer >= self.max_cells:
                raise TapeOverflow(self.max_cells)
            if new_pointer >= len(self._cells):
                self._grow(new_pointer + 1)
            self._size = new_pointer + 1
        self.pointer = new_pointer

    def move_left(self):
        if self.pointer == 0:
            raise TapeUnderflow()
        self.pointer -= 1

    def increment(self):
        self._cells[self.pointer] = (int(self._cells[self.pointer]) + 1) & 0xFF

    def decrement(self):
        self._cells[self.pointer] = (int(self._cells[self.pointer]) - 1) & 0xFF

    def read_cell(self) -> int:
        return int(self._cells[self.pointer])

    def write_cell(self, value: int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"cell value must be a byte, got {value}")
        self._cells[self.pointer] = value

    def snapshot(self) -> np.ndarray:
        """Copy of the logical cells, detached from the live buffer."""
        return self._cells[:self._size].copy()

    def _grow(self, needed: int):
        new_capacity = max(needed, 2 * len(self._cells))
        if self.max_cells is not None:
            new_capacity = min(new_capacity, self.max_cells)
        grown = np.zeros(new_capacity, dtype=np.uint8)
        grown[:len(self._cells)] = self._cells
        self._cells = grown

    def __repr__(self):
        return f"Tape(pointer={self.pointer}, cells={self.snapshot().tolist()})"
