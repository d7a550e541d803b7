from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from .errors import UnmatchedLoopClose, UnmatchedLoopOpen
from .instructions import Instruction


class JumpTable(Mapping[int, int]):
    """Read-only mapping between matched loop brackets, in both directions.

    ``table[open_index]`` is the matching close index and
    ``table[close_index]`` is the matching open index.
    """

    def __init__(self, pairs: Dict[int, int]):
        self._targets = MappingProxyType(dict(pairs))

    def __getitem__(self, index: int) -> int:
        return self._targets[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def pairs(self) -> Tuple[Tuple[int, int], ...]:
        """(open, close) pairs sorted by open index."""
        return tuple(sorted((i, j) for i, j in self._targets.items() if i < j))

    def __repr__(self) -> str:
        return f"JumpTable({list(self.pairs())})"


def build_jump_table(instructions: Sequence[Instruction]) -> JumpTable:
    """Pair every "[" with its "]" by instruction index.

    Raises UnmatchedLoopClose at the first "]" with nothing open, or
    UnmatchedLoopOpen at the earliest "[" left open at the end.
    """
    jump_table: Dict[int, int] = {}
    stack = []

    for i, ins in enumerate(instructions):
        if ins is Instruction.LOOP_OPEN:
            stack.append(i)
        elif ins is Instruction.LOOP_CLOSE:
            if not stack:
                raise UnmatchedLoopClose(i)
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    if stack:
        # bottom of the stack is the earliest open that never closed
        raise UnmatchedLoopOpen(stack[0])

    return JumpTable(jump_table)
