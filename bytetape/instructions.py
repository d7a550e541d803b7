"""
Instruction set and lexer.

The language has only 8 commands:
    >   Move the cell pointer to the right
    <   Move the cell pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.
"""

from enum import Enum
from typing import Iterable, Tuple


class Instruction(Enum):
    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    OUTPUT = "."
    INPUT = ","
    LOOP_OPEN = "["
    LOOP_CLOSE = "]"

    @property
    def symbol(self) -> str:
        return self.value


SYMBOLS = {ins.value: ins for ins in Instruction}
COMMANDS = "".join(SYMBOLS)


def lex(source: str) -> Tuple[Instruction, ...]:
    """Keep only the command symbols of ``source``, in order, as Instructions."""
    return tuple(SYMBOLS[c] for c in source if c in SYMBOLS)


def render(instructions: Iterable[Instruction]) -> str:
    """Inverse of lex: the bare command text with comments stripped."""
    return "".join(ins.value for ins in instructions)
