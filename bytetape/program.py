import logging
from dataclasses import dataclass
from typing import Tuple

from .instructions import Instruction, lex, render
from .jumps import JumpTable, build_jump_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Program:
    """Filtered instructions plus their resolved loop targets."""
    instructions: Tuple[Instruction, ...]
    jumps: JumpTable

    def __len__(self):
        return len(self.instructions)

    @property
    def text(self) -> str:
        return render(self.instructions)


def compile_program(source: str) -> Program:
    """Lex ``source`` and resolve its loops. Raises a BracketError if unbalanced."""
    instructions = lex(source)
    jumps = build_jump_table(instructions)
    logger.debug("compiled %d instructions, %d loops", len(instructions), len(jumps) // 2)
    return Program(instructions, jumps)
