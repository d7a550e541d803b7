"""Errors raised while compiling or running a program.

Every failure the interpreter reports derives from ExecutionError so a host
can catch one type. Bracket errors happen before any instruction runs; the
rest stop a run immediately in the failed state.
"""

from typing import Optional


class ExecutionError(Exception):
    """Base class for every compile-time and run-time failure."""


class BracketError(ExecutionError):
    """A loop bracket without a partner, found at instruction ``index``."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(message)


class UnmatchedLoopOpen(BracketError):
    def __init__(self, index: int):
        super().__init__(index, f"loop that starts at instruction {index} has no ending")


class UnmatchedLoopClose(BracketError):
    def __init__(self, index: int):
        super().__init__(index, f"loop ending at instruction {index} has no beginning")


class TapeUnderflow(ExecutionError):
    def __init__(self, instruction_index: Optional[int] = None):
        self.instruction_index = instruction_index
        where = "" if instruction_index is None else f" (instruction {instruction_index})"
        super().__init__(f"cell pointer moved left of cell 0{where}")


class TapeOverflow(ExecutionError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"tape grew past the configured limit of {limit} cells")


class IoError(ExecutionError):
    """Wraps a failure raised by the I/O port; the original exception is the cause."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"I/O port failed: {cause}")
