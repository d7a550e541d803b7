"""
Fetch-execute loop.

An Executor owns one tape and one instruction pointer and runs a compiled
Program against an I/O port. Loops are pure pointer jumps through the
program's jump table, so nesting depth never touches the Python stack.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .errors import ExecutionError, IoError, TapeUnderflow
from .instructions import Instruction
from .io_port import IOPort
from .program import Program
from .tape import Tape

logger = logging.getLogger(__name__)


class State(Enum):
    RUNNING = "running"
    HALTED = "halted"
    FAILED = "failed"


@dataclass
class RunResult:
    state: State
    steps: int
    tape: np.ndarray
    pointer: int


class Executor:
    def __init__(self, program: Program, io_port: IOPort, tape: Optional[Tape] = None):
        self.program = program
        self.instructions = program.instructions
        self.jumps = program.jumps
        self.io_port = io_port
        self.tape = tape if tape is not None else Tape()
        self.instruction_pointer = 0
        self.steps = 0
        self.error: Optional[ExecutionError] = None

    @property
    def state(self) -> State:
        if self.error is not None:
            return State.FAILED
        if self.instruction_pointer >= len(self.instructions):
            return State.HALTED
        return State.RUNNING

    def step(self) -> State:
        """Execute one instruction and return the resulting state.

        A failing instruction moves the executor to FAILED and re-raises the
        error. Stepping a halted or failed executor does nothing.
        """
        if self.state is not State.RUNNING:
            return self.state
        try:
            self._execute()
        except ExecutionError as exc:
            self.error = exc
            logger.warning("execution failed at instruction %d after %d steps: %s",
                           self.instruction_pointer, self.steps, exc)
            raise
        self.steps += 1
        return self.state

    def run(self) -> RunResult:
        """Step until the program halts. Errors propagate to the caller."""
        if self.error is not None:
            raise self.error
        while self.step() is State.RUNNING:
            pass
        logger.debug("halted after %d steps, tape has %d cells", self.steps, len(self.tape))
        return self.result()

    def result(self) -> RunResult:
        return RunResult(self.state, self.steps, self.tape.snapshot(), self.tape.pointer)

    def _execute(self):
        ip = self.instruction_pointer
        cmd = self.instructions[ip]
        tape = self.tape

        if cmd is Instruction.MOVE_RIGHT:
            tape.move_right()

        elif cmd is Instruction.MOVE_LEFT:
            try:
                tape.move_left()
            except TapeUnderflow:
                raise TapeUnderflow(ip) from None

        elif cmd is Instruction.INCREMENT:
            tape.increment()

        elif cmd is Instruction.DECREMENT:
            tape.decrement()

        elif cmd is Instruction.OUTPUT:
            try:
                self.io_port.write_byte(tape.read_cell())
            except (OSError, ValueError) as exc:
                raise IoError(exc) from exc

        elif cmd is Instruction.INPUT:
            try:
                value = self.io_port.read_byte()
                # end of input stores 0; a non-byte value is a port failure
                tape.write_cell(0 if value is None else value)
            except (OSError, ValueError) as exc:
                raise IoError(exc) from exc

        elif cmd is Instruction.LOOP_OPEN:
            if tape.read_cell() == 0:
                self.instruction_pointer = self.jumps[ip] + 1
                return

        elif cmd is Instruction.LOOP_CLOSE:
            if tape.read_cell() != 0:
                # back to the '[' so it re-tests the cell
                self.instruction_pointer = self.jumps[ip]
                return

        self.instruction_pointer = ip + 1
