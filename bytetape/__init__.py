"""bytetape: an interpreter for the eight-command byte tape language."""

from .config import ConfigError, InterpreterConfig, load_config
from .errors import (
    BracketError,
    ExecutionError,
    IoError,
    TapeOverflow,
    TapeUnderflow,
    UnmatchedLoopClose,
    UnmatchedLoopOpen,
)
from .executor import Executor, RunResult, State
from .instructions import Instruction, lex, render
from .interpreter import BrainfuckInterpreter, run
from .io_port import BufferPort, IOPort, StreamPort
from .jumps import JumpTable, build_jump_table
from .program import Program, compile_program
from .runner import run_bytes, run_once
from .tape import Tape

__version__ = "0.1.0"
