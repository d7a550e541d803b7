"""
Interpreter entry points.

run() is the core contract: compile the source, execute it against an I/O
port and either return the halted RunResult or raise an ExecutionError.
BrainfuckInterpreter wraps it for callers that work with text rather than
bytes.
"""

from typing import Optional

from .config import InterpreterConfig
from .executor import Executor, RunResult
from .io_port import BufferPort, IOPort
from .program import compile_program


def run(source: str, io_port: IOPort, *, config: Optional[InterpreterConfig] = None) -> RunResult:
    """Execute ``source`` to completion, exchanging bytes through ``io_port``."""
    config = config or InterpreterConfig()
    program = compile_program(source)
    executor = Executor(program, io_port, tape=config.make_tape())
    return executor.run()


class BrainfuckInterpreter:
    """Text-in, text-out interpreter.

    Input characters and output bytes are mapped one to one through latin-1,
    so chr(65) in gives byte 65 to the program and byte 65 out gives "A".
    """

    def __init__(self, max_cells: Optional[int] = None):
        self.config = InterpreterConfig(max_cells=max_cells)
        self.output = []
        self.input_reads = 0
        self.output_writes = 0
        self.last_result: Optional[RunResult] = None

    def run(self, code: str, input_data: str = "") -> str:
        """Execute code with optional input data and return its output."""
        port = BufferPort(input_data.encode("latin-1"))
        self.output = []
        try:
            self.last_result = run(code, port, config=self.config)
        finally:
            # keep whatever was written before a failure
            self.output = list(port.output.decode("latin-1"))
            self.input_reads = port.input_reads
            self.output_writes = port.output_writes
        return "".join(self.output)
