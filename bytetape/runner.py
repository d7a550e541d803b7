from typing import Optional, Tuple

from .config import InterpreterConfig
from .errors import ExecutionError
from .executor import RunResult
from .interpreter import run
from .io_port import BufferPort


def run_bytes(code: str, input_data: bytes = b"",
              config: Optional[InterpreterConfig] = None) -> Tuple[bytes, RunResult]:
    """Execute code over an in-memory port. Returns (output, result)."""
    port = BufferPort(input_data)
    result = run(code, port, config=config)
    return port.output, result


def run_once(code: str, x: int, config: Optional[InterpreterConfig] = None) -> Optional[int]:
    """Execute code with a single input byte, return the first output byte.

    None when nothing was written. A run that fails after writing still
    yields the first byte.
    """
    port = BufferPort(bytes((x % 256,)))
    try:
        run(code, port, config=config)
    except ExecutionError:
        pass
    return port.output[0] if port.output else None
