"""
Byte-at-a-time I/O ports used by the output and input instructions.

A port reads one byte (``None`` once input is exhausted) and writes one
byte. StreamPort binds to binary file objects such as ``sys.stdin.buffer``;
BufferPort keeps everything in memory for embedding and tests.
"""

from typing import BinaryIO, Optional, Protocol


class IOPort(Protocol):
    def read_byte(self) -> Optional[int]:
        """Next input byte, or None at end of input. May block."""
        ...

    def write_byte(self, value: int) -> None:
        ...


class StreamPort:
    """Port over binary streams. Output is flushed after every byte."""

    def __init__(self, input_stream: Optional[BinaryIO] = None, output_stream: Optional[BinaryIO] = None):
        self.input_stream = input_stream
        self.output_stream = output_stream

    def read_byte(self) -> Optional[int]:
        if self.input_stream is None:
            return None
        data = self.input_stream.read(1)
        return data[0] if data else None

    def write_byte(self, value: int) -> None:
        if self.output_stream is None:
            raise ValueError("port has no output stream")
        self.output_stream.write(bytes((value,)))
        self.output_stream.flush()


class BufferPort:
    """In-memory port: reads from ``input_data``, collects writes in ``output``."""

    def __init__(self, input_data: bytes = b""):
        self.input_data = bytes(input_data)
        self.input_index = 0
        self._output = bytearray()

    def read_byte(self) -> Optional[int]:
        if self.input_index >= len(self.input_data):
            return None
        value = self.input_data[self.input_index]
        self.input_index += 1
        return value

    def write_byte(self, value: int) -> None:
        self._output.append(value)

    @property
    def output(self) -> bytes:
        return bytes(self._output)

    @property
    def input_reads(self) -> int:
        return self.input_index

    @property
    def output_writes(self) -> int:
        return len(self._output)
