import sys


def load_program(path: str, encoding: str = "utf-8") -> str:
    """Read program text from ``path``; ``-`` reads standard input."""
    if path == "-":
        return sys.stdin.buffer.read().decode(encoding)
    with open(path, "r", encoding=encoding) as f:
        return f.read()
