#!/usr/bin/env python3
"""Command line front end: bytetape PROGRAM [options]."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVELS, ConfigError, load_config
from .errors import ExecutionError
from .interpreter import run
from .io_port import StreamPort
from .loader import load_program
from .log import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bytetape", description="Run a program on the byte tape interpreter")
    ap.add_argument("program", help="Program file, or '-' to read the program from stdin")
    ap.add_argument("--config", default=None, help="YAML file with interpreter settings")
    ap.add_argument("--input", default=None, help="Read program input from this file instead of stdin")
    ap.add_argument("--max-cells", type=int, default=None, help="Fail once the tape would grow past N cells")
    ap.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, default=None)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, overrides={"max_cells": args.max_cells, "log_level": args.log_level})
    except (ConfigError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    configure_logging(config.log_level_number)

    try:
        source = load_program(args.program, config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read program {args.program}: {e}", file=sys.stderr)
        return 1

    input_stream = None
    try:
        if args.input is not None:
            input_stream = open(args.input, "rb")
        elif args.program != "-":
            input_stream = sys.stdin.buffer
    except OSError as e:
        print(f"error: cannot open input {args.input}: {e}", file=sys.stderr)
        return 1

    port = StreamPort(input_stream, sys.stdout.buffer)
    try:
        result = run(source, port, config=config)
    except ExecutionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        if args.input is not None:
            input_stream.close()

    logger.info("halted after %d steps", result.steps)
    return 0


if __name__ == "__main__":
    sys.exit(main())
