import numpy as np
import pytest

from bytetape.errors import IoError, TapeUnderflow
from bytetape.executor import Executor, State
from bytetape.io_port import BufferPort
from bytetape.program import compile_program
from bytetape.tape import Tape


class ClosedOutput(BufferPort):
    def write_byte(self, value):
        raise BrokenPipeError("output closed")


class OutOfRangeInput(BufferPort):
    def read_byte(self):
        return 300


def make(code, input_data=b"", tape=None):
    port = BufferPort(input_data)
    return Executor(compile_program(code), port, tape=tape), port


class TestStep:
    def test_initial_state(self):
        ex, _ = make("+")
        assert ex.state is State.RUNNING
        assert ex.instruction_pointer == 0
        assert ex.tape.snapshot().tolist() == [0]

    def test_empty_program_is_halted(self):
        ex, _ = make("just a comment")
        assert ex.state is State.HALTED
        assert ex.run().steps == 0

    def test_single_steps(self):
        ex, _ = make("+>+")
        assert ex.step() is State.RUNNING
        assert ex.tape.read_cell() == 1
        ex.step()
        assert ex.tape.pointer == 1
        assert ex.step() is State.HALTED
        assert ex.instruction_pointer == 3

    def test_step_after_halt_is_noop(self):
        ex, _ = make("+")
        ex.run()
        assert ex.step() is State.HALTED
        assert ex.steps == 1

    def test_loop_open_skips_body_on_zero(self):
        ex, port = make("[+.]-")
        ex.step()
        assert ex.instruction_pointer == 4
        ex.run()
        assert port.output == b""
        assert ex.tape.read_cell() == 255

    def test_loop_close_jumps_back_to_open(self):
        ex, _ = make("++[-]")
        for _ in range(4):
            ex.step()
        # "++[-" done, cell is 1, so ']' goes back to '['
        assert ex.instruction_pointer == 4
        ex.step()
        assert ex.instruction_pointer == 2

    def test_loop_exits_when_cell_zero(self):
        ex, _ = make("+[-]")
        result = ex.run()
        assert result.state is State.HALTED
        # the "]" sees 0 and falls through
        assert result.steps == 4
        assert ex.tape.read_cell() == 0


class TestFailures:
    def test_move_left_at_origin_fails(self):
        ex, _ = make("+<+")
        with pytest.raises(TapeUnderflow) as exc:
            ex.run()
        assert exc.value.instruction_index == 1
        assert ex.state is State.FAILED
        assert ex.tape.read_cell() == 1

    def test_failed_executor_does_not_resume(self):
        ex, _ = make("<+")
        with pytest.raises(TapeUnderflow):
            ex.step()
        assert ex.step() is State.FAILED
        assert ex.tape.read_cell() == 0
        with pytest.raises(TapeUnderflow):
            ex.run()

    def test_output_failure_is_io_error(self):
        port = ClosedOutput()
        ex = Executor(compile_program("+.+"), port)
        with pytest.raises(IoError) as exc:
            ex.run()
        assert isinstance(exc.value.__cause__, BrokenPipeError)
        assert ex.state is State.FAILED
        assert ex.instruction_pointer == 1

    def test_non_byte_input_is_io_error(self):
        ex = Executor(compile_program("+,"), OutOfRangeInput())
        with pytest.raises(IoError) as exc:
            ex.run()
        assert isinstance(exc.value.__cause__, ValueError)
        assert ex.state is State.FAILED
        assert ex.instruction_pointer == 1
        assert ex.tape.read_cell() == 1


class TestInput:
    def test_input_stores_byte(self):
        ex, _ = make(",", b"\x41")
        ex.run()
        assert ex.tape.read_cell() == 65

    def test_end_of_input_stores_zero(self):
        ex, _ = make("+++,")
        ex.run()
        assert ex.tape.read_cell() == 0

    def test_reads_consume_in_order(self):
        ex, port = make(",>,>,", b"abc")
        result = ex.run()
        assert result.tape.tolist() == [97, 98, 99]
        assert port.input_reads == 3


class TestPrograms:
    def test_hello_world(self, hello_world):
        ex, port = make(hello_world)
        result = ex.run()
        assert port.output == b"Hello World!\n"
        assert result.state is State.HALTED

    def test_echo(self):
        ex, port = make(",.", b"A")
        ex.run()
        assert port.output == bytes([65])

    def test_echo_without_input(self):
        ex, port = make(",.")
        ex.run()
        assert port.output == bytes([0])

    def test_clear_loop_on_preset_cell(self):
        tape = Tape()
        tape.write_cell(5)
        ex, _ = make("[-]", tape=tape)
        result = ex.run()
        assert result.tape.tolist() == [0]
        assert result.state is State.HALTED

    def test_deep_nesting_does_not_recurse(self):
        depth = 5000
        ex, _ = make("+" + "[" * depth + "-" + "]" * depth)
        result = ex.run()
        assert result.state is State.HALTED
        assert ex.tape.read_cell() == 0

    def test_doubling(self):
        ex, port = make(",[>++<-]>.", bytes([21]))
        ex.run()
        assert port.output == bytes([42])

    def test_runs_are_deterministic(self):
        code = ",[>+>++<<-]>[.-]>[.-]"
        first, port1 = make(code, b"\x05")
        second, port2 = make(code, b"\x05")
        r1, r2 = first.run(), second.run()
        assert port1.output == port2.output
        assert np.array_equal(r1.tape, r2.tape)
        assert r1.pointer == r2.pointer
        assert r1.steps == r2.steps
