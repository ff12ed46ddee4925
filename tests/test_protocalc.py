import io
import math
import sys

import pytest

from rpncalc.commands import Command
from rpncalc.protocalc import ProtoCalc, main, run


def test_add_prints_result():
    out = io.StringIO()
    calc = ProtoCalc(output=out)
    calc.eval(0.0)
    calc.eval(5.0)
    calc.eval(Command.add)
    assert out.getvalue() == "5\n"


def test_sub_uses_top_as_left_operand():
    out = io.StringIO()
    calc = ProtoCalc(output=out)
    calc.eval(0.0)
    calc.eval(7.0)
    calc.eval(Command.sub)
    assert out.getvalue() == "7\n"


def test_result_is_pushed_back():
    out = io.StringIO()
    calc = ProtoCalc(output=out)
    for v in (1.0, 0.0, 9.0):
        calc.eval(v)
    calc.eval(Command.add)
    calc.eval(Command.mul)
    assert out.getvalue() == "9\n9\n"


def test_division_by_zero_is_infinite():
    out = io.StringIO()
    calc = ProtoCalc(output=out)
    calc.eval(0.0)
    calc.eval(1.0)
    calc.eval(Command.div)
    assert float(out.getvalue()) == math.inf


def test_pop_from_empty_stack_raises():
    with pytest.raises(IndexError, match="stack is empty"):
        ProtoCalc(output=io.StringIO()).eval(Command.add)


def test_other_commands_are_ignored():
    out = io.StringIO()
    calc = ProtoCalc(output=out)
    calc.eval(Command.print)
    calc.eval(Command.quit)
    assert out.getvalue() == ""


def test_run_until_end_of_input():
    out = io.StringIO()
    assert run(io.StringIO("0\n5\n+\n"), out) == 0
    assert out.getvalue() == ">>> >>> >>> 5\n>>> "


def test_run_stops_at_first_error():
    out = io.StringIO()
    assert run(io.StringIO("+\n1\n"), out) == 0
    assert out.getvalue() == ">>> Error: stack is empty\n"


def test_run_reports_parse_error():
    out = io.StringIO()
    run(io.StringIO("bogus\n"), out)
    assert out.getvalue() == ">>> Error: received invalid input\n"


def test_main_uses_standard_streams(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n2\n*\n"))
    monkeypatch.setattr(sys, "stdout", out)
    assert main([]) == 0
    assert out.getvalue() == ">>> >>> >>> 0\n>>> "