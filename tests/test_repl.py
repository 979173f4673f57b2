import io
import sys

import pytest

from kpz.repl import MAX_LINE_LENGTH, Session, main
from kpz.utils import format_number


def run(session, line):
	session.out.seek(0)
	session.out.truncate()
	more = session.execute(line)
	return more, session.out.getvalue()


@pytest.fixture
def session():
	return Session(out=io.StringIO())


def test_commands(session):
	assert run(session, "2 + 2") == (True, "Answer: 4\n\n")
	assert run(session, "d/dx x * x") == (True, "Derivative: (1*1)\n\n")
	assert run(session, "int x + 1") == (True, "Integral: 0.5*x^2+1\n\n")

def test_exit(session):
	assert run(session, ".") == (False, "")
	assert run(session, ".anything") == (False, "")

def test_variables_persist_between_lines(session):
	run(session, "a = 1+2")
	assert run(session, "1+a*-3") == (True, "Answer: -8\n\n")

def test_errors_are_printed_before_the_answer(session):
	assert run(session, "y") == (True, "Syntax error\nAnswer: 0\n\n")

def test_ukrainian():
	session = Session('uk', out=io.StringIO())
	assert run(session, "(1") == (True, "Незакриті дужки\nВідповідь: 1\n\n")
	assert run(session, "d/dx x") == (True, "Похідна: 1\n\n")
	assert run(session, "int 2") == (True, "Інтеграл: 2\n\n")

def test_long_lines_are_cut(session):
	line = "1+" * 50 + "1"
	assert len(line) > MAX_LINE_LENGTH
	assert run(session, line) == (True, "Answer: 40\n\n")

def test_format_number():
	assert format_number(4.0) == "4"
	assert format_number(1 / 3) == "0.333333"
	assert format_number(1e20) == "1e+20"
	assert format_number(float('inf')) == "inf"


class FakeTTY(io.StringIO):
	def isatty(self):
		return True


def test_main_batch(monkeypatch, capsys):
	monkeypatch.setattr(sys, 'stdin', io.StringIO("a = 2\na * 3\n.\n9\n"))
	assert main([]) == 0
	assert capsys.readouterr().out == "Answer: 2\n\nAnswer: 6\n\n"

def test_main_batch_ukrainian(monkeypatch, capsys):
	monkeypatch.setattr(sys, 'stdin', io.StringIO("int y\n"))
	assert main(['--lang', 'uk']) == 0
	assert capsys.readouterr().out == "Інтеграл: y*x\n\n"

def test_main_interactive(monkeypatch, capsys):
	lines = ["1 + 2"]

	def fake_input(prompt):
		if not lines:
			raise EOFError
		return lines.pop(0)

	monkeypatch.setattr(sys, 'stdin', FakeTTY())
	monkeypatch.setattr('builtins.input', fake_input)
	assert main([]) == 0
	out = capsys.readouterr().out
	assert out.startswith("To exit, enter a dot.\n")
	assert "Answer: 3\n\n" in out

def test_main_interactive_quiet(monkeypatch, capsys):
	lines = ["d/dx x", "."]
	monkeypatch.setattr(sys, 'stdin', FakeTTY())
	monkeypatch.setattr('builtins.input', lambda prompt: lines.pop(0))
	assert main(['-q']) == 0
	assert capsys.readouterr().out == "Derivative: 1\n\n"
