import pytest

from kpz import ExpressionParser, GenericSyntaxError, UnclosedParenthesis


@pytest.fixture
def errors():
	return []

@pytest.fixture
def parser(errors):
	return ExpressionParser(on_error=errors.append)


@pytest.mark.parametrize('text, expected', [
	("x + 3", "1+0"),
	("x * x", "(1*1)"),
	("x * x * x", "((1*1)*1)"),
	("2 * x - 7", "(0*1)-0"),
	("x / 2", "1/0"),
	("x % 2", "1%0"),
	("x ^ 2", "0*1^(0-1)"),
	("-x", "-1"),
	("+x", "1"),
	("(x + y)", "(1+0)"),
	("x1", "0"),
])
def test_differentiate(parser, errors, text, expected):
	assert parser.differentiate(text, "x") == expected
	assert errors == []

@pytest.mark.parametrize('text, expected', [
	("x + 1", "0.5*x^2+1"),
	("y", "y*x"),
	("3", "3"),
	("2.5", "2.5"),
	("x ^ 2", "(0.5*x^2^(2+1))/(2+1)"),
	("x * y", "0.5*x^2*y*x"),
	("x / 2 % 3", "0.5*x^2/2%3"),
	("-x", "-0.5*x^2"),
	("(x - 1)", "(0.5*x^2-1)"),
])
def test_integrate(parser, errors, text, expected):
	assert parser.integrate(text, "x") == expected
	assert errors == []

def test_variable_argument_is_ignored(parser):
	assert parser.differentiate("y", "y") == "0"
	assert parser.differentiate("x", "y") == "1"
	assert parser.integrate("y", "y") == "y*x"
	assert parser.differentiate("x * x") == "(1*1)"

def test_trailing_input_is_ignored(parser, errors):
	assert parser.differentiate("x 3") == "1"
	assert parser.differentiate("x = 3") == "1"
	assert parser.integrate("x ^ 2 ^ 3") == "(0.5*x^2^(2+1))/(2+1)"
	assert errors == []

def test_symbolic_errors(parser, errors):
	assert parser.differentiate("") == ""
	assert [type(e) for e in errors] == [GenericSyntaxError]

	del errors[:]
	assert parser.differentiate("(x") == "(1)"
	assert [type(e) for e in errors] == [UnclosedParenthesis]

	del errors[:]
	assert parser.integrate("x +") == "0.5*x^2+"
	assert [type(e) for e in errors] == [GenericSyntaxError]

def test_symbolic_modes_leave_variables_alone(parser, errors):
	parser.evaluate("x = 2")
	assert parser.differentiate("x") == "1"
	assert parser.integrate("z = 4") == "z*x"
	assert list(parser.variables) == ['x']
	assert errors == []

def test_output_reads_back(parser, errors):
	parser.evaluate("x = 2")
	assert parser.evaluate(parser.integrate("x + 1")) == 3.0
	assert parser.evaluate(parser.differentiate("x * x")) == 1.0
	assert parser.evaluate(parser.differentiate("x + 3")) == 1.0
	assert parser.evaluate(parser.differentiate("x ^ 2")) == 0.0
	assert parser.evaluate(parser.integrate("3 * x")) == 6.0
	assert errors == []

def test_long_sums_and_deep_nesting(parser, errors):
	assert parser.differentiate('+'.join(['x'] * 2000)) == '+'.join(['1'] * 2000)
	assert parser.integrate('+'.join(['x'] * 2000)) == '+'.join(['0.5*x^2'] * 2000)
	assert parser.differentiate('(' * 1000 + 'x' + ')' * 1000) == '(' * 1000 + '1' + ')' * 1000
	assert parser.integrate('(' * 1000 + 'x' + ')' * 1000) == '(' * 1000 + '0.5*x^2' + ')' * 1000
	assert errors == []
