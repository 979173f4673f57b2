"""
Rule tables
===========

Each mode walks the same parse tree (see ``kpz.grammar``) with its own set of
per-node rules. ``Evaluate`` folds it into a float, ``Differentiate`` and
``Integrate`` rewrite it into text that the grammar can read back.
A sum of n operands is a tree n levels deep, so the walk is non-recursive.

The symbolic rules are deliberately simple: a product differentiates to the
product of the derivatives, and the power rule is applied to the
already rewritten base and exponent.
"""
import math

from lark import v_args
from lark.visitors import Transformer_NonRecursive

from .exceptions import GenericSyntaxError
from .lexer import parse_number


SYMBOLIC_VARIABLE = 'x'


def divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def fmod(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _is_odd_integer(x):
    return x.is_integer() and x % 2 == 1


def power(base: float, exponent: float) -> float:
    if exponent == 0.0:
        return 1.0
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # pow(0, negative) is a pole, anything else here is out of the real domain
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


@v_args(inline=True)    # Affects the signatures of the methods
class Evaluate(Transformer_NonRecursive):
    from operator import add, sub, mul, neg

    def __init__(self, variables, report):
        super().__init__()
        self.variables = variables
        self.report = report

    def div(self, a, b):
        return divide(a, b)

    def mod(self, a, b):
        return fmod(a, b)

    def pow(self, base, exponent):
        return power(base, exponent)

    def group(self, value):
        return value

    def number(self, token) -> float:
        return parse_number(token.value)

    def missing(self, token) -> float:
        return 0.0

    def assign_var(self, name, value):
        return self.variables.assign(name.value, value)

    def var(self, name):
        try:
            return self.variables.lookup(name.value)
        except KeyError:
            self.report(GenericSyntaxError(name.start_pos, name))
            return 0.0


@v_args(inline=True)
class Rewrite(Transformer_NonRecursive):
    "Rules shared by both symbolic modes. Operands are joined as written."

    variable = SYMBOLIC_VARIABLE

    def add(self, a, b):
        return a + '+' + b

    def sub(self, a, b):
        return a + '-' + b

    def mul(self, a, b):
        return a + '*' + b

    def div(self, a, b):
        return a + '/' + b

    def mod(self, a, b):
        return a + '%' + b

    def neg(self, a):
        return '-' + a

    def group(self, a):
        return '(' + a + ')'

    def missing(self, token):
        return ''


@v_args(inline=True)
class Differentiate(Rewrite):

    def mul(self, a, b):
        return '(' + a + '*' + b + ')'

    def pow(self, base, exponent):
        return '%s*%s^(%s-1)' % (exponent, base, exponent)

    def number(self, token):
        return '0'

    def var(self, name):
        return '1' if name == self.variable else '0'


@v_args(inline=True)
class Integrate(Rewrite):

    def pow(self, base, exponent):
        return '(%s^(%s+1))/(%s+1)' % (base, exponent, exponent)

    def number(self, token):
        return token.value

    def var(self, name):
        if name == self.variable:
            return '0.5*%s^2' % self.variable
        return '%s*%s' % (name.value, self.variable)
