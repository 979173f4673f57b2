from .exceptions import CalcError, EmptyExpression, GenericSyntaxError, TokenTooLong, UnclosedParenthesis
from .lexer import Tokenizer
from .parser import ExpressionParser, calc_parser
from .utils import logger
from .variables import VariableTable

__version__ = "1.1.0"
