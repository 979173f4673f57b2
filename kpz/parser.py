from itertools import chain
from typing import Callable, Optional

from lark import Lark, Token

from .exceptions import CalcError, EmptyExpression, GenericSyntaxError, TokenTooLong, UnclosedParenthesis
from .grammar import calc_grammar
from .lexer import Tokenizer, is_truncated
from .transformers import SYMBOLIC_VARIABLE, Differentiate, Evaluate, Integrate
from .utils import logger
from .variables import VariableTable


calc_parser = Lark(calc_grammar, parser='lalr', lexer=Tokenizer)


def _log_error(error: CalcError):
    logger.warning('%s (position %s)', error, error.pos)


class ExpressionParser:
    """Evaluates, differentiates and integrates expressions over one grammar.

    Variables assigned through ``evaluate`` persist for the life of the
    instance. Problems in the input never raise; each one is passed to
    ``on_error`` and the call returns whatever could be computed.
    """

    def __init__(self, on_error: Optional[Callable[[CalcError], None]] = None):
        self.variables = VariableTable()
        self.on_error = on_error or _log_error

    def evaluate(self, text: str) -> float:
        ip = calc_parser.parse_interactive(text)
        tokens = list(ip.lexer_thread.lex(ip.parser_state))
        if not tokens:
            self.on_error(EmptyExpression(0))
            return 0.0
        tree = self._feed(ip, tokens, len(text), strict=True)
        return Evaluate(self.variables, self.on_error).transform(tree)

    def differentiate(self, text: str, variable: str = SYMBOLIC_VARIABLE) -> str:
        self._check_variable(variable)
        return Differentiate().transform(self._parse_symbolic(text))

    def integrate(self, text: str, variable: str = SYMBOLIC_VARIABLE) -> str:
        self._check_variable(variable)
        return Integrate().transform(self._parse_symbolic(text))

    def _check_variable(self, variable):
        if variable != SYMBOLIC_VARIABLE:
            logger.debug("Symbolic modes always use %r, ignoring %r", SYMBOLIC_VARIABLE, variable)

    def _parse_symbolic(self, text):
        ip = calc_parser.parse_interactive(text)
        tokens = list(ip.lexer_thread.lex(ip.parser_state))
        # Assignment has no symbolic meaning, so '=' ends the expression there.
        return self._feed(ip, tokens, len(text), strict=False, stop_at={'EQUAL'})

    def _feed(self, ip, tokens, end_pos, strict, stop_at=frozenset()):
        """Feed tokens to the interactive parser and return the parse tree.

        Recovery follows what a recursive-descent reader would do at the same
        point: an operand that can't start is reported and left empty, a group
        that isn't closed is reported and closed on the offending token, and
        whatever can't follow a complete expression is left unread.
        """
        end = Token('$END', '', end_pos, 1, end_pos + 1, 1, end_pos + 1, end_pos)
        for token in chain(tokens, [end]):
            if token.type != '$END' and is_truncated(token):
                self.on_error(TokenTooLong(token.start_pos, token))

            while True:
                accepts = ip.accepts()
                if token.type in accepts and token.type not in stop_at:
                    result = ip.feed_token(token)
                    break
                elif 'RPAR' in accepts:
                    self.on_error(UnclosedParenthesis(token.start_pos, token))
                    ip.feed_token(Token.new_borrow_pos('RPAR', ')', token))
                    if token.type != '$END':
                        break
                elif 'MISSING' in accepts:
                    self.on_error(GenericSyntaxError(token.start_pos, token))
                    ip.feed_token(Token.new_borrow_pos('MISSING', '', token))
                else:
                    if strict:
                        self.on_error(GenericSyntaxError(token.start_pos, token))
                    return ip.feed_eof(token)

        return result
