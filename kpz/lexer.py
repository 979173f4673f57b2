import re
from typing import Iterator

from lark.lexer import Lexer, Token

from .utils import logger


MAX_TOKEN_LENGTH = 79

DELIMITERS = {
    '+': 'PLUS',
    '-': 'MINUS',
    '*': 'STAR',
    '/': 'SLASH',
    '%': 'PERCENT',
    '^': 'CIRCUMFLEX',
    '=': 'EQUAL',
    '(': 'LPAR',
    ')': 'RPAR',
}

_DECIMAL = re.compile(r'[0-9]+(\.[0-9]*)?([eE][0-9]+)?')


def is_delimiter(c: str) -> bool:
    return c in DELIMITERS or c.isspace()


def parse_number(text: str) -> float:
    """Convert the text of a NUMBER token, independent of the current locale.

    Anything that isn't a plain decimal literal is read as 0.0.
    """
    if _DECIMAL.fullmatch(text):
        return float(text)
    logger.debug("Malformed number %r, using 0", text)
    return 0.0


class Tokenizer(Lexer):
    """Hand-written lexer plugged into Lark's LALR parser.

    Delimiters are single characters. Names and numbers run until the next
    delimiter or whitespace, so ``x1`` is one name and ``1.5e3`` one number.
    A character that can start no token ends the input.
    """

    def __init__(self, lexer_conf=None):
        pass

    def lex(self, text: str) -> Iterator[Token]:
        pos = 0
        end = len(text)
        while True:
            while pos < end and text[pos].isspace():
                pos += 1
            if pos >= end:
                return

            c = text[pos]
            start = pos
            if c in DELIMITERS:
                pos += 1
                type = DELIMITERS[c]
            elif c.isalpha() or '0' <= c <= '9':
                while pos < end and not is_delimiter(text[pos]):
                    pos += 1
                type = 'NAME' if c.isalpha() else 'NUMBER'
            else:
                logger.debug("Unexpected character %r at %d, ignoring the rest of the input", c, pos)
                return

            # Oversized tokens are cut down; end_pos still spans the full run,
            # which is how the parser notices the truncation.
            value = text[start:pos][:MAX_TOKEN_LENGTH]
            yield Token(type, value, start, 1, start + 1, 1, pos + 1, pos)


def is_truncated(token: Token) -> bool:
    return token.end_pos - token.start_pos > len(token)
