MESSAGES = {
    'en': {
        0: 'Syntax error',
        1: 'Unclosed parentheses',
        2: 'No expression',
        3: 'Token too long',
    },
    'uk': {
        0: 'Синтаксична помилка',
        1: 'Незакриті дужки',
        2: 'Немає виразу',
        3: 'Задовгий токен',
    },
}

DEFAULT_LANG = 'en'


class CalcError(Exception):
    """Base class for the errors reported while reading an expression.

    These are never raised out of ``ExpressionParser``; they are handed to its
    ``on_error`` callback and parsing carries on.
    """
    code: int

    def __init__(self, pos=None, token=None):
        self.pos = pos
        self.token = token
        super().__init__(self.message())

    def message(self, lang=DEFAULT_LANG):
        return MESSAGES[lang][self.code]

    def __repr__(self):
        return '%s(pos=%r, token=%r)' % (type(self).__name__, self.pos, self.token)


class GenericSyntaxError(CalcError):
    code = 0


class UnclosedParenthesis(CalcError):
    code = 1


class EmptyExpression(CalcError):
    code = 2


class TokenTooLong(CalcError):
    code = 3
