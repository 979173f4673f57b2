"""
Command loop
============

A line-oriented front end for ``ExpressionParser``.

- ``d/dx <expr>`` prints the derivative of ``<expr>``
- ``int <expr>`` prints its integral
- a line starting with ``.`` exits
- anything else is evaluated, e.g. ``a = 1+2`` then ``1+a*-3``
"""
import argparse
import logging
import sys

from . import __version__
from .exceptions import DEFAULT_LANG, MESSAGES
from .parser import ExpressionParser
from .transformers import SYMBOLIC_VARIABLE
from .utils import format_number, logger


MAX_LINE_LENGTH = 79
EXIT_PREFIX = '.'
DERIVATIVE_PREFIX = 'd/dx '
INTEGRAL_PREFIX = 'int '

TEXT = {
    'en': {
        'banner': [
            'To exit, enter a dot.',
            'To differentiate, enter the command: d/dx <expression>',
            'To integrate, enter the command: int <expression>',
        ],
        'prompt': 'Enter a command or expression: ',
        'answer': 'Answer: ',
        'derivative': 'Derivative: ',
        'integral': 'Integral: ',
    },
    'uk': {
        'banner': [
            'Для виходу введіть крапку.',
            'Щоб обчислити похідну, введіть команду: d/dx <вираз>',
            'Щоб обчислити інтеграл, введіть команду: int <вираз>',
        ],
        'prompt': 'Введіть команду або вираз: ',
        'answer': 'Відповідь: ',
        'derivative': 'Похідна: ',
        'integral': 'Інтеграл: ',
    },
}


class Session:
    def __init__(self, lang=DEFAULT_LANG, out=None):
        self.lang = lang
        self.text = TEXT[lang]
        self.out = out
        self.parser = ExpressionParser(on_error=self.print_error)

    def print(self, *args):
        print(*args, file=self.out or sys.stdout)

    def print_error(self, error):
        self.print(error.message(self.lang))

    def print_banner(self):
        for line in self.text['banner']:
            self.print(line)

    def execute(self, line: str) -> bool:
        """Run one input line. Returns False once the user asked to leave."""
        if len(line) > MAX_LINE_LENGTH:
            logger.warning('Line longer than %d characters, the rest is ignored', MAX_LINE_LENGTH)
            line = line[:MAX_LINE_LENGTH]

        if line.startswith(EXIT_PREFIX):
            return False

        if line.startswith(DERIVATIVE_PREFIX):
            expr = line[len(DERIVATIVE_PREFIX):]
            self.print(self.text['derivative'] + self.parser.differentiate(expr, SYMBOLIC_VARIABLE) + '\n')
        elif line.startswith(INTEGRAL_PREFIX):
            expr = line[len(INTEGRAL_PREFIX):]
            self.print(self.text['integral'] + self.parser.integrate(expr, SYMBOLIC_VARIABLE) + '\n')
        else:
            self.print(self.text['answer'] + format_number(self.parser.evaluate(line)) + '\n')
        return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='kpz', description='a calculator with symbolic d/dx and int')
    parser.add_argument('--lang', choices=sorted(MESSAGES), default=DEFAULT_LANG, help='language of messages')
    parser.add_argument('-q', '--quiet', action='store_true', help="don't print the initial banner")
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument('-V', '--version', action='version', version=f'kpz {__version__}')
    args = parser.parse_args(argv)

    logger.setLevel(getattr(logging, args.log_level))
    session = Session(args.lang)

    if not sys.stdin.isatty():
        for line in sys.stdin:
            if not session.execute(line.rstrip('\r\n')):
                break
        return 0

    if not args.quiet:
        session.print_banner()
    while True:
        try:
            line = input(session.text['prompt'])
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not session.execute(line):
            break
    return 0


if __name__ == '__main__':
    sys.exit(main())
