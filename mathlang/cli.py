import logging
import sys

import click

from prompt_toolkit import prompt
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.validation import ValidationError, Validator

from mathlang.excs import LexError
from mathlang.utils import format_token, tokenize


class SourceValidator(Validator):
    def validate(self, document):
        text = document.text
        try:
            tokenize(text)
        except LexError as exc:
            raise ValidationError(message=str(exc),
                                  cursor_position=exc.position or 0)


def get_continuation_tokens(width, line_number, is_soft_wrap):
    return [('', '.' * (width - 1) + ' ')]


def print_tokens(source):
    for token in tokenize(source):
        click.echo(format_token(token))


def repl():

    print('MATHLANG scanner ver. 0.1')
    print('Alt+Enter to scan the input')
    hist = InMemoryHistory()

    while True:
        try:
            text = prompt(u'>>> ', multiline=True, history=hist,
                          validator=SourceValidator(),
                          prompt_continuation=get_continuation_tokens)
        except EOFError:
            print('Quit')
            break
        except KeyboardInterrupt:
            print('Interrupted (CTRL+D to exit)')
            continue

        try:
            print_tokens(text)
        except LexError as exc:
            click.echo('error: %s' % exc, err=True)


@click.command()
@click.argument('input-file', type=click.File('r'), nargs=-1)
@click.option('-e', '--expression', help='Print the tokens of this expression')
@click.option('--do-repl', '-r', is_flag=True, help='Start the REPL after scanning the files and/or the expression')
@click.option('--verbose', '-v', is_flag=True, help='Log every token produced by the scanner.')
def main(input_file, expression, do_repl, verbose):
    '''
    Lexical scanner for the math language.

    Starts the REPL when invoked without arguments. Otherwise, prints the
    tokens of the files (if given), then of the provided expression (if
    given), then enters the REPL (if the flag is specified).
    '''
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(name)s %(levelname)s: %(message)s')

    try:
        for f in input_file:
            print_tokens(f.read())

        if expression:
            print_tokens(expression)
    except LexError as exc:
        click.echo('error: %s' % exc, err=True)
        sys.exit(1)

    if do_repl or (not expression and not input_file):
        repl()


if __name__ == '__main__':
    main()
