import logging

from mathlang.excs import (InvalidTokenException, LexError,
                           PrematureEndOfInputException,
                           UnterminatedStringException)
from mathlang.tokens import Token


logger = logging.getLogger(__name__)


class Scanner:
    """ pull-based scanner over a complete source string

        every call to next() returns the following token, or None once the
        source is exhausted. tokens are separated by whitespace, except that
        a run of digits ends as soon as a non-digit shows up:

            let x = 5;  ->  Name(let) Name(x) Symbol(=) Number(5.0) Symbol(;)

        only the first character of a run starting with punctuation is kept,
        so "+-*" produces a single Symbol('+').
    """

    QUOTE = '"'
    SYMBOL_EXCLUDED = '.'

    def __init__(self, source):
        if not isinstance(source, str):
            raise TypeError('source must be a str, not %s' % type(source).__name__)

        self._source = source
        self._position = 0
        self._token = []    # scratch buffer for the token being read

    @property
    def source(self):
        return self._source

    @property
    def position(self):
        return self._position

    def remaining(self):
        return len(self._source) - self._position

    def next(self):
        while self.remaining() > 0 and self.peek().isspace():
            self.read()

        if self.remaining() <= 0:
            return None

        start = self._position
        try:
            if self.peek() == self.QUOTE:
                token = Token.string(self.read_string())
            elif self.peek().isdecimal():
                token = Token.number(self.read_number())
            else:
                token = self.classify(self.read_bare(), start)
        except LexError as exc:
            logger.debug('lexing failed at %d: %s', start, exc)
            raise

        logger.debug('token %r at %d', token, start)
        return token

    def __iter__(self):
        while True:
            token = self.next()
            if token is None:
                break
            yield token

    def peek(self):
        if self._position < len(self._source):
            return self._source[self._position]
        raise PrematureEndOfInputException(position=self._position)

    def read(self):
        char = self.peek()
        self._position += 1
        return char

    def read_string(self):
        del self._token[:]
        start = self._position
        if self.read() != self.QUOTE:
            raise UnterminatedStringException(
                'strings must start with an opening quote', position=start
            )

        try:
            while self.peek() != self.QUOTE:
                self._token.append(self.read())
        except PrematureEndOfInputException as exc:
            raise UnterminatedStringException(
                position=self._position, start=start
            ) from exc

        self.read()  # closing quote
        return ''.join(self._token)

    def read_number(self):
        del self._token[:]
        while self.remaining() > 0 and self.peek().isdecimal():
            self._token.append(self.read())
        return ''.join(self._token)

    def read_bare(self):
        del self._token[:]
        while self.remaining() > 0 and not self.peek().isspace():
            self._token.append(self.read())
        return ''.join(self._token)

    @classmethod
    def classify(cls, text, position=None):
        if cls.is_name(text):
            return Token.name(text)
        elif cls.is_symbol(text):
            return Token.symbol(text[0])
        else:
            raise InvalidTokenException(text, position=position)

    @staticmethod
    def is_name(text):
        return text[0].isalpha()

    @classmethod
    def is_symbol(cls, text):
        first = text[0]
        return (not first.isalpha()
                and not first.isdecimal()
                and first != cls.SYMBOL_EXCLUDED)
