class Token:
    TOKEN_STRING = 1
    TOKEN_NAME = 2
    TOKEN_SYMBOL = 3
    TOKEN_NUMBER = 4

    TOKEN_TYPE_NAMES = {
        TOKEN_STRING: 'STRING',
        TOKEN_NAME: 'NAME',
        TOKEN_SYMBOL: 'SYMBOL',
        TOKEN_NUMBER: 'NUMBER',
    }

    __slots__ = ('_type', '_value')

    def __init__(self, value, type_):
        if type_ not in Token.TOKEN_TYPE_NAMES:
            raise ValueError('unknown token type: %r' % (type_,))
        object.__setattr__(self, '_type', type_)
        object.__setattr__(self, '_value', value)

    @staticmethod
    def string(text):
        return Token(text, Token.TOKEN_STRING)

    @staticmethod
    def name(text):
        return Token(text, Token.TOKEN_NAME)

    @staticmethod
    def symbol(char):
        if len(char) != 1:
            raise ValueError('symbols are a single character, got %r' % char)
        return Token(char, Token.TOKEN_SYMBOL)

    @staticmethod
    def number(value):
        return Token(float(value), Token.TOKEN_NUMBER)

    @property
    def type(self):
        return self._type

    @property
    def value(self):
        return self._value

    @property
    def type_name(self):
        return Token.TOKEN_TYPE_NAMES[self._type]

    def __setattr__(self, name, value):
        raise AttributeError('tokens are immutable')

    def __delattr__(self, name):
        raise AttributeError('tokens are immutable')

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return '%s(%r)' % (self.type_name.capitalize(), self.value)

    def __eq__(self, other):
        return (isinstance(other, Token)
                and other.value == self.value
                and other.type == self.type)

    def __hash__(self):
        return hash((self.type, self.value))
