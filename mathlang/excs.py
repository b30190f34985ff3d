
class MathlangException(Exception):
    def __init__(self, msg, **details):
        super(MathlangException, self).__init__(msg)
        self.msg = msg
        self.details = details

    def __str__(self):
        msg = (' ' + self.msg) if self.msg else ''
        details = (' ' + str(self.details)) if self.details else ''
        return '%s:%s%s' % (self.__class__.__name__, msg, details)


class LexError(MathlangException):
    def __init__(self, msg, position=None, **details):
        super(LexError, self).__init__(msg, position=position, **details)
        self.position = position


class UnterminatedStringException(LexError):
    def __init__(self, msg='unterminated string', position=None, **details):
        super(UnterminatedStringException, self).__init__(
            msg, position=position, **details
        )


class InvalidTokenException(LexError):
    def __init__(self, token, position=None):
        super(InvalidTokenException, self).__init__(
            'Invalid token', position=position, token=token
        )
        self.token = token


class PrematureEndOfInputException(LexError):
    def __init__(self, position=None):
        super(PrematureEndOfInputException, self).__init__(
            'No characters left', position=position
        )
