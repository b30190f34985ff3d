from mathlang.scanner import Scanner
from mathlang.tokens import Token


def tokenize(source):
    return list(Scanner(source))


def format_token(token):
    if token.type == Token.TOKEN_STRING:
        payload = '"%s"' % token.value
    else:
        payload = str(token.value)
    return '%s %s' % (token.type_name, payload)
