import logging

import pytest
from click.testing import CliRunner
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from mathlang.cli import SourceValidator, main


def test_expression():
    result = CliRunner().invoke(main, ['-e', 'let x = 5;'])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        'NAME let', 'NAME x', 'SYMBOL =', 'NUMBER 5.0', 'SYMBOL ;'
    ]


def test_input_files(tmp_path):
    first = tmp_path / 'a.math'
    first.write_text('print "hi"\n')
    second = tmp_path / 'b.math'
    second.write_text('123abc')

    result = CliRunner().invoke(main, [str(first), str(second)])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        'NAME print', 'STRING "hi"', 'NUMBER 123.0', 'NAME abc'
    ]


def test_lex_error():
    result = CliRunner().invoke(main, ['-e', 'x = "abc'])

    assert result.exit_code == 1
    assert 'error: UnterminatedStringException' in result.output


def test_verbose_logs_tokens(caplog):
    caplog.set_level(logging.DEBUG, logger='mathlang.scanner')
    result = CliRunner().invoke(main, ['-v', '-e', 'a "b'])

    assert result.exit_code == 1
    assert 'error: UnterminatedStringException' in result.output
    messages = [r.getMessage() for r in caplog.records
                if r.name == 'mathlang.scanner']
    assert messages[0].startswith('token ')
    assert messages[-1].startswith('lexing failed')


def test_validator():
    validator = SourceValidator()

    with pytest.raises(ValidationError) as excinfo:
        validator.validate(Document('"abc'))
    assert excinfo.value.cursor_position == 4
    assert 'UnterminatedStringException' in excinfo.value.message

    validator.validate(Document('a b'))
    validator.validate(Document(''))
