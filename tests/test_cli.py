import logging

import pytest

from faultoffset.cli import cmd_line_parse, format_result, main
from faultoffset.offsets import OffsetResult
from faultoffset.utils.logging import LOGGER


def test_cmd_line_parse():
    inps = cmd_line_parse(
        ['--origin', '35', '135', '--start', '35.1', '135.2', '--strike', '90', '--length', '10']
    )
    assert inps.origin == [35., 135.]
    assert inps.start == [35.1, 135.2]
    assert inps.strike == 90.
    assert inps.length == 10.
    assert inps.precision == 4
    assert not inps.verbose

    with pytest.raises(SystemExit):
        cmd_line_parse(['--origin', '35', '--start', '35', '135', '--strike', '90', '--length', '10'])

    with pytest.raises(SystemExit):
        cmd_line_parse(['--origin', 'x', '135', '--start', '35', '135', '--strike', '90', '--length', '10'])

    with pytest.raises(SystemExit):
        cmd_line_parse(
            ['--origin', '35', '135', '--start', '35', '135', '--strike', '90', '--length', '10',
             '--precision', '-1']
        )


def test_format_result():
    result = OffsetResult(0., -0.00001, 10.0222442, -0.0054834)
    assert format_result(result) == (
        'start: (x: 0.0000 km, y: 0.0000 km)\n'
        'end: (x: 10.0222 km, y: -0.0055 km)'
    )
    assert format_result(result, 1) == (
        'start: (x: 0.0 km, y: 0.0 km)\n'
        'end: (x: 10.0 km, y: 0.0 km)'
    )


def test_main(capsys):
    status = main(
        ['--origin', '35', '135', '--start', '35', '135', '--strike', '90', '--length', '10']
    )
    assert status == 0
    assert capsys.readouterr().out == (
        'start: (x: 0.0000 km, y: 0.0000 km)\n'
        'end: (x: 10.0222 km, y: -0.0055 km)\n'
    )


def test_main_invalid(capsys):
    status = main(
        ['--origin', '95', '135', '--start', '35', '135', '--strike', '90', '--length', '10']
    )
    assert status == 2
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'invalid input' in captured.err

    status = main(
        ['--origin', '35', '135', '--start', '35', '135', '--strike', 'nan', '--length', '10']
    )
    assert status == 2


def test_main_verbose(caplog):
    try:
        with caplog.at_level(logging.DEBUG, logger='faultoffset'):
            main(
                ['--origin', '35', '135', '--start', '35', '135', '--strike', '90',
                 '--length', '10', '-v']
            )
        assert 'Computing offsets' in caplog.text
    finally:
        LOGGER.setLevel(logging.WARNING)
