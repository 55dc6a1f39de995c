import logging

import pytest
from pydantic import ValidationError
from pytest import approx

from faultoffset import GeoPoint
from faultoffset.offsets import compute_offsets
from faultoffset.validation import calculate_offsets


def test_calculate_offsets():
    expected = compute_offsets(GeoPoint(35., 135.), GeoPoint(35.2, 135.3), 45., 20.)
    actual = calculate_offsets(35., 135., 35.2, 135.3, 45., 20.)
    assert actual == expected

    # Numeric strings and ints are parsed
    actual = calculate_offsets('35.0', '135', '35.2', '135.3', 45, '20')
    assert actual == expected


def test_calculate_offsets_poles():
    result = calculate_offsets(90., 0., 90., 0., 180., 10.)
    assert result.x_start_km == 0.
    assert result.y_end_km == approx(-10., abs=0.1)


@pytest.mark.parametrize(
    'args',
    [
        ('abc', 135., 35., 135., 90., 10.),
        (35., 135., 35., '', 90., 10.),
        (float('nan'), 135., 35., 135., 90., 10.),
        (35., float('inf'), 35., 135., 90., 10.),
        (35., 135., 35., 135., 'nan', 10.),
        (35., 135., 35., 135., 90., float('-inf')),
        (90.5, 135., 35., 135., 90., 10.),
        (35., 135., -91., 135., 90., 10.),
        (35., 135., 35., 135., 90., -1.),
        (35., 135., 35., 135., 90., None),
    ]
)
def test_calculate_offsets_invalid(args):
    with pytest.raises(ValidationError):
        calculate_offsets(*args)

    with pytest.raises(ValueError):
        calculate_offsets(*args)


def test_calculate_offsets_warnings(caplog):
    with caplog.at_level(logging.WARNING, logger='faultoffset'):
        calculate_offsets(0., 200., 0., 200., 90., 10.)
    assert 'not normalized' in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger='faultoffset'):
        calculate_offsets(0., 179., 0., -179., 90., 10.)
    assert 'long way around' in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger='faultoffset'):
        calculate_offsets(35., 135., 35., 135., 90., 10.)
    assert caplog.text == ''
