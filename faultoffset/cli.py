"""Command line interface: fault start/end offsets from an origin"""

__all__ = ['create_parser', 'cmd_line_parse', 'main']

import argparse
import logging
import sys
from typing import List, Optional

from faultoffset.offsets import OffsetResult
from faultoffset.utils.functions import format_km
from faultoffset.utils.logging import LOGGER
from faultoffset.validation import calculate_offsets

EXAMPLE = """example:
    faultoffset --origin 35.0 135.0 --start 35.0 135.0 --strike 90 --length 10
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='faultoffset',
        description='Convert a fault rupture (start point, strike, length) into x/y offsets '
                    'in km from a reference origin',
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=EXAMPLE
    )

    parser.add_argument('--origin', dest='origin', type=float, nargs=2, required=True,
                        metavar=('LAT', 'LON'),
                        help='reference origin, in degrees')
    parser.add_argument('--start', dest='start', type=float, nargs=2, required=True,
                        metavar=('LAT', 'LON'),
                        help='fault start point, in degrees')
    parser.add_argument('--strike', dest='strike', type=float, required=True,
                        help='fault strike, degrees clockwise from north')
    parser.add_argument('--length', dest='length', type=float, required=True,
                        help='rupture length, in km')
    parser.add_argument('--precision', dest='precision', type=int, default=4,
                        help='decimal places to print (default: 4)')
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true',
                        help='log debug output')

    return parser


def cmd_line_parse(iargs: Optional[List[str]] = None) -> argparse.Namespace:
    parser = create_parser()
    inps = parser.parse_args(args=iargs)
    if inps.precision < 0:
        parser.error('--precision must not be negative')

    return inps


def format_result(result: OffsetResult, precision: int = 4) -> str:
    """Two display lines, one per fault end"""
    lines = []
    for label, (x, y) in (('start', result.start), ('end', result.end)):
        lines.append(
            f'{label}: (x: {format_km(x, precision)} km, y: {format_km(y, precision)} km)'
        )
    return '\n'.join(lines)


def main(iargs: Optional[List[str]] = None) -> int:
    inps = cmd_line_parse(iargs)
    if inps.verbose:
        LOGGER.setLevel(logging.DEBUG)

    try:
        result = calculate_offsets(
            inps.origin[0], inps.origin[1],
            inps.start[0], inps.start[1],
            inps.strike, inps.length
        )
    except ValueError as exc:
        print(f'faultoffset: error: invalid input\n{exc}', file=sys.stderr)
        return 2

    print(format_result(result, inps.precision))
    return 0


if __name__ == '__main__':
    sys.exit(main())
