"""Module for miscellaneous multi-use functions"""

__all__ = ['format_km', 'round_half_up']


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def format_km(value: float, precision: int = 4) -> str:
    """
    Fixed-point string for a kilometre value, e.g. format_km(1.5) -> '1.5000'.

    Negative zero is printed as zero so that an offset of -0.0 doesn't read as
    a westward/southward displacement.

    Args:
        value:
            The value in kilometres

        precision:
            (Default 4) Number of decimal places

    Returns:
        str
    """
    out = f'{value:.{precision}f}'
    if out.startswith('-') and float(out) == 0:
        return out[1:]

    return out
