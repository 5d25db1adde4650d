from typing import List, Tuple

import numpy as np

from customfloat.utils.float_defs import CustomFloatFormat, DEFAULT_FORMAT

# Any shift past this already saturates a double to 0 or inf
MAX_LDEXP_SHIFT = 4096


def _ldexp(mantissa, shift):
    """np.ldexp with the shift clamped to a range numpy accepts."""
    return np.ldexp(mantissa, max(-MAX_LDEXP_SHIFT, min(shift, MAX_LDEXP_SHIFT)))


def standard_values(fmt: CustomFloatFormat = DEFAULT_FORMAT) -> List[Tuple[str, float]]:
    """
    Labelled reference values for a format.

    The extremes are computed in double precision: a result beyond the
    double range becomes 0.0 or inf, as it would in any IEEE-754 program.

    Args:
        fmt: The custom format the values are derived from

    Returns:
        list: (label, value) pairs in display order
    """
    one = np.float64(1.0)
    with np.errstate(over="ignore", under="ignore"):
        min_nonzero = _ldexp(one, -fmt.bias - fmt.man_bits + 1)
        max_positive = _ldexp(one - _ldexp(one, -fmt.man_bits), fmt.bias)

    return [
        ("Minimum nonzero value", float(min_nonzero)),
        ("Maximum positive value", float(max_positive)),
        ("Minimum negative value", float(-max_positive)),
        ("Value +1.0E0", 1.0),
        ("Value +inf", float("inf")),
        ("Value -inf", float("-inf")),
        ("Subnormal value", float(min_nonzero)),
        ("Value NaN", float("nan")),
    ]
