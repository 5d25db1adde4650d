import math
import sys

from myhdl import bin as bitstring

from customfloat.utils.encoder import EncodedFloat


def format_encoded(encoded: EncodedFloat) -> str:
    """
    Render the fields of an encoded value, one per line.

    Args:
        encoded: The value to render

    Returns:
        str: Sign bit, zero-padded exponent with its decimal value, and
        zero-padded mantissa
    """
    fmt = encoded.fmt
    return "\n".join(
        [
            f"Sign: {int(encoded.sign)}",
            f"Exponent: {bitstring(encoded.exponent, fmt.exp_bits)} (Decimal: {encoded.exponent})",
            f"Mantissa: {bitstring(encoded.mantissa, fmt.man_bits)}",
        ]
    )


def format_value(value: float) -> str:
    """Render a double with six significant digits."""
    return f"{value:g}"


def format_labelled(label: str, value: float, encoded: EncodedFloat) -> str:
    """Render one entry of the standard values table."""
    if not math.isfinite(value):
        # Specials are named by the label alone
        header = f"{label}:"
    else:
        header = f"{label}: {format_value(value)}"
    return f"{header}\n{format_encoded(encoded)}"


def print_encoded(encoded: EncodedFloat, file=None):
    """Print the fields of an encoded value to stdout or the given file."""
    print(format_encoded(encoded), file=file if file is not None else sys.stdout)
