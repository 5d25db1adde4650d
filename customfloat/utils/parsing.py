import math
import re


class ParseError(ValueError):
    """Raised when text is not a valid floating-point literal."""


# Optional sign, digits with optional fraction, optional exponent suffix
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_SPECIAL_RE = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)


def parse_double(text: str) -> float:
    """
    Parse a decimal floating-point literal such as "-1.23E+4".

    Args:
        text: The literal; surrounding whitespace is ignored. "inf",
            "infinity" and "nan" are accepted in any case.

    Returns:
        float: The parsed value

    Raises:
        ParseError: If the text is not a literal, or its magnitude is out of
            the double range
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a string, got {type(text)}")

    s = text.strip()
    if _SPECIAL_RE.fullmatch(s):
        return float(s)

    match = _DECIMAL_RE.fullmatch(s)
    if match is None:
        raise ParseError(f"Invalid floating-point format: {text!r}")

    value = float(s)
    if math.isinf(value):
        raise ParseError(f"Value out of range: {text!r}")
    if value == 0.0 and any(c in "123456789" for c in match.group(1)):
        raise ParseError(f"Value out of range: {text!r}")
    return value
