from dataclasses import dataclass
from typing import Optional
import math

# Largest binary exponent whose square stays well inside the double range
SAFE_SHIFT = 500


class InvalidArgument(ValueError):
    """Raised when combine() is called with both operands equal to zero."""


@dataclass(frozen=True)
class CombineResult:
    """Outcome of checked_combine(): either a value or the error that prevented it."""

    value: Optional[float] = None
    error: Optional[InvalidArgument] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def combine(a: float, b: float) -> float:
    """
    Compute F(a, b) = 2ab / (a^2 + b^2).

    Args:
        a, b: Operands, not both zero

    Returns:
        float: The value of F(a, b), in [-1, 1] for finite operands

    Raises:
        InvalidArgument: If both a and b are zero
    """
    a = float(a)
    b = float(b)
    if a == 0 and b == 0:
        raise InvalidArgument("Both a and b are zero, division by zero.")

    # F is scale invariant; when the squares would overflow or underflow, a
    # power of two scale brings the larger operand into [0.5, 1)
    largest = max(abs(a), abs(b))
    if math.isfinite(largest):
        _, shift = math.frexp(largest)
        if not (-SAFE_SHIFT <= shift <= SAFE_SHIFT):
            a = math.ldexp(a, -shift)
            b = math.ldexp(b, -shift)

    return (2 * a * b) / (a * a + b * b)


def checked_combine(a: float, b: float) -> CombineResult:
    """Compute F(a, b), returning the failure as part of the result."""
    try:
        return CombineResult(value=combine(a, b))
    except InvalidArgument as e:
        return CombineResult(error=e)
