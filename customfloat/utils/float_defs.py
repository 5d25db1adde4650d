from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class CustomFloatFormat:
    """
    Bit layout of a custom floating-point format.
    The format has:
    - 1 sign bit
    - EXP_BITS exponent bits (biased by 2^(EXP_BITS - 1) - 1)
    - MAN_BITS mantissa bits (implicit leading bit not stored)

    Special values:
    - Infinity: exponent all ones, mantissa zero
    - NaN: exponent all ones, mantissa nonzero
    - Zero: exponent zero, mantissa zero (sign bit kept)
    """

    # Defaults of the reference configuration
    DEFAULT_EXP_BITS: ClassVar[int] = 15
    DEFAULT_MAN_BITS: ClassVar[int] = 24

    exp_bits: int = DEFAULT_EXP_BITS
    man_bits: int = DEFAULT_MAN_BITS

    def __post_init__(self):
        """Validate the field widths."""
        for name in ("exp_bits", "man_bits"):
            bits = getattr(self, name)
            if isinstance(bits, bool) or not isinstance(bits, int):
                raise TypeError(f"{name} must be an integer, got {type(bits)}")
            if bits <= 0:
                raise ValueError(f"{name} must be positive, got {bits}")

    @property
    def bias(self) -> int:
        return (1 << (self.exp_bits - 1)) - 1

    @property
    def exp_all_ones(self) -> int:
        """Exponent value reserved for infinity and NaN."""
        return (1 << self.exp_bits) - 1

    @property
    def man_max(self) -> int:
        return (1 << self.man_bits) - 1

    @property
    def width(self) -> int:
        """Total width of the packed word: sign + exponent + mantissa."""
        return 1 + self.exp_bits + self.man_bits

    def __str__(self) -> str:
        return f"E{self.exp_bits}M{self.man_bits}"


DEFAULT_FORMAT = CustomFloatFormat()
