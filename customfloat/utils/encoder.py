from dataclasses import dataclass, field
from typing import Union
import math

from myhdl import intbv, modbv, concat

from customfloat.utils.float_defs import CustomFloatFormat, DEFAULT_FORMAT


class ExponentRangeError(ValueError):
    """Raised by a strict encoder when a value's exponent does not fit the format."""


@dataclass(frozen=True)
class EncodedFloat:
    """
    A value encoded in a custom floating-point format.

    - sign: True iff the sign bit of the source value was set
    - exponent: biased exponent, exp_bits wide
    - mantissa: fraction bits below the implicit leading bit, man_bits wide
    """

    sign: bool
    exponent: int
    mantissa: int
    fmt: CustomFloatFormat = field(default=DEFAULT_FORMAT)

    def __post_init__(self):
        """Validate the field ranges against the format."""
        if not isinstance(self.sign, bool):
            raise TypeError(f"Sign must be a bool, got {type(self.sign)}")
        if not (0 <= self.exponent <= self.fmt.exp_all_ones):
            raise ValueError(
                f"Exponent must be between 0 and {self.fmt.exp_all_ones}, got {self.exponent}"
            )
        if not (0 <= self.mantissa <= self.fmt.man_max):
            raise ValueError(
                f"Mantissa must be between 0 and {self.fmt.man_max}, got {self.mantissa}"
            )

    def is_nan(self) -> bool:
        return self.exponent == self.fmt.exp_all_ones and self.mantissa != 0

    def is_inf(self) -> bool:
        return self.exponent == self.fmt.exp_all_ones and self.mantissa == 0

    def is_zero(self) -> bool:
        return self.exponent == 0 and self.mantissa == 0

    def is_denormal(self) -> bool:
        return self.exponent == 0 and self.mantissa != 0

    def category(self) -> str:
        """Name of the value class encoded by the exponent/mantissa pair."""
        if self.is_nan():
            return "nan"
        if self.is_inf():
            return "infinity"
        if self.is_zero():
            return "zero"
        if self.is_denormal():
            return "denormal"
        return "normal"

    @property
    def raw_value(self) -> int:
        """Get the packed word: sign in the MSB, then exponent, then mantissa."""
        word = concat(
            self.sign,
            intbv(self.exponent)[self.fmt.exp_bits :],
            intbv(self.mantissa)[self.fmt.man_bits :],
        )
        return int(word)

    def to_binary(self) -> str:
        """Return the binary representation of the packed word."""
        return f"0b{self.raw_value:0{self.fmt.width}b}"

    def to_hex(self) -> str:
        """Return the hexadecimal representation of the packed word."""
        return f"0x{self.raw_value:0{(self.fmt.width + 3) // 4}x}"

    def __str__(self) -> str:
        return f"{self.fmt}({self.to_hex()}, {self.category()})"


class CustomFloatEncoder:
    """
    Encodes Python floats (IEEE-754 doubles) into a custom format.

    The mantissa is truncated, never rounded. A lenient encoder lets an
    exponent that does not fit the format wrap modulo 2^exp_bits; a strict
    encoder raises ExponentRangeError for it instead.
    """

    def __init__(self, fmt: CustomFloatFormat = DEFAULT_FORMAT, strict: bool = False):
        if not isinstance(fmt, CustomFloatFormat):
            raise TypeError(f"fmt must be a CustomFloatFormat, got {type(fmt)}")
        self.fmt = fmt
        self.strict = strict

    def __repr__(self) -> str:
        return f"CustomFloatEncoder(fmt={self.fmt!r}, strict={self.strict})"

    def encode(self, value: Union[float, int]) -> EncodedFloat:
        """
        Encode a number into the configured format.

        Args:
            value: Any float, including signed zeros, subnormals, infinities and NaN

        Returns:
            EncodedFloat: The sign, biased exponent and truncated mantissa
        """
        fmt = self.fmt
        value = float(value)

        # Handle special cases
        if math.isnan(value):
            # NaN payload and sign are not preserved
            return EncodedFloat(False, fmt.exp_all_ones, 1, fmt)

        sign = math.copysign(1.0, value) < 0

        if math.isinf(value):
            return EncodedFloat(sign, fmt.exp_all_ones, 0, fmt)

        if value == 0.0:
            return EncodedFloat(sign, 0, 0, fmt)

        # value = frac * 2^exp with frac in [0.5, 1)
        frac, exp = math.frexp(abs(value))

        # -1 moves the implicit bit from the 0.5 place to the 1.0 place
        biased_exponent = exp + fmt.bias - 1
        if self.strict and not (1 <= biased_exponent < fmt.exp_all_ones):
            raise ExponentRangeError(
                f"Value {value!r} needs biased exponent {biased_exponent}, "
                f"outside 1..{fmt.exp_all_ones - 1} for {fmt}"
            )
        exponent = modbv(biased_exponent, min=0, max=1 << fmt.exp_bits)

        # frac - 0.5 is exact, so the scaled fraction is truncated exactly
        numerator, denominator = (frac - 0.5).as_integer_ratio()
        mantissa = (numerator << fmt.man_bits) // denominator

        return EncodedFloat(sign, int(exponent), mantissa, fmt)


def encode(
    value: Union[float, int],
    fmt: CustomFloatFormat = DEFAULT_FORMAT,
    strict: bool = False,
) -> EncodedFloat:
    """Encode a number with a throwaway encoder for the given format."""
    return CustomFloatEncoder(fmt, strict=strict).encode(value)
