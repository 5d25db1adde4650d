from myhdl import *
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), "../../../"))
from customfloat.utils.float_defs import DEFAULT_FORMAT


@block
def custom_float_pack(sign, exponent, mantissa, word, fmt=DEFAULT_FORMAT):
    """
    Combinational packer for a custom floating-point word
    Parameters:
    - sign: Sign bit (bool signal)
    - exponent: Biased exponent (fmt.exp_bits wide)
    - mantissa: Mantissa without the implicit bit (fmt.man_bits wide)
    - word: Packed output (fmt.width wide), sign in the MSB
    - fmt: CustomFloatFormat giving the field widths
    """
    if len(word) != fmt.width:
        raise ValueError(f"Packed word must be {fmt.width} bits, got {len(word)}")

    @always_comb
    def pack_logic():
        word.next = concat(sign, exponent, mantissa)

    return pack_logic


@block
def custom_float_unpack(word, sign, exponent, mantissa, fmt=DEFAULT_FORMAT):
    """
    Combinational unpacker, the inverse of custom_float_pack
    Parameters:
    - word: Packed input (fmt.width wide)
    - sign, exponent, mantissa: Extracted fields
    - fmt: CustomFloatFormat giving the field widths
    """
    WIDTH = fmt.width
    MAN_BITS = fmt.man_bits

    if len(word) != WIDTH:
        raise ValueError(f"Packed word must be {WIDTH} bits, got {len(word)}")

    @always_comb
    def unpack_logic():
        sign.next = bool(word[WIDTH - 1])
        exponent.next = word[WIDTH - 1 : MAN_BITS]
        mantissa.next = word[MAN_BITS:]

    return unpack_logic
