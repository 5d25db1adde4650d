"""
Simple script to convert the custom float pack/unpack blocks to Verilog using MyHDL.
"""

from myhdl import *
import argparse
import sys
import os

# Add the project root to the path
sys.path.append(os.path.join(os.path.dirname(__file__), "../"))

from customfloat.hdl.components.custom_float_pack import (
    custom_float_pack,
    custom_float_unpack,
)
from customfloat.utils.float_defs import CustomFloatFormat


def convert_pack_to_verilog(fmt, path="gen/verilog"):
    """Convert the pack and unpack blocks for one format to Verilog."""
    # Create signals sized for the format
    sign = Signal(bool(0))
    exponent = Signal(intbv(0)[fmt.exp_bits :])
    mantissa = Signal(intbv(0)[fmt.man_bits :])
    word = Signal(intbv(0)[fmt.width :])

    # Make sure the output directory exists
    os.makedirs(path, exist_ok=True)

    pack_name = f"custom_float_pack_{str(fmt).lower()}"
    unpack_name = f"custom_float_unpack_{str(fmt).lower()}"

    dut = custom_float_pack(sign, exponent, mantissa, word, fmt=fmt)
    dut.convert(hdl="Verilog", path=path, name=pack_name)
    print(f"Verilog code generated: {path}/{pack_name}.v")

    dut = custom_float_unpack(word, sign, exponent, mantissa, fmt=fmt)
    dut.convert(hdl="Verilog", path=path, name=unpack_name)
    print(f"Verilog code generated: {path}/{unpack_name}.v")


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Convert custom float pack/unpack to Verilog")
    ap.add_argument("--exp-bits", type=int, default=CustomFloatFormat.DEFAULT_EXP_BITS)
    ap.add_argument("--man-bits", type=int, default=CustomFloatFormat.DEFAULT_MAN_BITS)
    ap.add_argument("--path", default="gen/verilog")
    args = ap.parse_args()
    convert_pack_to_verilog(CustomFloatFormat(args.exp_bits, args.man_bits), args.path)
