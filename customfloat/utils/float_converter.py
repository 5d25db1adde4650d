import argparse
import sys

from customfloat.utils.float_defs import CustomFloatFormat
from customfloat.utils.encoder import CustomFloatEncoder, ExponentRangeError
from customfloat.utils.formatter import format_encoded, format_labelled, format_value
from customfloat.utils.parsing import ParseError, parse_double
from customfloat.utils.combine import checked_combine
from customfloat.utils.standard_values import standard_values

INVALID_INPUT = "Invalid input. Please enter a valid floating-point number."


def build_parser():
    ap = argparse.ArgumentParser(
        description="Show the custom floating-point encoding of decimal numbers"
    )
    ap.add_argument(
        "--exp-bits",
        type=int,
        default=CustomFloatFormat.DEFAULT_EXP_BITS,
        help="Exponent width in bits",
    )
    ap.add_argument(
        "--man-bits",
        type=int,
        default=CustomFloatFormat.DEFAULT_MAN_BITS,
        help="Mantissa width in bits (implicit bit excluded)",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Reject values whose exponent does not fit instead of wrapping",
    )
    ap.add_argument(
        "--no-standard",
        action="store_true",
        help="Skip the table of standard representations",
    )
    ap.add_argument("--value", help="Number to encode (prompted for if omitted)")
    ap.add_argument("-a", help="First operand of F(a, b) (prompted for if omitted)")
    ap.add_argument("-b", help="Second operand of F(a, b) (prompted for if omitted)")
    return ap


def show_encoding(encoder, header, value):
    """Print a header line followed by the encoding of value."""
    print(header)
    try:
        print(format_encoded(encoder.encode(value)))
    except ExponentRangeError as e:
        print(f"Error: {e}", file=sys.stderr)


def show_standard_values(encoder):
    print("Standard representations:")
    for label, value in standard_values(encoder.fmt):
        print()
        try:
            print(format_labelled(label, value, encoder.encode(value)))
        except ExponentRangeError as e:
            print(f"{label}: {format_value(value)}")
            print(f"Error: {e}", file=sys.stderr)


def read_answer(answer, message):
    """Return the command line answer, or prompt for one."""
    if answer is not None:
        return answer
    return input(message)


def run_session(encoder, args):
    """
    Encode one number, then F(a, b) and its operands.

    Returns:
        int: 0 when the session ran to completion, 1 if input ran out
    """
    if not args.no_standard:
        show_standard_values(encoder)

    try:
        text = read_answer(
            args.value,
            "\nEnter a decimal floating-point number (e.g., ±1.23E±4): ",
        )
        try:
            value = parse_double(text)
            show_encoding(encoder, f"\nEntered value: {format_value(value)}", value)
        except ParseError:
            print(INVALID_INPUT, file=sys.stderr)

        a_text = read_answer(args.a, "Enter value for a: ")
        b_text = read_answer(args.b, "Enter value for b: ")
    except EOFError:
        print("\nNo more input.", file=sys.stderr)
        return 1

    try:
        a = parse_double(a_text)
        b = parse_double(b_text)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 0

    show_encoding(encoder, "\nRepresentation of a:", a)
    show_encoding(encoder, "\nRepresentation of b:", b)

    result = checked_combine(a, b)
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 0

    print(
        "\nThe result of F(a, b) = 2 * a * b / (a^2 + b^2): "
        f"{format_value(result.value)}"
    )

    # Re-encode the result from its shortest round-trip text
    try:
        value = parse_double(repr(result.value))
        show_encoding(encoder, f"\nRe-encoded value: {format_value(value)}", value)
    except ParseError:
        print(INVALID_INPUT, file=sys.stderr)
    return 0


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        fmt = CustomFloatFormat(args.exp_bits, args.man_bits)
    except ValueError as e:
        ap.error(str(e))

    encoder = CustomFloatEncoder(fmt, strict=args.strict)
    return run_session(encoder, args)


if __name__ == "__main__":
    sys.exit(main())
