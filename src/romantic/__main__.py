"""Main entry point for the romantic package."""
import sys
import argparse

from .common.config import DEFAULT_ALPHABET, DEFAULT_INTEGER_KIND
from .common.integer_kinds import IntegerKind
from .convert_csv import TARGETS, convert_csv_column
from .roman import Roman


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog='romantic', description='Roman numeral converter')
    subparsers = parser.add_subparsers(dest='command', required=True)

    alphabet_help = f"characters from smallest to largest magnitude (default: {''.join(DEFAULT_ALPHABET)})"
    kind_choices = [kind.name.lower() for kind in IntegerKind]

    encode_parser = subparsers.add_parser('encode', help='Convert integers to numerals')
    encode_parser.add_argument('numbers', nargs='+', type=int, help='Non-negative integers')
    encode_parser.add_argument('--alphabet', default=''.join(DEFAULT_ALPHABET), help=alphabet_help)

    decode_parser = subparsers.add_parser('decode', help='Convert numerals to integers')
    decode_parser.add_argument('numerals', nargs='+', help='Numeral strings')
    decode_parser.add_argument('--alphabet', default=''.join(DEFAULT_ALPHABET), help=alphabet_help)
    decode_parser.add_argument('--kind', default=DEFAULT_INTEGER_KIND.name.lower(), choices=kind_choices,
                               help='integer kind to decode into')

    csv_parser = subparsers.add_parser('csv', help='Convert a column of a CSV file')
    csv_parser.add_argument('path', help='Path to the input CSV file')
    csv_parser.add_argument('--column', required=True, help='Column to convert')
    csv_parser.add_argument('--to', required=True, choices=TARGETS, help='Conversion target')
    csv_parser.add_argument('--output', help='Output CSV path (default: <input>_converted.csv)')
    csv_parser.add_argument('--alphabet', default=''.join(DEFAULT_ALPHABET), help=alphabet_help)
    csv_parser.add_argument('--kind', default=DEFAULT_INTEGER_KIND.name.lower(), choices=kind_choices,
                            help='integer kind to decode into')

    return parser


def run_encode(args) -> None:
    roman = Roman(args.alphabet)
    for number in args.numbers:
        print(roman.encode(number))


def run_decode(args) -> None:
    roman = Roman(args.alphabet)
    for numeral in args.numerals:
        print(roman.decode(numeral, args.kind))


def run_csv(args) -> None:
    convert_csv_column(args.path, args.column, args.to, args.output, args.alphabet, args.kind)


def main(argv=None) -> int:
    """Parse arguments and run the chosen command.

    Returns:
        Process exit status: 0 on success, 1 if a conversion failed
    """
    args = build_parser().parse_args(argv)

    commands = {
        'encode': run_encode,
        'decode': run_decode,
        'csv': run_csv,
    }

    try:
        commands[args.command](args)
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
