"""passall command-line interface.

Usage examples:
    passall generate -n 20 -c 5
    passall generate -n 12 --word --case random --no-symbols
    passall generate -n 16 --caesar "Attack At Dawn" --shift 3
    passall cipher "Dwwdfn Dw Gdzq" --shift 3 --decode
"""

import argparse
import logging
import sys

from passall import (
    DEFAULT_LENGTH,
    CipherConfig,
    GenerationOptions,
    WordCase,
    caesar_cipher,
    caesar_decipher,
    generate_cipher_password,
    generate_password,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passall",
        description="Generate random passwords, optionally built around a word or a cipher.",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, 4-32 (default: {DEFAULT_LENGTH})",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument("--no-lower", action="store_true")
    gen_p.add_argument("--no-upper", action="store_true")
    gen_p.add_argument("--no-numbers", action="store_true")
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument(
        "-w", "--word", action="store_true",
        help="Embed a dictionary word",
    )
    gen_p.add_argument(
        "--case", choices=[c.value for c in WordCase], default=WordCase.LOWER.value,
        help="Case applied to the embedded word (default: lower)",
    )
    gen_p.add_argument(
        "--caesar", metavar="PHRASE",
        help="Embed PHRASE encoded with a Caesar cipher instead of a word",
    )
    gen_p.add_argument(
        "--shift", type=int, default=3,
        help="Caesar shift, 1-25 (default: 3)",
    )

    # ── cipher ─────────────────────────────────────────────────────────
    cipher_p = sub.add_parser("cipher", help="Caesar-shift text")
    cipher_p.add_argument("text", nargs="+", help="Text to transform")
    cipher_p.add_argument(
        "--shift", type=int, default=3,
        help="Caesar shift, 1-25 (default: 3)",
    )
    cipher_p.add_argument(
        "-d", "--decode", action="store_true",
        help="Reverse the shift instead of applying it",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(message)s",
    )

    try:
        if args.command == "generate":
            return _cmd_generate(args)
        if args.command == "cipher":
            return _cmd_cipher(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    parser.print_help()
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    options = GenerationOptions(
        lower=not args.no_lower,
        upper=not args.no_upper,
        numbers=not args.no_numbers,
        symbols=not args.no_symbols,
        word=args.word,
    )

    if args.caesar is not None:
        config = CipherConfig(args.caesar, args.shift)
        for i in range(args.count):
            pwd = generate_cipher_password(args.length, config, options)
            if not pwd:
                print("Error: enable at least one character class or give a phrase", file=sys.stderr)
                return 2
            if i == 0:
                print(f"  Plain:   {config.plaintext}")
                print(f"  Cipher:  {caesar_cipher(config.plaintext, config.shift)}  (shift {config.shift})")
            print(f"  {pwd}")
        return 0

    for _ in range(args.count):
        pwd = generate_password(args.length, options, args.case)
        if not pwd:
            print("Error: enable at least one character class or --word", file=sys.stderr)
            return 2
        print(f"  {pwd}")

    return 0


def _cmd_cipher(args: argparse.Namespace) -> int:
    text = " ".join(args.text)
    if args.decode:
        print(caesar_decipher(text, args.shift))
    else:
        print(caesar_cipher(text, args.shift))
    return 0


if __name__ == "__main__":
    sys.exit(main())
