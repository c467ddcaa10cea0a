"""
Command-line entry point

Usage:
    textsign text sign --format blake3 --key blake3.key [-i FILE]
    textsign text verify --format ed25519 --key ed25519.pk --sig SIG [-i FILE]
    textsign text generate --format ed25519 [-o DIR]
    textsign genpass [--length N] [--no-uppercase] [--no-lowercase] [--no-number] [--no-symbol]
    textsign base64 encode [--format standard|urlsafe] [-i FILE]
    textsign base64 decode [--format standard|urlsafe] [-i FILE] [-o FILE]

"-" (the default input) reads standard input.

Environment Variables:
    TEXTSIGN_LOG_LEVEL          Log level (default: WARNING)
    TEXTSIGN_KEY_DIR            Output directory for generated keys (default: .)
    TEXTSIGN_SECRET_KEY_MODE    Octal permissions for secret key files (default: 600)
    TEXTSIGN_DEBUG              Enable debug logging and tracebacks
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional, Sequence

from zxcvbn import zxcvbn

from . import __version__
from .config import LOG_LEVELS, TextSignConfig, get_config
from .crypto.keys import save_keys
from .errors import FileAccessError, TextSignError
from .process import decode_source, encode_source, generate_keys, sign_text, verify_text
from .types import Base64Format, TextSignFormat
from .utils.genpass import DEFAULT_LENGTH, generate_password
from .utils.io import STDIN

# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2

SIGN_FORMATS = [f.value for f in TextSignFormat]
BASE64_FORMATS = [f.value for f in Base64Format]


def setup_logging(level: int) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def text_sign_cmd(args: argparse.Namespace) -> int:
    print(sign_text(args.input, args.key, args.format))
    return EXIT_SUCCESS


def text_verify_cmd(args: argparse.Namespace) -> int:
    verified = verify_text(args.input, args.key, args.sig, args.format)
    print("true" if verified else "false")
    return EXIT_SUCCESS if verified else EXIT_VERIFICATION_FAILED


def text_generate_cmd(args: argparse.Namespace) -> int:
    config: TextSignConfig = args.config
    output = args.output or config.key_dir
    keys = generate_keys(args.format)
    for path in save_keys(args.format, keys, output, config.secret_key_mode):
        print(path)
    return EXIT_SUCCESS


def genpass_cmd(args: argparse.Namespace) -> int:
    password = generate_password(
        args.length,
        uppercase=args.uppercase,
        lowercase=args.lowercase,
        digits=args.number,
        symbols=args.symbol,
    )
    print(password)
    # stdout carries only the password
    estimate = zxcvbn(password)
    print(f"Password strength: {estimate['score']}", file=sys.stderr)
    return EXIT_SUCCESS


def base64_encode_cmd(args: argparse.Namespace) -> int:
    print(encode_source(args.input, args.format))
    return EXIT_SUCCESS


def base64_decode_cmd(args: argparse.Namespace) -> int:
    decoded = decode_source(args.input, args.format)
    if args.output:
        try:
            Path(args.output).write_bytes(decoded)
        except OSError as e:
            raise FileAccessError(
                f"Cannot write {args.output}: {e.strerror or e}", path=args.output
            ) from e
    else:
        sys.stdout.buffer.write(decoded)
        sys.stdout.flush()
    return EXIT_SUCCESS


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="textsign",
        description="Sign and verify text with blake3 or ed25519, generate keys and passwords.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=LOG_LEVELS,
        help="Log level (overrides TEXTSIGN_LOG_LEVEL)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug logging and tracebacks on error",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- text command ---
    text_parser = subparsers.add_parser(
        "text",
        help="Sign or verify text, generate signing keys",
    )
    text_subparsers = text_parser.add_subparsers(dest="text_command", help="Text operation")

    sign_parser = text_subparsers.add_parser("sign", help="Sign input with a private/shared key")
    sign_parser.add_argument("-i", "--input", default=STDIN, help="Input file (default: stdin)")
    sign_parser.add_argument("-k", "--key", required=True, help="Key file")
    sign_parser.add_argument("--format", type=str.lower, choices=SIGN_FORMATS, required=True, help="Sign format")
    sign_parser.set_defaults(func=text_sign_cmd)

    verify_parser = text_subparsers.add_parser("verify", help="Verify a signature with a public/shared key")
    verify_parser.add_argument("-i", "--input", default=STDIN, help="Input file (default: stdin)")
    verify_parser.add_argument("-k", "--key", required=True, help="Key file")
    verify_parser.add_argument("--sig", type=str, required=True, help="Signature (URL-safe base64, no padding)")
    verify_parser.add_argument("--format", type=str.lower, choices=SIGN_FORMATS, required=True, help="Sign format")
    verify_parser.set_defaults(func=text_verify_cmd)

    generate_parser = text_subparsers.add_parser("generate", help="Generate a new key")
    generate_parser.add_argument("--format", type=str.lower, choices=SIGN_FORMATS, required=True, help="Sign format")
    generate_parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output directory (default: TEXTSIGN_KEY_DIR or .)",
    )
    generate_parser.set_defaults(func=text_generate_cmd)

    text_parser.set_defaults(func=lambda args: text_parser.print_help() or EXIT_RUNTIME_ERROR)

    # --- genpass command ---
    genpass_parser = subparsers.add_parser("genpass", help="Generate a random password")
    genpass_parser.add_argument("-l", "--length", type=int, default=DEFAULT_LENGTH, help=f"Length (default: {DEFAULT_LENGTH})")
    genpass_parser.add_argument("--no-uppercase", dest="uppercase", action="store_false", help="Exclude uppercase letters")
    genpass_parser.add_argument("--no-lowercase", dest="lowercase", action="store_false", help="Exclude lowercase letters")
    genpass_parser.add_argument("--no-number", dest="number", action="store_false", help="Exclude digits")
    genpass_parser.add_argument("--no-symbol", dest="symbol", action="store_false", help="Exclude symbols")
    genpass_parser.set_defaults(func=genpass_cmd)

    # --- base64 command ---
    base64_parser = subparsers.add_parser("base64", help="Base64 encode or decode")
    base64_subparsers = base64_parser.add_subparsers(dest="base64_command", help="Base64 operation")

    encode_parser = base64_subparsers.add_parser("encode", help="Encode input to base64")
    encode_parser.add_argument("-i", "--input", default=STDIN, help="Input file (default: stdin)")
    encode_parser.add_argument("--format", type=str.lower, choices=BASE64_FORMATS, default=Base64Format.STANDARD.value)
    encode_parser.set_defaults(func=base64_encode_cmd)

    decode_parser = base64_subparsers.add_parser("decode", help="Decode base64 input")
    decode_parser.add_argument("-i", "--input", default=STDIN, help="Input file (default: stdin)")
    decode_parser.add_argument("-o", "--output", type=str, default=None, help="Output file (default: stdout)")
    decode_parser.add_argument("--format", type=str.lower, choices=BASE64_FORMATS, default=Base64Format.STANDARD.value)
    decode_parser.set_defaults(func=base64_decode_cmd)

    base64_parser.set_defaults(func=lambda args: base64_parser.print_help() or EXIT_RUNTIME_ERROR)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = get_config()
    except ValueError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    debug = args.debug or config.debug
    if debug:
        level = logging.DEBUG
    elif args.log_level:
        level = getattr(logging, args.log_level)
    else:
        level = config.effective_log_level
    setup_logging(level)

    args.config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except TextSignError as e:
        if debug:
            traceback.print_exc()
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
