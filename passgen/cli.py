"""CLI for passgen: check a password's strength or generate a new one."""

import argparse
import logging
import re
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import MAX_LENGTH
from .generator import (
    EmptyCharacterSetError,
    GenerationConfig,
    generate,
    generate_default,
)
from .strength import classify

logger = logging.getLogger(__name__)

console = Console()

GENERATION_FLAGS = ("length", "digits", "lowercase", "special", "uppercase")

_LENGTH_RE = re.compile(r"\+?[0-9]+")


def _echo(text: str) -> None:
    # written raw: rich would strip control codes and expand tabs
    console.file.write(text + "\n")


def parse_length(value: str) -> Optional[int]:
    """Return the length as an int, or None if it is not in 0..MAX_LENGTH."""
    if not _LENGTH_RE.fullmatch(value):
        return None
    length = int(value)
    if length > MAX_LENGTH:
        return None
    return length


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def cmd_check(args) -> int:
    strength = classify(args.password)
    logger.debug("classified a %d-char password", len(args.password))
    _echo(f"{args.password} is {strength}")
    return 0


def cmd_generate(args) -> int:
    if args.length is not None:
        length = parse_length(args.length)
        if length is None:
            _echo(f"Length should be a positive number, instead got {args.length}")
            return 0
        config = GenerationConfig(
            length=length,
            use_digits=args.digits,
            use_lowercase=args.lowercase,
            use_special_chars=args.special,
            use_uppercase=args.uppercase,
        )
    else:
        config = GenerationConfig.with_default_length(
            use_digits=args.digits,
            use_lowercase=args.lowercase,
            use_special_chars=args.special,
            use_uppercase=args.uppercase,
        )

    try:
        pw = generate(config)
    except EmptyCharacterSetError as e:
        logger.debug("generation failed: %s", e)
        _echo("Failed to generate password")
        return 0
    _echo(pw)
    return 0


def cmd_generate_default(args) -> int:
    _echo(generate_default())
    return 0


def uses_generation_flags(args) -> bool:
    return args.length is not None or any(
        getattr(args, name) for name in GENERATION_FLAGS[1:]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generates and checks passwords",
    )
    parser.add_argument("password", nargs="?", help="The password that needs to be checked")
    parser.add_argument("-e", "--length", type=str, help="Password length (0-%d)" % MAX_LENGTH)
    parser.add_argument("-d", "--digits", action="store_true", help="Should the password contain digits")
    parser.add_argument("-l", "--lowercase", action="store_true", help="Should the password contain lowercase letters")
    parser.add_argument("-s", "--special", action="store_true", help="Should the password contain special characters")
    parser.add_argument("-u", "--uppercase", action="store_true", help="Should the password contain uppercase letters")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.password is not None:
        if uses_generation_flags(args):
            parser.error("a password to check cannot be combined with generation options")
        return cmd_check(args)
    if uses_generation_flags(args):
        return cmd_generate(args)
    return cmd_generate_default(args)


if __name__ == "__main__":
    raise SystemExit(main())
