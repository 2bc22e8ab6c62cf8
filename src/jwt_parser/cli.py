"""
CLI entry point for the JWT parser.

Provides both interactive mode (prompt for token) and argument mode
(pass token directly or pipe via stdin).  The signature is decoded but
never verified.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime

from .config import ConfigError, ParserConfig, load_config, parse_parser_config
from .errors import TokenParseError
from .logging_setup import setup_logging
from .parser import Parser
from .token import Token

__all__ = ["main"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

def _json_default(value):
    """Render date claims as ISO-8601 strings."""
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _format_signature(token: Token, signature_format: str) -> str | None:
    if token.signature is None:
        return None
    if signature_format == "hex":
        return token.signature.hex()
    return str(token.signature)


def _token_to_dict(token: Token, cfg: ParserConfig) -> dict:
    return {
        "header": dict(token.headers),
        "claims": dict(token.claims),
        "signature": _format_signature(token, cfg.signature_format),
        "raw_segments": list(token.raw_segments),
    }


def _print_json(label: str, data: dict, indent: int) -> None:
    """Print a labelled JSON section."""
    print(f"\n{label}:")
    print(json.dumps(data, indent=indent, default=_json_default))


def _print_result(token: Token, cfg: ParserConfig) -> None:
    """Pretty-print the parsed token parts."""
    _print_json("Header", dict(token.headers), cfg.indent)
    _print_json("Claims", dict(token.claims), cfg.indent)

    signature = _format_signature(token, cfg.signature_format)
    if signature is None:
        print("\nSignature: (none — token is unsigned)")
    else:
        print(f"\nSignature ({cfg.signature_format}, NOT verified):\n{signature}")

    print("\nRaw segments:")
    for segment in token.raw_segments:
        print(f"  {segment}")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jwt-parser",
        description="Parse and inspect a JWT token without signature verification.",
        epilog="Examples:\n"
               "  %(prog)s                          # interactive prompt\n"
               "  %(prog)s <token>                   # pass token as argument\n"
               "  echo '<token>' | %(prog)s --stdin  # read from stdin\n"
               "  %(prog)s <token> --json            # single JSON document\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "token",
        nargs="?",
        default=None,
        help="JWT token string (optional — prompts interactively if omitted)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        default=False,
        help="Read token from stdin (for piping)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config YAML (default: config/config.yaml if present)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the parsed token as one JSON document",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Show debug logging on the console",
    )
    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        cfg = parse_parser_config(load_config(args.config))
    except ConfigError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    log_path = setup_logging(verbose=args.verbose, log_to_file=cfg.log_to_file)
    if log_path:
        logger.debug("Logging to %s", log_path)

    # --- Resolve token input -----------------------------------------------
    if args.stdin:
        token = sys.stdin.read().strip()
        if not token:
            print("Error: No token received on stdin.")
            sys.exit(1)
    elif args.token:
        token = args.token.strip()
    else:
        # Interactive mode
        print("JWT Token Parser")
        print("================")
        try:
            token = input("Please enter your JWT token: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            sys.exit(130)

    # --- Parse --------------------------------------------------------------
    try:
        result = Parser(max_length=cfg.max_token_length).parse(token)
    except TokenParseError as exc:
        logger.debug("Parse failed: %s", type(exc).__name__)
        print(f"Error: {exc}")
        sys.exit(1)

    if args.json:
        print(json.dumps(_token_to_dict(result, cfg), indent=cfg.indent, default=_json_default))
    else:
        _print_result(result, cfg)
