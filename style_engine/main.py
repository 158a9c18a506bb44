#!/usr/bin/env python3
"""
Style Engine - Main Entry Point

Parses a single CSS property value and prints the resulting descriptor.
"""

import argparse
import sys
from enum import Enum
from typing import List, Optional

from style_engine import __version__
from style_engine.css import CSSValueError, UnknownPropertyError, ValueParser
from style_engine.utils.config import Config
from style_engine.utils.logging import LOG_LEVELS, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Parse a CSS property value into a descriptor")

    parser.add_argument("property", help="Property name, e.g. box-shadow")
    parser.add_argument("value", help="Property value, e.g. '5px 10px #888888 inset'")
    parser.add_argument("--config", help="Path to a JSON configuration file", default=None)
    parser.add_argument("--log-level", choices=sorted(LOG_LEVELS), default=None,
                        help="Console log level (default: from configuration)")
    parser.add_argument("--css", action="store_true",
                        help="Print the canonical CSS text instead of the descriptor")
    parser.add_argument("--version", action="version", version=f"Style Engine {__version__}")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config = Config(args.config)
    logger = setup_logging(console_level=args.log_level or config.get('logging.level', 'WARNING'))

    value_parser = ValueParser(config)

    try:
        result = value_parser.parse(args.property, args.value)
    except UnknownPropertyError:
        logger.error(f"Unknown property: {args.property}")
        return 1
    except CSSValueError as e:
        logger.error(f"Invalid {args.property} value {args.value!r}: {e}")
        return 1

    if result is None:
        print("none")
    elif args.css:
        print(result.value if isinstance(result, Enum) else result.to_css())
    else:
        print(repr(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
