#!/usr/bin/env python3
"""Print a random string drawn from a small alphabet.

Usage:
    python random_from.py
    python random_from.py --bag 0123456789abcdef --length 32
"""

from __future__ import annotations

import argparse
import logging

from secure_bytes import random_string_from


def main() -> None:
    """Parse arguments and print one random string."""
    parser = argparse.ArgumentParser(description="Random string from a bag of characters")
    parser.add_argument("--bag", default="abcde", help="characters to choose from (default: abcde)")
    parser.add_argument("--length", type=int, default=64, help="output length (default: 64)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log seeding details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Each of the characters is selected independently from the bag.
    print(random_string_from(args.bag, args.length))


if __name__ == "__main__":
    main()
