#!/usr/bin/env python3
"""Print the base64 SHA-512 digest of 128 random bytes.

Also shows seed configuration, which is normally unnecessary. It must
happen before the first random output; afterwards ``config_seed`` returns
``False`` and changes nothing.

Usage:
    python random_sha512.py
    SECURE_BYTES_BIT_WIDTH=256 python random_sha512.py -v
"""

from __future__ import annotations

import argparse
import base64
import hashlib
import logging

from secure_bytes import config_seed, random_bytes

_QUANTITY = 128


def main() -> None:
    """Configure seeding, draw bytes and print their digest."""
    parser = argparse.ArgumentParser(description="Base64 SHA-512 of random bytes")
    parser.add_argument("-v", "--verbose", action="store_true", help="log seeding details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config_seed(non_blocking=True)

    data = random_bytes(_QUANTITY)
    digest = base64.b64encode(hashlib.sha512(data).digest()).decode("ascii")
    print(digest.rstrip("="))


if __name__ == "__main__":
    main()
