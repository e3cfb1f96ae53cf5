"""Text encodings of raw random bytes: hex, base64 and quoted-printable.

Line wrapping follows MIME conventions: at most 76 characters per line, each
line terminated by the caller's ``eol``. An empty ``eol`` disables wrapping.
"""

from __future__ import annotations

import base64
import binascii
import re

MAX_LINE_LENGTH = 76

_SOFT_BREAK = re.compile(r"=\r?\n")
_QP_TOKEN = re.compile(r"=[0-9A-F]{2}|[^=]")


def encode_hex(data: bytes) -> str:
    """Return lowercase hex digits, two per byte."""
    return data.hex()


def encode_base64(data: bytes, eol: str = "\n") -> str:
    """Return standard-alphabet base64 of *data*.

    Every line, including the last, is followed by *eol*; no line exceeds
    76 characters. ``b""`` encodes to ``""``.
    """
    encoded = base64.b64encode(data).decode("ascii")
    if not eol or not encoded:
        return encoded
    lines = [encoded[i : i + MAX_LINE_LENGTH] for i in range(0, len(encoded), MAX_LINE_LENGTH)]
    return eol.join(lines) + eol


def encode_qp(data: bytes, eol: str = "\n") -> str:
    """Return binary-safe quoted-printable of *data*.

    CR and LF bytes are escaped (``=0D``/``=0A``), so the only line breaks
    in the output are soft breaks ``=`` followed by *eol*. Every line,
    including the last, ends in a soft break and is at most 76 characters
    long; an ``=XX`` escape is never split. ``b""`` encodes to ``""``.

    Args:
        data: Bytes to encode.
        eol: Line terminator made of CR and LF characters, or ``""`` for a
            single unwrapped line.

    Raises:
        ValueError: If *eol* holds anything other than CR or LF.
    """
    if eol.strip("\r\n"):
        raise ValueError(f"eol must consist of CR and LF characters, got {eol!r}")
    if not data:
        return ""
    encoded = binascii.b2a_qp(data, quotetabs=False, istext=False, header=False).decode("ascii")
    encoded = _SOFT_BREAK.sub("", encoded)
    if not eol:
        return encoded

    # Leave room for the "=" of each soft break.
    width = MAX_LINE_LENGTH - 1
    lines: list[str] = []
    line = ""
    for token in _QP_TOKEN.findall(encoded):
        if len(line) + len(token) > width:
            lines.append(line)
            line = ""
        line += token
    lines.append(line)
    soft_break = "=" + eol
    return soft_break.join(lines) + soft_break
