# byte_utils.py
"""
Byte-level helpers for the xdump formatter.

This module centralizes:
- layout constants (default/maximum widths, offset digits, separators)
- per-byte rendering for the hex and ASCII columns
- a forgiving chunk reader (read_up_to) for file-like sources
"""

from typing import BinaryIO

# ---- Layout constants ----
VERSION = "0.3.0"

DEFAULT_LINE_WIDTH = 16
DEFAULT_BYTE_GROUP_LENGTH = 1
MIN_WIDTH = 1
MAX_WIDTH = 256

OFFSET_DIGITS = 8
COLUMN_SEPARATOR = ' | '
RULE_JOINT = '+'

# C0 control codes map onto the Unicode "Control Pictures" block
CONTROL_PICTURES_BASE = 0x2400
PLACEHOLDER = '.'

# ---- Per-byte rendering ----
def byte_to_hex(b: int) -> str:
    return f'{b:02x}'

def byte_to_char(b: int, control_pictures: bool = False) -> str:
    """
    Render one byte for the ASCII column.

    0x00-0x1F -> Control Picture glyph (U+2400 + b) if enabled, else '.'
    0x20-0x7E -> the ASCII character itself
    0x7F-0xFF -> '.'
    """
    if b < 0x20:
        return chr(CONTROL_PICTURES_BASE + b) if control_pictures else PLACEHOLDER
    if b < 0x7f:
        return chr(b)
    return PLACEHOLDER

# ---- Convenience / IO helpers ----
def read_up_to(f: BinaryIO, n: int) -> bytes:
    """
    Read at most n bytes from file-like object f.

    Unlike a single f.read(n), short reads from raw or unbuffered streams are
    topped up until n bytes are collected or the stream is exhausted, so only
    the final chunk of a stream can come back short. Returns b'' at EOF.
    """
    data = f.read(n)
    if not isinstance(data, (bytes, bytearray)):
        # read() on text-mode files returns str; None means a non-blocking stream had nothing
        raise TypeError(f"source read() returned {type(data).__name__}, expected bytes")
    if not data:
        return b''
    buf = bytearray(data)
    while len(buf) < n:
        more = f.read(n - len(buf))
        if not more:
            break
        buf += more
    return bytes(buf)
