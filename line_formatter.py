# line_formatter.py
"""
Render one chunk into the three-column line layout:

    <offset> | <hex field> | <ascii field>

The hex field is padded to the width of a *full* line so every row, including
a short final one, lines up with the header. The ASCII field is never padded.
"""

from typing import Iterable, Iterator

from byte_utils import OFFSET_DIGITS, COLUMN_SEPARATOR, byte_to_hex, byte_to_char
from dump_config import DumpConfig


def iter_groups(cells: list, group_length: int) -> Iterator[list]:
    for i in range(0, len(cells), group_length):
        yield cells[i:i + group_length]


def join_grouped(cells: Iterable[str], group_length: int) -> str:
    """Concatenate cells inside each group of group_length, and space-join the groups."""
    cells = list(cells)
    return ' '.join(''.join(group) for group in iter_groups(cells, group_length))


def format_offset(offset: int) -> str:
    return f'{offset:0{OFFSET_DIGITS}x}'


def format_hex_field(chunk: bytes, byte_group_length: int) -> str:
    return join_grouped((byte_to_hex(b) for b in chunk), byte_group_length)


def format_ascii_field(chunk: bytes, control_pictures: bool = False) -> str:
    return ''.join(byte_to_char(b, control_pictures) for b in chunk)


def format_line(offset: int, chunk: bytes, config: DumpConfig) -> str:
    hex_field = format_hex_field(chunk, config.byte_group_length)
    hex_field = hex_field.ljust(config.hex_field_width)
    ascii_field = format_ascii_field(chunk, config.control_pictures)
    return COLUMN_SEPARATOR.join((format_offset(offset), hex_field, ascii_field))
