# header_utils.py
"""
Header builder for the dump layout.

Functions:
- build_legend(config) -> str   byte-index legend aligned over the hex column
- build_rule(config) -> str     dashed separator, one run per column, joined by '+'
- build_header(config) -> [legend, rule]

Both lines are sized from the configured line_width / byte_group_length, so
they match the column boundaries of every data line, e.g. with defaults:

             | 00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f |
    ---------+-------------------------------------------------+-----------------
"""

from typing import List

from byte_utils import OFFSET_DIGITS, COLUMN_SEPARATOR, RULE_JOINT, byte_to_hex
from dump_config import DumpConfig
from line_formatter import join_grouped


def build_legend(config: DumpConfig) -> str:
    # line_width <= 256, so each index fits in two hex digits
    indexes = (byte_to_hex(i) for i in range(config.line_width))
    legend = join_grouped(indexes, config.byte_group_length).ljust(config.hex_field_width)
    return COLUMN_SEPARATOR.join((' ' * OFFSET_DIGITS, legend, ' ' * config.line_width))


def build_rule(config: DumpConfig) -> str:
    # each run covers its column plus the spaces the ' | ' separator puts around it
    offset_run = '-' * (OFFSET_DIGITS + 1)
    hex_run = '-' * (config.hex_field_width + 2)
    ascii_run = '-' * (config.line_width + 1)
    return RULE_JOINT.join((offset_run, hex_run, ascii_run))


def build_header(config: DumpConfig) -> List[str]:
    return [build_legend(config), build_rule(config)]
