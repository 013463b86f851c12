# dump_config.py
"""
Display options for a dump.

DumpConfig is a frozen record; each with_* setter validates its value and
returns an updated copy, so options chain:

    cfg = DumpConfig().with_line_width(8).with_byte_group_length(2)

Validation also runs on direct construction, so an out-of-range width can
never reach the read loop.
"""

from dataclasses import dataclass, replace
from typing import Optional

from byte_utils import (
    DEFAULT_LINE_WIDTH, DEFAULT_BYTE_GROUP_LENGTH, MIN_WIDTH, MAX_WIDTH
)
from dump_errors import InvalidConfiguration


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_width(option: str, value) -> None:
    if not _is_int(value) or not (MIN_WIDTH <= value <= MAX_WIDTH):
        raise InvalidConfiguration(option, value, f"an integer in [{MIN_WIDTH}, {MAX_WIDTH}]")


def _check_line_count(value) -> None:
    if value is None:
        return
    if not _is_int(value) or value < 0:
        raise InvalidConfiguration('line_count', value, "None or a non-negative integer")


@dataclass(frozen=True)
class DumpConfig:
    control_pictures: bool = False
    line_count: Optional[int] = None
    line_width: int = DEFAULT_LINE_WIDTH
    byte_group_length: int = DEFAULT_BYTE_GROUP_LENGTH

    def __post_init__(self):
        _check_line_count(self.line_count)
        _check_width('line_width', self.line_width)
        _check_width('byte_group_length', self.byte_group_length)

    # ---- chained setters ----
    def with_control_pictures(self, enabled: bool) -> 'DumpConfig':
        return replace(self, control_pictures=bool(enabled))

    def with_line_count(self, count: Optional[int]) -> 'DumpConfig':
        _check_line_count(count)
        return replace(self, line_count=count)

    def with_line_width(self, width: int) -> 'DumpConfig':
        _check_width('line_width', width)
        return replace(self, line_width=width)

    def with_byte_group_length(self, length: int) -> 'DumpConfig':
        _check_width('byte_group_length', length)
        return replace(self, byte_group_length=length)

    # ---- derived values ----
    @property
    def hex_field_width(self) -> int:
        """Rendered width of a full line's hex column (groups plus separating spaces)."""
        # 2*line_width digits + ceil(line_width / group) - 1 spaces
        return ((2 * self.byte_group_length + 1) * self.line_width - 1) // self.byte_group_length

    @property
    def byte_limit(self) -> Optional[int]:
        """Number of bytes the line cap allows to be read, or None when unlimited."""
        if self.line_count is None:
            return None
        return self.line_count * self.line_width
