# writer.py
import io
from typing import Optional, TextIO, BinaryIO

from dump_config import DumpConfig
from reader import iter_dump_lines, read_dump


def write_dump(source: BinaryIO,
               out: TextIO,
               config: Optional[DumpConfig] = None) -> int:
    """
    Dump `source` to the text sink `out`, one line at a time.

    - Each line is written (with a trailing newline) as soon as it is formatted,
      so if the source fails mid-stream the lines before the failure stay written
      and the SourceReadFailure propagates to the caller.
    - Neither `source` nor `out` is closed.

    Returns the number of data lines written (header lines not counted).
    """
    written = 0
    for i, line in enumerate(iter_dump_lines(source, config)):
        out.write(line)
        out.write('\n')
        if i >= 2:
            written += 1
    return written


def hexdump(data: bytes, config: Optional[DumpConfig] = None) -> str:
    """
    Convenience helper: dump an in-memory buffer and return the text
    (lines joined by '\\n', no trailing newline).
    """
    return '\n'.join(read_dump(io.BytesIO(data), config))
