# reader.py
from typing import BinaryIO, Iterator, List, Optional, Tuple

from byte_utils import read_up_to
from dump_config import DumpConfig
from dump_errors import SourceReadFailure
from header_utils import build_header
from line_formatter import format_line


def iter_chunks(source: BinaryIO, config: DumpConfig) -> Iterator[Tuple[int, bytes]]:
    """
    Yield (chunk_offset, chunk_bytes) pairs from a sequential byte source.

    - Each chunk holds up to config.line_width bytes; only the last may be short.
    - chunk_offset advances by line_width after every chunk, full or not.
    - When config.line_count is set, iteration stops *before* the read that
      would start line line_count + 1, so nothing past the cap is consumed.

    The source is borrowed: it is never opened, closed or seeked here.
    Any failure from source.read() ends iteration with SourceReadFailure.
    """
    width = config.line_width
    limit = config.byte_limit
    chunk_offset = 0
    while True:
        if limit is not None and chunk_offset >= limit:
            return
        try:
            # tops up short reads to one full line; never asks for more than width bytes
            chunk = read_up_to(source, width)
        except Exception as e:
            raise SourceReadFailure(chunk_offset, e) from e
        if not chunk:
            return
        yield chunk_offset, chunk
        chunk_offset += width


def iter_dump_lines(source: BinaryIO, config: Optional[DumpConfig] = None) -> Iterator[str]:
    """
    Yield the two header lines, then one formatted line per chunk.

    Lines are produced lazily, so a consumer that writes them out as they
    arrive keeps everything emitted before a read failure.
    """
    if config is None:
        config = DumpConfig()
    yield from build_header(config)
    for chunk_offset, chunk in iter_chunks(source, config):
        yield format_line(chunk_offset, chunk, config)


def read_dump(source: BinaryIO, config: Optional[DumpConfig] = None) -> List[str]:
    """Collect the whole dump of `source` as a list of lines (header included)."""
    return list(iter_dump_lines(source, config))
