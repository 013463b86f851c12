#!/usr/bin/env python3
"""
xdump.py

CLI wrapper: print a file as a hex + ASCII dump.

Usage:
  python xdump.py FILE [-l LINES] [-w WIDTH] [-g GROUP] [-c]

Exit codes:
  0 = success
  1 = runtime error (file cannot be opened, read failure)
  2 = incorrect usage (arg parsing, out-of-range option)
"""
import sys
import argparse
from typing import List, Optional

from byte_utils import VERSION, DEFAULT_LINE_WIDTH, DEFAULT_BYTE_GROUP_LENGTH
from dump_config import DumpConfig
from dump_errors import InvalidConfiguration, SourceReadFailure
from writer import write_dump


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='xdump',
                                     description='Display file contents in hexadecimal and ASCII')
    parser.add_argument('file_path', help='input file')
    parser.add_argument('-l', '--line-count', type=int, default=None,
                        help='number of lines to print (default: all)')
    parser.add_argument('-w', '--line-width', type=int, default=DEFAULT_LINE_WIDTH,
                        help=f'number of bytes per line, 1-256 (default: {DEFAULT_LINE_WIDTH})')
    parser.add_argument('-g', '--group-length', type=int, default=DEFAULT_BYTE_GROUP_LENGTH,
                        help=f'number of bytes per hex group, 1-256 (default: {DEFAULT_BYTE_GROUP_LENGTH})')
    parser.add_argument('-c', '--control-pictures', action='store_true',
                        help='display C0 control codes as Unicode Control Pictures')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    return parser


def config_from_args(args: argparse.Namespace) -> DumpConfig:
    return (DumpConfig()
            .with_line_count(args.line_count)
            .with_line_width(args.line_width)
            .with_byte_group_length(args.group_length)
            .with_control_pictures(args.control_pictures))


def _ensure_utf8(stream) -> None:
    # Control Pictures are outside latin-1/cp1252; only swap encodings that can't hold them
    encoding = (getattr(stream, 'encoding', None) or '').lower().replace('-', '')
    if encoding != 'utf8' and hasattr(stream, 'reconfigure'):
        stream.reconfigure(encoding='utf-8')


def main(argv: Optional[List[str]] = None, out=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if out is None:
        out = sys.stdout

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help / --version exit 0, bad arguments exit 2
        return e.code if isinstance(e.code, int) else 2

    try:
        config = config_from_args(args)
    except InvalidConfiguration as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if config.control_pictures:
        _ensure_utf8(out)

    try:
        f = open(args.file_path, 'rb')
    except OSError as e:
        print(f"error: could not read file {args.file_path}: {e}", file=sys.stderr)
        return 1

    with f:
        try:
            write_dump(f, out, config)
        except SourceReadFailure as e:
            # lines already written stay on the sink
            out.flush()
            print(f"error: could not read file {args.file_path}: {e}", file=sys.stderr)
            return 1
        except (OSError, UnicodeEncodeError) as e:
            # sink failures, e.g. a closed pipe or an encoding without Control Pictures
            print(f"error: could not write output: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
