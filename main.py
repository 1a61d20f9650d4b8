import argparse
import curses
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from app_logging import setup_logging
from config_paths import load_config
from record_source import RecordSourceError

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"


PROG = "tabpeek"

_NAMED_DELIMITERS = {
    "\\t": "\t",
    "tab": "\t",
    "space": " ",
    "pipe": "|",
    "semicolon": ";",
}


def parse_delimiter(value: str) -> str:
    delimiter = _NAMED_DELIMITERS.get(value.lower(), value) if value else value
    if not delimiter or len(delimiter) != 1:
        raise argparse.ArgumentTypeError(
            f"delimiter must be a single character, got {value!r}"
        )
    if delimiter in ('"', "\n", "\r"):
        raise argparse.ArgumentTypeError(f"{value!r} cannot be used as a delimiter")
    return delimiter


def _buffer_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid buffer size {value!r}") from None
    if size < 2:
        raise argparse.ArgumentTypeError("buffer size must be at least 2")
    return size


def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Browse large delimited text files in the terminal.",
    )
    parser.add_argument("path", help="file to view")
    parser.add_argument(
        "-d",
        "--delimiter",
        type=parse_delimiter,
        default=",",
        help="field delimiter (default ','; '\\t' or 'tab' for tabs)",
    )
    parser.add_argument(
        "-l", "--line", type=int, default=0, help="data row to start at (0-based)"
    )
    parser.add_argument(
        "-b",
        "--buffer-size",
        type=_buffer_size,
        default=None,
        help="rows kept in memory around the current row",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_args(argv=None):
    args = build_parser().parse_args(argv)
    args.line = max(0, args.line)
    return args


def main(argv=None):
    args = parse_args(argv)

    config = load_config()
    if args.buffer_size is not None:
        config["BUFFER_SIZE"] = args.buffer_size
    logger = setup_logging(config["LOG_LEVEL"])

    if not os.path.exists(args.path):
        print(f"{PROG}: error: no such file: {args.path}", file=sys.stderr)
        return 1

    from orchestrator import Orchestrator

    def curses_main(stdscr):
        Orchestrator(
            stdscr,
            args.path,
            delimiter=args.delimiter,
            start_row=args.line,
            config=config,
        ).run()

    logger.info("opening %s at row %d", args.path, args.line)
    try:
        # wrapper restores the terminal before any exception reaches us
        curses.wrapper(curses_main)
    except RecordSourceError as exc:
        logger.error("fatal: %s", exc)
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
