#!/usr/bin/env python3
"""
bytehist - print a histogram of byte-value frequencies.

Usage:
    python bytehist_cli.py [input-file | -]
    cat data.bin | python bytehist_cli.py
    python bytehist_cli.py data.bin --columns 60 --plot out/data.png
"""

from __future__ import annotations

import argparse
import os
import pathlib
import sys
import textwrap
import time
from typing import BinaryIO, Optional, Sequence, TextIO

from bytehist.accumulator import accumulate, accumulate_path
from bytehist.errors import HistogramError, WriteError
from bytehist.renderer import DEFAULT_FILL, SCREEN_COLUMNS, render
from utils import console_ui

EMPTY_INPUT_MESSAGE = "(input is empty)"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _fill_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError("must be exactly one character")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="bytehist",
        usage="%(prog)s [input-file | -] [options]",
        description="Print the relative frequency of every byte value 0x00-0xff.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          bytehist firmware.bin
          head -c 4096 /dev/urandom | bytehist -
          bytehist data.bin --columns 40 --plot out/data.png
        """),
    )
    ap.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File to read; '-' or nothing reads standard input.",
    )
    ap.add_argument(
        "--columns",
        type=_positive_int,
        default=SCREEN_COLUMNS,
        help=f"Width of the longest bar (default: {SCREEN_COLUMNS}).",
    )
    ap.add_argument(
        "--fill",
        type=_fill_char,
        default=DEFAULT_FILL,
        help=f"Character used to draw bars (default: {DEFAULT_FILL!r}).",
    )
    ap.add_argument(
        "--plot",
        metavar="PATH",
        type=pathlib.Path,
        help="Also save the histogram as a PNG chart.",
    )
    ap.add_argument(
        "--plain",
        action="store_true",
        help="Disable colors in diagnostics.",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Report input source, byte count and timing on stderr.",
    )
    return ap.parse_args(argv)


def _write(out: TextIO, text: str) -> None:
    try:
        out.write(text)
        out.flush()
    except (OSError, UnicodeEncodeError) as exc:
        raise WriteError(f"write failed: {exc}") from exc


def _silence_stdout() -> None:
    # Point stdout at devnull so the interpreter's final flush cannot fail again.
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def run(args: argparse.Namespace, stdin: BinaryIO, stdout: TextIO) -> None:
    """Accumulate the selected input and write its histogram to *stdout*."""
    start = time.perf_counter()
    if args.input == "-":
        source = "<stdin>"
        table, total = accumulate(stdin)
    else:
        source = args.input
        table, total = accumulate_path(args.input)

    if args.verbose:
        console_ui.kv("Input", source)
        console_ui.kv("Bytes read", f"{total:,}")
        console_ui.elapsed("Accumulated in", time.perf_counter() - start)

    if total == 0:
        _write(stdout, EMPTY_INPUT_MESSAGE + "\n")
        if args.plot is not None:
            console_ui.warning("Input is empty; no chart written.")
        return

    _write(stdout, render(table, total, columns=args.columns, fill=args.fill))

    if args.plot is not None:
        # matplotlib is loaded only when a chart is requested.
        from reports.histogram_chart import make_histogram_chart

        path = make_histogram_chart(table, total, args.plot)
        if args.verbose:
            console_ui.success(f"Chart saved to {path.resolve()}")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    console_ui.init(plain=args.plain)
    try:
        run(
            args,
            stdin if stdin is not None else sys.stdin.buffer,
            stdout if stdout is not None else sys.stdout,
        )
    except KeyboardInterrupt:
        console_ui.warning("Operation cancelled by user.")
        return 130
    except WriteError as exc:
        console_ui.error(str(exc))
        if stdout is None:
            _silence_stdout()
        return 1
    except HistogramError as exc:
        console_ui.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
