"""Command-line entry point for analysing rubber duck observation files."""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import signal
import sys
import threading
from collections.abc import Iterator, Sequence
from pathlib import Path

from .records import Coordinate

VERSION_STRING = "duckies Version 1.0.0\n"
SYNOPSIS = "duckies [options] file1 file2 ... \n"
USAGE = (
    "Parse rubber ducky observation files and perform a clustering analysis to\n"
    "find out where are very polite dubugging assistants are coming from.\n"
    "\n"
)
ENV_PREFIX = "DUCKIES_"
DEFAULT_THREADS = 2

_LOGGER_NAME = "duckworks"
_LOG_FORMAT = "[%(asctime)s] [%(levelname).1s] %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_PLACEHOLDER_RESULTS = (
    Coordinate(51.5074, -0.1278),
    Coordinate(19.432608, -99.133209),
    Coordinate(19.076090, 72.877426),
    Coordinate(19.8987, -155.6659),
    Coordinate(-19.0154, 29.1549),
)

logger = logging.getLogger(__name__)


class _ConfigError(Exception):
    """Raised when the command line or environment cannot be understood."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise _ConfigError(message)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid job count {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("the number of jobs must be at least 1")
    return value


_TRUE_WORDS = frozenset({"", "1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _parse_bool(text: str) -> bool:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise _ConfigError(f"invalid boolean value {text!r}")


def _build_parser() -> _Parser:
    parser = _Parser(prog="duckies", usage=argparse.SUPPRESS, add_help=False)
    parser.add_argument(
        "-h", "--help", action="store_true", help="produce help message"
    )
    parser.add_argument(
        "--version", action="store_true", help="print the version and exit"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="print logging information to the terminal",
    )
    parser.add_argument(
        "-j", "--jobs", type=_positive_int, help="set the maximum number of jobs"
    )
    parser.add_argument("paths", nargs="*", type=Path, help="paths to process")
    return parser


def _apply_environment(args: argparse.Namespace) -> None:
    """Fill options not given on the command line from DUCKIES_* variables."""
    for name, value in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        option = name[len(ENV_PREFIX):].lower()
        if option in ("help", "version", "verbose"):
            if not getattr(args, option):
                setattr(args, option, _parse_bool(value))
        elif option == "jobs":
            if args.jobs is None:
                try:
                    args.jobs = _positive_int(value)
                except argparse.ArgumentTypeError as exc:
                    raise _ConfigError(str(exc)) from None
        elif option == "paths":
            if not args.paths:
                args.paths = [Path(value)]


def parse_config(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Read options from ``argv`` and the environment.

    Exits with status 0 after ``--version`` or ``--help`` and with status 1
    on invalid options or when no paths are given.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    options_text = parser.format_help()

    try:
        args = parser.parse_args(list(argv))
        _apply_environment(args)
    except _ConfigError as exc:
        sys.stderr.write(f"{exc}\n\n{SYNOPSIS}{options_text}\n")
        raise SystemExit(1) from None

    if args.version:
        sys.stderr.write(VERSION_STRING)
        raise SystemExit(0)

    if args.help:
        sys.stderr.write(f"{SYNOPSIS}{USAGE}{options_text}\n")
        raise SystemExit(0)

    if not args.paths:
        sys.stderr.write(f"{SYNOPSIS}{options_text}\n")
        raise SystemExit(1)

    return args


class _ConsoleHandler(logging.StreamHandler):
    """The stderr handler installed by ``setup_logging``."""


def setup_logging(args: argparse.Namespace) -> logging.Logger:
    """Send package log records to stderr; info level when verbose, else warning."""
    package_logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if isinstance(handler, _ConsoleHandler):
            package_logger.removeHandler(handler)

    handler = _ConsoleHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _LOG_DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(
        logging.INFO if getattr(args, "verbose", False) else logging.WARNING
    )

    logger.info("Finished setting up logger")
    return package_logger


def setup_threading(args: argparse.Namespace) -> int:
    """Number of worker threads to use: the requested count capped by the CPUs,
    or a conservative default when none was requested."""
    available = os.cpu_count() or 1
    requested = getattr(args, "jobs", None)
    threads = DEFAULT_THREADS if requested is None else min(available, requested)
    logger.info("We will use %d threads", threads)
    return threads


class _InterruptState:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def record(self) -> int:
        """Count one interrupt and return how many came before it."""
        with self._lock:
            previous = self._count
            self._count += 1
            return previous

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def reset(self) -> None:
        with self._lock:
            self._count = 0


_interrupts = _InterruptState()


def _sigint_handler(signum, frame) -> None:
    if _interrupts.record() > 0:
        sys.exit(1)


def _setup_signals():
    """Install the SIGINT handler; return the previous one, or None if not possible."""
    if threading.current_thread() is not threading.main_thread():
        return None
    return signal.signal(signal.SIGINT, _sigint_handler)


def check_interrupts() -> bool:
    """True once Ctrl-C has been pressed, telling the user how to force an exit."""
    interrupted = _interrupts.count > 0
    if interrupted:
        sys.stderr.write(
            "Received Ctrl-C event, terminating gracefully\n"
            "Press Ctrl-C again to exit immediately\n"
        )
        sys.stderr.flush()
    return interrupted


@contextlib.contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        logger.critical("%s", exc)
        raise SystemExit(1) from exc


def run_and_report(args: argparse.Namespace) -> list[Coordinate]:
    """Print the result coordinates, one ``latitude longitude`` pair per line."""
    results = list(_PLACEHOLDER_RESULTS)
    for coordinate in results:
        sys.stdout.write(f"{coordinate.latitude: 7.3f} {coordinate.longitude: 8.3f}\n")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    previous_handler = _setup_signals()
    try:
        args = parse_config(argv)
        setup_logging(args)
        setup_threading(args)
        with _handle_errors():
            run_and_report(args)
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGINT, previous_handler)
    return 0