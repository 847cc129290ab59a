import sys
import logging
from typing import Any, Optional

from . import const, vt100
from .parser import (
    ArgumentError,
    MissingValueError,
    Parser,
    UnexpectedValueError,
)
from .tokens import ArgumentToken, FlagToken, OptionToken, Token, parseArg, tokenize

__all__ = [
    "ArgumentError",
    "ArgumentToken",
    "FlagToken",
    "MissingValueError",
    "OptionToken",
    "Parser",
    "Token",
    "UnexpectedValueError",
    "parseArg",
    "tokenize",
    "main",
]

_logger = logging.getLogger(__name__)


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def usage():
    print(
        f"Usage: {const.ARGV0} [--verbose] [--version] [--no-split] [--query QUERY]... [args...]"
    )


# --- Queries ---------------------------------------------------------------- #

# A query replays one parser call against the remaining arguments:
#
#   arg                    shift()
#   option:NAME[:COUNT]    shiftValuesForOption(NAME, COUNT)
#   flag:C[:COUNT]         shiftValuesForFlag(C, COUNT)
#   has-option:NAME        hasOption(NAME)
#   has-flag:C             hasFlag(C)


def _parseCount(s: str) -> int:
    try:
        return int(s)
    except ValueError:
        raise ValueError(f"Invalid value count '{s}'")


def runQuery(parser: Parser, query: str) -> Any:
    """Runs a single query against `parser` and returns its result."""
    kind, _, rest = query.partition(":")
    name, _, count = rest.partition(":")

    if query == "arg":
        return parser.shift()

    if not name:
        raise ValueError(f"Invalid query '{query}'")

    if kind == "option":
        return parser.shiftValuesForOption(name, _parseCount(count or "1"))
    elif kind == "flag":
        return parser.shiftValuesForFlag(name, _parseCount(count or "1"))
    elif kind == "has-option" and not count:
        return parser.hasOption(name)
    elif kind == "has-flag" and not count:
        return parser.hasFlag(name)

    raise ValueError(f"Invalid query '{query}'")


def dump(parser: Parser):
    """Prints every remaining token with its kind."""
    vt100.title(f"Remainder ({len(parser)})")
    for tok in parser.tokens:
        print(vt100.indent(f"{vt100.kind(tok.kind)} {tok}"))


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        # `--no-split` is looked up in the split token stream, then the
        # arguments are classified again without splitting.
        noSplit = Parser(argv).hasOption("no-split")
        parser = Parser(argv, splitEquals=not noSplit)
        parser.hasOption("no-split")
        logger.setup(parser.hasOption("verbose"))

        if parser.hasOption("version"):
            print(f"shiftargs v{const.VERSION_STR}")
            return 0

        queries: list[str] = []
        while (query := parser.shiftValueForOption("query")) is not None:
            queries.append(query)

        _logger.info(f"Running {len(queries)} queries against '{parser}'")

        if queries:
            vt100.title("Queries")
            for query in queries:
                print(vt100.indent(f"{query} => {runQuery(parser, query)!r}"))
            print()

        dump(parser)
        return 0

    except ValueError as e:
        _logger.debug(str(e), exc_info=True)
        vt100.error(str(e))
        usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
