import logging
from typing import Callable, Optional

from . import const
from .tokens import ArgumentToken, FlagToken, OptionToken, Token, tokenize

_logger = logging.getLogger(__name__)

# --- Errors ----------------------------------------------------------------- #


class ArgumentError(ValueError):
    """
    Base class for errors raised while consuming arguments.

    Two errors are equal when their messages are.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)


class MissingValueError(ArgumentError):
    """Raised when an option or flag is given without enough values."""

    def __init__(self, argument: str):
        super().__init__(f"Missing value for `{argument}`")
        self.argument = argument


class UnexpectedValueError(ArgumentError):
    """Raised when an option or flag is followed by a non-argument token."""

    def __init__(self, token: Token, argument: str):
        super().__init__(
            f"Unexpected {token.kind} `{token}` as a value for `{argument}`"
        )
        self.token = token
        self.argument = argument


# --- Parser ----------------------------------------------------------------- #


class Parser:
    """
    A destructive parser over a list of command-line arguments.

    Every `shift*` and `has*` method removes the tokens it matched, so
    each token is observed at most once. Whatever was not consumed is
    available through `remainder`.
    """

    _tokens: list[Token]

    def __init__(self, args: list[str], splitEquals: bool = const.SPLIT_EQUALS):
        """
        Initializes a new `Parser` object.

        Args:
            args: The raw arguments, without the program name.
            splitEquals: Whether `--key=value` is read as `--key value`.
        """
        self._tokens = tokenize(args, splitEquals)

    @staticmethod
    def fromParser(parser: "Parser") -> "Parser":
        """Creates a parser over a copy of another parser's remaining tokens."""
        res = Parser([])
        res._tokens = parser._tokens[:]
        return res

    def copy(self) -> "Parser":
        return Parser.fromParser(self)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens)

    @property
    def isEmpty(self) -> bool:
        return len(self._tokens) == 0

    @property
    def remainder(self) -> list[str]:
        return [str(tok) for tok in self._tokens]

    def __len__(self) -> int:
        return len(self._tokens)

    def __str__(self) -> str:
        return " ".join(self.remainder)

    def __repr__(self) -> str:
        return f"Parser({self.remainder!r})"

    def _find(self, pred: Callable[[Token], bool]) -> Optional[int]:
        for i, tok in enumerate(self._tokens):
            if pred(tok):
                return i
        return None

    def _shiftValues(self, index: int, count: int, argument: str) -> list[str]:
        """Pops `count` argument tokens found at `index`."""
        res: list[str] = []
        for _ in range(count):
            if len(self._tokens) <= index:
                raise MissingValueError(argument)

            tok = self._tokens.pop(index)
            if not isinstance(tok, ArgumentToken):
                raise UnexpectedValueError(tok, argument)
            res.append(tok.value)
        return res

    def shift(self) -> Optional[str]:
        """Removes and returns the first positional argument, if any."""
        index = self._find(lambda tok: isinstance(tok, ArgumentToken))
        if index is None:
            return None

        tok = self._tokens.pop(index)
        assert isinstance(tok, ArgumentToken)
        _logger.debug(f"Shifted argument '{tok.value}'")
        return tok.value

    def shiftValueForOption(self, name: str) -> Optional[str]:
        """Returns the value for an option (--name Kyle, --name=Kyle)."""
        values = self.shiftValuesForOption(name)
        return values[0] if values is not None else None

    def shiftValuesForOption(self, name: str, count: int = 1) -> Optional[list[str]]:
        """
        Removes the option `--name` and the `count` arguments following it.

        Returns:
            The values in order, or None if the option was not given.

        Raises:
            MissingValueError: Fewer than `count` tokens follow the option.
            UnexpectedValueError: A value slot holds an option or a flag.

        The option and any values consumed before an error stay consumed.
        """
        if count < 0:
            raise ValueError(f"Expected a non-negative value count, got {count}")

        index = self._find(lambda tok: isinstance(tok, OptionToken) and tok.key == name)
        if index is None:
            return None

        del self._tokens[index]
        values = self._shiftValues(index, count, f"--{name}")
        _logger.debug(f"Shifted option '--{name}' with values {values}")
        return values

    def hasOption(self, name: str) -> bool:
        """Removes the option `--name`, returning whether it was given."""
        index = self._find(lambda tok: isinstance(tok, OptionToken) and tok.key == name)
        if index is None:
            return False

        del self._tokens[index]
        _logger.debug(f"Consumed option '--{name}'")
        return True

    def hasFlag(self, flag: str) -> bool:
        """
        Removes the short flag `flag` from the first cluster holding it,
        returning whether it was given. Other flags of the cluster stay.
        """
        index = self._find(lambda tok: isinstance(tok, FlagToken) and tok.has(flag))
        if index is None:
            return False

        tok = self._tokens[index]
        assert isinstance(tok, FlagToken)
        rest = tok.without(flag)
        if rest.isEmpty():
            del self._tokens[index]
        else:
            self._tokens[index] = rest

        _logger.debug(f"Consumed flag '-{flag}'")
        return True

    def shiftValueForFlag(self, flag: str) -> Optional[str]:
        """Returns the value for a flag (-n Kyle)."""
        values = self.shiftValuesForFlag(flag)
        return values[0] if values is not None else None

    def shiftValuesForFlag(self, flag: str, count: int = 1) -> Optional[list[str]]:
        """
        Removes the first cluster holding `flag`, then the `count`
        arguments following it.

        Unlike `hasFlag`, the whole cluster is removed, including any
        other flags it holds. Errors behave as in `shiftValuesForOption`.
        """
        if count < 0:
            raise ValueError(f"Expected a non-negative value count, got {count}")

        index = self._find(lambda tok: isinstance(tok, FlagToken) and tok.has(flag))
        if index is None:
            return None

        del self._tokens[index]
        values = self._shiftValues(index, count, f"-{flag}")
        _logger.debug(f"Shifted flag '-{flag}' with values {values}")
        return values
