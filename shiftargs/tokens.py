import dataclasses as dt

from . import const


@dt.dataclass(frozen=True)
class Token:
    """
    Base class for classified command-line tokens.
    """

    @property
    def kind(self) -> str:
        raise NotImplementedError()


@dt.dataclass(frozen=True)
class ArgumentToken(Token):
    """
    A positional argument, any token not starting with "-".

    Attributes:
        value: The argument as it was given.
    """

    value: str

    @property
    def kind(self) -> str:
        return "argument"

    def __str__(self) -> str:
        return self.value


@dt.dataclass(frozen=True)
class OptionToken(Token):
    """
    A long option (e.g. "--verbose").

    Attributes:
        key: The option name without the leading "--".
    """

    key: str

    @property
    def kind(self) -> str:
        return "option"

    def __str__(self) -> str:
        return f"--{self.key}"


@dt.dataclass(frozen=True)
class FlagToken(Token):
    """
    A cluster of short flags (e.g. "-abc").

    Two clusters holding the same flags are equal whatever their order.

    Attributes:
        flags: The flag characters, without duplicates, in first-seen order.
    """

    flags: tuple[str, ...] = dt.field(compare=False)
    _set: frozenset[str] = dt.field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "flags", tuple(dict.fromkeys(self.flags)))
        object.__setattr__(self, "_set", frozenset(self.flags))

    @staticmethod
    def fromStr(s: str) -> "FlagToken":
        return FlagToken(tuple(s))

    @property
    def kind(self) -> str:
        return "flag"

    def has(self, flag: str) -> bool:
        return flag in self._set

    def without(self, flag: str) -> "FlagToken":
        """Returns a copy of this token with `flag` removed."""
        return FlagToken(tuple(f for f in self.flags if f != flag))

    def isEmpty(self) -> bool:
        return len(self._set) == 0

    def __str__(self) -> str:
        return "-" + "".join(self.flags)


def parseArg(arg: str, splitEquals: bool = const.SPLIT_EQUALS) -> list[Token]:
    """Classifies a single command-line argument into one or two tokens."""
    if arg.startswith("--"):
        key = arg[2:]
        if splitEquals and "=" in key:
            key, value = key.split("=", 1)
            return [OptionToken(key), ArgumentToken(value)]
        return [OptionToken(key)]
    elif arg.startswith("-"):
        return [FlagToken.fromStr(arg[1:])]
    else:
        return [ArgumentToken(arg)]


def tokenize(args: list[str], splitEquals: bool = const.SPLIT_EQUALS) -> list[Token]:
    """Classifies a list of command-line arguments into a list of tokens."""
    res: list[Token] = []
    for arg in args:
        res.extend(parseArg(arg, splitEquals))
    return res
