import sys

RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
RESET = "\033[0m"


KIND_COLORS = {
    "argument": GREEN,
    "option": BLUE,
    "flag": YELLOW,
}


def kind(name: str, width: int = 8) -> str:
    color = KIND_COLORS.get(name, "")
    return f"{color}{name.ljust(width)}{RESET}"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str):
    print(f"{BOLD}{text}{RESET}")


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
