"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass

INT_MAX = 2_147_483_647
INT_MIN = -2_147_483_648

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the simulation arguments are invalid."""


@dataclass(frozen=True)
class Args:
    """Settings of one simulation run; times are in milliseconds."""

    n_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None


def parse_int(text: str) -> int:
    """Read a leading signed decimal integer, ignoring leading whitespace.

    Parsing stops at the first non-digit; no digits yields 0. A value outside
    the 32-bit signed range raises OverflowError.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + int(char)
        if not INT_MIN <= result * sign <= INT_MAX:
            raise OverflowError(f"integer out of range: {text!r}")
    return result * sign


def is_number(text: str | None) -> bool:
    """Tell whether text is an optional '+' followed only by ASCII digits."""
    if not text:
        return False
    body = text[1:] if text[0] == "+" else text
    return all("0" <= char <= "9" for char in body)


def _to_int(text: str) -> int:
    try:
        return parse_int(text)
    except OverflowError:
        return -1


def parse_args(argv: list[str]) -> Args:
    """Validate the program arguments (without the program name)."""
    if not 4 <= len(argv) <= 5:
        raise ArgumentError("Error: invalid number of arguments")
    for arg in argv:
        if not is_number(arg):
            raise ArgumentError(f"Error: invalid argument '{arg}'")
    n_philos, time_to_die, time_to_eat, time_to_sleep = (
        _to_int(arg) for arg in argv[:4]
    )
    must_eat = _to_int(argv[4]) if len(argv) == 5 else None
    if min(n_philos, time_to_die, time_to_eat, time_to_sleep) <= 0:
        raise ArgumentError("Error: arguments must be positive integers")
    if must_eat is not None and must_eat <= 0:
        raise ArgumentError("Error")
    return Args(n_philos, time_to_die, time_to_eat, time_to_sleep, must_eat)