"""Plus command - add two non-negative integers."""
from __future__ import annotations

import re

from tinysh.commands.registry import builtin_registry
from tinysh.core.datamodels import CONTINUE
from tinysh.core.helpers import report_error

# ASCII digits only: no sign, no decimal point, no whitespace
_NUMBER_RE = re.compile(r"[0-9]+")


def is_number(arg: str) -> bool:
    """Check that arg is a non-empty string of decimal digits.

    Example:
        >>> is_number("007")
        True
        >>> is_number("-5")
        False
        >>> is_number("")
        False
    """
    return _NUMBER_RE.fullmatch(arg) is not None


@builtin_registry.register("plus", "Add two numbers", usage="plus <a> <b>")
def cmd_plus(tokens: list[str]) -> int:
    """Print the sum of two numbers. Extra arguments are ignored."""
    if len(tokens) < 3:
        report_error('expected arguments to "plus"')
        return CONTINUE

    a, b = tokens[1], tokens[2]
    if not (is_number(a) and is_number(b)):
        report_error('unacceptable arguments for "plus"')
        return CONTINUE

    try:
        print(int(a) + int(b))
    except ValueError:
        # Beyond sys.get_int_max_str_digits()
        report_error('number too large for "plus"')
    return CONTINUE
