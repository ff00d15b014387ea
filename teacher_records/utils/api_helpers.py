"""API helper functions for routes."""

import re
from contextlib import contextmanager
from typing import Iterator, Optional

from teacher_records.exceptions import AppError, OperationFailedError

_SIGN = re.compile(r"\s*([+-]?)")
_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a query parameter.

    Leading whitespace and a sign are allowed; parsing stops at the first
    non-digit, so ``"42abc"`` gives 42 and ``"4.7"`` gives 4. A ``0x``
    prefix switches to hexadecimal. Only ASCII digits count.

    Args:
        text: Raw query parameter value, or None if absent.

    Returns:
        Parsed integer, or None if the text does not start with one.
    """
    if text is None:
        return None
    sign_match = _SIGN.match(text)
    pos = sign_match.end()
    if text[pos : pos + 2] in ("0x", "0X"):
        digits = _HEX_DIGITS.match(text, pos + 2)
        base = 16
    else:
        digits = _DECIMAL_DIGITS.match(text, pos)
        base = 10
    if not digits:
        return None
    value = int(digits.group(), base)
    return -value if sign_match.group(1) == "-" else value


@contextmanager
def operation_guard(message: str) -> Iterator[None]:
    """Convert unexpected exceptions raised by a route into a fixed error.

    Application errors pass through to their own exception handlers;
    anything else is re-raised as ``OperationFailedError(message)``.

    Args:
        message: Message returned to the client on failure.

    Usage:
        with operation_guard("Failed to retrieve teachers"):
            return await service.get_all()
    """
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        raise OperationFailedError(message) from e
