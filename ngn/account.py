"""Format checks and random generation for bank codes and account numbers."""

from __future__ import annotations

import random
import re
from typing import Optional

from ngn.banks import random_bank

BANK_CODE_LENGTH = 3
ACCOUNT_NUMBER_LENGTH = 9

_DIGITS = frozenset("0123456789")
_SEPARATORS_RE = re.compile(r"[\s\-]")


class FormatError(ValueError):
    """Raised when a bank code, account number or NUBAN is malformed."""


def is_digits(value: str) -> bool:
    # str.isdigit() would also accept superscripts and non-ASCII digits
    return all(ch in _DIGITS for ch in value)


def normalize_digits(raw: str) -> str:
    """Drop whitespace and dashes from a digit string typed by a person."""
    return _SEPARATORS_RE.sub("", raw)


def validate_bank_code(code: str) -> None:
    if len(code) != BANK_CODE_LENGTH:
        raise FormatError(f"Bank code must have length {BANK_CODE_LENGTH}, got {len(code)}")
    if not is_digits(code):
        raise FormatError("Bank code must be digits only")


def random_bank_code(rng: Optional[random.Random] = None) -> str:
    """Return the code of a real bank picked at random from the registry."""
    return random_bank(rng).code


def validate_account_number(number: str) -> None:
    if len(number) != ACCOUNT_NUMBER_LENGTH:
        raise FormatError(
            f"Bank account number must have length {ACCOUNT_NUMBER_LENGTH}, got {len(number)}"
        )
    if not is_digits(number):
        raise FormatError("Bank account number must be digits only")


def generate_account_number(rng: Optional[random.Random] = None) -> str:
    """
    Generate a random 9-digit account number (without check digit).

    Every value in [0, 10**9) is equally likely and rendered zero-padded,
    so each of the 10**9 possible digit strings is equally likely too.
    """
    source = rng if rng is not None else random
    return f"{source.randrange(10 ** ACCOUNT_NUMBER_LENGTH):0{ACCOUNT_NUMBER_LENGTH}d}"
