"""
NUBAN (Nigerian Universal Bank Account Number) generation and validation.

A NUBAN has 10 digits: a 9-digit account number followed by a check digit
that depends on the 3-digit bank code. The bank code itself is not part of
the NUBAN, so a NUBAN is only valid or invalid relative to a bank code.

See CBN "Proposals on the Nigerian Uniform Bank Account Number (NUBAN)
Scheme", v0.4 (2010).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from itertools import cycle
from typing import List, Optional

from ngn.account import (
    ACCOUNT_NUMBER_LENGTH,
    FormatError,
    generate_account_number,
    is_digits,
    normalize_digits,
    random_bank_code,
    validate_account_number,
    validate_bank_code,
)
from ngn.banks import Bank, all_banks

logger = logging.getLogger(__name__)

NUBAN_LENGTH = ACCOUNT_NUMBER_LENGTH + 1

# Weights applied to bank code + account number, repeated left to right.
CHECK_DIGIT_WEIGHTS = (3, 7, 3)


@dataclass
class ValidationResult:
    valid: bool
    masked: str
    error: str = ""


def _validate_format(nuban: str) -> None:
    if len(nuban) != NUBAN_LENGTH:
        raise FormatError(f"NUBAN must have length {NUBAN_LENGTH}, got {len(nuban)}")
    if not is_digits(nuban):
        raise FormatError("NUBAN must be digits only")


def calculate_check_digit(account_number: str, bank_code: str) -> int:
    """
    Check digit for *account_number* at the bank with *bank_code*.

    Algorithm:
      1. concatenate bank code and account number (12 digits)
      2. multiply each digit with 3, 7, 3, 3, 7, 3, ... and sum the products
      3. take the sum modulo 10 and subtract it from 10
      4. take that result modulo 10 (so a remainder of 0 gives 0, not 10)

    Inputs are assumed to be well-formed; callers validate first.
    """
    digits = (int(ch) for ch in bank_code + account_number)
    product_sum = sum(d * w for d, w in zip(digits, cycle(CHECK_DIGIT_WEIGHTS)))
    return (10 - product_sum % 10) % 10


def calculate_nuban(account_number: str, bank_code: str) -> str:
    """Append the check digit to a 9-digit account number. Raises FormatError on bad input."""
    validate_account_number(account_number)
    validate_bank_code(bank_code)
    return account_number + str(calculate_check_digit(account_number, bank_code))


def generate_nuban(bank_code: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """
    Generate a construction-valid NUBAN.

    If no bank code is given, one is picked from the real banks in the
    registry, so the result may well be an account in actual use. An explicit
    bank code only has to be 3 digits, not a known bank.
    """
    if bank_code is None:
        bank_code = random_bank_code(rng)
    account_number = generate_account_number(rng)
    nuban = calculate_nuban(account_number, bank_code)
    logger.debug("Generated NUBAN %s for bank code %s", nuban, bank_code)
    return nuban


def validate_nuban(nuban: str, bank_code: str) -> None:
    """Check length, digits and check digit of *nuban* for *bank_code*. Raises FormatError."""
    validate_bank_code(bank_code)
    _validate_format(nuban)

    account_number = nuban[:ACCOUNT_NUMBER_LENGTH]
    check_digit = int(nuban[-1])
    correct_check_digit = calculate_check_digit(account_number, bank_code)
    if check_digit != correct_check_digit:
        raise FormatError(f"Check digit {check_digit} is incorrect. Correct: {correct_check_digit}")


def normalize_nuban(raw: str) -> str:
    """Strip whitespace and dashes, e.g. ``"172 318 5117"`` -> ``"1723185117"``."""
    return normalize_digits(raw)


def mask_nuban(nuban: str) -> str:
    if len(nuban) < 7:
        return nuban
    return nuban[:3] + "*" * (len(nuban) - 6) + nuban[-3:]


def check_nuban(raw: str, bank_code: str) -> ValidationResult:
    """Normalise and validate *raw* for *bank_code*. Returns ValidationResult instead of raising."""
    nuban = normalize_nuban(raw)
    try:
        validate_nuban(nuban, bank_code)
    except FormatError as exc:
        return ValidationResult(False, mask_nuban(nuban), str(exc))
    return ValidationResult(True, mask_nuban(nuban))


def matching_banks(nuban: str) -> List[Bank]:
    """
    Registry banks for which *nuban* carries a correct check digit.

    Several banks usually match, since there are only ten possible check
    digits. Raises FormatError if *nuban* is not 10 digits.
    """
    _validate_format(nuban)

    account_number = nuban[:ACCOUNT_NUMBER_LENGTH]
    check_digit = int(nuban[-1])
    return [
        bank
        for bank in all_banks()
        if calculate_check_digit(account_number, bank.code) == check_digit
    ]
