"""Nigerian banking utils: NUBAN, account number, bank code, list of banks."""

import logging

from .account import (
    FormatError,
    generate_account_number,
    normalize_digits,
    random_bank_code,
    validate_account_number,
    validate_bank_code,
)
from .banks import Bank, all_banks, find_bank, random_bank
from .nuban import (
    ValidationResult,
    calculate_check_digit,
    calculate_nuban,
    check_nuban,
    generate_nuban,
    mask_nuban,
    matching_banks,
    normalize_nuban,
    validate_nuban,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bank",
    "FormatError",
    "ValidationResult",
    "all_banks",
    "calculate_check_digit",
    "calculate_nuban",
    "check_nuban",
    "find_bank",
    "generate_account_number",
    "generate_nuban",
    "mask_nuban",
    "matching_banks",
    "normalize_digits",
    "normalize_nuban",
    "random_bank",
    "random_bank_code",
    "validate_account_number",
    "validate_bank_code",
    "validate_nuban",
]
