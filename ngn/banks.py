"""Registry of real Nigerian banks and their 3-digit CBN bank codes."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Bank:
    name: str
    code: str

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


# Order is part of the contract: random_bank() indexes into it.
BANKS: Tuple[Bank, ...] = (
    Bank("ACCESS BANK", "044"),
    Bank("CITIBANK", "023"),
    Bank("DIAMOND BANK", "063"),
    Bank("ECOBANK NIGERIA", "050"),
    Bank("FIDELITY BANK", "070"),
    Bank("FIRST BANK OF NIGERIA", "011"),
    Bank("FIRST CITY MONUMENT BANK", "214"),
    Bank("GUARANTY TRUST BANK", "058"),
    Bank("HERITAGE BANK", "030"),
    Bank("KEYSTONE BANK", "082"),
    Bank("POLARIS BANK", "086"),
    Bank("PROVIDUS BANK", "101"),
    Bank("STANBIC IBTC BANK", "221"),
    Bank("STANDARD CHARTERED BANK", "068"),
    Bank("STERLING BANK", "232"),
    Bank("SUNTRUST", "100"),
    Bank("UNION BANK OF NIGERIA", "032"),
    Bank("UNITED BANK FOR AFRICA", "033"),
    Bank("UNITY BANK", "215"),
    Bank("WEMA BANK", "035"),
    Bank("ZENITH BANK", "057"),
)

_BY_CODE: Dict[str, Bank] = {bank.code: bank for bank in BANKS}


def all_banks() -> Tuple[Bank, ...]:
    return BANKS


def random_bank(rng: Optional[random.Random] = None) -> Bank:
    """Pick a registry bank uniformly. Uses the shared ``random`` generator unless *rng* is given."""
    source = rng if rng is not None else random
    return BANKS[source.randrange(len(BANKS))]


def find_bank(code: str) -> Optional[Bank]:
    return _BY_CODE.get(code)
