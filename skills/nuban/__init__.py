"""
NUBAN skill – generate and check Nigerian bank account numbers.

Tools:
  nuban_generate     – random construction-valid NUBAN (optionally for a bank code)
  nuban_calculate    – append the check digit to a 9-digit account number
  nuban_validate     – check a NUBAN against a bank code
  nuban_find_banks   – list the known banks a NUBAN would be valid for
  banks_list         – list the known banks and their codes

Optional:
  NGN_RANDOM_SEED    – integer seed for reproducible generation
  NGN_LOG_DIR        – log directory (default ~/.ngnMCP/logs)
  NGN_LOG_LEVEL      – console log level (default INFO)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from skills.config import NgnConfigError, make_rng

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

__all__ = ["NgnConfigError", "register_tools"]


def register_tools(mcp: "FastMCP") -> None:
    """Register all NUBAN tools with the given FastMCP instance."""
    from ngn.account import FormatError, normalize_digits, random_bank_code
    from ngn.banks import all_banks, find_bank
    from ngn.nuban import (
        calculate_nuban,
        check_nuban,
        generate_nuban,
        matching_banks,
        normalize_nuban,
    )
    from skills.logger import setup_logger

    logger = setup_logger()
    rng = make_rng()
    if rng is not None:
        logger.info("NUBAN generation seeded via NGN_RANDOM_SEED.")

    def _bank_label(code: str) -> str:
        bank = find_bank(code)
        return str(bank) if bank else f"unknown bank ({code})"

    # ------------------------------------------------------------------

    @mcp.tool()
    def nuban_generate(bank_code: Optional[str] = None) -> str:
        """
        Generates a random, construction-valid NUBAN.

        Args:
            bank_code: 3-digit bank code. Without it, a real bank is picked at random.
        """
        bank_code = random_bank_code(rng) if bank_code is None else bank_code.strip()
        try:
            nuban = generate_nuban(bank_code, rng=rng)
        except FormatError as exc:
            return f"Error: {exc}"
        logger.info("nuban_generate: %s", nuban)
        return f"{nuban}  |  {_bank_label(bank_code)}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def nuban_calculate(account_number: str, bank_code: str) -> str:
        """
        Calculates the NUBAN (account number + check digit).

        Args:
            account_number: 9-digit account number without check digit.
            bank_code:      3-digit bank code (e.g. "033").
        """
        try:
            nuban = calculate_nuban(normalize_digits(account_number), bank_code.strip())
        except FormatError as exc:
            return f"Error: {exc}"
        return f"{nuban}  |  check digit {nuban[-1]}  |  {_bank_label(bank_code.strip())}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def nuban_validate(nuban: str, bank_code: str) -> str:
        """
        Checks length, digits and check digit of a NUBAN for a bank code.

        Args:
            nuban:     10-digit NUBAN. Spaces and dashes are ignored.
            bank_code: 3-digit bank code.
        """
        result = check_nuban(nuban, bank_code.strip())
        label = _bank_label(bank_code.strip())
        if result.valid:
            return f"{result.masked}: valid for {label}"
        logger.info("nuban_validate: %s rejected for %s", result.masked, bank_code)
        return f"{result.masked}: invalid for {label} – {result.error}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def nuban_find_banks(nuban: str) -> str:
        """
        Lists the known banks for which the NUBAN has a correct check digit.

        Args:
            nuban: 10-digit NUBAN. Spaces and dashes are ignored.
        """
        try:
            banks = matching_banks(normalize_nuban(nuban))
        except FormatError as exc:
            return f"Error: {exc}"
        if not banks:
            return "No known bank matches this NUBAN."
        lines = [f"{len(banks)} possible bank(s):"]
        lines.extend(f"  {bank.code}  {bank.name}" for bank in banks)
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def banks_list() -> str:
        """Lists all known Nigerian banks with their 3-digit bank codes."""
        lines = [f"{'Code':<6}Name", "-" * 40]
        lines.extend(f"{bank.code:<6}{bank.name}" for bank in all_banks())
        return "\n".join(lines)
