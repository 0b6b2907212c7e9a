"""Tests for the NUBAN MCP tools, registered on a fake server."""

from __future__ import annotations

import logging

import pytest

from ngn.nuban import validate_nuban
from skills.nuban import NgnConfigError, register_tools
from tests.mocks import FakeMCP


@pytest.fixture
def tools(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("NGN_RANDOM_SEED", raising=False)
    mcp = FakeMCP()
    register_tools(mcp)
    return mcp.tools


class TestRegistration:
    """Tests for the set of registered tools and configuration."""

    def test_registers_all_tools(self, tools) -> None:
        assert set(tools) == {
            "nuban_generate",
            "nuban_calculate",
            "nuban_validate",
            "nuban_find_banks",
            "banks_list",
        }

    def test_invalid_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NGN_RANDOM_SEED", "abc")
        with pytest.raises(NgnConfigError, match="NGN_RANDOM_SEED"):
            register_tools(FakeMCP())

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NGN_LOG_LEVEL", "bogus")
        with pytest.raises(NgnConfigError, match="NGN_LOG_LEVEL"):
            register_tools(FakeMCP())

    def test_library_logs_reach_server_handlers(self, tools) -> None:
        server_handlers = logging.getLogger("ngnMCP").handlers
        assert server_handlers
        assert logging.getLogger("ngn").handlers[-len(server_handlers):] == server_handlers

    def test_seed_makes_generation_reproducible(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NGN_RANDOM_SEED", "7")
        first, second = FakeMCP(), FakeMCP()
        register_tools(first)
        register_tools(second)
        outputs_a = [first.tools["nuban_generate"]() for _ in range(3)]
        outputs_b = [second.tools["nuban_generate"]() for _ in range(3)]
        assert outputs_a == outputs_b


class TestTools:
    """Tests for the tool output text."""

    def test_generate_for_bank_code(self, tools) -> None:
        output = tools["nuban_generate"](" 033 ")
        nuban, label = output.split("  |  ")
        validate_nuban(nuban, "033")
        assert label == "UNITED BANK FOR AFRICA (033)"

    def test_generate_for_unknown_bank(self, tools) -> None:
        output = tools["nuban_generate"]("999")
        assert output.endswith("unknown bank (999)")

    def test_generate_random_bank(self, tools) -> None:
        nuban, label = tools["nuban_generate"]().split("  |  ")
        code = label[-4:-1]
        validate_nuban(nuban, code)

    def test_generate_bad_code(self, tools) -> None:
        assert tools["nuban_generate"]("12").startswith("Error: Bank code must have length 3")

    def test_calculate(self, tools) -> None:
        output = tools["nuban_calculate"]("172 318 511", "033")
        assert output == "1723185117  |  check digit 7  |  UNITED BANK FOR AFRICA (033)"

    def test_calculate_ignores_separators_in_account_number(self, tools) -> None:
        assert tools["nuban_calculate"]("172-318-511", " 033").startswith("1723185117  |")

    def test_calculate_error(self, tools) -> None:
        assert tools["nuban_calculate"]("17231851", "033").startswith("Error: Bank account number")

    def test_validate_ok(self, tools) -> None:
        output = tools["nuban_validate"]("172-318-5117", "033")
        assert output == "172****117: valid for UNITED BANK FOR AFRICA (033)"

    def test_validate_mismatch(self, tools) -> None:
        output = tools["nuban_validate"]("1723185117", "058")
        assert "invalid for GUARANTY TRUST BANK (058)" in output
        assert "Check digit 7 is incorrect. Correct: 8" in output

    def test_find_banks(self, tools) -> None:
        output = tools["nuban_find_banks"]("1723185117")
        assert "033  UNITED BANK FOR AFRICA" in output
        assert "044  ACCESS BANK" in output
        assert "058" not in output

    def test_find_banks_error(self, tools) -> None:
        assert tools["nuban_find_banks"]("123").startswith("Error: NUBAN must have length 10")

    def test_banks_list(self, tools) -> None:
        lines = tools["banks_list"]().splitlines()
        assert len(lines) == 2 + 21
        assert lines[2] == "044   ACCESS BANK"
