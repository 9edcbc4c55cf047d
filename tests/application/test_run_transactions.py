"""Tests for the RunTransactions use case."""

import pytest

from solid.application.dto import TransactionSpec
from solid.application.run_transactions import AccountDesign, RunTransactionsHandler
from solid.domain.exceptions import ValidationError


def _ops(*pairs: tuple[str, str]) -> list[TransactionSpec]:
    return [TransactionSpec(kind, amount) for kind, amount in pairs]


class TestRunTransactions:

    @pytest.mark.parametrize("design", list(AccountDesign))
    def test_applies_operations_in_order(self, design):
        dto = RunTransactionsHandler().handle(
            "ACC-1",
            "100",
            _ops(("deposit", "50"), ("withdraw", "30"), ("withdraw", "200")),
            design,
        )
        assert dto.account_number == "ACC-1"
        assert dto.balance == "$-80.00"
        assert dto.report == ["Account Number: ACC-1", "Balance: $-80.00"]

    def test_designs_agree(self):
        handler = RunTransactionsHandler()
        ops = _ops(("deposit", "0.10"), ("deposit", "0.20"), ("withdraw", "0.30"))
        results = {handler.handle("ACC-2", "10", ops, design).balance for design in AccountDesign}
        assert results == {"$10.00"}

    def test_exact_balance_keeps_sub_cent_digits(self):
        dto = RunTransactionsHandler().handle("ACC-4", "10", _ops(("deposit", "0.001")))
        assert dto.balance == "$10.00"
        assert dto.exact_balance == "10.001"

    def test_currency_shown_in_report(self):
        dto = RunTransactionsHandler(currency="EUR").handle("ACC-5", "3", [])
        assert dto.report[-1] == "Balance: €3.00"

    def test_no_operations_reports_opening_balance(self):
        dto = RunTransactionsHandler().handle("ACC-3", "7.5", [])
        assert dto.balance == "$7.50"

    def test_separated_is_the_default_design(self):
        handler = RunTransactionsHandler()
        assert handler.handle("A", "1", []) == handler.handle(
            "A", "1", [], AccountDesign.SEPARATED
        )


class TestRunTransactionsValidation:

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match="Unknown transaction kind 'transfer'"):
            RunTransactionsHandler().handle("A", "1", _ops(("transfer", "5")))

    def test_bad_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            RunTransactionsHandler().handle("A", "1", _ops(("deposit", "lots")))

    def test_bad_opening_balance_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            RunTransactionsHandler().handle("A", "", [])

    def test_huge_amount_rejected_before_any_arithmetic(self):
        with pytest.raises(ValidationError, match="Money amount out of range"):
            RunTransactionsHandler().handle("A", "1e1000000", _ops(("deposit", "1")))
