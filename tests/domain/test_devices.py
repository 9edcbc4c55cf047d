"""Unit tests for the printer and scanner contracts."""

import pytest

from solid.domain.model.devices import Printer, Scanner
from tests.fakes import RecordingPrinter, RecordingScanner


class TestCapabilityContracts:

    def test_contracts_are_independent(self):
        assert not issubclass(Printer, Scanner)
        assert not issubclass(Scanner, Printer)

    def test_each_contract_has_one_method(self):
        assert Printer.__abstractmethods__ == frozenset({"print_document"})
        assert Scanner.__abstractmethods__ == frozenset({"scan_document"})

    def test_print_only_implementation_needs_no_scan_method(self):
        printer = RecordingPrinter()
        printer.print_document()
        assert printer.printed == 1
        assert not hasattr(printer, "scan_document")

    def test_scan_only_implementation_needs_no_print_method(self):
        scanner = RecordingScanner()
        scanner.scan_document()
        assert scanner.scanned == 1
        assert not hasattr(scanner, "print_document")

    @pytest.mark.parametrize("contract", [Printer, Scanner])
    def test_contract_cannot_be_instantiated(self, contract):
        with pytest.raises(TypeError):
            contract()
