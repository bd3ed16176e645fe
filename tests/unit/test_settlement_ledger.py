from user_desk.app.application.settlements import SettlementLedger


def test_older_settlement_for_same_record_is_flagged() -> None:
    ledger = SettlementLedger()
    first = ledger.issue(7)
    second = ledger.issue(7)

    assert ledger.settle(7, second) is True
    assert ledger.settle(7, first) is False


def test_settlements_for_other_records_are_independent() -> None:
    ledger = SettlementLedger()
    a = ledger.issue(1)
    ledger.issue(2)

    assert ledger.settle(1, a) is True
    assert ledger.settle(None, ledger.issue(None)) is True
