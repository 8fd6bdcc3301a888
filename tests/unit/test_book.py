import pytest

from src.em_book.domain.book import (
    demands_for,
    lots_for,
    prune_exhausted,
    submit_demand,
    submit_production,
)
from src.em_common.checked import U64_MAX
from src.em_common.errors import UnknownParticipantError, ValueOutOfRangeError
from src.em_ledger.domain.models import DemandRequest, ProductionLot
from tests.helpers import build_ledger


class TestSubmitProduction:
    def test_appends_lot(self) -> None:
        ledger = submit_production(build_ledger({"p": 0}), "p", 100, 5)
        assert ledger.lots == [ProductionLot(producer_id="p", energy_amount=100, price=5)]

    def test_appends_in_submission_order(self) -> None:
        ledger = build_ledger({"p": 0}, lots=[("p", 1, 9), ("p", 2, 1)])
        assert [lot.price for lot in ledger.lots] == [9, 1]

    def test_unregistered_producer_rejected(self) -> None:
        ledger = build_ledger()
        with pytest.raises(UnknownParticipantError):
            submit_production(ledger, "ghost", 100, 5)
        assert ledger.lots == []

    def test_zero_and_max_values_accepted(self) -> None:
        ledger = submit_production(build_ledger({"p": 0}), "p", 0, U64_MAX)
        assert ledger.lots[0].energy_amount == 0
        assert ledger.lots[0].price == U64_MAX

    def test_unrepresentable_value_rejected(self) -> None:
        with pytest.raises(ValueOutOfRangeError):
            submit_production(build_ledger({"p": 0}), "p", U64_MAX + 1, 1)


class TestSubmitDemand:
    def test_appends_demand(self) -> None:
        ledger = submit_demand(build_ledger({"c": 0}), "c", 50, 10)
        assert ledger.demands == [DemandRequest(consumer_id="c", energy_amount=50, price_limit=10)]

    def test_unregistered_consumer_rejected(self) -> None:
        with pytest.raises(UnknownParticipantError):
            submit_demand(build_ledger(), "ghost", 50, 10)

    def test_role_is_not_enforced(self) -> None:
        # a registered producer may still post demand
        ledger = build_ledger({"p": 0}, lots=[("p", 5, 1)])
        ledger = submit_demand(ledger, "p", 3, 2)
        assert len(ledger.demands) == 1

    def test_negative_price_limit_rejected(self) -> None:
        with pytest.raises(ValueOutOfRangeError):
            submit_demand(build_ledger({"c": 0}), "c", 1, -1)


class TestFilters:
    def test_lots_and_demands_for(self) -> None:
        ledger = build_ledger(
            {"a": 0, "b": 0},
            lots=[("a", 1, 1), ("b", 2, 2), ("a", 3, 3)],
            demands=[("b", 4, 4)],
        )
        assert [lot.energy_amount for lot in lots_for(ledger, "a")] == [1, 3]
        assert lots_for(ledger, "nobody") == []
        assert [d.energy_amount for d in demands_for(ledger, "b")] == [4]


class TestPrune:
    def test_prune_removes_only_exhausted(self) -> None:
        ledger = build_ledger(
            {"a": 0},
            lots=[("a", 0, 1), ("a", 5, 2), ("a", 0, 3)],
            demands=[("a", 0, 1), ("a", 7, 1)],
        )
        prune_exhausted(ledger)
        assert [lot.price for lot in ledger.lots] == [2]
        assert [d.energy_amount for d in ledger.demands] == [7]
