from datetime import UTC, datetime

import pytest

from src.em_common.enums import ParticipantRole
from src.em_common.errors import (
    InsufficientFundsError,
    LedgerNotInitializedError,
    UnknownParticipantError,
)
from src.em_gateway.dispatcher import execute_instruction
from src.em_gateway.instructions import (
    Deposit,
    Initialize,
    MatchOffers,
    RegisterParticipant,
    SubmitDemand,
    SubmitOffer,
    Withdraw,
)
from src.em_ledger.domain.models import Ledger
from tests.helpers import build_ledger

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _run(ledger: Ledger | None, instruction: object, caller: str) -> Ledger:
    return execute_instruction(ledger, instruction, caller, NOW).ledger  # type: ignore[arg-type]


class TestRouting:
    def test_full_session(self) -> None:
        ledger = _run(None, Initialize(), "admin")
        ledger = _run(ledger, RegisterParticipant(role=ParticipantRole.PRODUCER), "P")
        ledger = _run(ledger, RegisterParticipant(role=ParticipantRole.CONSUMER), "C")
        ledger = _run(ledger, SubmitOffer(energy_amount=100, price=5), "P")
        ledger = _run(ledger, Deposit(amount=1000), "C")
        ledger = _run(ledger, SubmitDemand(energy_amount=50, price_limit=10), "C")

        outcome = execute_instruction(ledger, MatchOffers(), "anyone", NOW)
        assert len(outcome.trades) == 1
        assert outcome.trades[0].timestamp == NOW
        ledger = _run(outcome.ledger, Withdraw(amount=250), "P")
        assert ledger.participants["P"].wallet_balance == 0
        assert ledger.participants["C"].wallet_balance == 750

    def test_identity_comes_from_caller(self) -> None:
        ledger = build_ledger({"P": 0, "Q": 0})
        ledger = _run(ledger, SubmitOffer(energy_amount=1, price=1), "Q")
        assert ledger.lots[0].producer_id == "Q"

    def test_initialize_discards_existing_state(self) -> None:
        ledger = build_ledger({"P": 10}, lots=[("P", 1, 1)])
        assert _run(ledger, Initialize(), "P") == Ledger()

    def test_non_match_instructions_record_no_trades(self) -> None:
        outcome = execute_instruction(build_ledger({"C": 0}), Deposit(amount=1), "C", NOW)
        assert outcome.trades == []


class TestFailures:
    def test_uninitialized_ledger(self) -> None:
        with pytest.raises(LedgerNotInitializedError):
            _run(None, RegisterParticipant(role=ParticipantRole.CONSUMER), "C")

    def test_unregistered_caller_cannot_submit(self) -> None:
        with pytest.raises(UnknownParticipantError):
            _run(build_ledger(), SubmitDemand(energy_amount=1, price_limit=1), "C")

    def test_failure_leaves_input_unchanged(self) -> None:
        ledger = build_ledger({"C": 5})
        before = ledger.clone()
        with pytest.raises(InsufficientFundsError):
            _run(ledger, Withdraw(amount=6), "C")
        assert ledger == before
