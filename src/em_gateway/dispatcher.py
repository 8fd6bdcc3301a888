"""Instruction dispatcher: maps one instruction to the matching state transition.

execute_instruction is the whole core seen from outside:
(Ledger | None, Instruction, caller, cleared_at) -> InstructionOutcome.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime

from src.em_account.domain.balance import deposit, withdraw
from src.em_book.domain.book import submit_demand, submit_production
from src.em_common.errors import LedgerNotInitializedError
from src.em_gateway.instructions import (
    Deposit,
    Initialize,
    Instruction,
    MatchOffers,
    RegisterParticipant,
    SubmitDemand,
    SubmitOffer,
    Withdraw,
)
from src.em_ledger.domain.models import Ledger, Trade
from src.em_ledger.domain.registry import initialize, register
from src.em_matching.engine.matching_algo import match_offers

logger = logging.getLogger(__name__)


@dataclass
class InstructionOutcome:
    ledger: Ledger
    trades: list[Trade] = field(default_factory=list)  # non-empty only for match_offers


def execute_instruction(
    ledger: Ledger | None,
    instruction: Instruction,
    caller: str,
    cleared_at: datetime,
) -> InstructionOutcome:
    """Apply one instruction. Raises AppError subclasses; never mutates `ledger`."""
    if isinstance(instruction, Initialize):
        return InstructionOutcome(ledger=initialize())
    if ledger is None:
        raise LedgerNotInitializedError()

    logger.debug("Executing %s for caller=%s", instruction.kind, caller)
    if isinstance(instruction, RegisterParticipant):
        return InstructionOutcome(ledger=register(ledger, caller, instruction.role))
    if isinstance(instruction, SubmitOffer):
        return InstructionOutcome(
            ledger=submit_production(ledger, caller, instruction.energy_amount, instruction.price)
        )
    if isinstance(instruction, SubmitDemand):
        return InstructionOutcome(
            ledger=submit_demand(
                ledger, caller, instruction.energy_amount, instruction.price_limit
            )
        )
    if isinstance(instruction, MatchOffers):
        result = match_offers(ledger, cleared_at)
        return InstructionOutcome(ledger=result.ledger, trades=result.trades)
    if isinstance(instruction, Deposit):
        return InstructionOutcome(ledger=deposit(ledger, caller, instruction.amount))
    if isinstance(instruction, Withdraw):
        return InstructionOutcome(ledger=withdraw(ledger, caller, instruction.amount))
    raise TypeError(f"Unhandled instruction: {instruction!r}")
