"""Balance ledger: checked credit/debit on participant wallets.

credit/debit mutate a participant that belongs to a working copy of the
ledger; callers compute every leg before swapping the copy in, so an error
half-way leaves the caller's snapshot untouched.
"""

import logging

from src.em_common.checked import checked_add, checked_sub, require_u64
from src.em_common.errors import InsufficientFundsError
from src.em_ledger.domain.models import Ledger, Participant
from src.em_ledger.domain.registry import require_participant

logger = logging.getLogger(__name__)


def credit(participant: Participant, amount: int) -> None:
    participant.wallet_balance = checked_add(participant.wallet_balance, amount)


def debit(participant: Participant, amount: int) -> None:
    participant.wallet_balance = checked_sub(participant.wallet_balance, amount)


def deposit(ledger: Ledger, identity: str, amount: int) -> Ledger:
    """balance += amount. Raises UnknownParticipantError / ArithmeticOverflowError."""
    require_u64("amount", amount)
    require_participant(ledger, identity)
    updated = ledger.clone()
    credit(updated.participants[identity], amount)
    logger.info(
        "Deposit: id=%s amount=%d balance=%d",
        identity, amount, updated.participants[identity].wallet_balance,
    )
    return updated


def withdraw(ledger: Ledger, identity: str, amount: int) -> Ledger:
    """balance -= amount. Raises InsufficientFundsError when balance < amount."""
    require_u64("amount", amount)
    participant = require_participant(ledger, identity)
    if participant.wallet_balance < amount:
        raise InsufficientFundsError(amount, participant.wallet_balance)
    updated = ledger.clone()
    debit(updated.participants[identity], amount)
    logger.info(
        "Withdraw: id=%s amount=%d balance=%d",
        identity, amount, updated.participants[identity].wallet_balance,
    )
    return updated
