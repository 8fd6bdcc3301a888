"""Pydantic schemas for em_account API."""

from pydantic import BaseModel, Field

from src.em_common.schema_types import U64
from src.em_ledger.domain.models import Participant

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class DepositRequest(BaseModel):
    amount: U64 = Field(..., description="Amount to credit to the caller wallet")


class WithdrawRequest(BaseModel):
    amount: U64 = Field(..., description="Amount to debit from the caller wallet")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BalanceResponse(BaseModel):
    participant_id: str
    wallet_balance: int
    energy_balance: int

    @classmethod
    def from_domain(cls, p: Participant) -> "BalanceResponse":
        return cls(
            participant_id=p.id,
            wallet_balance=p.wallet_balance,
            energy_balance=p.energy_balance,
        )


class BalanceChangeResponse(BaseModel):
    participant_id: str
    wallet_balance: int
    changed_by: int  # positive for deposit, negative for withdraw

    @classmethod
    def from_result(cls, p: Participant, delta: int) -> "BalanceChangeResponse":
        return cls(participant_id=p.id, wallet_balance=p.wallet_balance, changed_by=delta)
