"""em_account REST API: 3 endpoints, all act on the caller's own wallet."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.em_account.application.schemas import (
    BalanceChangeResponse,
    BalanceResponse,
    DepositRequest,
    WithdrawRequest,
)
from src.em_common.response import ApiResponse, success_response
from src.em_gateway.auth.dependencies import get_caller_identity
from src.em_gateway.instructions import Deposit, Withdraw
from src.em_gateway.store import LedgerStore, get_ledger_store
from src.em_ledger.domain.registry import require_participant

router = APIRouter(prefix="/account", tags=["account"])


@router.get("/balance")
async def get_balance(
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    participant = require_participant(store.snapshot(), caller)
    return success_response(BalanceResponse.from_domain(participant).model_dump(), request)


@router.post("/deposit")
async def deposit(
    body: DepositRequest,
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    outcome = await store.submit(Deposit(amount=body.amount), caller)
    data = BalanceChangeResponse.from_result(outcome.ledger.participants[caller], body.amount)
    return success_response(data.model_dump(), request)


@router.post("/withdraw")
async def withdraw(
    body: WithdrawRequest,
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    outcome = await store.submit(Withdraw(amount=body.amount), caller)
    data = BalanceChangeResponse.from_result(outcome.ledger.participants[caller], -body.amount)
    return success_response(data.model_dump(), request)
