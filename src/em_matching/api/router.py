"""em_matching REST API: run a clearing pass and read the settlement log."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.em_common.response import ApiResponse, success_response
from src.em_gateway.auth.dependencies import get_caller_identity
from src.em_gateway.instructions import MatchOffers
from src.em_gateway.store import LedgerStore, get_ledger_store
from src.em_ledger.application.schemas import TradeResponse
from src.em_matching.application.schemas import MatchRunResponse, TradeLogResponse

router = APIRouter(prefix="/matching", tags=["matching"])


@router.post("/run")
async def run_matching(
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    outcome = await store.submit(MatchOffers(), caller)
    data = MatchRunResponse(
        trades=[TradeResponse.from_domain(t) for t in outcome.trades],
        lots_left=len(outcome.ledger.lots),
        demands_left=len(outcome.ledger.demands),
    )
    return success_response(data.model_dump(), request)


@router.get("/trades")
async def list_trades(
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
    participant_id: str | None = Query(None, description="Trades where this id is either side"),
) -> ApiResponse:
    trades = store.snapshot().trades
    if participant_id is not None:
        trades = [t for t in trades if participant_id in (t.consumer_id, t.producer_id)]
    data = TradeLogResponse(items=[TradeResponse.from_domain(t) for t in trades], total=len(trades))
    return success_response(data.model_dump(), request)
