"""em_book REST API: submit offers/demands and read the open book."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.em_book.application.schemas import (
    BookResponse,
    SubmitDemandRequest,
    SubmitOfferRequest,
)
from src.em_book.domain.book import demands_for, lots_for
from src.em_common.response import ApiResponse, success_response
from src.em_gateway.auth.dependencies import get_caller_identity
from src.em_gateway.instructions import SubmitDemand, SubmitOffer
from src.em_gateway.store import LedgerStore, get_ledger_store
from src.em_ledger.application.schemas import DemandResponse, LotResponse

router = APIRouter(prefix="/book", tags=["book"])


@router.get("")
async def get_book(
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
    participant_id: str | None = Query(None, description="Only entries of this participant"),
) -> ApiResponse:
    ledger = store.snapshot()
    if participant_id is None:
        data = BookResponse.from_ledger(ledger)
    else:
        data = BookResponse(
            lots=[LotResponse.from_domain(lot) for lot in lots_for(ledger, participant_id)],
            demands=[DemandResponse.from_domain(d) for d in demands_for(ledger, participant_id)],
        )
    return success_response(data.model_dump(), request)


@router.post("/offers")
async def submit_offer(
    body: SubmitOfferRequest,
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    instruction = SubmitOffer(energy_amount=body.energy_amount, price=body.price)
    outcome = await store.submit(instruction, caller)
    return success_response(BookResponse.from_ledger(outcome.ledger).model_dump(), request)


@router.post("/demands")
async def submit_demand(
    body: SubmitDemandRequest,
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    instruction = SubmitDemand(energy_amount=body.energy_amount, price_limit=body.price_limit)
    outcome = await store.submit(instruction, caller)
    return success_response(BookResponse.from_ledger(outcome.ledger).model_dump(), request)
