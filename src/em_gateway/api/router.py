"""Wire entry point: POST one raw instruction, get the resulting ledger snapshot."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.em_common.response import ApiResponse, success_response
from src.em_gateway.auth.dependencies import get_caller_identity
from src.em_gateway.instructions import decode_instruction
from src.em_gateway.store import LedgerStore, get_ledger_store
from src.em_ledger.application.schemas import LedgerSnapshot, TradeResponse

router = APIRouter(tags=["instructions"])


@router.post("/instructions")
async def post_instruction(
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    instruction = decode_instruction(await request.body())
    outcome = await store.submit(instruction, caller)
    data = {
        "kind": instruction.kind,
        "ledger": LedgerSnapshot.from_ledger(outcome.ledger).model_dump(),
        "trades": [TradeResponse.from_domain(t).model_dump() for t in outcome.trades],
    }
    return success_response(data, request)
