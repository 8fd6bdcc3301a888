"""em_ledger REST API: ledger lifecycle and participant registry."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.em_common.errors import UnknownParticipantError
from src.em_common.response import ApiResponse, success_response
from src.em_gateway.auth.dependencies import get_caller_identity
from src.em_gateway.instructions import Initialize, RegisterParticipant
from src.em_gateway.store import LedgerStore, get_ledger_store
from src.em_ledger.application.schemas import (
    LedgerSnapshot,
    ParticipantResponse,
    RegisterRequest,
)
from src.em_ledger.domain.registry import find

router = APIRouter(tags=["ledger"])


@router.post("/ledger/initialize")
async def initialize_ledger(
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    outcome = await store.submit(Initialize(), caller)
    return success_response(LedgerSnapshot.from_ledger(outcome.ledger).model_dump(), request)


@router.get("/ledger")
async def get_ledger(
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    snapshot = LedgerSnapshot.from_ledger(store.snapshot())
    return success_response(snapshot.model_dump(), request)


@router.post("/participants")
async def register_participant(
    body: RegisterRequest,
    caller: Annotated[str, Depends(get_caller_identity)],
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    outcome = await store.submit(RegisterParticipant(role=body.role), caller)
    participant = outcome.ledger.participants[caller]
    return success_response(ParticipantResponse.from_domain(participant).model_dump(), request)


@router.get("/participants/{identity}")
async def get_participant(
    identity: str,
    store: Annotated[LedgerStore, Depends(get_ledger_store)],
    request: Request,
) -> ApiResponse:
    participant = find(store.snapshot(), identity)
    if participant is None:
        raise UnknownParticipantError(identity)
    return success_response(ParticipantResponse.from_domain(participant).model_dump(), request)
