from pydantic import BaseModel

from src.em_ledger.application.schemas import TradeResponse


class MatchRunResponse(BaseModel):
    trades: list[TradeResponse]  # recorded by this pass only
    lots_left: int
    demands_left: int


class TradeLogResponse(BaseModel):
    items: list[TradeResponse]
    total: int
