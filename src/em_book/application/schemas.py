# src/em_book/application/schemas.py
from pydantic import BaseModel

from src.em_common.schema_types import U64
from src.em_ledger.application.schemas import DemandResponse, LotResponse
from src.em_ledger.domain.models import Ledger


class SubmitOfferRequest(BaseModel):
    energy_amount: U64
    price: U64


class SubmitDemandRequest(BaseModel):
    energy_amount: U64
    price_limit: U64


class BookResponse(BaseModel):
    lots: list[LotResponse]
    demands: list[DemandResponse]

    @classmethod
    def from_ledger(cls, ledger: Ledger) -> "BookResponse":
        return cls(
            lots=[LotResponse.from_domain(lot) for lot in ledger.lots],
            demands=[DemandResponse.from_domain(d) for d in ledger.demands],
        )
