from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import BUYER_COMPANY_MAX_LENGTH


class SaleCreate(BaseModel):
    quantity: int = Field(gt=0)
    unit_price: Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
    buyer_company: str = Field(min_length=1, max_length=BUYER_COMPANY_MAX_LENGTH)
    sale_date: date


class SaleRead(BaseModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    buyer_company: str
    sale_date: date

    model_config = ConfigDict(from_attributes=True)
