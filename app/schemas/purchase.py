from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PurchaseCreate(BaseModel):
    quantity: int = Field(gt=0)
    expected_delivery: date


class PurchaseRead(BaseModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    expected_delivery: date
    actual_delivery: Optional[datetime] = None
    delivered: bool

    model_config = ConfigDict(from_attributes=True)
