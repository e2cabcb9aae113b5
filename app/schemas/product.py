from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.purchase import PurchaseRead
from app.schemas.sale import SaleRead

Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


class ProductBase(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    netto_price: Money
    category: str = Field(min_length=1)
    image_link: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    # Omitted fields stay unchanged; only image_link accepts an explicit null.
    name: str = Field(None, min_length=1)
    description: str = Field(None, min_length=1)
    netto_price: Money = None
    category: str = Field(None, min_length=1)
    image_link: Optional[str] = None
    version: Optional[int] = None


class ProductPriceUpdate(BaseModel):
    netto_price: Money
    version: Optional[int] = None


class ProductRead(ProductBase):
    id: int
    in_stock: int
    version: int

    model_config = ConfigDict(from_attributes=True)


class ProductReadWithHistory(ProductRead):
    purchases: List[PurchaseRead] = Field(default_factory=list)
    sales: List[SaleRead] = Field(default_factory=list)


class ProductListResponse(BaseModel):
    count: int
    categories: List[str]
    results: List[ProductRead]
