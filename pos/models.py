# pos/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List

U32_MAX = 2**32 - 1

# JSON integer in the u32 range; "2", true and 2.0 are rejected
UInt32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]
# any finite JSON number, but not a string or a boolean
Amount = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UInt32
    name: str
    price: Amount


class OrderItem(BaseModel):
    product_id: UInt32
    quantity: UInt32


class Order(BaseModel):
    items: List[OrderItem]
    total: Amount
