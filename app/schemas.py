# schemas.py

from datetime import datetime
from typing import Annotated, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# Pydantic models for request and response.
# Wire names are camelCase, attributes are snake_case.

class Item(BaseModel):
    # Extra fields are kept so the item is echoed back unchanged
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    product_id: Optional[str] = Field(default=None, alias="productId", examples=["p1"])
    # Integers stay integers; overflowing or NaN values are rejected
    amount: Union[int, Annotated[float, Field(allow_inf_nan=False)]] = Field(..., examples=[0.5])

class OrderRequest(BaseModel):
    # Fields that client sends in Request
    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[str] = Field(default=None, alias="customerId", examples=["c1"])
    items: List[Item] = Field(...)

class OrderRecord(BaseModel):
    # Synthesized per request, never stored
    model_config = ConfigDict(populate_by_name=True)

    id: float = Field(..., ge=0, lt=1)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    items: List[Item]
