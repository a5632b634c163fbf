from pydantic import Field
from typing import List
from storefront.schemas.common import CamelModel, ImageOut


class CartProductOut(CamelModel):
    id: int
    name: str
    price: int
    images: List[ImageOut] = []


class CartItemOut(CamelModel):
    id: int
    product_id: int
    quantity: int


class CartLineOut(CartItemOut):
    product: CartProductOut


class CartOut(CamelModel):
    id: int
    items: List[CartLineOut]
    total_price: int


class AddToCartIn(CamelModel):
    product_id: int = Field(..., ge=1)
    quantity: int = Field(1, ge=1)


class UpdateCartItemIn(CamelModel):
    quantity: int = Field(..., ge=1)
