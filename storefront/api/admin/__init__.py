from fastapi import APIRouter, Depends

from storefront.api.deps import get_admin_user
from storefront.api.admin import categories, products, orders, reviews, inquiries, users

# every route below requires an ADMIN bearer token
router = APIRouter(dependencies=[Depends(get_admin_user)])
router.include_router(categories.router, prefix="/categories")
router.include_router(products.router, prefix="/products")
router.include_router(orders.router, prefix="/orders")
router.include_router(reviews.router, prefix="/reviews")
router.include_router(inquiries.router, prefix="/inquiries")
router.include_router(users.router, prefix="/users")
