from sqlalchemy.orm import Session, selectinload

from storefront.core.exceptions import HttpException
from storefront.models import Cart, CartItem, Product
from storefront.schemas.cart import AddToCartIn, UpdateCartItemIn

CART_ITEM_NOT_FOUND = "Cart item not found."


def get_or_create_cart(db: Session, user_id: int) -> Cart:
    cart = db.query(Cart).filter(Cart.user_id == user_id).first()
    if cart is None:
        cart = Cart(user_id=user_id)
        db.add(cart)
        db.commit()
        db.refresh(cart)
    return cart


def get_my_cart(db: Session, user_id: int) -> dict:
    cart = get_or_create_cart(db, user_id)
    items = (
        db.query(CartItem)
        .options(selectinload(CartItem.product).selectinload(Product.images))
        .filter(CartItem.cart_id == cart.id)
        .order_by(CartItem.id.asc())
        .all()
    )
    return {
        "id": cart.id,
        "items": items,
        "total_price": sum(item.product.price * item.quantity for item in items),
    }


def add_item(db: Session, user_id: int, data: AddToCartIn) -> CartItem:
    if db.get(Product, data.product_id) is None:
        raise HttpException(404, "Product does not exist.")

    cart = get_or_create_cart(db, user_id)
    existing = (
        db.query(CartItem)
        .filter(CartItem.cart_id == cart.id, CartItem.product_id == data.product_id)
        .first()
    )
    if existing:
        # same product again: bump the quantity of the existing line
        existing.quantity = existing.quantity + data.quantity
        db.commit()
        db.refresh(existing)
        return existing

    item = CartItem(cart_id=cart.id, product_id=data.product_id, quantity=data.quantity)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def _get_own_item(db: Session, user_id: int, item_id: int) -> CartItem:
    item = db.get(CartItem, item_id)
    if item is None or item.cart.user_id != user_id:
        raise HttpException(404, CART_ITEM_NOT_FOUND)
    return item


def update_item(db: Session, user_id: int, item_id: int, data: UpdateCartItemIn) -> CartItem:
    item = _get_own_item(db, user_id, item_id)
    item.quantity = data.quantity
    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, user_id: int, item_id: int) -> dict:
    item = _get_own_item(db, user_id, item_id)
    db.delete(item)
    db.commit()
    return {"message": "Cart item deleted.", "deleted_id": item_id}
