from sqlalchemy.orm import Session

from storefront.core.exceptions import HttpException
from storefront.models import Category, Product, ProductImage
from storefront.schemas.product import ProductCreateIn, ProductUpdateIn
from storefront.services.product_service import get_product_by_id


def create_product(db: Session, data: ProductCreateIn) -> Product:
    if db.get(Category, data.category_id) is None:
        raise HttpException(404, "Category id does not exist.")

    fields = data.model_dump(exclude={"image_urls"})
    product = Product(**fields, images=[ProductImage(url=url) for url in data.image_urls])
    db.add(product)
    db.commit()
    return get_product_by_id(db, product.id)


def update_product(db: Session, product_id: int, data: ProductUpdateIn) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise HttpException(404, "Product to update was not found.")

    if data.category_id and db.get(Category, data.category_id) is None:
        raise HttpException(404, "The target category does not exist.")

    for field, value in data.model_dump(exclude={"image_urls"}, exclude_unset=True).items():
        if value is not None:
            setattr(product, field, value)

    if data.image_urls is not None:
        # supplied images replace the whole list
        product.images = [ProductImage(url=url) for url in data.image_urls]

    db.commit()
    return get_product_by_id(db, product.id)


def delete_product(db: Session, product_id: int) -> dict:
    product = db.get(Product, product_id)
    if product is None:
        raise HttpException(404, "Product to delete was not found.")

    db.delete(product)
    db.commit()
    return {"message": "Product deleted.", "deleted_id": product_id}
