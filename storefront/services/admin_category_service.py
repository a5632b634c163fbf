from sqlalchemy.orm import Session

from storefront.core.exceptions import HttpException
from storefront.models import Category, Product
from storefront.schemas.category import CategoryCreateIn, CategoryUpdateIn
from storefront.services.category_service import descendant_ids

CATEGORY_NOT_FOUND = "Category does not exist."
PATH_TAKEN = "A category with this path already exists."


def _get_or_404(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise HttpException(404, CATEGORY_NOT_FOUND)
    return category


def create_category(db: Session, data: CategoryCreateIn) -> Category:
    if db.query(Category).filter(Category.path == data.path).first():
        raise HttpException(409, PATH_TAKEN)
    if data.parent_id is not None and db.get(Category, data.parent_id) is None:
        raise HttpException(404, "Parent category does not exist.")

    category = Category(name=data.name, path=data.path, parent_id=data.parent_id)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def update_category(db: Session, category_id: int, data: CategoryUpdateIn) -> Category:
    category = _get_or_404(db, category_id)

    if data.path and data.path != category.path:
        if db.query(Category).filter(Category.path == data.path).first():
            raise HttpException(409, PATH_TAKEN)
        category.path = data.path

    if "parent_id" in data.model_fields_set and data.parent_id != category.parent_id:
        if data.parent_id is not None:
            if db.get(Category, data.parent_id) is None:
                raise HttpException(404, "Parent category does not exist.")
            # a category cannot move under itself or one of its descendants
            if data.parent_id in descendant_ids(db, category.id):
                raise HttpException(400, "A category cannot be its own ancestor.")
        category.parent_id = data.parent_id

    if data.name:
        category.name = data.name

    db.commit()
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> dict:
    category = _get_or_404(db, category_id)

    if db.query(Category).filter(Category.parent_id == category_id).count() > 0:
        raise HttpException(400, "The category has sub-categories. Move or delete them first.")
    if db.query(Product).filter(Product.category_id == category_id).count() > 0:
        raise HttpException(400, "The category still has products. Move or delete them first.")

    db.delete(category)
    db.commit()
    return {"message": "Category deleted.", "deleted_id": category_id}
