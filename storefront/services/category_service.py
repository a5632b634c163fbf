from typing import Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

from storefront.core.exceptions import HttpException
from storefront.models import Category, Product
from storefront.utils.pagination import paginate

# deeper chains are treated as corrupt data
MAX_CATEGORY_DEPTH = 32


def children_index(categories: List[Category]) -> Dict[Optional[int], List[Category]]:
    index: Dict[Optional[int], List[Category]] = {}
    for c in categories:
        index.setdefault(c.parent_id, []).append(c)
    return index


def _build_node(category: Category, index: dict, seen: set) -> dict:
    seen.add(category.id)
    return {
        "id": category.id,
        "name": category.name,
        "path": category.path,
        "parent_id": category.parent_id,
        "children": [
            _build_node(child, index, seen)
            for child in index.get(category.id, [])
            if child.id not in seen
        ],
    }


def get_all_categories(db: Session) -> List[dict]:
    categories = db.query(Category).order_by(Category.id.asc()).all()
    index = children_index(categories)
    seen: set = set()
    return [_build_node(root, index, seen) for root in index.get(None, [])]


def descendant_ids(db: Session, category_id: int) -> List[int]:
    """Ids of the category and everything below it."""
    index = children_index(db.query(Category).all())
    result, stack = [], [category_id]
    while stack:
        current = stack.pop()
        if current in result:
            continue
        result.append(current)
        stack.extend(c.id for c in index.get(current, []))
    return result


def build_breadcrumb(db: Session, category: Category) -> List[Category]:
    trail = [category]
    seen = {category.id}
    current = category
    while current.parent_id is not None and len(trail) < MAX_CATEGORY_DEPTH:
        parent = db.get(Category, current.parent_id)
        if parent is None or parent.id in seen:
            break
        trail.append(parent)
        seen.add(parent.id)
        current = parent
    trail.reverse()
    return trail


def get_category_by_path(db: Session, path: str, page: int, limit: int) -> dict:
    category = db.query(Category).filter(Category.path == path).first()
    if category is None:
        raise HttpException(404, "Category does not exist.")

    query = (
        db.query(Product)
        .options(selectinload(Product.images))
        .filter(Product.category_id == category.id)
        .order_by(Product.created_at.desc(), Product.id.desc())
    )
    result = paginate(query, page, limit)
    return {
        "category": category,
        "breadcrumb": build_breadcrumb(db, category),
        "products": result["data"],
        "pagination": result["pagination"],
    }
