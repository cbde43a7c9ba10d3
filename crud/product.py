# crud/product.py

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
import models

PAGE_SIZE = 10
PLACEHOLDER_IMAGE_URL = "default_image_url_placeholder.png"
# Largest OFFSET a 64-bit SQL integer parameter can carry.
MAX_OFFSET = 2**63 - 1


def search_predicate(query: str):
    """
    Case-insensitive substring match on the product name, or None to match everything.
    """
    if not query:
        return None
    return models.Product.name.ilike(f"%{query}%")


def get_products_page(
    db: Session, query: str = "", page: int = 1, limit: int = PAGE_SIZE
) -> Tuple[List[models.Product], int]:
    """
    Get one page of products and the total number of matches.

    Both statements share one predicate but run as separate round-trips, so
    the count and the rows can disagree if writes land in between.
    """
    predicate = search_predicate(query)

    rows_stmt = select(models.Product)
    count_stmt = select(func.count()).select_from(models.Product)
    if predicate is not None:
        rows_stmt = rows_stmt.where(predicate)
        count_stmt = count_stmt.where(predicate)

    rows_stmt = rows_stmt.order_by(models.Product.id).offset(min((page - 1) * limit, MAX_OFFSET)).limit(limit)

    products = list(db.scalars(rows_stmt).all())
    total_count = db.scalar(count_stmt) or 0
    return products, total_count


def create_product(db: Session, name: str, image_url: Optional[str] = None) -> models.Product:
    db_product = models.Product(name=name, image_url=image_url or PLACEHOLDER_IMAGE_URL)
    try:
        db.add(db_product)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(db_product)
    return db_product


def delete_product(db: Session, product_id) -> int:
    """Deletes a product by its primary key. Returns the number of rows removed."""
    try:
        pk = int(product_id)
    except (TypeError, ValueError):
        # Identifiers are integers; anything else cannot match a row.
        return 0
    try:
        count = db.query(models.Product).filter(models.Product.id == pk).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return count
