# routes/storefront.py
from typing import Optional

import logging
from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import ROOT_DIR
from database import get_db
from crud import product as crud_product
from schemas import Product, ProductPage, StatusResponse
from utils import parse_page, search_pagination

logger = logging.getLogger("storefront")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

router = APIRouter(tags=["Storefront"])
templates = Jinja2Templates(directory=str(ROOT_DIR / "templates"))

# ---------- helpers ----------

def _status(success: bool, message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(StatusResponse(success=success, message=message).model_dump(), status_code=status_code)

def _render_store(request: Request, result: ProductPage, pagination_links, status: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "store.html",
        {
            "title": "Store",
            "products": result.products,
            "pagination_links": pagination_links,
            "status": status,
            "query": result.query,
        },
    )

# ---------- routes ----------

@router.get("/", response_class=HTMLResponse)
def store_page(
    request: Request,
    query: str = Query(""),
    page: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Product listing with optional name search, ten products per page.
    Store failures still render the page, with an error banner instead of products.
    """
    current_page = parse_page(page)
    try:
        products, total_count = crud_product.get_products_page(
            db, query=query, page=current_page, limit=crud_product.PAGE_SIZE
        )
    except (SQLAlchemyError, OverflowError):
        logger.exception("Error fetching products (query=%r, page=%d)", query, current_page)
        return _render_store(request, ProductPage(query=query, page=current_page), [], "Error fetching products")

    result = ProductPage(
        products=[Product.model_validate(p) for p in products],
        total_count=total_count,
        page=current_page,
        limit=crud_product.PAGE_SIZE,
        query=query,
    )
    pagination_links = search_pagination(result.total_pages, current_page, query)
    return _render_store(request, result, pagination_links, "")


@router.post("/add")
def add_product(
    name: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    if not name:
        return _status(False, "Product name is required", 400)

    try:
        db_product = crud_product.create_product(db, name=name, image_url=image_url)
    except SQLAlchemyError:
        logger.exception("Error adding product (name=%r)", name)
        return _status(False, "Failed to add product", 500)

    logger.info("Added product id=%s name=%r", db_product.id, db_product.name)
    return _status(True, "Product added successfully")


@router.post("/delete")
def delete_product(
    product_id: Optional[str] = Form(None, alias="productID"),
    db: Session = Depends(get_db),
):
    if not product_id:
        return _status(False, "Product ID is required", 400)

    try:
        count = crud_product.delete_product(db, product_id)
    except SQLAlchemyError:
        logger.exception("Error deleting product (productID=%r)", product_id)
        return _status(False, "Failed to delete product", 500)

    logger.info("Deleted product productID=%r rows=%d", product_id, count)
    return _status(True, "Product deleted successfully")
